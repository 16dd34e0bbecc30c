"""
Pytest configuration and shared fixtures.

This module provides common fixtures for testing:
- Quiet structured logging
- Sample networks for both graph modes
- CSV edge files on disk
"""

import logging
from pathlib import Path

import pytest
import structlog

from netinfluence.core.config import get_settings
from netinfluence.graph import SocialNetwork


# =============================================================================
# Logging
# =============================================================================

@pytest.fixture(autouse=True)
def quiet_logging():
    """Drop log output below CRITICAL for the duration of a test."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from NETINFLUENCE_* variables and the settings cache."""
    for name in ("UNWEIGHTED_FILE", "WEIGHTED_FILE", "SCORE_PRECISION", "LOG_LEVEL"):
        monkeypatch.delenv(f"NETINFLUENCE_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Networks
# =============================================================================

@pytest.fixture
def chain_network() -> SocialNetwork:
    """Unweighted chain A - B - C."""
    network = SocialNetwork(weighted=False)
    network.add_edge("A", "B")
    network.add_edge("B", "C")
    return network


@pytest.fixture
def weighted_chain_network() -> SocialNetwork:
    """Weighted chain A -5- B -1- C."""
    network = SocialNetwork(weighted=True)
    network.add_edge("A", "B", 5)
    network.add_edge("B", "C", 1)
    return network


@pytest.fixture
def disconnected_network() -> SocialNetwork:
    """Two components: A - B - C and X - Y."""
    network = SocialNetwork(weighted=False)
    network.add_edge("A", "B")
    network.add_edge("B", "C")
    network.add_edge("X", "Y")
    return network


# =============================================================================
# Files
# =============================================================================

@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "network.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def unweighted_csv(write_csv) -> Path:
    return write_csv(
        "node1,node2\n"
        "Alice,Bob\n"
        "Bob,Carol\n"
        "\n"
        "Carol, Dave \n"
        ",Eve\n"
        "Frank\n",
        name="unweighted.csv",
    )


@pytest.fixture
def weighted_csv(write_csv) -> Path:
    return write_csv(
        "node1,node2,weight\n"
        "Alice,Bob,5\n"
        "Bob,Carol,1\n"
        "Carol,Dave,-3\n"
        "Dave,Eve,abc\n"
        "Eve,Frank,0\n"
        "Alice,Carol\n",
        name="weighted.csv",
    )
