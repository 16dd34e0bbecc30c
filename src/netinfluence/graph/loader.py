"""Read edge records from delimited text files.

Ingestion is best-effort: rows that are blank, have missing or blank node
fields, or (in weighted mode) carry a weight that is not a strictly positive
integer are skipped. Skips are counted in a ``LoadReport`` and logged at
debug level; they never raise.
"""

from __future__ import annotations

import csv
import re
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from netinfluence.core import LoaderError, Settings, get_logger

logger = get_logger(__name__)

_INTEGER_RE = re.compile(r"[+-]?\d+")

SKIP_BLANK = "blank"
SKIP_MISSING_FIELDS = "missing_fields"
SKIP_BLANK_NODE = "blank_node"
SKIP_BAD_WEIGHT = "bad_weight"
SKIP_NON_POSITIVE_WEIGHT = "non_positive_weight"


class EdgeRecord(NamedTuple):
    """A validated edge ready for ``SocialNetwork.add_edge``."""

    source: str
    target: str
    weight: int = 1


class LoaderConfig(BaseModel):
    """Where and how to read an edge file."""

    model_config = ConfigDict(frozen=True)

    path: Path
    weighted: bool
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    has_header: bool = True

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        weighted: bool,
        path: Path | None = None,
    ) -> LoaderConfig:
        """Build a config for ``weighted`` mode, defaulting to the configured file."""
        return cls(
            path=path or settings.input_file(weighted),
            weighted=weighted,
            delimiter=settings.csv_delimiter,
            has_header=settings.csv_has_header,
        )


@dataclass
class LoadReport:
    """Counts gathered while loading an edge file."""

    rows_read: int = 0
    edges_loaded: int = 0
    skipped: Counter[str] = field(default_factory=Counter)

    @property
    def rows_skipped(self) -> int:
        return sum(self.skipped.values())

    def skip(self, reason: str, line: int) -> None:
        self.skipped[reason] += 1
        logger.debug("Skipping row", line=line, reason=reason)


def _parse_weight(text: str) -> int | None:
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def parse_rows(
    rows: Iterable[list[str]],
    weighted: bool,
    report: LoadReport | None = None,
    first_line: int = 1,
) -> Iterator[EdgeRecord]:
    """Validate raw rows and yield the ones that form edges.

    Args:
        rows: Field lists, header already removed.
        weighted: Expect ``node1, node2, weight`` rows instead of ``node1, node2``.
        report: Optional report to record counts and skip reasons in.
        first_line: Line number of the first row, used in log output.

    Yields:
        EdgeRecord for every accepted row. Unweighted records have weight 1.
    """
    report = report if report is not None else LoadReport()
    required = 3 if weighted else 2

    for line, row in enumerate(rows, start=first_line):
        report.rows_read += 1
        fields = [value.strip() for value in row]

        if not any(fields):
            report.skip(SKIP_BLANK, line)
            continue

        if len(fields) < required:
            report.skip(SKIP_MISSING_FIELDS, line)
            continue

        source, target = fields[0], fields[1]
        if not source or not target:
            report.skip(SKIP_BLANK_NODE, line)
            continue

        weight = 1
        if weighted:
            parsed = _parse_weight(fields[2])
            if parsed is None:
                report.skip(SKIP_BAD_WEIGHT, line)
                continue
            if parsed <= 0:
                report.skip(SKIP_NON_POSITIVE_WEIGHT, line)
                continue
            weight = parsed

        report.edges_loaded += 1
        yield EdgeRecord(source, target, weight)


def read_edge_records(config: LoaderConfig, report: LoadReport | None = None) -> list[EdgeRecord]:
    """Read and validate every edge in ``config.path``.

    Args:
        config: File location and layout.
        report: Optional report to fill in.

    Returns:
        Accepted edge records in file order.

    Raises:
        LoaderError: If the file does not exist or cannot be read.
    """
    path = config.path
    if not path.is_file():
        raise LoaderError(f"File '{path}' not found.", path=path)

    report = report if report is not None else LoadReport()

    try:
        with open(path, encoding="utf-8", newline="") as f:
            reader = csv.reader(f, delimiter=config.delimiter)
            first_line = 1
            if config.has_header:
                next(reader, None)
                first_line = 2
            records = list(parse_rows(reader, config.weighted, report, first_line))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.error(f"Failed to read edge file {path}: {e}")
        raise LoaderError(f"Failed to read '{path}': {e}", path=path) from e

    if report.rows_read == 0:
        logger.warning(f"No data rows found in {path}")
    else:
        logger.info(
            f"Loaded {report.edges_loaded} edges from {path}",
            rows_read=report.rows_read,
            rows_skipped=report.rows_skipped,
        )

    return records
