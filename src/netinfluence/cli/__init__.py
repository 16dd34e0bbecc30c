"""Command line interface for netinfluence."""
