"""Error types raised while loading thesis records.

Library code raises these; only the CLI turns them into a diagnostic line and
an exit status.
"""
from __future__ import annotations
from pathlib import Path


class ThesisReportError(Exception):
    """Base class for fatal report errors."""


class InputNotFoundError(ThesisReportError):
    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"File not found: {path}")


class InputReadError(ThesisReportError):
    def __init__(self, path: Path | str, reason: str = ''):
        self.path = Path(path)
        detail = f" ({reason})" if reason else ''
        super().__init__(f"Failed to read input text file: {path}{detail}")


class EntryLimitExceededError(ThesisReportError):
    """More complete records than the configured maximum."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Too many entries (limit {limit}); increase max_entries")


__all__ = ['ThesisReportError', 'InputNotFoundError', 'InputReadError', 'EntryLimitExceededError']
