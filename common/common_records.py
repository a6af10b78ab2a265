"""Thesis record model and line-oriented parser.

Input layout (one record per group, no header):

    author
    year
    title
    advisor
    affiliation
    degree          ("MS" / "PhD" are counted, anything else is kept as-is)
    url             (may be an empty line)
    <separator>     (conventionally blank; consumed whatever it holds)

The parser cycles a position counter through those 8 slots. A record is
emitted once its url line has been read; a trailing group with fewer than
7 field lines is dropped with a warning.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from common.common_errors import EntryLimitExceededError, InputNotFoundError, InputReadError
from common.common_logging import Sink, log_line

FIELD_COUNT = 7
SLOT_COUNT = FIELD_COUNT + 1  # fields + separator line

# Fixed limit of the bounded variant; parse_text is unbounded unless asked.
MAX_ENTRIES = 500

# Undecodable bytes survive as lone surrogates and are re-encoded unchanged on output.
INPUT_ENCODING = 'utf-8'
INPUT_ERRORS = 'surrogateescape'


@dataclass(frozen=True)
class ThesisRecord:
    """One thesis/dissertation entry."""
    author: str = ""
    year: str = ""
    title: str = ""
    advisor: str = ""
    affiliation: str = ""
    degree: str = ""
    url: str = ""

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "ThesisRecord":
        if len(lines) != FIELD_COUNT:
            raise ValueError(f"expected {FIELD_COUNT} field lines, got {len(lines)}")
        return cls(*lines)

    @property
    def has_url(self) -> bool:
        return self.url != ""


def _strip_eol(line: str) -> str:
    # Everything from the first CR or LF on is dropped, so a stray CR cannot shift slots.
    return line.split('\n', 1)[0].split('\r', 1)[0]


def parse_text(stream: Iterable[str], max_entries: Optional[int] = None, sink: Optional[Sink] = None) -> List[ThesisRecord]:
    """Group the lines of ``stream`` into records.

    Parameters
    ----------
    stream : iterable of str
        Open text file or any iterable of lines (terminators optional).
    max_entries : int (optional)
        Upper bound on complete records. None (default) means unbounded.
    sink : callable(str) (optional)
        Log sink for the trailing-record warning; stderr when omitted.

    Raises
    ------
    EntryLimitExceededError
        When a record beyond ``max_entries`` completes.
    """
    records: List[ThesisRecord] = []
    pending: List[str] = []
    slot = 0
    for raw in stream:
        if slot < FIELD_COUNT:
            pending.append(_strip_eol(raw))
            if slot == FIELD_COUNT - 1:
                if max_entries is not None and len(records) >= max_entries:
                    raise EntryLimitExceededError(max_entries)
                records.append(ThesisRecord.from_lines(pending))
                pending = []
        slot = (slot + 1) % SLOT_COUNT
    if pending:
        log_line('warn', f"Ignoring incomplete trailing record ({len(pending)} of {FIELD_COUNT} fields)", sink=sink)
    return records


def load_records(path: Path | str, max_entries: Optional[int] = None, sink: Optional[Sink] = None) -> List[ThesisRecord]:
    """Open ``path``, parse it and close it before returning.

    Only LF ends a line. Bytes that are not valid UTF-8 are kept as-is.
    """
    path = Path(path)
    try:
        fh = path.open('r', encoding=INPUT_ENCODING, errors=INPUT_ERRORS, newline='\n')
    except OSError as exc:
        raise InputNotFoundError(path) from exc
    with fh:
        try:
            return parse_text(fh, max_entries=max_entries, sink=sink)
        except OSError as exc:
            raise InputReadError(path, str(exc)) from exc


__all__ = ['FIELD_COUNT', 'MAX_ENTRIES', 'INPUT_ENCODING', 'INPUT_ERRORS', 'ThesisRecord', 'parse_text', 'load_records']
