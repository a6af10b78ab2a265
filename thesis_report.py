"""
Thesis/dissertation listing → HTML fragment (CLI core).

Reads a plain text file of thesis/dissertation entries (7 lines per entry,
entries separated by one blank line), sorts them and writes an HTML fragment
to stdout for pasting into a web page.

Two entry points, one per layout:
- parse-theses [FILE]       author first, then year; A-G/H-N/O-U/V-Z jump links
- parse-theses-year [FILE]  most recent year first, then author; per-year jump links

FILE defaults to superdarn_theses.txt. Diagnostics go to stderr; on failure
nothing is written to stdout and the exit status is 1.

Key functions:
- build_report(path, options): load + sort, returns the ordered records.
- run(argv, mode): argument parsing and error reporting shared by both entry points.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from builders.thesis_report_common import write_html
from common.common_errors import ThesisReportError
from common.common_logging import Sink, log_line
from common.common_options import DEFAULT_INPUT, ReportMode, ReportOptions
from common.common_order import sort_records
from common.common_records import ThesisRecord, load_records

_DESCRIPTIONS = {
    ReportMode.ALPHABETICAL: 'Build thesis/dissertation HTML sorted by author, then year',
    ReportMode.YEAR: 'Build thesis/dissertation HTML grouped by year (most recent first), then author',
}


def build_report(path: Path, options: ReportOptions = ReportOptions(), sink: Optional[Sink] = None) -> List[ThesisRecord]:
    """Load ``path`` and return its records ordered for ``options.mode``.

    The input file is closed before sorting starts. Raises ThesisReportError
    subclasses for missing/unreadable input or an exceeded entry limit.
    """
    records = load_records(path, max_entries=options.max_entries, sink=sink)
    return sort_records(records, options.mode, numeric_years=options.numeric_years)


def _make_parser(mode: ReportMode) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=_DESCRIPTIONS[mode])
    ap.add_argument('file', nargs='?', default=DEFAULT_INPUT,
                    help=f'Input text file (default: {DEFAULT_INPUT})')
    return ap


def run(argv: Optional[Sequence[str]] = None, mode: ReportMode = ReportMode.ALPHABETICAL) -> int:
    args = _make_parser(mode).parse_args(argv)
    options = ReportOptions(mode=mode)
    try:
        records = build_report(Path(args.file), options)
    except ThesisReportError as exc:
        log_line('error', str(exc))
        return 1
    write_html(records, sys.stdout, mode)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    return run(argv, ReportMode.ALPHABETICAL)


def main_year(argv: Optional[Sequence[str]] = None) -> int:
    return run(argv, ReportMode.YEAR)


if __name__ == '__main__':
    sys.exit(main())
