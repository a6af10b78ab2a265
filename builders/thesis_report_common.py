"""
Shared output routine for thesis reports.

Writes the fragment produced by ``report_builders.build_html`` either to an
open text stream (stdout for the CLI) or to a file path, so callers never
assemble the document themselves.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, TextIO, Union

from builders.report_builders import ReportSummary, build_html, summarize
from common.common_options import ReportMode
from common.common_records import INPUT_ENCODING, INPUT_ERRORS, ThesisRecord

Destination = Union[TextIO, Path, str]


def _encode(html: str) -> bytes:
    return html.encode(INPUT_ENCODING, INPUT_ERRORS)


def write_html(records: Sequence[ThesisRecord], out: Destination, mode: ReportMode = ReportMode.ALPHABETICAL) -> ReportSummary:
    """Render ``records`` (already sorted for ``mode``) and write the fragment to ``out``.

    Parameters
    ----------
    records : sequence of ThesisRecord
        Sorted records.
    out : text stream or path
        Paths and byte-backed streams get UTF-8, with input bytes that were
        not valid UTF-8 written back unchanged. Stream errors propagate.
    mode : ReportMode
        Navigation layout.

    Returns
    -------
    ReportSummary with the total, MS and PhD counts shown at the bottom.
    """
    html = build_html(records, mode)
    if isinstance(out, (str, Path)):
        Path(out).write_bytes(_encode(html))
        return summarize(records)
    buffer = getattr(out, 'buffer', None)
    if buffer is not None:
        # Binary layer of a real text stream (stdout); keeps undecodable input bytes intact.
        out.flush()
        buffer.write(_encode(html))
        buffer.flush()
    else:
        out.write(html)
        out.flush()
    return summarize(records)


__all__ = ['write_html']
