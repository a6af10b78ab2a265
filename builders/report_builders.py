"""HTML fragment builders for thesis/dissertation listings.

The output is a fragment meant to be pasted into an existing page, not a
standalone document: it starts and ends with marker comments and wraps
everything in a centered div.

Layout per mode:
- ALPHABETICAL: fixed A-G/H-N/O-U/V-Z jump links, one named anchor at the
  first record of each populated bucket.
- YEAR: one jump link per distinct year, a named anchor plus centered
  heading wherever the year changes.

Field values are written verbatim. Entries are expected to contain trusted,
already-formatted HTML text, so no escaping is applied.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from builders.report_sections import (
    ALPHA_BUCKETS,
    assign_bucket_anchors,
    assign_year_headings,
    distinct_years,
)
from common.common_options import ReportMode
from common.common_records import ThesisRecord

BEGIN_MARKER = '<!-- *** BEGIN THESIS/DISSERTATION CONTENT HERE *** --!>'
END_MARKER = '<!-- *** END THESIS/DISSERTATION CONTENT HERE *** --!>'
TABLE_STYLE = 'border:1px solid black; width:600px;'
YEAR_NAV_STYLE = 'width:800px;'

DEGREE_MS = 'MS'
DEGREE_PHD = 'PhD'

_ROW_LABELS = (
    ('Author', 'author'),
    ('Year', 'year'),
    ('Title', 'title'),
    ('Advisor', 'advisor'),
    ('Affiliation', 'affiliation'),
)


@dataclass(frozen=True)
class ReportSummary:
    total: int = 0
    ms: int = 0
    phd: int = 0


def summarize(records: Sequence[ThesisRecord]) -> ReportSummary:
    """Count records by exact degree match; other degree strings land in neither bucket."""
    ms = sum(1 for r in records if r.degree == DEGREE_MS)
    phd = sum(1 for r in records if r.degree == DEGREE_PHD)
    return ReportSummary(total=len(records), ms=ms, phd=phd)


def build_record_table(rec: ThesisRecord) -> str:
    parts: List[str] = [f'  <table style="{TABLE_STYLE}">\n']
    for label, attr in _ROW_LABELS:
        parts.append(f'    <tr><td><b>{label}:</b> {getattr(rec, attr)}</td></tr>\n')
    parts.append(f'    <tr><td><b>Degree:</b> {rec.degree}</td>')
    if rec.has_url:
        parts.append(f'<td align="right"><a href="{rec.url}" target="_blank">URL</a></td></tr>\n')
    else:
        parts.append('</tr>\n')
    parts.append('  </table><br>\n\n')
    return ''.join(parts)


def build_alpha_nav() -> str:
    links = [f'  <a href="#{label}">{label}</a>' for label, _start in ALPHA_BUCKETS]
    return '  <b>Jump to:</b>&nbsp;\n' + '&nbsp;|\n'.join(links) + '\n\n'


def build_year_nav(years: Sequence[str]) -> str:
    parts: List[str] = [f'  <div style="{YEAR_NAV_STYLE}">\n', '    <b>Jump to:</b>&nbsp;\n']
    if years:
        parts.append('|\n'.join(f'    <a href="#{y}">{y}</a>&nbsp;' for y in years) + '\n')
    parts.append('  </div>\n')
    return ''.join(parts)


def build_bucket_anchor(label: str) -> str:
    return f'  <a name={label}></a>\n\n'


def build_year_heading(year: str) -> str:
    return f'  <a name={year}></a>\n  <center><b>{year}</b></center><br>\n\n'


def build_summary(summary: ReportSummary) -> str:
    return (f'  <center>Number of items: <b>{summary.total}</b></center>\n'
            f'  <center>({summary.ms} MS | {summary.phd} PhD)</center>\n\n')


def build_html(records: Sequence[ThesisRecord], mode: ReportMode) -> str:
    """Render already-sorted ``records`` as an HTML fragment for ``mode``."""
    markers: List[Optional[str]]
    if mode is ReportMode.ALPHABETICAL:
        nav = build_alpha_nav()
        markers = [build_bucket_anchor(a) if a else None for a in assign_bucket_anchors(records)]
    elif mode is ReportMode.YEAR:
        nav = build_year_nav(distinct_years(records))
        markers = [build_year_heading(y) if y is not None else None for y in assign_year_headings(records)]
    else:
        raise ValueError(f"unknown report mode: {mode!r}")

    parts: List[str] = [BEGIN_MARKER + '\n', '<div align="center">\n\n']
    parts.append(nav)
    parts.append('  <br><br>\n\n')
    for rec, marker in zip(records, markers):
        if marker:
            parts.append(marker)
        parts.append(build_record_table(rec))
    parts.append(build_summary(summarize(records)))
    parts.append('</div>\n')
    parts.append(END_MARKER + '\n')
    return ''.join(parts)


__all__ = [
    'BEGIN_MARKER', 'END_MARKER', 'DEGREE_MS', 'DEGREE_PHD', 'ReportSummary',
    'summarize', 'build_record_table', 'build_alpha_nav', 'build_year_nav',
    'build_bucket_anchor', 'build_year_heading', 'build_summary', 'build_html',
]
