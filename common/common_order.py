"""Record ordering for both report modes.

Years are compared as raw strings unless ``numeric_years`` is set: "2020"
sorts after "2019", but "999" also sorts after "2019". Authors are compared
with only their first character uppercased.
"""
from __future__ import annotations
from typing import Iterable, List, Tuple, Union

from common.common_options import ReportMode
from common.common_records import ThesisRecord

YearKey = Union[str, Tuple[int, Union[int, str]]]


def author_sort_key(author: str) -> str:
    """Return ``author`` with the first character uppercased (ASCII only, like C toupper)."""
    if not author:
        return author
    first = author[0]
    if first.isascii():
        first = first.upper()
    return first + author[1:]


def year_sort_key(year: str, numeric: bool = False) -> YearKey:
    if not numeric:
        return year
    stripped = year.strip()
    if stripped.isdigit():
        return (1, int(stripped))
    return (0, year)


def sort_records(records: Iterable[ThesisRecord], mode: ReportMode, numeric_years: bool = False) -> List[ThesisRecord]:
    """Return a new list ordered for ``mode``; the input is left untouched."""
    if mode is ReportMode.ALPHABETICAL:
        return sorted(records, key=lambda r: (author_sort_key(r.author), year_sort_key(r.year, numeric_years)))
    if mode is ReportMode.YEAR:
        # Stable two-pass sort: author ascending survives within equal years.
        by_author = sorted(records, key=lambda r: author_sort_key(r.author))
        return sorted(by_author, key=lambda r: year_sort_key(r.year, numeric_years), reverse=True)
    raise ValueError(f"unknown report mode: {mode!r}")


__all__ = ['author_sort_key', 'year_sort_key', 'sort_records']
