"""Navigation helpers shared by both report layouts.

Public helpers:
  ALPHA_BUCKETS                 -> ((label, start_letter), ...) in page order
  assign_bucket_anchors(records) -> per-record bucket label or None
  distinct_years(records)       -> years in first-appearance order
  assign_year_headings(records) -> per-record year label or None

Design notes:
- Input must already be sorted for the matching mode.
- Each bucket is consumed at most once, in order. A record whose letter
  passes several unconsumed buckets gets the anchor of the last one it
  reaches; the skipped buckets get none.
- Pure functions: no mutation of input records.
"""
from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Tuple

from common.common_order import author_sort_key
from common.common_records import ThesisRecord

ALPHA_BUCKETS: Tuple[Tuple[str, str], ...] = (
    ('A-G', 'A'),
    ('H-N', 'H'),
    ('O-U', 'O'),
    ('V-Z', 'V'),
)


def bucket_letter(author: str) -> str:
    return author_sort_key(author)[:1]


def assign_bucket_anchors(records: Sequence[ThesisRecord]) -> List[Optional[str]]:
    anchors: List[Optional[str]] = []
    next_idx = 0
    for rec in records:
        letter = bucket_letter(rec.author)
        reached = next_idx
        while reached < len(ALPHA_BUCKETS) and letter and letter >= ALPHA_BUCKETS[reached][1]:
            reached += 1
        if reached > next_idx:
            anchors.append(ALPHA_BUCKETS[reached - 1][0])
            next_idx = reached
        else:
            anchors.append(None)
    return anchors


def distinct_years(records: Iterable[ThesisRecord]) -> List[str]:
    seen: set[str] = set()
    years: List[str] = []
    for rec in records:
        if rec.year not in seen:
            seen.add(rec.year)
            years.append(rec.year)
    return years


def assign_year_headings(records: Sequence[ThesisRecord]) -> List[Optional[str]]:
    """Year label wherever it differs from the previous record's (always for the first)."""
    headings: List[Optional[str]] = []
    prev: Optional[str] = None
    for idx, rec in enumerate(records):
        if idx == 0 or rec.year != prev:
            headings.append(rec.year)
        else:
            headings.append(None)
        prev = rec.year
    return headings


__all__ = ['ALPHA_BUCKETS', 'bucket_letter', 'assign_bucket_anchors', 'distinct_years', 'assign_year_headings']
