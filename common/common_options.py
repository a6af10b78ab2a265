"""Report mode and per-run options.

``ReportMode`` pairs a sort order with a navigation style; ``ReportOptions``
carries everything a single run needs (the role ``report['_options']`` used
to play as a loose dict).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_INPUT = 'superdarn_theses.txt'


class ReportMode(Enum):
    ALPHABETICAL = 'alphabetical'  # author, then year; A-G/H-N/O-U/V-Z anchors
    YEAR = 'year'                  # year descending, then author; one anchor per year


@dataclass(frozen=True)
class ReportOptions:
    mode: ReportMode = ReportMode.ALPHABETICAL
    numeric_years: bool = False
    max_entries: Optional[int] = None


__all__ = ['DEFAULT_INPUT', 'ReportMode', 'ReportOptions']
