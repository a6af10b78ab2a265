"""Minimal logging utilities.

One-line diagnostics on stderr (or a caller supplied sink). stdout is reserved
for the HTML fragment, so nothing here ever prints there.
"""
from __future__ import annotations
from typing import Callable, Optional
import sys

Sink = Callable[[str], None]


def log_line(level: str, msg: str, name: str = 'thesisreport', sink: Optional[Sink] = None):
    """Log a single line message."""
    try:
        if sink:
            sink(f"{level.upper()}: {name}: {msg}")
        else:
            sys.stderr.write(f"{level.upper()}: {name}: {msg}\n")
    except Exception:
        pass


__all__ = ['Sink', 'log_line']
