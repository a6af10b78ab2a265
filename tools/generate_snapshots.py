"""Utility script to (re)generate snapshot artifacts for tests.

Usage:
  python -m tools.generate_snapshots

Renders tests/fixtures/sample_theses.txt in both modes and writes the
results under tests/snapshots/. Review the diff before committing; CI relies
on the committed snapshots.
"""
from pathlib import Path

from builders.report_builders import build_html
from common.common_options import ReportMode, ReportOptions
from thesis_report import build_report

TESTS_DIR = Path(__file__).resolve().parent.parent / 'tests'
FIXTURE = TESTS_DIR / 'fixtures' / 'sample_theses.txt'
SNAP_DIR = TESTS_DIR / 'snapshots'
SNAP_DIR.mkdir(exist_ok=True)


def regen(mode: ReportMode):
    records = build_report(FIXTURE, ReportOptions(mode=mode))
    target = SNAP_DIR / f'sample_{mode.value}.html'
    target.write_text(build_html(records, mode), encoding='utf-8')
    print(f'Updated {target.name}.')


def main():
    for mode in ReportMode:
        regen(mode)
    print('All snapshots regenerated.')

if __name__ == '__main__':
    main()
