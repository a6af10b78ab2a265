import io

from builders.report_builders import ReportSummary, build_html, build_record_table, summarize
from builders.thesis_report_common import write_html
from common.common_options import ReportMode
from common.common_records import ThesisRecord


def _rec(author='Doe, J', year='2010', degree='PhD', url=''):
    return ThesisRecord(author=author, year=year, title='A & B <i>radar</i> study', advisor='Prof. X',
                        affiliation='Dartmouth College', degree=degree, url=url)


def test_degree_row_without_url_has_single_cell():
    table = build_record_table(_rec(url=''))
    assert '    <tr><td><b>Degree:</b> PhD</td></tr>\n' in table
    assert 'URL' not in table


def test_degree_row_with_url_links_exact_target():
    url = 'https://example.org/t?id=7&x=1'
    table = build_record_table(_rec(url=url))
    assert f'<td align="right"><a href="{url}" target="_blank">URL</a></td></tr>' in table


def test_fields_not_escaped():
    table = build_record_table(_rec())
    assert '<b>Title:</b> A & B <i>radar</i> study' in table


def test_degree_counts_exact_match_only():
    records = [_rec(degree='MS'), _rec(degree='PhD'), _rec(degree='MS'), _rec(degree='Other')]
    assert summarize(records) == ReportSummary(total=4, ms=2, phd=1)
    html = build_html(records, ReportMode.ALPHABETICAL)
    assert '<center>Number of items: <b>4</b></center>' in html
    assert '<center>(2 MS | 1 PhD)</center>' in html


def test_degree_case_sensitive():
    assert summarize([_rec(degree='phd'), _rec(degree='M.S.'), _rec(degree='PhD ')]) == ReportSummary(3, 0, 0)


def test_fragment_markers_and_container():
    html = build_html([_rec()], ReportMode.YEAR)
    assert html.startswith('<!-- *** BEGIN THESIS/DISSERTATION CONTENT HERE *** --!>\n<div align="center">\n')
    assert html.endswith('</div>\n<!-- *** END THESIS/DISSERTATION CONTENT HERE *** --!>\n')
    assert '<html' not in html and '<body' not in html


def test_write_html_to_stream_returns_summary():
    buf = io.StringIO()
    summary = write_html([_rec(degree='MS')], buf, ReportMode.ALPHABETICAL)
    assert summary == ReportSummary(1, 1, 0)
    assert buf.getvalue() == build_html([_rec(degree='MS')], ReportMode.ALPHABETICAL)


def test_write_html_to_path(tmp_path):
    out = tmp_path / 'theses.html'
    write_html([_rec()], out, ReportMode.YEAR)
    assert out.read_text(encoding='utf-8') == build_html([_rec()], ReportMode.YEAR)
