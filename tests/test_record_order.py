import itertools

import pytest

from common.common_options import ReportMode
from common.common_order import author_sort_key, sort_records, year_sort_key
from common.common_records import ThesisRecord


def _rec(author, year, degree='PhD'):
    return ThesisRecord(author=author, year=year, title='t', advisor='a', affiliation='u', degree=degree, url='')


def _pairs(records):
    return [(r.author, r.year) for r in records]


@pytest.mark.parametrize('author,expected', [
    ('bob smith', 'Bob smith'),
    ('Amy Jones', 'Amy Jones'),
    ('', ''),
    ('émile', 'émile'),  # non-ASCII first letter left alone
    ('1st author', '1st author'),
])
def test_author_sort_key(author, expected):
    assert author_sort_key(author) == expected


def test_author_order_first_letter_case_insensitive():
    records = [_rec('bob smith', '2020'), _rec('Amy Jones', '2019')]
    ordered = sort_records(records, ReportMode.ALPHABETICAL)
    assert _pairs(ordered) == [('Amy Jones', '2019'), ('bob smith', '2020')]
    # stored value untouched
    assert ordered[1].author == 'bob smith'


def test_author_order_ties_broken_by_year():
    records = [_rec('Lee, K', '2018'), _rec('lee, K', '2011'), _rec('Lee, K', '2014')]
    ordered = sort_records(records, ReportMode.ALPHABETICAL)
    assert [r.year for r in ordered] == ['2011', '2014', '2018']


def test_year_order_descending_then_author():
    records = [_rec('Zed', '2019'), _rec('amy', '2021'), _rec('Bob', '2019'), _rec('carl', '2020')]
    ordered = sort_records(records, ReportMode.YEAR)
    assert _pairs(ordered) == [('amy', '2021'), ('carl', '2020'), ('Bob', '2019'), ('Zed', '2019')]


def test_year_compared_as_raw_strings():
    records = [_rec('A', '999'), _rec('B', '2019')]
    # "999" > "2019" lexicographically, so it comes first in descending order
    assert [r.year for r in sort_records(records, ReportMode.YEAR)] == ['999', '2019']


def test_numeric_years_opt_in():
    records = [_rec('A', '999'), _rec('B', '2019'), _rec('C', 'n.d.')]
    ordered = sort_records(records, ReportMode.YEAR, numeric_years=True)
    assert [r.year for r in ordered] == ['2019', '999', 'n.d.']
    assert year_sort_key('2019', numeric=True) > year_sort_key('999', numeric=True)


@pytest.mark.parametrize('mode', [ReportMode.ALPHABETICAL, ReportMode.YEAR])
def test_order_independent_of_input_permutation(mode):
    base = [_rec('Adams', '2019'), _rec('adams', '2015'), _rec('Harris', '2021'), _rec('zimmer', '2019')]
    expected = sort_records(base, mode)
    for perm in itertools.permutations(base):
        assert sort_records(list(perm), mode) == expected


@pytest.mark.parametrize('mode', [ReportMode.ALPHABETICAL, ReportMode.YEAR])
def test_sorting_is_idempotent(mode):
    base = [_rec('Owen', '2003'), _rec('baker', '2010'), _rec('Vance', '2003'), _rec('Baker', '2001')]
    once = sort_records(base, mode)
    assert sort_records(once, mode) == once


def test_input_list_not_mutated():
    base = [_rec('b', '2000'), _rec('a', '2001')]
    snapshot = list(base)
    sort_records(base, ReportMode.ALPHABETICAL)
    assert base == snapshot
