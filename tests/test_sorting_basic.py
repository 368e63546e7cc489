import math

from price_explorer.models import PriceRecord, SortDirection, SortKey
from price_explorer.stages.sorting import parse_price, sort_records


def _rec(id, city, price, country="Czechia", continent="Europe"):
    return PriceRecord(id=id, city=city, country=country, continent=continent, priceCzk=price)


def _ids(recs):
    return [r.id for r in recs]


def test_parse_price_lenient():
    assert parse_price("100.00") == 100.0
    assert parse_price("  42.5 ") == 42.5
    assert parse_price("12.5 CZK") == 12.5
    assert math.isnan(parse_price("abc"))
    assert math.isnan(parse_price(""))
    assert math.isnan(parse_price(None))


def test_parse_price_only_ascii_prefix():
    # digit-group underscores stop the prefix, like a browser float parse
    assert parse_price("1_000") == 1.0
    assert parse_price("Infinity") == math.inf
    assert math.isnan(parse_price("infinity"))
    assert math.isnan(parse_price("inf"))
    assert math.isnan(parse_price("\u0661\u0662"))
    assert parse_price("1e3 CZK") == 1000.0
    assert parse_price("-.5") == -0.5


def test_price_sort_is_numeric_not_lexicographic():
    recs = [_rec(1, "a", "100.00"), _rec(2, "b", "9.50"), _rec(3, "c", "25.00")]
    assert _ids(sort_records(recs, SortKey.PRICE_CZK, SortDirection.ASCENDING)) == [2, 3, 1]
    assert _ids(sort_records(recs, SortKey.PRICE_CZK, SortDirection.DESCENDING)) == [1, 3, 2]


def test_descending_keeps_ties_in_prior_order():
    recs = [
        _rec(1, "a", "50.00"),
        _rec(2, "b", "10.00"),
        _rec(3, "c", "50.00"),
        _rec(4, "d", "10.00"),
    ]
    asc = sort_records(recs, SortKey.PRICE_CZK, SortDirection.ASCENDING)
    desc = sort_records(recs, SortKey.PRICE_CZK, SortDirection.DESCENDING)
    assert _ids(asc) == [2, 4, 1, 3]
    # not a reversal of asc: equal prices keep 1 before 3 and 2 before 4
    assert _ids(desc) == [1, 3, 2, 4]


def test_string_keys():
    recs = [
        _rec(1, "Vienna", "1", country="Austria"),
        _rec(2, "Brno", "1", country="Czechia"),
        _rec(3, "Prague", "1", country="Czechia"),
    ]
    assert _ids(sort_records(recs, SortKey.CITY, SortDirection.ASCENDING)) == [2, 3, 1]
    assert _ids(sort_records(recs, SortKey.COUNTRY, SortDirection.DESCENDING)) == [2, 3, 1]
    assert _ids(sort_records(recs, "continent", "ascending")) == [1, 2, 3]


def test_sort_does_not_mutate_and_accepts_empty():
    recs = [_rec(1, "a", "3"), _rec(2, "b", "1")]
    sort_records(recs)
    assert _ids(recs) == [1, 2]
    assert sort_records([]) == []


def test_unparseable_prices_do_not_raise():
    recs = [_rec(1, "a", "3"), _rec(2, "b", "oops"), _rec(3, "c", "1")]
    out = sort_records(recs, SortKey.PRICE_CZK, SortDirection.ASCENDING)
    assert sorted(_ids(out)) == [1, 2, 3]


def test_nan_price_ties_with_everything():
    recs = [_rec(1, "a", "3"), _rec(2, "b", "oops")]
    assert _ids(sort_records(recs, SortKey.PRICE_CZK, SortDirection.ASCENDING)) == [1, 2]
    assert _ids(sort_records(recs, SortKey.PRICE_CZK, SortDirection.DESCENDING)) == [1, 2]
    assert _ids(sort_records(recs[::-1], SortKey.PRICE_CZK, SortDirection.ASCENDING)) == [2, 1]
