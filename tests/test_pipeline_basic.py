from dataclasses import replace

from price_explorer.models import PriceRecord, SortDirection, SortKey
from price_explorer.pipeline import run_query
from price_explorer.state import default_state, select_continent, select_country, set_search, toggle_sort


RECORDS = [
    PriceRecord(id=1, city="Prague", country="Czechia", continent="Europe", priceCzk="100.00"),
    PriceRecord(id=2, city="Prague", country="Czechia", continent="Europe", priceCzk="80.00"),
    PriceRecord(id=3, city="Brno", country="Czechia", continent="Europe", priceCzk="90.00"),
]


def _ids(result):
    return [r.id for r in result.visible]


def test_default_state_dedups_and_sorts_by_price():
    res = run_query(RECORDS, default_state())
    assert _ids(res) == [2, 3]
    assert res.shown == 2
    assert res.total == 3


def test_without_dedup_shows_all_sorted():
    res = run_query(RECORDS, replace(default_state(), remove_duplicates=False))
    assert _ids(res) == [2, 3, 1]


def test_search_any_case():
    for term in ("brno", "BRNO", "bRnO"):
        assert _ids(run_query(RECORDS, set_search(default_state(), term))) == [3]


def test_toggle_price_flips_order():
    state = replace(default_state(), remove_duplicates=False)
    state = toggle_sort(state, SortKey.PRICE_CZK)
    assert state.sort_direction == SortDirection.DESCENDING
    assert _ids(run_query(RECORDS, state)) == [1, 3, 2]


def test_facets_use_full_record_set():
    extra = RECORDS + [
        PriceRecord(id=4, city="Tokyo", country="Japan", continent="Asia", priceCzk="120.00", createdAt=None),
    ]
    state = select_country(select_continent(default_state(), "Asia"), "Japan")
    res = run_query(extra, state)
    assert res.continents == ["Asia", "Europe"]
    assert res.countries == ["Japan"]
    assert _ids(res) == [4]


def test_pipeline_does_not_enforce_country_invariant():
    # a stale country outside the continent simply matches nothing
    state = replace(default_state(), selected_continent="Asia", selected_country="Czechia")
    res = run_query(RECORDS, state)
    assert res.visible == []
    assert res.countries == []


def test_inputs_untouched():
    records = list(RECORDS)
    run_query(records, default_state())
    assert records == RECORDS
