"""Filter-state transitions.

Each user interaction maps to a pure function that takes the current
``FilterState`` and returns a new one. The pipeline never holds state itself.
"""

from __future__ import annotations

from dataclasses import replace

from price_explorer.models import FilterState, SortDirection, SortKey


def default_state() -> FilterState:
    return FilterState()


def reset(state: FilterState) -> FilterState:
    """Clear filters and restore the default sort.

    Unlike the initial state, reset turns duplicate removal off.
    """
    return replace(
        state,
        search_term="",
        selected_continent="",
        selected_country="",
        remove_duplicates=False,
        sort_key=SortKey.PRICE_CZK,
        sort_direction=SortDirection.ASCENDING,
    )


def set_search(state: FilterState, term: str) -> FilterState:
    return replace(state, search_term=term or "")


def select_continent(state: FilterState, continent: str) -> FilterState:
    # the country list depends on the continent, so the old selection is dropped
    return replace(state, selected_continent=continent or "", selected_country="")


def select_country(state: FilterState, country: str) -> FilterState:
    return replace(state, selected_country=country or "")


def toggle_duplicates(state: FilterState) -> FilterState:
    return replace(state, remove_duplicates=not state.remove_duplicates)


def toggle_sort(state: FilterState, key: SortKey) -> FilterState:
    key = SortKey(key)
    if state.sort_key == key and state.sort_direction == SortDirection.ASCENDING:
        direction = SortDirection.DESCENDING
    else:
        direction = SortDirection.ASCENDING
    return replace(state, sort_key=key, sort_direction=direction)
