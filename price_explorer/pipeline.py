from __future__ import annotations

from typing import Sequence

from price_explorer.models import FilterState, PriceRecord, QueryResult
from price_explorer.stages.dedup import dedup_lowest_price
from price_explorer.stages.facets import continents, countries
from price_explorer.stages.filters import filter_continent, filter_country, filter_search
from price_explorer.stages.sorting import sort_records
from price_explorer.utils import get_logger

logger = get_logger(__name__)


def run_query(records: Sequence[PriceRecord], state: FilterState) -> QueryResult:
    """Derive facets and the visible table for ``records`` under ``state``.

    Pure: recomputes everything on each call. Callers that need memoization
    should cache on their side, keyed by the record set and the state.
    """
    result = filter_continent(records, state.selected_continent)
    result = filter_country(result, state.selected_country)
    result = filter_search(result, state.search_term)
    logger.debug("filters: kept=%d from=%d", len(result), len(records))

    if state.remove_duplicates:
        result = dedup_lowest_price(result)

    result = sort_records(result, state.sort_key, state.sort_direction)

    return QueryResult(
        continents=continents(records),
        countries=countries(records, state.selected_continent),
        visible=result,
        total=len(records),
    )
