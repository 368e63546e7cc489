from __future__ import annotations

from typing import List, Sequence

from price_explorer.models import PriceRecord


def _distinct_sorted(values) -> List[str]:
    # dict.fromkeys keeps one entry per value; sorted() compares by code point
    return sorted(dict.fromkeys(values))


def continents(records: Sequence[PriceRecord]) -> List[str]:
    """Distinct continents over the full, unfiltered record set."""
    return _distinct_sorted(r.continent for r in records)


def countries(records: Sequence[PriceRecord], selected_continent: str = "") -> List[str]:
    """Distinct countries, restricted to ``selected_continent`` when it is set."""
    if selected_continent:
        records = [r for r in records if r.continent == selected_continent]
    return _distinct_sorted(r.country for r in records)
