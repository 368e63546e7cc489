from __future__ import annotations

from typing import List, Sequence

from price_explorer.models import PriceRecord


def filter_continent(records: Sequence[PriceRecord], continent: str) -> List[PriceRecord]:
    if not continent:
        return list(records)
    return [r for r in records if r.continent == continent]


def filter_country(records: Sequence[PriceRecord], country: str) -> List[PriceRecord]:
    if not country:
        return list(records)
    return [r for r in records if r.country == country]


def _matches(record: PriceRecord, needle: str) -> bool:
    return (
        needle in record.city.lower()
        or needle in record.country.lower()
        or needle in record.continent.lower()
    )


def filter_search(records: Sequence[PriceRecord], term: str) -> List[PriceRecord]:
    """Case-insensitive substring match on city, country or continent."""
    if not term:
        return list(records)
    needle = term.lower()
    return [r for r in records if _matches(r, needle)]
