from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from price_explorer.models import PriceRecord
from price_explorer.stages.sorting import parse_price
from price_explorer.utils import get_logger

logger = get_logger(__name__)


def dedup_lowest_price(records: Sequence[PriceRecord]) -> List[PriceRecord]:
    """Keep the cheapest record per city.

    Ties keep the first encountered record. Output order is the order in which
    each city first appears. A candidate only replaces the kept record when its
    price is strictly lower, so a NaN price neither replaces nor gets replaced.
    """
    if not records:
        return []

    best: Dict[str, Tuple[float, PriceRecord]] = {}
    for rec in records:
        price = parse_price(rec.price_czk)
        current = best.get(rec.city)
        if current is None or price < current[0]:
            # re-assigning an existing key keeps its first-insertion position
            best[rec.city] = (price, rec)

    out = [rec for _, rec in best.values()]
    logger.info("dedup.lowest_price: kept=%d from=%d", len(out), len(records))
    return out
