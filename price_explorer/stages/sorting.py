from __future__ import annotations

import math
import re
from functools import cmp_to_key
from typing import Any, Callable, Dict, List, Optional, Sequence

from price_explorer.models import PriceRecord, SortDirection, SortKey
from price_explorer.utils import get_logger

logger = get_logger(__name__)


# ---------- Price parsing ----------

_NUMERIC_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def parse_price(raw: Optional[str]) -> float:
    """Lenient float parse: leading ASCII numeric prefix wins, otherwise NaN."""
    if raw is None:
        return math.nan
    m = _NUMERIC_PREFIX.match(str(raw).strip())
    if not m:
        return math.nan
    return float(m.group(0))


# ---------- Comparators ----------

def _compare_values(a: Any, b: Any) -> int:
    # NaN fails both `<` and `>`, so it ties with everything
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


_FIELD_GETTERS: Dict[SortKey, Callable[[PriceRecord], Any]] = {
    SortKey.CITY: lambda r: r.city,
    SortKey.COUNTRY: lambda r: r.country,
    SortKey.CONTINENT: lambda r: r.continent,
    SortKey.PRICE_CZK: lambda r: parse_price(r.price_czk),
}


def compare_records(a: PriceRecord, b: PriceRecord, key: SortKey, direction: SortDirection) -> int:
    result = _compare_values(_FIELD_GETTERS[key](a), _FIELD_GETTERS[key](b))
    if direction == SortDirection.DESCENDING:
        return -result
    return result


def sort_records(
    records: Sequence[PriceRecord],
    key: SortKey = SortKey.PRICE_CZK,
    direction: SortDirection = SortDirection.ASCENDING,
) -> List[PriceRecord]:
    """Stable sort; descending flips the comparison sign, ties keep input order."""
    key = SortKey(key)
    direction = SortDirection(direction)
    out = sorted(records, key=cmp_to_key(lambda a, b: compare_records(a, b, key, direction)))
    logger.debug("sort: key=%s direction=%s n=%d", key.value, direction.value, len(out))
    return out
