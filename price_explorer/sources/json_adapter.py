import json
from typing import Any, Dict, List

from pydantic import TypeAdapter

from price_explorer.models import PriceRecord
from price_explorer.utils import get_logger

logger = get_logger(__name__)

_RECORDS_ADAPTER = TypeAdapter(List[PriceRecord])


def fetch(source_cfg: Dict[str, Any]) -> List[PriceRecord]:
    path = source_cfg["path"]
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of price records in {path}")
    records = _RECORDS_ADAPTER.validate_python(data)
    logger.info("json source: loaded=%d path=%s", len(records), path)
    return records
