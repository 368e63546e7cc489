import csv
from typing import Any, Dict, List

from price_explorer.models import PriceRecord
from price_explorer.utils import get_logger

logger = get_logger(__name__)

REQUIRED_COLUMNS = ("id", "city", "country", "continent", "priceCzk")


def _row_to_record(row: Dict[str, str]) -> PriceRecord:
    created = (row.get("createdAt") or "").strip()
    return PriceRecord(
        id=int(row["id"]) if row["id"].isdigit() else row["id"],
        city=row["city"],
        country=row["country"],
        continent=row["continent"],
        priceCzk=row["priceCzk"],
        createdAt=created or None,
    )


def fetch(source_cfg: Dict[str, Any]) -> List[PriceRecord]:
    path = source_cfg["path"]
    with open(path, "r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"CSV source {path} is missing columns: {', '.join(missing)}")
        records = [_row_to_record(row) for row in reader]
    logger.info("csv source: loaded=%d path=%s", len(records), path)
    return records
