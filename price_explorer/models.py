from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from price_explorer.utils import parse_datetime_safe


class SortKey(str, Enum):
    CITY = "city"
    COUNTRY = "country"
    CONTINENT = "continent"
    PRICE_CZK = "priceCzk"


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class PriceRecord(BaseModel):
    """One price observation as delivered by the record source.

    Field aliases follow the camelCase wire names of the source data.
    ``price_czk`` is kept as the original decimal string and is never validated.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Union[int, str]
    city: str
    country: str
    continent: str
    price_czk: str = Field(alias="priceCzk")
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    @property
    def created(self) -> Optional[dt.datetime]:
        return parse_datetime_safe(self.created_at)


@dataclass(frozen=True)
class FilterState:
    search_term: str = ""
    selected_continent: str = ""
    selected_country: str = ""
    remove_duplicates: bool = True
    sort_key: SortKey = SortKey.PRICE_CZK
    sort_direction: SortDirection = SortDirection.ASCENDING


@dataclass
class QueryResult:
    continents: List[str]
    countries: List[str]
    visible: List[PriceRecord]
    total: int

    @property
    def shown(self) -> int:
        return len(self.visible)
