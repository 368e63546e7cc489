from __future__ import annotations

from typing import Any, Dict, List

from price_explorer.models import FilterState, PriceRecord, QueryResult, SortDirection, SortKey

COLUMNS = [
    (SortKey.CITY, "City"),
    (SortKey.COUNTRY, "Country"),
    (SortKey.CONTINENT, "Continent"),
    (SortKey.PRICE_CZK, "Price (CZK)"),
]


def sort_arrow(state: FilterState, key: SortKey) -> str:
    if state.sort_key != SortKey(key):
        return ""
    return "↑" if state.sort_direction == SortDirection.ASCENDING else "↓"


def _cell(value: str) -> str:
    return (value or "").replace("|", "\\|")


def _row(rec: PriceRecord) -> str:
    cells = [rec.city, rec.country, rec.continent, rec.price_czk]
    return "| " + " | ".join(_cell(c) for c in cells) + " |"


def _header(state: FilterState) -> List[str]:
    labels = []
    for key, label in COLUMNS:
        arrow = sort_arrow(state, key)
        labels.append(f"{label} {arrow}" if arrow else label)
    return [
        "| " + " | ".join(labels) + " |",
        "| --- | --- | --- | ---: |",
    ]


def _active_filters(state: FilterState) -> List[str]:
    out = []
    if state.search_term:
        out.append(f"- Search: `{state.search_term}`")
    out.append(f"- Continent: {state.selected_continent or 'All Continents'}")
    out.append(f"- Country: {state.selected_country or 'All Countries'}")
    out.append(f"- Only lowest price per city: {'yes' if state.remove_duplicates else 'no'}")
    return out


def render_md(result: QueryResult, state: FilterState, title: str = "Price Explorer") -> str:
    lines = [f"# {title}", ""]
    lines.extend(_active_filters(state))
    lines.append("")
    lines.append(f"Showing {result.shown} of {result.total} results")
    lines.append("")
    lines.extend(_header(state))
    lines.extend(_row(r) for r in result.visible)
    return "\n".join(lines) + "\n"


def to_json(result: QueryResult, state: FilterState, title: str = "Price Explorer") -> Dict[str, Any]:
    return {
        "title": title,
        "filters": {
            "search": state.search_term,
            "continent": state.selected_continent,
            "country": state.selected_country,
            "remove_duplicates": state.remove_duplicates,
        },
        "sort": {
            "key": state.sort_key.value,
            "direction": state.sort_direction.value,
            "arrow": sort_arrow(state, state.sort_key),
        },
        "facets": {
            "continents": list(result.continents),
            "countries": list(result.countries),
        },
        "counts": {"shown": result.shown, "total": result.total},
        "rows": [r.model_dump(mode="json", by_alias=True) for r in result.visible],
    }
