import os
import time
import uuid
import yaml
from dataclasses import replace
from typing import Dict, Any, List, Optional

from price_explorer.models import FilterState, PriceRecord, QueryResult, SortDirection, SortKey
from price_explorer.pipeline import run_query
from price_explorer.rendering.markdown import render_md, to_json
from price_explorer.sources import csv_adapter, json_adapter
from price_explorer.state import (
    reset,
    select_continent,
    select_country,
    set_search,
    toggle_sort,
)
from price_explorer.utils import write_output, validate_config, get_logger

logger = get_logger(__name__)

DEFAULT_TITLE = "Price Explorer"


def _fetch_records(source_cfg: Dict[str, Any]) -> List[PriceRecord]:
    """Load records from the configured source."""
    t = source_cfg["type"]
    if t == "json":
        return json_adapter.fetch(source_cfg)
    elif t == "csv":
        return csv_adapter.fetch(source_cfg)
    else:
        raise ValueError(f"Unknown source type: {t}")


def _resolve_paths(cfg: Dict[str, Any], config_path: str) -> None:
    base = os.path.dirname(os.path.abspath(config_path))
    for section, key in (("source", "path"), ("output", "dir")):
        value = cfg[section][key]
        if not os.path.isabs(value):
            cfg[section][key] = os.path.normpath(os.path.join(base, value))


def state_from_config(filters_cfg: Optional[Dict[str, Any]]) -> FilterState:
    f = filters_cfg or {}
    defaults = FilterState()
    return FilterState(
        search_term=f.get("search", defaults.search_term),
        selected_continent=f.get("continent", defaults.selected_continent),
        selected_country=f.get("country", defaults.selected_country),
        remove_duplicates=f.get("remove_duplicates", defaults.remove_duplicates),
        sort_key=SortKey(f.get("sort_key", defaults.sort_key)),
        sort_direction=SortDirection(f.get("sort_direction", defaults.sort_direction)),
    )


def _apply_overrides(state: FilterState, overrides: Optional[Dict[str, Any]]) -> FilterState:
    """Replay CLI overrides on top of the configured state.

    Order: reset, then search/continent/country/dedup, then sort clicks.
    """
    if not overrides:
        return state

    if overrides.get("reset"):
        state = reset(state)
    if overrides.get("search") is not None:
        state = set_search(state, overrides["search"])
    if overrides.get("continent") is not None:
        state = select_continent(state, overrides["continent"])
    if overrides.get("country") is not None:
        state = select_country(state, overrides["country"])
    if overrides.get("remove_duplicates") is not None:
        state = replace(state, remove_duplicates=bool(overrides["remove_duplicates"]))
    for key in overrides.get("sort_clicks") or []:
        state = toggle_sort(state, SortKey(key))
    return state


def _execute_pipeline(cfg: Dict[str, Any], run_id: str, overrides: Optional[Dict[str, Any]] = None, echo: bool = False) -> QueryResult:
    """Load records, run the query pipeline and write the rendered view."""
    title = cfg.get("title", DEFAULT_TITLE)
    logger.info("config loaded run=%s title=%s source=%s", run_id, title, cfg["source"]["type"])

    state = _apply_overrides(state_from_config(cfg.get("filters")), overrides)
    logger.info(
        "filter state search=%r continent=%r country=%r dedup=%s sort=%s/%s",
        state.search_term,
        state.selected_continent,
        state.selected_country,
        state.remove_duplicates,
        state.sort_key.value,
        state.sort_direction.value,
    )

    t0 = time.monotonic()
    records = _fetch_records(cfg["source"])
    logger.info("fetched records=%d took_ms=%d", len(records), int((time.monotonic()-t0)*1000))

    t1 = time.monotonic()
    result = run_query(records, state)
    logger.info("query shown=%d total=%d took_ms=%d", result.shown, result.total, int((time.monotonic()-t1)*1000))

    md = render_md(result, state, title)
    js = to_json(result, state, title)
    generated_files = write_output(md, js, cfg["output"])
    logger.info("output written dir=%s files=%d", cfg["output"]["dir"], len(generated_files))

    if echo:
        print(md)

    return result


def run_once(
    config_path: str,
    *,
    overrides: Optional[Dict[str, Any]] = None,
    echo: bool = False,
) -> QueryResult:
    """Execute pipeline once with given config file path."""
    run_id = uuid.uuid4().hex[:8]
    logger.info("=== run start id=%s ===", run_id)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
        validate_config(cfg)
        _resolve_paths(cfg, config_path)
        return _execute_pipeline(cfg, run_id, overrides, echo=echo)

    except Exception as e:
        logger.error("Pipeline execution failed: %s", e)
        raise
    finally:
        logger.info("=== run end id=%s ===", run_id)
