#!/usr/bin/env python3
import argparse

from price_explorer.orchestrator import run_once

SORT_KEYS = ["city", "country", "continent", "priceCzk"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Price Explorer CLI")
    parser.add_argument("--config", required=True, help="Path to YAML config")
    parser.add_argument("--reset", action="store_true", help="Clear filters and restore default sort before other flags")
    parser.add_argument("--search", type=str, help="Case-insensitive match on city, country or continent")
    parser.add_argument("--continent", type=str, help="Exact continent filter (clears country)")
    parser.add_argument("--country", type=str, help="Exact country filter")
    parser.add_argument("--dedup", dest="remove_duplicates", action="store_true", help="Show only the lowest price per city")
    parser.add_argument("--no-dedup", dest="remove_duplicates", action="store_false", help="Show every record")
    parser.add_argument("--sort", dest="sort_clicks", action="append", choices=SORT_KEYS,
                        help="Click a column header; repeat the same key to flip direction")
    parser.add_argument("--print", dest="echo", action="store_true", help="Also print the markdown table to stdout")
    parser.set_defaults(remove_duplicates=None)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    overrides = {
        "reset": args.reset,
        "search": args.search,
        "continent": args.continent,
        "country": args.country,
        "remove_duplicates": args.remove_duplicates,
        "sort_clicks": args.sort_clicks,
    }

    run_once(args.config, overrides=overrides, echo=args.echo)


if __name__ == "__main__":
    main()
