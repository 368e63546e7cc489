"""Pipeline stages: facets, filtering, deduplication, sorting.

Each stage exposes a small, pure function API over sequences of
``PriceRecord`` and never mutates its input.
"""
