"""Record source adapters.

Every adapter exposes ``fetch(source_cfg) -> List[PriceRecord]`` and keeps the
order of records as stored.
"""
