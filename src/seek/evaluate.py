"""Summaries of search results: total count and per-source counts."""

from collections.abc import Mapping

import polars as pl

from seek.data_models.hit import Hit

_COUNT_SCHEMA = {"source": pl.String, "count": pl.Int64}


def count(hits_by_source: Mapping[str, list[Hit]]) -> int:
    return sum(len(hits) for hits in hits_by_source.values())


def count_by_source(hits_by_source: Mapping[str, list[Hit]]) -> pl.DataFrame:
    """One row per source in input order, zero counts included."""
    if not hits_by_source:
        return pl.DataFrame(schema=_COUNT_SCHEMA)
    rows = [(name, len(hits)) for name, hits in hits_by_source.items()]
    return pl.DataFrame(rows, schema=_COUNT_SCHEMA, orient="row")
