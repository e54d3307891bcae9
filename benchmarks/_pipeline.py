"""Aggregate raw timings with polars and render them into a rich table."""

import polars as pl
from rich.table import Table

import pyoseq as ps

from ._registery import CASES, Row, collect_raw_timings


def run_pipeline(category: str | None = None) -> Table:
    """Run the registered cases, optionally restricted to one category."""
    selected = ps.Seq.of(CASES).filter(
        lambda c, *_: category is None or c.category == category
    )
    if not selected.some(lambda *_: True):
        msg = f"No benchmarks registered for category {category!r}"
        raise ValueError(msg)
    return _to_table(_compute_all_stats(collect_raw_timings(selected)))


def _compute_all_stats(raw_rows: list[Row]) -> pl.DataFrame:
    """Median time per call and sample count, for each `(category, name, size)`."""
    return (
        pl.DataFrame(raw_rows, schema=list(Row._fields), orient="row")
        .group_by("category", "name", "size")
        .agg(
            pl.col("time").median().alias("median"),
            pl.len().alias("runs"),
        )
        .sort("category", "size", "median")
    )


def _to_table(stats: pl.DataFrame) -> Table:
    table = Table(title="pyoseq benchmarks")
    for column in ("category", "name", "size", "runs", "median (µs)"):
        table.add_column(column, justify="left" if column == "name" else "right")
    for category, name, size, runs, median in stats.select(
        "category", "name", "size", "runs", "median"
    ).iter_rows():
        table.add_row(category, name, str(size), str(runs), f"{median * 1e6:.2f}")
    return table
