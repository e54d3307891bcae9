"""Tests for the benchmark registry and its aggregation."""

import pytest

pl = pytest.importorskip("polars")
pytest.importorskip("rich")

from benchmarks._pipeline import _compute_all_stats, _to_table  # noqa: E402
from benchmarks._registery import (  # noqa: E402
    CASES,
    REPEATS,
    SIZES,
    Case,
    Row,
    _sample,
    bench,
)


def test_compute_all_stats() -> None:
    """Test samples are grouped per case into a median and a count."""
    rows = [
        Row("Map", "seq", 8, 3.0),
        Row("Map", "seq", 8, 1.0),
        Row("Map", "seq", 8, 2.0),
        Row("Map", "seq", 16, 5.0),
        Row("Map", "comprehension", 8, 0.5),
    ]
    stats = _compute_all_stats(rows)
    by_case = {
        (name, size): (median, runs)
        for name, size, median, runs in stats.select(
            "name", "size", "median", "runs"
        ).iter_rows()
    }
    assert by_case == {
        ("seq", 8): (2.0, 3),
        ("seq", 16): (5.0, 1),
        ("comprehension", 8): (0.5, 1),
    }
    assert _to_table(stats).row_count == 3


def test_bench_registers_one_case_per_size() -> None:
    """Test the decorator binds the generated data of every size."""
    before = len(CASES)

    class Sizes:
        @bench(gen=lambda data: data.count())
        @staticmethod
        def identity(size: int) -> object:
            return size

    added = CASES[before:]
    del CASES[before:]
    assert [(c.name, c.size) for c in added] == [("identity", size) for size in SIZES]
    assert [c.fn() for c in added] == list(SIZES)


def test_sample_times_each_repeat() -> None:
    """Test one case yields one row per repeat."""
    rows = _sample(Case("Cat", "noop", 4, lambda: None)).to_list()
    assert len(rows) == REPEATS
    assert all(r[:3] == ("Cat", "noop", 4) and r.time >= 0 for r in rows)
