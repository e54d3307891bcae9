import timeit
from collections.abc import Callable
from functools import partial
from typing import Final, NamedTuple

from rich.console import Console
from rich.progress import Progress

import pyoseq as ps

SIZES: Final = (256, 1024, 4096)
REPEATS: Final = 15
"""Timed samples per `(benchmark, size)` pair, aggregated into a median."""
NUMBER: Final = 20
"""Calls of the benchmarked function within one sample."""

CONSOLE: Final = Console()


class Case(NamedTuple):
    """One benchmarked function, bound to the data of one size."""

    category: str
    name: str
    size: int
    fn: Callable[[], object]


class Row(NamedTuple):
    """One timed sample, in seconds per call."""

    category: str
    name: str
    size: int
    time: float


CASES: list[Case] = []


def bench[P](
    *, gen: Callable[[ps.Seq[int]], P] = lambda data: data.to_list()
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Register **func** once per size of `SIZES`.

    **gen** turns a `Seq` over `range(size)` into the argument **func** receives.
    The category is the name of the class holding **func**.
    """

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        category = func.__qualname__.split(".")[0]

        def _case(size: int, *_: object) -> Case:
            data = gen(ps.Seq.of(range(size)))
            return Case(category, func.__name__, size, partial(func, data))

        CASES.extend(ps.Seq.of(SIZES).map(_case))
        return func

    return decorator


def collect_raw_timings(cases: ps.Seq[Case]) -> list[Row]:
    """Time every case, `REPEATS` samples each."""
    total = cases.count()
    CONSOLE.print(
        f"{total} cases, {total * REPEATS * NUMBER} calls", style="bold white"
    )
    with Progress(console=CONSOLE) as progress:
        task = progress.add_task("[cyan]Timing...", total=total)

        def _timed(case: Case, *_: object) -> ps.Seq[Row]:
            progress.update(task, description=f"[cyan]{case.name} @ {case.size}")
            rows = _sample(case)
            progress.advance(task)
            return rows

        return cases.flat_map(_timed).to_list()


def _sample(case: Case) -> ps.Seq[Row]:
    samples = timeit.repeat(case.fn, number=NUMBER, repeat=REPEATS)
    return ps.Seq.of(samples).map(
        lambda t, *_: Row(case.category, case.name, case.size, t / NUMBER)
    )
