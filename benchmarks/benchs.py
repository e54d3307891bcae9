"""Benchmarks comparing pyoseq pipelines with plain Python equivalents."""

import pyoseq as ps

from ._registery import bench


def _square(x: int, *_: object) -> int:
    return x * x


def _is_even(x: int, *_: object) -> bool:
    return x % 2 == 0


class MapFilter:
    """Benchmark a map then filter pipeline."""

    @bench(gen=lambda data: data)
    @staticmethod
    def seq(data: ps.Seq[int]) -> object:
        """Benchmark the `Seq` handle."""
        return data.map(_square).filter(_is_even).to_list()

    @bench(gen=lambda data: data.source())
    @staticmethod
    def free_functions(data: ps.Source[int]) -> object:
        """Benchmark the free functions on a raw source."""
        return ps.to_list(ps.filter(ps.map(data, _square), _is_even))

    @bench()
    @staticmethod
    def comprehension(data: list[int]) -> object:
        """Baseline list comprehension."""
        return [y for y in (x * x for x in data) if y % 2 == 0]


class EarlyExit:
    """Benchmark short-circuiting traversals."""

    @bench(gen=lambda data: data)
    @staticmethod
    def seq_find(data: ps.Seq[int]) -> object:
        """Benchmark `Seq.find` on the middle element."""
        return data.find(lambda v, *_: v == 128)

    @bench(gen=lambda data: data)
    @staticmethod
    def seq_slice(data: ps.Seq[int]) -> object:
        """Benchmark `Seq.slice` taking a small window."""
        return data.slice(10, 20).to_list()

    @bench()
    @staticmethod
    def builtin_next(data: list[int]) -> object:
        """Baseline `next` over a generator."""
        return next((v for v in data if v == 128), None)


class Eager:
    """Benchmark the buffering combinators."""

    @bench(gen=lambda data: data.reverse())
    @staticmethod
    def seq_sort(data: ps.Seq[int]) -> object:
        """Benchmark `Seq.sort` with a comparator."""
        return data.sort(lambda a, b: a - b).to_list()

    @bench(gen=lambda data: data.reverse())
    @staticmethod
    def seq_sort_by(data: ps.Seq[int]) -> object:
        """Benchmark `Seq.sort_by` with the identity key."""
        return data.sort_by(lambda v: v).to_list()

    @bench(gen=lambda data: data.reverse().to_list())
    @staticmethod
    def builtin_sorted(data: list[int]) -> object:
        """Baseline `sorted` builtin."""
        return sorted(data)
