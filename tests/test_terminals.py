"""Tests for the terminal operations."""

from collections.abc import Iterator

import pytest

import pyoseq as ps


def _counting(data: list[int], pulled: list[int]) -> ps.Source[int]:
    def _source() -> Iterator[int]:
        for v in data:
            pulled.append(v)
            yield v

    return _source


class TestBooleans:
    """Tests for every, some and includes."""

    def test_every(self) -> None:
        """Test every on matching and non matching sources."""
        src = ps.sequence([2, 4, 6])
        assert ps.every(src, lambda v, *_: v % 2 == 0) is True
        assert ps.every(src, lambda v, *_: v < 5) is False

    def test_every_empty_is_true(self) -> None:
        """Test every is vacuously true."""
        assert ps.every(ps.empty(), lambda *_: False) is True

    def test_every_short_circuits(self) -> None:
        """Test every stops at the first failure."""
        pulled: list[int] = []
        assert not ps.every(_counting([1, 2, 3], pulled), lambda v, *_: v < 2)
        assert pulled == [1, 2]

    def test_some(self) -> None:
        """Test some on matching and non matching sources."""
        src = ps.sequence([1, 3, 4])
        assert ps.some(src, lambda v, *_: v % 2 == 0) is True
        assert ps.some(src, lambda v, *_: v > 10) is False

    def test_some_empty_is_false(self) -> None:
        """Test some is false on an empty source."""
        assert ps.some(ps.empty(), lambda *_: True) is False

    def test_some_short_circuits(self) -> None:
        """Test some stops at the first success."""
        pulled: list[int] = []
        assert ps.some(_counting([1, 2, 3], pulled), lambda v, *_: v == 2)
        assert pulled == [1, 2]

    def test_some_passes_index(self) -> None:
        """Test the predicate receives the element position."""
        assert ps.some(ps.sequence("abc"), lambda v, i, _: v == "c" and i == 2)

    def test_includes(self) -> None:
        """Test includes uses equality."""
        src = ps.sequence([1, 2.0, "3"])
        assert ps.includes(src, 2)
        assert not ps.includes(src, 3)

    def test_includes_identity(self) -> None:
        """Test includes matches by identity, even for values unequal to themselves."""
        nan = float("nan")
        assert ps.includes(ps.sequence([1.0, nan]), nan)
        assert not ps.includes(ps.sequence([float("nan")]), nan)


class TestLookups:
    """Tests for find, first and last."""

    def test_find(self) -> None:
        """Test find returns the first match."""
        src = ps.sequence([5, 8, 10])
        assert ps.find(src, lambda v, *_: v % 2 == 0) == ps.Some(8)
        assert ps.find(src, lambda v, *_: v > 10).is_none()

    def test_find_keeps_falsy_values(self) -> None:
        """Test a falsy match is still found."""
        assert ps.find(ps.sequence([3, 0, None]), lambda v, *_: not v) == ps.Some(0)

    def test_find_short_circuits(self) -> None:
        """Test find stops at the first match."""
        pulled: list[int] = []
        ps.find(_counting([1, 2, 3], pulled), lambda v, *_: v == 1)
        assert pulled == [1]

    def test_first(self) -> None:
        """Test first with and without predicate."""
        src = ps.sequence([4, 5, 6])
        assert ps.first(src).unwrap() == 4
        assert ps.first(src, lambda v, *_: v > 4).unwrap() == 5
        assert ps.first(ps.empty()) == ps.NONE

    def test_last(self) -> None:
        """Test last with and without predicate."""
        src = ps.sequence([4, 5, 6, 7])
        assert ps.last(src).unwrap() == 7
        assert ps.last(src, lambda v, *_: v % 2 == 0).unwrap() == 6
        assert ps.last(src, lambda v, *_: v > 10).is_none()

    def test_last_of_none_value(self) -> None:
        """Test a `None` element is distinguished from absence."""
        assert ps.last(ps.sequence([1, None])) == ps.Some(None)

    def test_unwrap_absent_raises(self) -> None:
        """Test unwrapping an absent lookup raises OptionUnwrapError."""
        with pytest.raises(ps.OptionUnwrapError):
            ps.first(ps.empty()).unwrap()


class TestReduce:
    """Tests for reduce and fold."""

    def test_reduce(self) -> None:
        """Test a plain left fold."""
        src = ps.sequence(["a", "b", "c"])
        assert ps.reduce(src, lambda acc, v, *_: acc + v, "") == "abc"

    def test_reduce_empty_returns_initial(self) -> None:
        """Test the initial value is returned for an empty source."""
        assert ps.reduce(ps.empty(), lambda acc, *_: acc + 1, 7) == 7

    def test_reduce_passes_index_and_source(self) -> None:
        """Test the reducer receives `(acc, item, index, source)`."""
        src = ps.sequence([10, 20])
        result = ps.reduce(src, lambda acc, v, i, s: [*acc, (v, i, s is src)], [])
        assert result == [(10, 0, True), (20, 1, True)]

    def test_reduce_short_circuit_stops_at_nth_step(self) -> None:
        """Test no element beyond the short-circuiting step is processed."""
        pulled: list[int] = []
        steps: list[int] = []

        def add(acc: int, v: int, i: int, _: object) -> int:
            steps.append(i)
            return acc + v

        result = ps.reduce(
            _counting([1, 2, 3, 4, 5], pulled), add, 0, lambda _, __, i, ___: i == 2
        )
        assert result == 6
        assert steps == [0, 1, 2]
        assert pulled == [1, 2, 3]

    def test_reduce_short_circuit_sees_updated_accumulator(self) -> None:
        """Test the short-circuit callback receives the accumulator after the step."""
        seen: list[int] = []

        def stop(acc: int, *_: object) -> bool:
            seen.append(acc)
            return False

        ps.reduce(ps.sequence([1, 2]), lambda acc, v, *_: acc + v, 0, stop)
        assert seen == [1, 3]

    def test_fold(self) -> None:
        """Test fold reports whether the traversal ended early."""
        src = ps.sequence([1, 2, 3])
        stopped = ps.fold(src, lambda acc, v, *_: acc + v, 0, lambda acc, *_: acc > 2)
        finished = ps.fold(src, lambda acc, v, *_: acc + v, 0)
        assert stopped == ps.Folded(3, short_circuited=True)
        assert finished == ps.Folded(6, short_circuited=False)


class TestCollect:
    """Tests for to_list, count and drain."""

    def test_to_list(self) -> None:
        """Test to_list returns a new list each time."""
        src = ps.sequence((1, 2))
        first, second = ps.to_list(src), ps.to_list(src)
        assert first == second == [1, 2]
        assert first is not second

    def test_count(self) -> None:
        """Test count on a filtered source."""
        src = ps.filter(ps.sequence(range(10)), lambda v, *_: v % 3 == 0)
        assert ps.count(src) == 4

    def test_drain_plain_source(self) -> None:
        """Test drain reports no completion value for a plain source."""
        drained = ps.drain(ps.sequence([1, 2]))
        assert drained.values == [1, 2]
        assert drained.result.is_none()

    def test_drain_completion_value_is_dropped_downstream(self) -> None:
        """Test a later combinator does not forward the completion value."""
        src = ps.map(
            ps.exit(ps.sequence([1, 2, 3]), lambda v, *_: v == 2, "early"),
            lambda v, *_: v,
        )
        assert ps.drain(src) == ps.Drained([1], ps.NONE)
