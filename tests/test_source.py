"""Tests for source constructors and the re-iteration contract."""

import pyoseq as ps


def test_sequence_reiterates_list() -> None:
    """Test two cursors of the same source yield the same elements."""
    src = ps.sequence([3, 1, 2])
    assert list(src()) == [3, 1, 2]
    assert list(src()) == [3, 1, 2]


def test_sequence_cursors_are_independent() -> None:
    """Test advancing one cursor does not move another one."""
    src = ps.sequence("abc")
    first, second = src(), src()
    assert next(first) == "a"
    assert next(first) == "b"
    assert next(second) == "a"
    assert list(first) == ["c"]
    assert list(second) == ["b", "c"]


def test_sequence_over_dict_yields_keys() -> None:
    """Test any re-iterable collection is accepted."""
    src = ps.sequence({"x": 1, "y": 2})
    assert ps.to_list(src) == ["x", "y"]
    assert ps.to_list(src) == ["x", "y"]


def test_sequence_over_single_use_iterator_is_not_replayable() -> None:
    """Test the documented precondition: a generator is consumed by the first traversal."""
    src = ps.sequence(x for x in range(3))
    assert ps.to_list(src) == [0, 1, 2]
    assert ps.to_list(src) == []


def test_sequence_sees_collection_updates() -> None:
    """Test the source closes over the collection itself, not a snapshot."""
    data = [1, 2]
    src = ps.sequence(data)
    data.append(3)
    assert ps.to_list(src) == [1, 2, 3]


def test_empty() -> None:
    """Test empty never yields."""
    assert ps.to_list(ps.empty()) == []


def test_once() -> None:
    """Test once yields its value on every traversal."""
    src = ps.once("x")
    assert ps.to_list(src) == ["x"]
    assert ps.to_list(src) == ["x"]
