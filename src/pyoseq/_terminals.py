"""Terminal operations: functions consuming one cursor of a `Source` and returning a plain value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import cytoolz as cz
import more_itertools as mit

from ._combinators import filter as filter_source
from ._core import get_logger
from ._results import NONE, Option, Some
from ._types import Drained, Folded

if TYPE_CHECKING:
    from ._types import Predicate, Reducer, ShortCircuit, Source

logger = get_logger(__name__)


def every[T](source: Source[T], predicate: Predicate[T]) -> bool:
    """Check whether **predicate** holds for every element.

    Stops at the first failure. `True` for an empty source.

    Args:
        source (Source[T]): The source to consume.
        predicate (Predicate[T]): Called with `(value, index, source)`.

    Returns:
        bool: `True` if no element fails **predicate**.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.every(ps.sequence([2, 4]), lambda v, *_: v % 2 == 0)
    True
    >>> ps.every(ps.empty(), lambda *_: False)
    True

    ```
    """
    return all(predicate(v, i, source) for i, v in enumerate(source()))


def some[T](source: Source[T], predicate: Predicate[T]) -> bool:
    """Check whether **predicate** holds for at least one element.

    Stops at the first success. `False` for an empty source.

    Args:
        source (Source[T]): The source to consume.
        predicate (Predicate[T]): Called with `(value, index, source)`.

    Returns:
        bool: `True` if any element satisfies **predicate**.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.some(ps.sequence([1, 2]), lambda v, *_: v > 1)
    True
    >>> ps.some(ps.empty(), lambda *_: True)
    False

    ```
    """
    return any(predicate(v, i, source) for i, v in enumerate(source()))


def find[T](source: Source[T], predicate: Predicate[T]) -> Option[T]:
    """Get the first element satisfying **predicate**.

    Args:
        source (Source[T]): The source to consume.
        predicate (Predicate[T]): Called with `(value, index, source)`.

    Returns:
        Option[T]: `Some` of the first match, `NONE` if nothing matches.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.find(ps.sequence([1, 2, 3]), lambda v, *_: v > 1)
    Some(value=2)
    >>> ps.find(ps.sequence([1, 2, 3]), lambda v, *_: v > 5)
    NONE

    ```
    """
    return first(source, predicate)


def includes[T](source: Source[T], value: T) -> bool:
    """Check whether an element is **value**, or equal to it.

    Same semantics as the `in` operator on a `list`.

    Args:
        source (Source[T]): The source to consume.
        value (T): The element to look for.

    Returns:
        bool: `True` if **value** is found.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.includes(ps.sequence("abc"), "b")
    True
    >>> ps.includes(ps.sequence("abc"), "z")
    False

    ```
    """
    return some(source, lambda v, *_: v is value or v == value)


def first[T](source: Source[T], predicate: Predicate[T] | None = None) -> Option[T]:
    """Get the first element, or the first one satisfying **predicate**.

    Args:
        source (Source[T]): The source to consume.
        predicate (Predicate[T] | None): Optional filter, called with `(value, index, source)`.

    Returns:
        Option[T]: `Some` of the element, `NONE` if there is none.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.first(ps.sequence([4, 5, 6]))
    Some(value=4)
    >>> ps.first(ps.sequence([4, 5, 6]), lambda v, *_: v % 2 == 1)
    Some(value=5)
    >>> ps.first(ps.empty())
    NONE

    ```
    """
    src = source if predicate is None else filter_source(source, predicate)
    for v in src():
        return Some(v)
    return NONE


def last[T](source: Source[T], predicate: Predicate[T] | None = None) -> Option[T]:
    """Get the last element, or the last one satisfying **predicate**.

    Always consumes the whole cursor.

    Args:
        source (Source[T]): The source to consume.
        predicate (Predicate[T] | None): Optional filter, called with `(value, index, source)`.

    Returns:
        Option[T]: `Some` of the element, `NONE` if there is none.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.last(ps.sequence([4, 5, 6]))
    Some(value=6)
    >>> ps.last(ps.sequence([4, 5, 6]), lambda v, *_: v % 2 == 1)
    Some(value=5)

    ```
    """
    sentinel = object()
    src = source if predicate is None else filter_source(source, predicate)
    value = mit.last(src(), sentinel)
    return NONE if value is sentinel else Some(value)


def reduce[T, A](
    source: Source[T],
    fn: Reducer[T, A],
    initial: A,
    short_circuit: ShortCircuit[T, A] | None = None,
) -> A:
    """Fold the elements from left to right into an accumulator.

    Args:
        source (Source[T]): The source to consume.
        fn (Reducer[T, A]): Called with `(acc, item, index, source)`, returns the new accumulator.
        initial (A): The starting accumulator.
        short_circuit (ShortCircuit[T, A] | None): Called after each step with the updated accumulator.
            When it returns true, the accumulator is returned without pulling further elements.

    Returns:
        A: The final accumulator.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> src = ps.sequence([1, 2, 3, 4])
    >>> ps.reduce(src, lambda acc, v, *_: acc + v, 0)
    10
    >>> ps.reduce(src, lambda acc, v, *_: acc + v, 0, lambda acc, *_: acc >= 3)
    3

    ```
    """
    return fold(source, fn, initial, short_circuit).value


def fold[T, A](
    source: Source[T],
    fn: Reducer[T, A],
    initial: A,
    short_circuit: ShortCircuit[T, A] | None = None,
) -> Folded[A]:
    """Same as `reduce`, but also report whether **short_circuit** stopped the traversal.

    Args:
        source (Source[T]): The source to consume.
        fn (Reducer[T, A]): Called with `(acc, item, index, source)`, returns the new accumulator.
        initial (A): The starting accumulator.
        short_circuit (ShortCircuit[T, A] | None): Called after each step with the updated accumulator.

    Returns:
        Folded[A]: The final accumulator, and whether the fold ended early.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> src = ps.sequence([1, 2, 3, 4])
    >>> ps.fold(src, lambda acc, v, *_: acc + v, 0, lambda acc, *_: acc >= 3)
    Folded(value=3, short_circuited=True)
    >>> ps.fold(src, lambda acc, v, *_: acc + v, 0, lambda acc, *_: acc > 100)
    Folded(value=10, short_circuited=False)

    ```
    """
    acc = initial
    for i, v in enumerate(source()):
        acc = fn(acc, v, i, source)
        if short_circuit is not None and short_circuit(acc, v, i, source):
            logger.debug("fold short-circuited at index %d", i)
            return Folded(acc, short_circuited=True)
    return Folded(acc, short_circuited=False)


def to_list[T](source: Source[T]) -> list[T]:
    """Collect one traversal into a new `list`, preserving order.

    Args:
        source (Source[T]): The source to consume.

    Returns:
        list[T]: The elements.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.to_list(ps.sequence((1, 2, 3)))
    [1, 2, 3]

    ```
    """
    return list(source())


def count(source: Source[Any]) -> int:
    """Count the elements of one traversal, without storing them.

    Args:
        source (Source[Any]): The source to consume.

    Returns:
        int: The number of elements.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.count(ps.sequence("abcd"))
    4

    ```
    """
    return cz.itertoolz.count(source())


def drain[T, R](source: Source[T]) -> Drained[T, R]:
    """Collect one traversal, along with the completion value of its cursor.

    Only cursors built by `exit`/`exit_after` return such a value, when their predicate stopped them.

    Args:
        source (Source[T]): The source to consume.

    Returns:
        Drained[T, R]: The elements, and `Some` of the completion value if the cursor returned one.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> src = ps.exit_after(ps.sequence([1, 2, 3]), lambda v, *_: v == 2, "found")
    >>> ps.drain(src)
    Drained(values=[1, 2], result=Some(value='found'))
    >>> ps.drain(ps.sequence([1, 2]))
    Drained(values=[1, 2], result=NONE)

    ```
    """
    values: list[T] = []
    cursor = source()
    while True:
        try:
            values.append(next(cursor))
        except StopIteration as stop:
            return Drained(values, Option.from_(stop.value))
