"""Combinators: functions taking sources (plus callbacks) and returning a new, still re-iterable `Source`.

Every returned `Source` closes over its upstream `Source` and its arguments only.
A new cursor is built on each call, so no traversal state is ever shared.
"""

from __future__ import annotations

import functools
import itertools
from collections.abc import Callable, Generator, Iterator
from typing import TYPE_CHECKING, Any

import cytoolz as cz

from ._core import SupportsRichComparison, get_logger

if TYPE_CHECKING:
    from ._types import Comparator, FlatTransform, Predicate, Source, Transform

logger = get_logger(__name__)


def concat[T](first: Source[T], second: Source[T]) -> Source[T]:
    """Chain two sources end to end.

    **second** cursor is only created once **first** is exhausted.

    Args:
        first (Source[T]): Elements yielded first.
        second (Source[T]): Elements yielded after **first**.

    Returns:
        Source[T]: A source over every element of **first**, then every element of **second**.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> src = ps.concat(ps.sequence([1, 2]), ps.sequence([3, 4]))
    >>> ps.to_list(src)
    [1, 2, 3, 4]
    >>> ps.to_list(src)
    [1, 2, 3, 4]

    ```
    """

    def _concat() -> Iterator[T]:
        return cz.itertoolz.concat(src() for src in (first, second))

    return _concat


def filter[T](source: Source[T], predicate: Predicate[T]) -> Source[T]:  # noqa: A001
    """Keep the elements for which **predicate** returns true.

    **predicate** is called once per input element, and only as far as the output is pulled.

    Args:
        source (Source[T]): The input source.
        predicate (Predicate[T]): Called with `(value, index, source)`, index being the position in **source**.

    Returns:
        Source[T]: A source over the matching elements.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> src = ps.sequence(["a", "b", "c", "d"])
    >>> ps.to_list(ps.filter(src, lambda _, i, __: i % 2 == 0))
    ['a', 'c']

    ```
    """

    def _filter() -> Iterator[T]:
        return (v for i, v in enumerate(source()) if predicate(v, i, source))

    return _filter


def map[T, R](source: Source[T], transform: Transform[T, R]) -> Source[R]:  # noqa: A001
    """Apply **transform** to each element.

    Args:
        source (Source[T]): The input source.
        transform (Transform[T, R]): Called with `(value, index, source)`.

    Returns:
        Source[R]: A source over the transformed elements, same order and length as **source**.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.to_list(ps.map(ps.sequence([1, 2, 3]), lambda v, i, _: v * 10 + i))
    [10, 21, 32]

    ```
    """

    def _map() -> Iterator[R]:
        return (transform(v, i, source) for i, v in enumerate(source()))

    return _map


def flat_map[T, R](source: Source[T], transform: FlatTransform[T, R]) -> Source[R]:
    """Apply **transform** to each element and flatten the returned iterables by one level.

    Each inner iterable is drained before the next input element is pulled.

    Args:
        source (Source[T]): The input source.
        transform (FlatTransform[T, R]): Called with `(value, index, source)`, returns an iterable.

    Returns:
        Source[R]: A source over the elements of every inner iterable, in order.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.to_list(ps.flat_map(ps.sequence([1, 2]), lambda v, *_: [v, v]))
    [1, 1, 2, 2]

    ```
    """

    def _flat_map() -> Iterator[R]:
        return cz.itertoolz.concat(
            transform(v, i, source) for i, v in enumerate(source())
        )

    return _flat_map


def slice[T](source: Source[T], begin: int, end: int | None = None) -> Source[T]:  # noqa: A001
    """Keep the elements at positions `[begin, end)`.

    Elements before **begin** are still pulled from **source**.
    Once position **end** is reached, no further element is pulled.

    A negative **begin** behaves as `0`.
    An **end** of `0` or below produces an empty source.

    Args:
        source (Source[T]): The input source.
        begin (int): First position kept.
        end (int | None): Position where iteration stops, exclusive. `None` means until exhaustion.

    Returns:
        Source[T]: A source over the selected elements.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> src = ps.sequence(range(7))
    >>> ps.to_list(ps.slice(src, 2, 5))
    [2, 3, 4]
    >>> ps.to_list(ps.slice(src, 2))
    [2, 3, 4, 5, 6]
    >>> ps.to_list(ps.slice(src, 2, 0))
    []

    ```
    """
    start = max(begin, 0) if end is None else min(max(begin, 0), end)

    def _slice() -> Iterator[T]:
        if end is not None and end <= 0:
            return iter(())
        return itertools.islice(source(), start, end)

    return _slice


def reverse[T](source: Source[T]) -> Source[T]:
    """Yield the elements in reverse order.

    **Warning** ⚠️
        This combinator is eager: the first pull on each cursor buffers the whole input.
        It never terminates on an infinite source.

    Args:
        source (Source[T]): The input source.

    Returns:
        Source[T]: A source over the elements of **source**, last first.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> src = ps.reverse(ps.sequence([1, 2, 3]))
    >>> ps.to_list(src)
    [3, 2, 1]
    >>> ps.to_list(src)
    [3, 2, 1]

    ```
    """

    def _reverse() -> Iterator[T]:
        buffer = list(source())
        logger.debug("reverse buffered %d elements", len(buffer))
        yield from reversed(buffer)

    return _reverse


def sort[T](source: Source[T], comparator: Comparator[T]) -> Source[T]:
    """Yield the elements ordered by **comparator**.

    The sort is stable: elements comparing equal keep their input order.

    **Warning** ⚠️
        This combinator is eager: the first pull on each cursor buffers the whole input.

    Args:
        source (Source[T]): The input source.
        comparator (Comparator[T]): Returns a negative, zero or positive number to order `a` before, equal to, or after `b`.

    Returns:
        Source[T]: A source over the sorted elements.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> words = ps.sequence(["bb", "a", "cc", "d"])
    >>> ps.to_list(ps.sort(words, lambda a, b: len(a) - len(b)))
    ['a', 'd', 'bb', 'cc']

    ```
    """
    return _sorted(source, functools.cmp_to_key(comparator))


def sort_by[T](
    source: Source[T], key: Callable[[T], SupportsRichComparison[Any]]
) -> Source[T]:
    """Yield the elements ordered by **key**, like the `sorted` builtin.

    Stable, and eager like `sort`.

    Args:
        source (Source[T]): The input source.
        key (Callable[[T], SupportsRichComparison[Any]]): Function computing the sort key of each element.

    Returns:
        Source[T]: A source over the sorted elements.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.to_list(ps.sort_by(ps.sequence([(2, "b"), (1, "z"), (2, "a")]), lambda p: p[0]))
    [(1, 'z'), (2, 'b'), (2, 'a')]

    ```
    """
    return _sorted(source, key)


def _sorted[T](source: Source[T], key: Callable[[T], Any]) -> Source[T]:
    def _sort() -> Iterator[T]:
        buffer = sorted(source(), key=key)
        logger.debug("sort buffered %d elements", len(buffer))
        yield from buffer

    return _sort


def exit[T, R](  # noqa: A001
    source: Source[T], predicate: Predicate[T], result: R | None = None
) -> Source[T]:
    """Yield elements until **predicate** returns true, excluding the element that triggered it.

    Each cursor is a `Generator` returning **result** once stopped by **predicate**.
    Plain iteration never observes it. Use `drain` (or `yield from`) to read it.

    Args:
        source (Source[T]): The input source.
        predicate (Predicate[T]): Called with `(value, index, source)`.
        result (R | None): Completion value of the cursor when **predicate** stops it.

    Returns:
        Source[T]: A source over the leading elements.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> src = ps.exit(ps.sequence([1, 2, 3, 4]), lambda v, *_: v == 3, "stopped")
    >>> ps.to_list(src)
    [1, 2]
    >>> ps.drain(src).result
    Some(value='stopped')

    ```
    """

    def _exit() -> Generator[T, None, R | None]:
        for i, v in enumerate(source()):
            if predicate(v, i, source):
                return result
            yield v
        return None

    return _exit


def exit_after[T, R](
    source: Source[T], predicate: Predicate[T], result: R | None = None
) -> Source[T]:
    """Yield elements until **predicate** returns true, including the element that triggered it.

    Same completion value semantics as `exit`.

    Args:
        source (Source[T]): The input source.
        predicate (Predicate[T]): Called with `(value, index, source)`.
        result (R | None): Completion value of the cursor when **predicate** stops it.

    Returns:
        Source[T]: A source over the leading elements, up to and including the trigger.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.to_list(ps.exit_after(ps.sequence([1, 2, 3, 4]), lambda v, *_: v == 3))
    [1, 2, 3]

    ```
    """

    def _exit_after() -> Generator[T, None, R | None]:
        for i, v in enumerate(source()):
            if predicate(v, i, source):
                yield v
                return result
            yield v
        return None

    return _exit_after
