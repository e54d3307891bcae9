from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

from . import _combinators as cb
from . import _terminals as tm
from ._core import CommonBase, SupportsRichComparison, get_config
from ._source import empty, once, sequence

if TYPE_CHECKING:
    from ._results import Option
    from ._types import (
        Comparator,
        Drained,
        FlatTransform,
        Folded,
        Predicate,
        Reducer,
        ShortCircuit,
        Source,
        Transform,
    )


class Seq[T](CommonBase[Callable[[], Iterator[T]]], Iterable[T]):
    """A chainable handle over a re-iterable `Source`.

    - A `Source` is a zero-argument callable returning a fresh `Iterator` on each call.
    - Combinator methods (`map`, `filter`, `slice`...) return a new `Seq` and never pull any element.
    - Terminal methods (`every`, `reduce`, `to_list`...) run one traversal and return a plain value.

    Unlike a bare `Iterator`, a `Seq` is never exhausted: every traversal starts again from the first element of the underlying collection.

    Callbacks receive `(value, index, source)`, where index is the position in the input of the method and source is the input `Source` itself.
    Ignore the trailing arguments when not needed, e.g. `lambda v, *_: v > 1`.

    To instantiate from any re-iterable collection, use the `of` class method.

    Args:
        data (Source[T]): The source to wrap.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> evens = ps.Seq.of(range(10)).filter(lambda v, *_: v % 2 == 0)
    >>> evens.map(lambda v, *_: v * v).to_list()
    [0, 4, 16, 36, 64]
    >>> list(evens)
    [0, 2, 4, 6, 8]
    >>> list(evens)
    [0, 2, 4, 6, 8]

    ```
    """

    __slots__ = ()

    @staticmethod
    def of[U](collection: Iterable[U]) -> Seq[U]:
        """Wrap a finite, re-iterable collection.

        See `sequence` for the precondition on **collection**.

        Args:
            collection (Iterable[U]): The collection to wrap.

        Returns:
            Seq[U]: A new `Seq` over **collection**.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of((1, 2, 3))
        Seq(1, 2, 3)

        ```
        """
        return Seq(sequence(collection))

    @staticmethod
    def new() -> Seq[T]:
        """Create an empty `Seq`.

        Make sure to specify the type when calling this method, e.g., `Seq[int].new()`.

        Returns:
            Seq[T]: A new empty `Seq`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq[int].new().to_list()
        []

        ```
        """
        return Seq(empty())

    @staticmethod
    def once[U](value: U) -> Seq[U]:
        """Create a `Seq` yielding **value** exactly once per traversal."""
        return Seq(once(value))

    def __iter__(self) -> Iterator[T]:
        return self._inner()

    def __contains__(self, item: object) -> bool:
        return self.includes(item)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self)})"

    def source(self) -> Source[T]:
        """Get the underlying `Source`.

        Returns:
            Source[T]: The wrapped factory, usable with the free functions.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> src = ps.Seq.of("ab").map(lambda v, *_: v.upper()).source()
        >>> ps.to_list(src)
        ['A', 'B']

        ```
        """
        return self._inner

    # combinators ---------------------------------------------------------

    def concat(self, other: Seq[T] | Source[T] | Iterable[T]) -> Seq[T]:
        """Append the elements of **other** after those of `self`.

        Args:
            other (Seq[T] | Source[T] | Iterable[T]): Another `Seq`, a raw `Source`, or a re-iterable collection.

        Returns:
            Seq[T]: A new `Seq` over both.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of([1, 2]).concat([3, 4])
        Seq(1, 2, 3, 4)
        >>> ps.Seq.of([1]).concat(ps.Seq.of([2]))
        Seq(1, 2)

        ```
        """
        return Seq(cb.concat(self._inner, _into_source(other)))

    def filter(self, predicate: Predicate[T]) -> Seq[T]:
        """Keep the elements for which **predicate** returns true.

        Args:
            predicate (Predicate[T]): Called with `(value, index, source)`.

        Returns:
            Seq[T]: A new `Seq` over the matching elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of([1, 2, 3, 4]).filter(lambda v, *_: v > 2)
        Seq(3, 4)

        ```
        """
        return Seq(cb.filter(self._inner, predicate))

    def map[R](self, transform: Transform[T, R]) -> Seq[R]:
        """Apply **transform** to each element.

        Args:
            transform (Transform[T, R]): Called with `(value, index, source)`.

        Returns:
            Seq[R]: A new `Seq` over the transformed elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of("abc").map(lambda v, i, _: f"{i}:{v}")
        Seq('0:a', '1:b', '2:c')

        ```
        """
        return Seq(cb.map(self._inner, transform))

    def flat_map[R](self, transform: FlatTransform[T, R]) -> Seq[R]:
        """Apply **transform** to each element and flatten the returned iterables by one level.

        Args:
            transform (FlatTransform[T, R]): Called with `(value, index, source)`, returns an iterable.

        Returns:
            Seq[R]: A new `Seq` over the flattened elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of([1, 2]).flat_map(lambda v, *_: [v] * v)
        Seq(1, 2, 2)

        ```
        """
        return Seq(cb.flat_map(self._inner, transform))

    def slice(self, begin: int, end: int | None = None) -> Seq[T]:
        """Keep the elements at positions `[begin, end)`.

        Args:
            begin (int): First position kept.
            end (int | None): Position where iteration stops, exclusive. `None` means until exhaustion.

        Returns:
            Seq[T]: A new `Seq` over the selected elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of(range(7)).slice(2, 5)
        Seq(2, 3, 4)

        ```
        """
        return Seq(cb.slice(self._inner, begin, end))

    def reverse(self) -> Seq[T]:
        """Yield the elements in reverse order.

        **Warning** ⚠️
            Each traversal buffers the whole input.

        Returns:
            Seq[T]: A new `Seq` over the reversed elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of([1, 2, 3]).reverse()
        Seq(3, 2, 1)

        ```
        """
        return Seq(cb.reverse(self._inner))

    def sort(self, comparator: Comparator[T]) -> Seq[T]:
        """Yield the elements ordered by **comparator**, stably.

        **Warning** ⚠️
            Each traversal buffers the whole input.

        Args:
            comparator (Comparator[T]): Returns a negative, zero or positive number to order `a` before, equal to, or after `b`.

        Returns:
            Seq[T]: A new `Seq` over the sorted elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of([3, 1, 2]).sort(lambda a, b: b - a)
        Seq(3, 2, 1)

        ```
        """
        return Seq(cb.sort(self._inner, comparator))

    def sort_by(self, key: Callable[[T], SupportsRichComparison[Any]]) -> Seq[T]:
        """Yield the elements ordered by **key**, stably.

        Args:
            key (Callable[[T], SupportsRichComparison[Any]]): Function computing the sort key of each element.

        Returns:
            Seq[T]: A new `Seq` over the sorted elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of(["ccc", "a", "bb"]).sort_by(len)
        Seq('a', 'bb', 'ccc')

        ```
        """
        return Seq(cb.sort_by(self._inner, key))

    def exit(self, predicate: Predicate[T], result: object = None) -> Seq[T]:
        """Yield elements until **predicate** returns true, excluding the trigger.

        Args:
            predicate (Predicate[T]): Called with `(value, index, source)`.
            result (object): Completion value of each cursor when **predicate** stops it. See `drain`.

        Returns:
            Seq[T]: A new `Seq` over the leading elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of([1, 2, 3, 4]).exit(lambda v, *_: v == 3)
        Seq(1, 2)

        ```
        """
        return Seq(cb.exit(self._inner, predicate, result))

    def exit_after(self, predicate: Predicate[T], result: object = None) -> Seq[T]:
        """Yield elements until **predicate** returns true, including the trigger.

        Args:
            predicate (Predicate[T]): Called with `(value, index, source)`.
            result (object): Completion value of each cursor when **predicate** stops it. See `drain`.

        Returns:
            Seq[T]: A new `Seq` over the leading elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of([1, 2, 3, 4]).exit_after(lambda v, *_: v == 3)
        Seq(1, 2, 3)

        ```
        """
        return Seq(cb.exit_after(self._inner, predicate, result))

    # terminals -----------------------------------------------------------

    def every(self, predicate: Predicate[T]) -> bool:
        """Check whether **predicate** holds for every element. `True` when empty.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of([1, 2]).every(lambda v, *_: v > 0)
        True

        ```
        """
        return tm.every(self._inner, predicate)

    def some(self, predicate: Predicate[T]) -> bool:
        """Check whether **predicate** holds for any element. `False` when empty.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of([1, 2]).some(lambda v, *_: v > 1)
        True

        ```
        """
        return tm.some(self._inner, predicate)

    def find(self, predicate: Predicate[T]) -> Option[T]:
        """Get the first element satisfying **predicate**.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of([1, 2, 3]).find(lambda v, *_: v > 1).unwrap()
        2

        ```
        """
        return tm.find(self._inner, predicate)

    def first(self, predicate: Predicate[T] | None = None) -> Option[T]:
        """Get the first element, or the first one satisfying **predicate**."""
        return tm.first(self._inner, predicate)

    def last(self, predicate: Predicate[T] | None = None) -> Option[T]:
        """Get the last element, or the last one satisfying **predicate**.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of([1, 2, 3]).last()
        Some(value=3)
        >>> ps.Seq[int].new().last()
        NONE

        ```
        """
        return tm.last(self._inner, predicate)

    def includes(self, value: T) -> bool:
        """Check whether an element is **value**, or equal to it.

        Also available as the `in` operator.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> 2 in ps.Seq.of([1, 2])
        True

        ```
        """
        return tm.includes(self._inner, value)

    def reduce[A](
        self,
        fn: Reducer[T, A],
        initial: A,
        short_circuit: ShortCircuit[T, A] | None = None,
    ) -> A:
        """Fold the elements from left to right into an accumulator.

        Args:
            fn (Reducer[T, A]): Called with `(acc, item, index, source)`, returns the new accumulator.
            initial (A): The starting accumulator.
            short_circuit (ShortCircuit[T, A] | None): Called after each step, returning true stops the traversal.

        Returns:
            A: The final accumulator.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of(range(1, 5)).reduce(lambda acc, v, *_: acc * v, 1)
        24

        ```
        """
        return tm.reduce(self._inner, fn, initial, short_circuit)

    def fold[A](
        self,
        fn: Reducer[T, A],
        initial: A,
        short_circuit: ShortCircuit[T, A] | None = None,
    ) -> Folded[A]:
        """Same as `reduce`, but also report whether **short_circuit** stopped the traversal.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of(range(1, 5)).fold(lambda acc, v, *_: acc * v, 1, lambda acc, *_: acc > 5)
        Folded(value=6, short_circuited=True)

        ```
        """
        return tm.fold(self._inner, fn, initial, short_circuit)

    def drain[R](self) -> Drained[T, R]:
        """Collect one traversal, along with the completion value of its cursor.

        Only meaningful right after `exit`/`exit_after`: any later combinator drops the completion value.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> drained = ps.Seq.of("abc").exit(lambda v, *_: v == "c", "hit c").drain()
        >>> drained.values
        ['a', 'b']
        >>> drained.result.unwrap()
        'hit c'

        ```
        """
        return tm.drain(self._inner)

    def to_list(self) -> list[T]:
        """Collect one traversal into a new `list`."""
        return tm.to_list(self._inner)

    def to_array(self) -> list[T]:
        """Alias of `to_list`."""
        return self.to_list()

    def count(self) -> int:
        """Count the elements of one traversal.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Seq.of(range(10)).filter(lambda v, *_: v > 6).count()
        3

        ```
        """
        return tm.count(self._inner)


def _into_source[T](data: Seq[T] | Source[T] | Iterable[T]) -> Source[T]:
    match data:
        case Seq():
            return data.source()
        case _ if callable(data):
            return data
        case _:
            return sequence(data)
