from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from ._core import Pipeable
from ._results import Option

# sources and callbacks

type Source[T] = Callable[[], Iterator[T]]
"""A zero-argument factory returning a fresh cursor over the same elements on every call."""
type Predicate[T] = Callable[[T, int, Source[T]], bool]
"""Called with `(value, index, source)`, where index is the position in **source**."""
type Transform[T, R] = Callable[[T, int, Source[T]], R]
"""Called with `(value, index, source)`, returns the mapped value."""
type FlatTransform[T, R] = Callable[[T, int, Source[T]], Iterable[R]]
"""Called with `(value, index, source)`, returns an iterable flattened one level."""
type Comparator[T] = Callable[[T, T], int]
"""Negative, zero or positive to order `a` before, equal to, or after `b`."""
type Reducer[T, A] = Callable[[A, T, int, Source[T]], A]
"""Called with `(acc, item, index, source)`, returns the next accumulator."""
type ShortCircuit[T, A] = Callable[[A, T, int, Source[T]], bool]
"""Called after each reduction step, with the same arguments as the reducer, the accumulator being updated."""


# terminal result types


class Folded[A](NamedTuple):
    """Result of `fold`.

    See `Seq.fold()` for details.
    """

    value: A
    """The final accumulator."""
    short_circuited: bool
    """Whether the short-circuit callback stopped the traversal early."""


@dataclass(slots=True)
class Drained[T, R](Pipeable):
    """Result of draining a single cursor.

    See `Seq.drain()` for details.
    """

    values: list[T]
    """Every yielded element, in order."""
    result: Option[R]
    """The completion value of the cursor, if it returned one."""
