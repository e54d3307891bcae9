"""Constructors turning plain collections into re-iterable sources."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._types import Source


def sequence[T](collection: Iterable[T]) -> Source[T]:
    """Wrap a finite, ordered collection into a `Source`.

    Each call of the returned `Source` creates a new cursor over **collection**, in its original order.

    **Warning** ⚠️
        **collection** must be re-iterable (a `list`, `tuple`, `range`, `dict`...).
        Passing a single-use `Iterator` or `Generator` is not detected: the first traversal will consume it and every following traversal will be empty.

    Args:
        collection (Iterable[T]): The collection to wrap.

    Returns:
        Source[T]: A factory of independent cursors over **collection**.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> src = ps.sequence([1, 2, 3])
    >>> list(src())
    [1, 2, 3]
    >>> list(src())
    [1, 2, 3]

    ```
    """

    def _sequence() -> Iterator[T]:
        return iter(collection)

    return _sequence


def empty[T]() -> Source[T]:
    """Create a `Source` which never yields.

    Returns:
        Source[T]: A factory of empty cursors.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> list(ps.empty()())
    []

    ```
    """
    return sequence(())


def once[T](value: T) -> Source[T]:
    """Create a `Source` which yields **value** exactly once per traversal.

    Args:
        value (T): The single element.

    Returns:
        Source[T]: A factory of one-element cursors.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> list(ps.once(42)())
    [42]

    ```
    """
    return sequence((value,))
