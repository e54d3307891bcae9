import itertools
from collections.abc import Iterable
from reprlib import Repr
from typing import Any


def iter_repr(
    data: Iterable[Any],
    max_items: int,
    width: int,
) -> str:
    """Render at most `max_items` elements of a traversal, comma separated."""
    head = list(itertools.islice(data, max_items + 1))
    suffix = ", ..." if len(head) > max_items else ""
    shortener = Repr(maxstring=width, maxother=width)
    return ", ".join(shortener.repr(v) for v in head[:max_items]) + suffix
