from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from typing import Any

from ._format import iter_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Display settings shared by every `Seq`.

    Args:
        max_repr_items (int): Number of elements rendered by `repr()` before eliding the rest.
        repr_width (int): Maximum width of a single rendered element.
    """

    max_repr_items: int = 20
    repr_width: int = 80

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                msg = f"{field.name} must be a positive int, got {value!r}"
                raise ValueError(msg)

    def iter_repr(self, data: Iterable[Any]) -> str:
        return iter_repr(data, self.max_repr_items, self.repr_width)


_CONFIG = Config()


def get_config() -> Config:
    """Get the current global configuration.

    Returns:
        Config: The active configuration.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.get_config().max_repr_items
    20

    ```
    """
    return _CONFIG


def set_config(**changes: int) -> Config:
    """Replace fields of the global configuration.

    Args:
        **changes (int): Field names and their new values.

    Returns:
        Config: The new active configuration.

    Raises:
        ValueError: If a value is not a positive int.
        TypeError: If a field name is unknown.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.set_config(max_repr_items=2)
    Config(max_repr_items=2, repr_width=80)
    >>> ps.Seq.of(range(5))
    Seq(0, 1, ...)
    >>> ps.set_config(max_repr_items=20).max_repr_items
    20

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
