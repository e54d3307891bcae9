from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeIs

if TYPE_CHECKING:
    from ._states import NoneOption, Some


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """Value returned by lookups that may find nothing (`find`, `first`, `last`).

    Either `Some(value)` or the `NONE` singleton.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Returns:
            bool: `True` if the option is a `Some` variant, `False` otherwise.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Some(2).is_some()
        True
        >>> ps.NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is the `NONE` value.

        Returns:
            bool: `True` if the option is `NONE`, `False` otherwise.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Some(2).is_none()
        False
        >>> ps.NONE.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Some("car").unwrap()
        'car'
        >>> ps.NONE.unwrap()
        Traceback (most recent call last):
            ...
        pyoseq._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with a provided message.

        Args:
            msg (str): The message to include in the exception if the option is `NONE`.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Some("value").expect("fruits are healthy")
        'value'
        >>> ps.NONE.expect("fruits are healthy")
        Traceback (most recent call last):
            ...
        pyoseq._results._option.OptionUnwrapError: fruits are healthy (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Args:
            default (T): The value to return if the option is `NONE`.

        Returns:
            T: The contained value or the default.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Some("car").unwrap_or("bike")
        'car'
        >>> ps.NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from a function."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value.

        Args:
            f (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Option[U]: A new `Option` with the mapped value if `Some`, otherwise `NONE`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Some("Hello, World!").map(len)
        Some(value=13)
        >>> ps.NONE.map(len)
        NONE

        ```
        """
        from ._states import NONE, Some

        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    @staticmethod
    def from_[U](value: U | None) -> Option[U]:
        """Wrap a possibly-`None` value.

        Args:
            value (U | None): The value to wrap.

        Returns:
            Option[U]: `NONE` if value is `None`, else `Some(value)`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Option.from_(3)
        Some(value=3)
        >>> ps.Option.from_(None)
        NONE

        ```
        """
        from ._states import NONE, Some

        return NONE if value is None else Some(value)

