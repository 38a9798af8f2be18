from __future__ import annotations

from collections.abc import Iterable

from ._option import NONE, Option, Some


def some[T](value: T) -> Option[T]:
    """Wrap a value in a `Some`.

    The value is stored as-is, without copying. `None` and falsy values are valid payloads.

    Args:
        value (T): The value to wrap.

    Returns:
        Option[T]: A new `Some` holding **value**.

    Example:
    ```python
    >>> import optionchain as oc
    >>> oc.some(0)
    Some(0)
    >>> oc.some(None).is_some()
    True

    ```
    """
    return Some(value)


def none[T]() -> Option[T]:
    """Return the `NONE` singleton.

    Returns:
        Option[T]: `NONE`, usable wherever an `Option` of any payload type is expected.

    Example:
    ```python
    >>> import optionchain as oc
    >>> oc.none() is oc.none()
    True
    >>> oc.none()
    NONE

    ```
    """
    return NONE


def all[T](options: Iterable[Option[T]]) -> Option[list[T]]:  # noqa: A001
    """Transpose an iterable of `Option` into an `Option` of list.

    Elements are scanned in order. The first `NONE` stops the scan and `NONE` is returned, later elements are never consumed.

    If every element is `Some`, their values are collected, in order, into a new list.

    Args:
        options (Iterable[Option[T]]): The options to transpose.

    Returns:
        Option[list[T]]: `Some` of the unwrapped values, or `NONE`.

    Example:
    ```python
    >>> import optionchain as oc
    >>> oc.all([oc.Some(1), oc.Some(2), oc.Some(3)])
    Some([1, 2, 3])
    >>> oc.all([oc.Some(1), oc.NONE, oc.Some(3)])
    NONE
    >>> oc.all([])
    Some([])

    ```
    """
    values: list[T] = []
    for option in options:
        if option.is_none():
            return NONE
        values.append(option.unwrap())
    return Some(values)


def from_nullable[T](value: T | None) -> Option[T]:
    """Build an `Option` from a value where `None` means absence.

    Only the `None` object itself is treated as missing; `0`, `""` and other falsy values are `Some`.

    Args:
        value (T | None): The value to convert.

    Returns:
        Option[T]: `NONE` if **value** is `None`, otherwise `Some(value)`.

    Example:
    ```python
    >>> import optionchain as oc
    >>> oc.from_nullable(None)
    NONE
    >>> oc.from_nullable("")
    Some('')

    ```
    """
    return NONE if value is None else Some(value)
