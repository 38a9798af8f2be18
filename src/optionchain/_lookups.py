from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any, Final

import cytoolz as cz
import more_itertools as mit

from ._option import NONE, Option, Some

_MISSING: Final = object()


def _from_lookup(value: Any) -> Option[Any]:
    return NONE if value is _MISSING else Some(value)


def find[T](data: Iterable[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Search for the first element of an iterable that satisfies a `predicate`.

    Args:
        data (Iterable[T]): The elements to search.
        predicate (Callable[[T], bool]): Function to evaluate each item.

    Returns:
        Option[T]: The first element satisfying the predicate. `Some(value)` if found, `NONE` otherwise.

    Example:
    ```python
    >>> import optionchain as oc
    >>> oc.find(range(10), lambda x: x > 5)
    Some(6)
    >>> oc.find(range(10), lambda x: x > 9).unwrap_or("missing")
    'missing'
    >>> oc.find([None, 1], lambda x: x is None)
    Some(None)

    ```
    """
    return _from_lookup(mit.first_true(data, default=_MISSING, pred=predicate))


def find_map[T, R](data: Iterable[T], func: Callable[[T], Option[R]]) -> Option[R]:
    """Apply a function to the elements of an iterable and return the first `Some` result.

    Elements after the first `Some` are not visited.

    Args:
        data (Iterable[T]): The elements to visit.
        func (Callable[[T], Option[R]]): Function to apply to each element, returning an `Option[R]`.

    Returns:
        Option[R]: The first `Some(R)` result from applying `func`, or `NONE` if no such result is found.

    Examples:
    ```python
    >>> import optionchain as oc
    >>> def _parse(s: str) -> oc.Option[int]:
    ...     try:
    ...         return oc.Some(int(s))
    ...     except ValueError:
    ...         return oc.NONE
    >>>
    >>> oc.find_map(["lol", "NaN", "2", "5"], _parse)
    Some(2)
    >>> oc.find_map(["lol", "NaN"], _parse)
    NONE

    ```
    """
    for item in data:
        result = func(item)
        if result.is_some():
            return result
    return NONE


def first[T](data: Iterable[T]) -> Option[T]:
    """Return the first element of an iterable.

    Args:
        data (Iterable[T]): The elements.

    Returns:
        Option[T]: `Some` of the first element, or `NONE` if **data** is empty.

    Example:
    ```python
    >>> import optionchain as oc
    >>> oc.first([9, 8])
    Some(9)
    >>> oc.first([])
    NONE

    ```
    """
    return _from_lookup(mit.first(data, _MISSING))


def last[T](data: Iterable[T]) -> Option[T]:
    """Return the last element of an iterable.

    Args:
        data (Iterable[T]): The elements.

    Returns:
        Option[T]: `Some` of the last element, or `NONE` if **data** is empty.

    Example:
    ```python
    >>> import optionchain as oc
    >>> oc.last(iter([7, 8, 9]))
    Some(9)
    >>> oc.last(())
    NONE

    ```
    """
    return _from_lookup(mit.last(data, _MISSING))


def nth[T](data: Iterable[T], index: int) -> Option[T]:
    """Return the item at **index**.

    Args:
        data (Iterable[T]): The elements.
        index (int): Zero-based position of the item to retrieve.

    Returns:
        Option[T]: `Some` of the item, or `NONE` if **data** is too short.

    Example:
    ```python
    >>> import optionchain as oc
    >>> oc.nth([10, 20], 1)
    Some(20)
    >>> oc.nth([10, 20], 2)
    NONE

    ```
    """
    return _from_lookup(mit.nth(data, index, _MISSING))


def get[K: Hashable, V](
    data: Mapping[K, V] | Sequence[V], key: K | int
) -> Option[V]:
    """Look up a single key in a mapping, or a single index in a sequence.

    Missing keys and out of range indices give `NONE`; stored `None` values give `Some(None)`.

    Args:
        data (Mapping[K, V] | Sequence[V]): The collection to look into.
        key (K | int): The key or index to retrieve.

    Returns:
        Option[V]: `Some` of the stored value, or `NONE`.

    Example:
    ```python
    >>> import optionchain as oc
    >>> oc.get({"a": 1, "b": None}, "b")
    Some(None)
    >>> oc.get({"a": 1}, "z")
    NONE
    >>> oc.get(["x", "y"], -1)
    Some('y')

    ```
    """
    return _from_lookup(cz.itertoolz.get(key, data, default=_MISSING))


def get_in(data: Mapping[Any, Any] | Sequence[Any], keys: Iterable[Any]) -> Option[Any]:
    """Follow a path of keys and indices through nested collections.

    Args:
        data (Mapping[Any, Any] | Sequence[Any]): The outermost collection.
        keys (Iterable[Any]): The successive keys or indices to apply.

    Returns:
        Option[Any]: `Some` of the value at the end of the path, or `NONE` if any step is missing.

    Example:
    ```python
    >>> import optionchain as oc
    >>> transaction = {"name": "Alice", "purchase": {"items": ["Apple", "Orange"], "costs": [0.50, 1.25]}}
    >>> oc.get_in(transaction, ["purchase", "items", 0])
    Some('Apple')
    >>> oc.get_in(transaction, ["purchase", "total"])
    NONE
    >>> oc.get_in(transaction, ["name", "first"])
    NONE

    ```
    """
    return _from_lookup(cz.dicttoolz.get_in(keys, data, default=_MISSING))
