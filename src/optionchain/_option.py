from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Final, Never, TypeIs, final, overload

from ._core import Pipeable, get_config

UNWRAP_NONE_MESSAGE: Final = "Tried to call unwrap() on a none value"


class UnwrapError(RuntimeError): ...


class Option[T](ABC, Pipeable):
    """A value that may or may not be present.

    There are exactly two variants: `Some`, which holds a payload, and `NoneOption`, whose single instance is `NONE`.

    Any payload is a valid `Some` payload, including `None`, `0` and `""`.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Returns:
            `True` if the option is a `Some` variant, `False` otherwise.

        Example:
            ```python
            >>> import optionchain as oc
            >>> x: oc.Option[int] = oc.Some(2)
            >>> x.is_some()
            True
            >>> y: oc.Option[int] = oc.NONE
            >>> y.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `None` value.

        Returns:
            `True` if the option is the `NONE` variant, `False` otherwise.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some(None).is_none()
            False
            >>> oc.NONE.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Returns:
            The contained `Some` value.

        Raises:
            UnwrapError: If the option is `None`.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some("car").unwrap()
            'car'
            >>> oc.NONE.unwrap()
            Traceback (most recent call last):
                ...
            optionchain._option.UnwrapError: Tried to call unwrap() on a none value

            ```
        """
        ...

    @abstractmethod
    def match[S, N](self, some: Callable[[T], S], none: Callable[[], N]) -> S | N:
        """
        Calls `some` with the contained value if the option is `Some`, otherwise calls `none`.

        Exactly one of the two callbacks is invoked.

        Args:
            some: Called with the contained value for a `Some`.
            none: Called without arguments for `None`.

        Returns:
            The return value of whichever callback was called.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some("foo").match(some=str.upper, none=lambda: "missing")
            'FOO'
            >>> oc.NONE.match(some=str.upper, none=lambda: "missing")
            'missing'

            ```
        """
        ...

    @overload
    def expect(self, msg: str) -> T: ...
    @overload
    def expect(self, msg: BaseException) -> T: ...
    def expect(self, msg: str | BaseException) -> T:
        """
        Returns the contained `Some` value.
        Raises an exception if the value is `None`.

        A string is wrapped in an `UnwrapError` carrying exactly that message.
        An exception instance is raised as-is, see `Option.unwrap_or_raise()`.

        Args:
            msg: The message of the `UnwrapError`, or the exception to raise.

        Returns:
            The contained `Some` value.

        Raises:
            UnwrapError: If the option is `None` and `msg` is a string.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some("value").expect("fruits are healthy")
            'value'
            >>> oc.NONE.expect("fruits are healthy")
            Traceback (most recent call last):
                ...
            optionchain._option.UnwrapError: fruits are healthy
            >>> oc.NONE.expect(KeyError("fruit"))
            Traceback (most recent call last):
                ...
            KeyError: 'fruit'

            ```
        """
        match msg:
            case BaseException():
                return self.unwrap_or_raise(msg)
            case _:
                if self.is_some():
                    return self.unwrap()
                raise UnwrapError(msg)

    def unwrap_or_raise(self, error: BaseException) -> T:
        """
        Returns the contained `Some` value, or raises the provided exception if the value is `None`.

        The exception is raised unchanged: it is neither wrapped nor given a new message.

        Args:
            error: The exception to raise if the option is `None`.

        Returns:
            The contained `Some` value.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some(3).unwrap_or_raise(ValueError("no value"))
            3
            >>> oc.NONE.unwrap_or_raise(ValueError("no value"))
            Traceback (most recent call last):
                ...
            ValueError: no value

            ```
        """
        if self.is_some():
            return self.unwrap()
        raise error

    def unwrap_or[D](self, default: D) -> T | D:
        """
        Returns the contained `Some` value or a provided default.

        Args:
            default: The value to return if the option is `None`.

        Returns:
            The contained `Some` value or the provided default.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some("car").unwrap_or("bike")
            'car'
            >>> oc.NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else[D](self, f: Callable[[], D]) -> T | D:
        """
        Returns the contained `Some` value or computes it from a function.

        The function is only called if the option is `None`.

        Args:
            f: A function that returns a default value if the option is `None`.

        Returns:
            The contained `Some` value or the result of the function.

        Example:
            ```python
            >>> import optionchain as oc
            >>> k = 10
            >>> oc.Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> oc.NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving a `None` value untouched.

        Args:
            f: The function to apply to the `Some` value.

        Returns:
            A new `Option` with the mapped value if `Some`, otherwise `NONE`.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some("Hello, World!").map(len)
            Some(13)
            >>> oc.NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def if_some(self, f: Callable[[T], object]) -> None:
        """
        Calls a function with the contained value if the option is `Some`.

        The return value of the function is discarded.

        Args:
            f: The function to call with the `Some` value.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some("foo").if_some(print)
            foo
            >>> oc.NONE.if_some(print)

            ```
        """
        if self.is_some():
            f(self.unwrap())

    def if_none(self, f: Callable[[], object]) -> None:
        """
        Calls a function if the option is `None`.

        Args:
            f: The function to call.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.NONE.if_none(lambda: print("nothing here"))
            nothing here
            >>> oc.Some(1).if_none(lambda: print("nothing here"))

            ```
        """
        if self.is_none():
            f()

    def and_[U](self, other: Option[U]) -> Option[U]:
        """
        Returns `NONE` if the option is `None`, otherwise returns `other`.

        `other` is evaluated eagerly by the caller; use `Option.and_then()` to defer the computation.

        Args:
            other: The `Option` to return if the option is `Some`.

        Returns:
            `other` if the option is `Some`, otherwise `NONE`.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some(2).and_(oc.Some("foo"))
            Some('foo')
            >>> oc.Some(2).and_(oc.NONE)
            NONE
            >>> oc.NONE.and_(oc.Some("foo"))
            NONE

            ```
        """
        return other if self.is_some() else NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls a function if the option is `Some`, otherwise returns `NONE`.
        Some languages call this operation flatmap.

        The returned `Option` is passed through without being wrapped again.

        Args:
            f: The function to call with the `Some` value.

        Returns:
            The result of the function if `Some`, otherwise `NONE`.

        Example:
            ```python
            >>> import optionchain as oc
            >>> def sq(x: int) -> oc.Option[int]:
            ...     return oc.Some(x * x)
            >>> def nope(x: int) -> oc.Option[int]:
            ...     return oc.NONE
            >>> oc.Some(2).and_then(sq).and_then(sq)
            Some(16)
            >>> oc.Some(2).and_then(sq).and_then(nope)
            NONE
            >>> oc.NONE.and_then(sq).and_then(sq)
            NONE

            ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_[U](self, other: Option[U]) -> Option[T | U]:
        """
        Returns the option if it contains a value, otherwise returns `other`.

        `other` is evaluated eagerly by the caller; use `Option.or_else()` to defer the computation.

        Args:
            other: The `Option` to return if the option is `None`.

        Returns:
            The original `Option` if it is `Some`, otherwise `other`.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some(2).or_(oc.Some(100))
            Some(2)
            >>> oc.NONE.or_(oc.Some(100))
            Some(100)
            >>> oc.NONE.or_(oc.NONE)
            NONE

            ```
        """
        return self if self.is_some() else other

    def or_else[U](self, f: Callable[[], Option[U]]) -> Option[T | U]:
        """
        Returns the option if it contains a value, otherwise calls a function and returns the result.

        Args:
            f: The function to call if the option is `None`.

        Returns:
            The original `Option` if it is `Some`, otherwise the result of the function.

        Example:
            ```python
            >>> import optionchain as oc
            >>> def nobody() -> oc.Option[str]:
            ...     return oc.NONE
            >>> def vikings() -> oc.Option[str]:
            ...     return oc.Some("vikings")
            >>> oc.Some("barbarians").or_else(vikings)
            Some('barbarians')
            >>> oc.NONE.or_else(vikings)
            Some('vikings')
            >>> oc.NONE.or_else(nobody)
            NONE

            ```
        """
        return self if self.is_some() else f()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """
        Returns the option if it is `Some` and the predicate holds for its value, otherwise `NONE`.

        The predicate is never called on `None`.

        Args:
            predicate: The function to test the `Some` value with.

        Returns:
            The original `Option` if the predicate returns `True`, otherwise `NONE`.

        Example:
            ```python
            >>> import optionchain as oc
            >>> def is_even(n: int) -> bool:
            ...     return n % 2 == 0
            >>> oc.NONE.filter(is_even)
            NONE
            >>> oc.Some(3).filter(is_even)
            NONE
            >>> oc.Some(4).filter(is_even)
            Some(4)

            ```
        """
        if self.is_some() and predicate(self.unwrap()):
            return self
        return NONE

    def flatten[U](self: Option[Option[U]]) -> Option[U]:
        """
        Converts from `Option[Option[U]]` to `Option[U]`.

        Only one level of nesting is removed.

        Returns:
            The inner `Option` if `Some`, otherwise `NONE`.

        Raises:
            TypeError: If the contained value is not an `Option`.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some(oc.Some(6)).flatten()
            Some(6)
            >>> oc.Some(oc.NONE).flatten()
            NONE
            >>> oc.Some(oc.Some(oc.Some(6))).flatten()
            Some(Some(6))
            >>> oc.NONE.flatten()
            NONE

            ```
        """
        if self.is_none():
            return NONE
        match self.unwrap():
            case Option() as inner:
                return inner
            case other:
                msg = f"flatten() requires an Option payload, got {type(other).__name__}"
                raise TypeError(msg)

    def xor[U](self, other: Option[U]) -> Option[T | U]:
        """
        Returns the `Some` option if exactly one of `self`, `other` is `Some`, otherwise returns `NONE`.

        Args:
            other: The `Option` to compare with.

        Returns:
            `self` or `other` if exactly one of them is `Some`, otherwise `NONE`.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some(2).xor(oc.NONE)
            Some(2)
            >>> oc.NONE.xor(oc.Some(2))
            Some(2)
            >>> oc.Some(2).xor(oc.Some(2))
            NONE
            >>> oc.NONE.xor(oc.NONE)
            NONE

            ```
        """
        match (self.is_some(), other.is_some()):
            case (True, False):
                return self
            case (False, True):
                return other
            case _:
                return NONE

    def array(self) -> list[T]:
        """
        Returns a list holding the contained value, or an empty list if the option is `None`.

        Returns:
            A new one-item list for `Some`, a new empty list for `None`.

        Example:
            ```python
            >>> import optionchain as oc
            >>> oc.Some("foo").array()
            ['foo']
            >>> oc.NONE.array()
            []

            ```
        """
        return [self.unwrap()] if self.is_some() else []

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.unwrap()


@final
@dataclass(slots=True, frozen=True, repr=False)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.

    Example:
    ```python
    >>> import optionchain as oc
    >>> oc.Some(42)
    Some(42)
    >>> oc.Some(42) == oc.Some(42)
    True

    ```
    """

    value: T

    def __repr__(self) -> str:
        return f"Some({get_config().payload_repr(self.value)})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def match[S, N](self, some: Callable[[T], S], none: Callable[[], N]) -> S | N:
        return some(self.value)


@final
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value.

    Every construction returns the same instance, exported as `NONE`.

    Example:
    ```python
    >>> import optionchain as oc
    >>> oc.NoneOption() is oc.NONE
    True

    ```
    """

    __slots__ = ()

    _instance: ClassVar[NoneOption | None] = None

    def __new__(cls) -> NoneOption:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NONE"

    def __reduce__(self) -> tuple[type[NoneOption], tuple[()]]:
        return (NoneOption, ())

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise UnwrapError(UNWRAP_NONE_MESSAGE)

    def match[S, N](self, some: Callable[[Any], S], none: Callable[[], N]) -> S | N:
        return none()


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
