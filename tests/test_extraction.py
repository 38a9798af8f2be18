"""Tests for value extraction and defaulting."""

from unittest.mock import Mock

import pytest

import optionchain as oc


def test_unwrap_some() -> None:
    """unwrap returns the payload of a Some."""
    assert oc.Some("foo").unwrap() == "foo"
    payload = object()
    assert oc.Some(payload).unwrap() is payload


def test_unwrap_none_message() -> None:
    """unwrap on NONE raises UnwrapError with the fixed message."""
    with pytest.raises(oc.UnwrapError) as info:
        oc.NONE.unwrap()
    assert str(info.value) == "Tried to call unwrap() on a none value"
    assert str(info.value) == oc.UNWRAP_NONE_MESSAGE
    assert type(info.value).__name__ == "UnwrapError"
    assert isinstance(info.value, RuntimeError)


def test_expect_some() -> None:
    """expect returns the payload and ignores the message."""
    assert oc.Some("foo").expect("Oh noes!") == "foo"
    assert oc.Some("foo").expect(ValueError("Oh noes!")) == "foo"


def test_expect_message() -> None:
    """A string message is wrapped in an UnwrapError verbatim."""
    with pytest.raises(oc.UnwrapError) as info:
        oc.NONE.expect("Oh noes!")
    assert str(info.value) == "Oh noes!"


def test_expect_error_is_raised_as_is() -> None:
    """An exception argument is raised as the very same object."""
    provided = ValueError("Oh noes!")
    with pytest.raises(ValueError) as info:  # noqa: PT011
        oc.NONE.expect(provided)
    assert info.value is provided
    assert str(info.value) == "Oh noes!"
    assert not isinstance(info.value, oc.UnwrapError)


def test_unwrap_or_raise() -> None:
    """unwrap_or_raise is the dedicated entry point for exception objects."""
    provided = KeyError("missing")
    assert oc.Some(1).unwrap_or_raise(provided) == 1
    with pytest.raises(KeyError) as info:
        oc.NONE.unwrap_or_raise(provided)
    assert info.value is provided


def test_unwrap_or() -> None:
    """unwrap_or falls back to the default only for NONE."""
    assert oc.Some(5).unwrap_or(-1) == 5
    assert oc.NONE.unwrap_or(-1) == -1
    assert oc.Some(None).unwrap_or(-1) is None


def test_unwrap_or_else() -> None:
    """unwrap_or_else only calls its thunk for NONE."""
    thunk = Mock(return_value=-19)
    assert oc.Some(42).unwrap_or_else(thunk) == 42  # noqa: PLR2004
    thunk.assert_not_called()

    thunk = Mock(return_value=-19)
    assert oc.NONE.unwrap_or_else(thunk) == -19  # noqa: PLR2004
    thunk.assert_called_once_with()


def test_or_else_then_unwrap() -> None:
    """A lazily supplied fallback can be unwrapped."""
    assert oc.none().or_else(lambda: oc.some(7)).unwrap() == 7  # noqa: PLR2004
