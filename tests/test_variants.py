"""Tests for the Some/NONE variants and their identity rules."""

import copy
import dataclasses
import pickle

import pytest

import optionchain as oc

PAYLOADS = [42, "foo", {}, [], None, 0, "", False]


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


@pytest.mark.parametrize("value", PAYLOADS)
def test_some_is_some(value: object) -> None:
    """Any payload, falsy or `None` included, makes a `Some`."""
    opt = oc.some(value)
    assert opt.is_some() is True
    assert opt.is_none() is False


def test_none_is_none() -> None:
    """The none variant answers tag queries."""
    assert oc.none().is_some() is False
    assert oc.none().is_none() is True


def test_none_identity() -> None:
    """Every none is the same object."""
    assert oc.none() is oc.none()
    assert oc.none() is oc.NONE
    assert oc.NoneOption() is oc.NONE
    assert oc.none() == oc.none()


def test_none_survives_copy_and_pickle() -> None:
    """Copies and pickles of NONE resolve back to the singleton."""
    assert copy.copy(oc.NONE) is oc.NONE
    assert copy.deepcopy(oc.NONE) is oc.NONE
    assert pickle.loads(pickle.dumps(oc.NONE)) is oc.NONE  # noqa: S301


def test_some_pickle() -> None:
    """Some payloads survive pickling."""
    assert pickle.loads(pickle.dumps(oc.Some([1, 2]))) == oc.Some([1, 2])  # noqa: S301


def test_structural_equality() -> None:
    """Some compares by payload and never equals NONE."""
    assert oc.Some(1) == oc.Some(1)
    assert oc.Some(1) != oc.Some(2)
    assert oc.Some(None) != oc.NONE
    assert oc.NONE != oc.Some(None)
    assert hash(oc.Some("a")) == hash(oc.Some("a"))


def test_some_is_immutable() -> None:
    """The payload of a Some cannot be reassigned."""
    opt = oc.Some(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        opt.value = 2  # type: ignore[misc]


def test_slots() -> None:
    """Containers carry no instance dict."""
    assert _check_slots(oc.Some(42))
    assert _check_slots(oc.NONE)


def test_repr() -> None:
    """Reprs show the variant and payload."""
    assert repr(oc.Some(42)) == "Some(42)"
    assert repr(oc.Some("x")) == "Some('x')"
    assert repr(oc.Some(oc.NONE)) == "Some(NONE)"
    assert repr(oc.NONE) == "NONE"


def test_pattern_matching() -> None:
    """Variants can be destructured with match statements."""

    def _describe(opt: oc.Option[str]) -> str:
        match opt:
            case oc.Some(value):
                return f"some {value}"
            case oc.NoneOption():
                return "none"
            case _:
                raise AssertionError("unreachable")

    assert _describe(oc.Some("hello")) == "some hello"
    assert _describe(oc.NONE) == "none"


def test_iteration() -> None:
    """Iterating yields the payload once, or nothing."""
    assert list(oc.Some(None)) == [None]
    assert list(oc.NONE) == []


def test_option_is_abstract() -> None:
    """The capability interface cannot be instantiated directly."""
    with pytest.raises(TypeError):
        oc.Option()  # type: ignore[abstract]
