"""Tests for Option-returning collection lookups."""

from unittest.mock import Mock

import optionchain as oc


def test_find() -> None:
    """find returns the first match, stored `None` included."""
    assert oc.find(range(10), lambda x: x > 5) == oc.Some(6)  # noqa: PLR2004
    assert oc.find(range(10), lambda x: x > 9) is oc.NONE  # noqa: PLR2004
    assert oc.find([None, 1], lambda x: x is None) == oc.Some(None)
    assert oc.find([], bool) is oc.NONE


def test_find_map_stops_at_first_some() -> None:
    """Elements after the first Some are not visited."""
    parse = Mock(side_effect=lambda s: oc.Some(int(s)) if s.isdigit() else oc.NONE)
    assert oc.find_map(["a", "2", "3"], parse) == oc.Some(2)
    assert parse.call_count == 2  # noqa: PLR2004
    assert oc.find_map(["a", "b"], parse) is oc.NONE


def test_first_last_nth() -> None:
    """Positional lookups give NONE when out of range."""
    assert oc.first([9, 8]) == oc.Some(9)
    assert oc.first([]) is oc.NONE
    assert oc.first([None]) == oc.Some(None)
    assert oc.last(iter([7, 8, 9])) == oc.Some(9)
    assert oc.last([]) is oc.NONE
    assert oc.nth([10, 20], 1) == oc.Some(20)
    assert oc.nth([10, 20], 5) is oc.NONE


def test_get() -> None:
    """get works on mappings and sequences."""
    data = {"a": 1, "b": None}
    assert oc.get(data, "a") == oc.Some(1)
    assert oc.get(data, "b") == oc.Some(None)
    assert oc.get(data, "z") is oc.NONE
    assert oc.get(["x", "y"], 0) == oc.Some("x")
    assert oc.get(["x", "y"], 2) is oc.NONE


def test_get_in() -> None:
    """get_in follows nested paths."""
    data = {"user": {"tags": ["admin", "dev"], "email": None}}
    assert oc.get_in(data, ["user", "tags", 1]) == oc.Some("dev")
    assert oc.get_in(data, ["user", "email"]) == oc.Some(None)
    assert oc.get_in(data, ["user", "phone"]) is oc.NONE
    assert oc.get_in(data, ["user", "tags", 9]) is oc.NONE
    assert oc.get_in(data, []) == oc.Some(data)


def test_lookups_chain_with_combinators() -> None:
    """Lookup results compose with the combinator API."""
    config = {"server": {"port": "8080"}}
    port = oc.get_in(config, ["server", "port"]).map(int).filter(lambda p: p > 0)
    assert port == oc.Some(8080)
    fallback = oc.get_in(config, ["client", "port"]).map(int).unwrap_or(80)
    assert fallback == 80  # noqa: PLR2004
