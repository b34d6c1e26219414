"""Tests for Scope bindings."""

import pytest
from jinja2 import StrictUndefined, UndefinedError

from jtree.render import Scope, extend, lookup


def test_extend_returns_new_scope():
    base = Scope({"a": 1})
    child = base.extend("b", 2)

    assert dict(child) == {"a": 1, "b": 2}
    assert dict(base) == {"a": 1}


def test_extend_shadows_existing_binding():
    base = Scope({"a": 1})
    child = base.extend("a", 2)

    assert child["a"] == 2
    assert base["a"] == 1
    assert len(child) == 1


def test_lookup_bound_value():
    assert Scope({"a": [1, 2]}).lookup("a") == [1, 2]


def test_lookup_missing_fails_on_use():
    value = Scope().lookup("nope")
    assert isinstance(value, StrictUndefined)
    with pytest.raises(UndefinedError):
        str(value)


def test_scope_copies_caller_mapping():
    bindings = {"a": 1}
    scope = Scope(bindings)
    bindings["b"] = 2

    assert "b" not in scope


def test_of_coerces():
    scope = Scope({"a": 1})
    assert Scope.of(scope) is scope
    assert dict(Scope.of({"a": 1})) == {"a": 1}
    assert len(Scope.of(None)) == 0


def test_module_level_helpers():
    scope = extend({"a": 1}, "b", 2)
    assert isinstance(scope, Scope)
    assert lookup(scope, "b") == 2
    assert lookup({"a": 1}, "a") == 1
    assert isinstance(lookup(None, "a"), StrictUndefined)


def test_lookup_missing_fails_in_repr():
    with pytest.raises(UndefinedError):
        repr(Scope().lookup("nope"))
