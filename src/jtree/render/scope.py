"""Scope - immutable variable bindings with append-only extension."""

from __future__ import annotations

from collections import ChainMap
from typing import Any, Iterator, Mapping

from jtree.jinja.extensions import StrictRenderUndefined


class Scope(Mapping[str, Any]):
    """Immutable mapping of variable names to native values.

    ``extend`` returns a new scope layered on top of this one, so a binding
    added while rendering one mapping is never visible to the scope it was
    extended from.
    """

    __slots__ = ("_bindings",)

    _bindings: ChainMap

    def __init__(self, bindings: Mapping[str, Any] | None = None):
        self._bindings = ChainMap(dict(bindings or {}))

    @classmethod
    def of(cls, value: "Scope | Mapping[str, Any] | None") -> "Scope":
        """Coerce None, a Scope or any mapping into a Scope."""
        if isinstance(value, Scope):
            return value
        return cls(value)

    def extend(self, name: str, value: Any) -> "Scope":
        """Return a new scope with every binding of this one plus name."""
        child = Scope.__new__(Scope)
        child._bindings = self._bindings.new_child({name: value})
        return child

    def lookup(self, name: str) -> Any:
        """Return the bound value, or an undefined that fails on use."""
        if name in self._bindings:
            return self._bindings[name]
        return StrictRenderUndefined(name=name)

    def __getitem__(self, name: str) -> Any:
        return self._bindings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"Scope({dict(self._bindings)!r})"


def extend(base: Scope | Mapping[str, Any] | None, name: str, value: Any) -> Scope:
    return Scope.of(base).extend(name, value)


def lookup(scope: Scope | Mapping[str, Any] | None, name: str) -> Any:
    return Scope.of(scope).lookup(name)
