"""Tree renderer - renders a value tree through Jinja.

Strings are rendered and reparsed as YAML, so a template can produce a
number, list or mapping. Within a mapping each key's rendered value is bound
under the key's name for the keys that follow it:

    a: "{{ 1 }}"
    b: "{{ a + 1 }}"    # -> 2
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from jtree.exceptions import OmitRequested, RenderFailed
from jtree.jinja.engine import render_string
from jtree.render.scope import Scope
from jtree.render.values import parse_value

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rendered:
    """A mapping entry that rendered to a value."""

    value: Any


@dataclass(frozen=True)
class Omitted:
    """A mapping entry whose template asked to be omitted."""


Outcome = Union[Rendered, Omitted]


def render(value: Any, scope: Scope | Mapping[str, Any] | None = None) -> Any:
    """Render a value tree against a scope.

    Args:
        value: None, bool, number, string, list/tuple or string-keyed mapping.
        scope: Variables visible to every template in the tree.

    Returns:
        A tree of the same shape with every string rendered and reparsed.

    Raises:
        OmitRequested: If any template used the result of omit().
        RenderFailed: On the first template or value that cannot be rendered.
    """
    return _render(value, Scope.of(scope))


def render_params(
    params: Mapping[str, Any], scope: Scope | Mapping[str, Any] | None = None
) -> dict[str, Any]:
    """Render a mapping, dropping the keys whose template called omit().

    Dropped keys are not bound for later keys, so referencing one fails as
    an undefined name.

    Raises:
        RenderFailed: If params is not a mapping or an entry fails to render.
    """
    if not isinstance(params, Mapping):
        raise RenderFailed(f"{params!r} is not a valid params mapping")

    rendered: dict[str, Any] = {}
    current = Scope.of(scope)

    for key, value in params.items():
        _check_key(key)
        outcome = render_entry(value, current)
        if isinstance(outcome, Omitted):
            log.debug("omitting param %r", key)
            continue
        current = current.extend(key, outcome.value)
        rendered[key] = outcome.value

    return rendered


def render_entry(value: Any, scope: Scope) -> Outcome:
    """Render one value, turning an omit() request into Omitted."""
    try:
        return Rendered(_render(value, scope))
    except OmitRequested:
        return Omitted()


def _render(value: Any, scope: Scope) -> Any:
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return parse_value(render_string(value, scope))
    if isinstance(value, (list, tuple)):
        return [_render(item, scope) for item in value]
    if isinstance(value, Mapping):
        return _render_mapping(value, scope)
    raise RenderFailed(f"{value!r} is not a valid render value")


def _render_mapping(value: Mapping[Any, Any], scope: Scope) -> dict[Any, Any]:
    rendered: dict[Any, Any] = {}
    current = scope

    for key, item in value.items():
        _check_key(key)
        rendered_item = _render(item, current)
        current = current.extend(key, rendered_item)
        rendered[key] = rendered_item

    return rendered


def _check_key(key: Any) -> None:
    if not isinstance(key, str):
        raise RenderFailed(f"{key!r} is not a valid mapping key, expected a string")
