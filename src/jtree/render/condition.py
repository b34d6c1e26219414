"""Condition evaluation for `when`-style expressions."""

from __future__ import annotations

from typing import Any, Mapping

from jtree.exceptions import RenderFailed
from jtree.jinja.engine import render_string


def is_render_string(expr: str, scope: Mapping[str, Any] | None = None) -> bool:
    """Evaluate a Jinja expression to a bool.

    Only an output of exactly "false" is False; anything else is True.

    Example:
        >>> is_render_string("boo == 'test'", {"boo": "test"})
        True
    """
    rendered = render_string(
        f"{{% if {expr} %}}true{{% else %}}false{{% endif %}}", scope
    )
    return rendered != "false"


def is_render_value(value: Any, scope: Mapping[str, Any] | None = None) -> bool:
    """Evaluate a condition that may already be a YAML boolean."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return is_render_string(value, scope)
    raise RenderFailed(f"{value!r} is not a valid condition")
