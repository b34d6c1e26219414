"""Value-tree rendering: scopes, YAML reparse, tree walk and conditions."""

from jtree.render.condition import is_render_string, is_render_value
from jtree.render.scope import Scope, extend, lookup
from jtree.render.tree import Omitted, Rendered, render, render_entry, render_params
from jtree.render.values import parse_value

__all__ = [
    "is_render_string",
    "is_render_value",
    "Scope",
    "extend",
    "lookup",
    "Omitted",
    "Rendered",
    "render",
    "render_entry",
    "render_params",
    "parse_value",
]
