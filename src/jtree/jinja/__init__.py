"""Jinja engine wrapper - shared environment, omit() and error mapping."""

from jtree.jinja.engine import (
    classify_error,
    configure,
    get_environment,
    render_string,
    reset_environment,
)
from jtree.jinja.extensions import (
    OmitUndefined,
    StrictRenderUndefined,
    get_jtree_jinja_env,
    omit,
)

__all__ = [
    "classify_error",
    "configure",
    "get_environment",
    "render_string",
    "reset_environment",
    "OmitUndefined",
    "StrictRenderUndefined",
    "get_jtree_jinja_env",
    "omit",
]
