"""jtree - render YAML value trees through Jinja2.

Strings are rendered with strict undefined and reparsed as YAML; within a
mapping each key is visible to the keys after it. ``omit()`` lets a template
ask for its field to be left unset.
"""

from jtree.config import EngineConfig
from jtree.exceptions import OMIT_MESSAGE, OmitRequested, RenderError, RenderFailed
from jtree.jinja import configure, render_string
from jtree.log import setup_logging
from jtree.render import (
    Scope,
    is_render_string,
    is_render_value,
    parse_value,
    render,
    render_params,
)

__all__ = [
    "EngineConfig",
    "OMIT_MESSAGE",
    "OmitRequested",
    "RenderError",
    "RenderFailed",
    "configure",
    "render_string",
    "setup_logging",
    "Scope",
    "is_render_string",
    "is_render_value",
    "parse_value",
    "render",
    "render_params",
]
