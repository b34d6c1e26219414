"""Engine - the process-wide Jinja environment and string rendering.

The environment is built once, on first use, and never mutated afterwards.
Each render works on an overlay of it so concurrent callers never share
compiled template state.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping

from jinja2 import Environment, TemplateError

from jtree.config import EngineConfig
from jtree.exceptions import OMIT_MESSAGE, OmitRequested, RenderError, RenderFailed
from jtree.jinja.extensions import get_jtree_jinja_env

log = logging.getLogger(__name__)

_lock = threading.Lock()
_env: Environment | None = None
_config: EngineConfig | None = None


def configure(config: EngineConfig) -> None:
    """Set the config used to build the shared environment.

    Must be called before the first render.

    Raises:
        RuntimeError: If the environment has already been built.
    """
    global _config

    with _lock:
        if _env is not None:
            raise RuntimeError("jtree environment already initialized")
        _config = config


def get_environment() -> Environment:
    """Return the shared environment, building it on first call."""
    global _env

    if _env is None:
        with _lock:
            if _env is None:
                config = _config or EngineConfig.from_env()
                log.debug("building jinja environment with %s", config)
                _env = get_jtree_jinja_env(config)
    return _env


def reset_environment() -> None:
    """Drop the shared environment and config (used by tests)."""
    global _env, _config

    with _lock:
        _env = None
        _config = None


def classify_error(exc: Exception) -> RenderError:
    """Map an engine failure to OmitRequested or RenderFailed."""
    message = exc.message if isinstance(exc, TemplateError) else str(exc)
    if message == OMIT_MESSAGE:
        return OmitRequested()
    return RenderFailed(str(exc))


def render_string(text: str, scope: Mapping[str, Any] | None = None) -> str:
    """Render a single template string against a scope.

    Args:
        text: Jinja template source.
        scope: Variables visible to the template.

    Returns:
        Rendered text, trailing newline included.

    Raises:
        OmitRequested: If the template used the result of omit().
        RenderFailed: On syntax errors, undefined names or runtime errors.
    """
    env = get_environment().overlay()
    log.debug("rendering %r", text)

    try:
        tmpl = env.from_string(text)
        return tmpl.render(dict(scope) if scope is not None else {})
    except Exception as exc:
        raise classify_error(exc) from exc
