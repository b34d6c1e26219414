"""Jinja2 globals and environment factory for jtree templates."""

import os
from typing import Any

from jinja2 import Environment, StrictUndefined, Undefined

from jtree.config import EngineConfig
from jtree.exceptions import OMIT_MESSAGE


class StrictRenderUndefined(StrictUndefined):
    """StrictUndefined that also fails when printed through repr().

    Container literals such as ``[missing]`` render their items with repr(),
    which jinja leaves as the text ``Undefined``.
    """

    __slots__ = ()

    __repr__ = Undefined._fail_with_undefined_error


class OmitUndefined(StrictRenderUndefined):
    """Undefined value returned by omit().

    Any use of it (printing, truth test, arithmetic, iteration) fails with
    OMIT_MESSAGE. Jinja evaluates filter arguments eagerly, so failing on use
    instead of on call is what lets ``x | default(omit())`` pass through a
    bound ``x``.
    """

    __slots__ = ()


def omit() -> OmitUndefined:
    """Mark the current field as intentionally unset.

    The result only fails when used, so ``{% set y = omit() %}`` alone
    renders nothing and raises nothing.

    Example:
        packages: "{{ package_filters | default(omit()) }}"
    """
    return OmitUndefined(hint=OMIT_MESSAGE)


def json_default(value: Any) -> Any:
    """``default`` hook for the tojson filter: undefined values fail as such."""
    if isinstance(value, Undefined):
        value._fail_with_undefined_error()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def env_var(name: str, default: str = "") -> str:
    """Get an environment variable value.

    Args:
        name: Name of the environment variable.
        default: Default value if not set.

    Returns:
        Environment variable value or default.
    """
    return os.environ.get(name, default)


def get_jtree_jinja_env(config: EngineConfig | None = None) -> Environment:
    """Create a Jinja2 Environment with jtree globals.

    Args:
        config: Optional overrides for the non-fixed Jinja options.

    Returns:
        Configured Jinja2 Environment.
    """
    config = config or EngineConfig()

    env = Environment(
        keep_trailing_newline=True,
        undefined=StrictRenderUndefined,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
        autoescape=config.autoescape,
        extensions=list(config.extensions),
    )

    env.globals["omit"] = omit
    env.globals["env"] = env_var
    env.policies["json.dumps_kwargs"] = {"sort_keys": True, "default": json_default}

    return env
