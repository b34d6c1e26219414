"""Configuration for the shared Jinja environment.

The trailing newline and strict undefined behaviour are not configurable:
every environment keeps the newline a template ends with and fails on
unbound names. The remaining Jinja knobs can be set in code or through
JTREE_* environment variables.
"""

from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "JTREE_"


class EngineConfig(BaseModel):
    """Options applied when the Jinja environment is built."""

    model_config = {"frozen": True}

    trim_blocks: bool = Field(
        default=False, description="Remove the first newline after a block tag"
    )
    lstrip_blocks: bool = Field(
        default=False, description="Strip whitespace before a block tag"
    )
    autoescape: bool = Field(default=False, description="HTML-escape output")
    extensions: tuple[str, ...] = Field(
        default=(), description="Jinja extensions, e.g. 'jinja2.ext.do'"
    )

    @field_validator("extensions", mode="before")
    @classmethod
    def split_extensions(cls, value: Any) -> Any:
        """Accept a comma-separated string as well as a sequence."""
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EngineConfig":
        """Build a config from JTREE_* variables, e.g. JTREE_TRIM_BLOCKS=1."""
        environ = os.environ if environ is None else environ

        data: dict[str, Any] = {}
        for name in cls.model_fields:
            key = f"{ENV_PREFIX}{name.upper()}"
            if key in environ:
                data[name] = environ[key]

        return cls.model_validate(data)
