"""Template action - render a file's full text for a copy step.

Reading the source file, resolving paths and writing the destination with
its mode belong to the copy collaborator passed to ``exec_template``.

Example:
    - template:
        src: "template.j2"
        dest: /tmp/MY_PASSWORD_FILE.txt
        mode: "0400"
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, TypeVar

from pydantic import BaseModel, Field

from jtree.jinja.engine import render_string

log = logging.getLogger(__name__)

T = TypeVar("T")


class CopyParams(BaseModel):
    """Rendered content and where the copy step should put it."""

    model_config = {"frozen": True}

    content: str = Field(description="Rendered file content")
    dest: str = Field(description="Destination path")
    mode: str | None = Field(default=None, description="Permissions, e.g. '0400'")


def render_content(
    source: str,
    dest: str,
    scope: Mapping[str, Any] | None = None,
    mode: str | None = None,
) -> CopyParams:
    """Render template text into CopyParams for dest."""
    log.debug("rendering template for %s", dest)
    return CopyParams(content=render_string(source, scope), dest=dest, mode=mode)


def exec_template(
    source: str,
    dest: str,
    scope: Mapping[str, Any] | None,
    copy_file: Callable[[CopyParams], T],
    mode: str | None = None,
) -> T:
    """Render template text and hand the result to copy_file."""
    return copy_file(render_content(source, dest, scope, mode))
