"""jtree Exceptions

Errors raised while rendering value trees.
"""

from __future__ import annotations

OMIT_MESSAGE = "Param is omitted"


class RenderError(Exception):
    """Base exception for all jtree rendering errors."""

    pass


class OmitRequested(RenderError):
    """Raised when a template called omit() and used its result.

    Not a defect: callers may drop the field instead of failing.
    """

    def __init__(self) -> None:
        super().__init__(OMIT_MESSAGE)


class RenderFailed(RenderError):
    """Raised when a template or value cannot be rendered."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)
