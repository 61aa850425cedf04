"""
Lightdash Exceptions
====================

Exception classes raised by the lightdash helpers.
"""

from __future__ import annotations
from typing import Any, Optional, Sequence


class LightdashError(Exception):
    """Base class for every error raised by lightdash itself."""


class PathSyntaxError(LightdashError, ValueError):
    """Raised when a path string cannot be parsed.

    Attributes
    ----------
    path_segment : Any
        The offending substring or key (if available).
    path : str | Sequence | None
        The full path being processed when the error occurred.
    """

    def __init__(
        self,
        message: str,
        *,
        path_segment: Any = None,
        path: Optional[Any] = None,
    ):
        super().__init__(message)
        self.path_segment = path_segment
        self.path = path

    def __str__(self) -> str:
        base = super().__str__()
        if self.path_segment is not None:
            base += f" | segment={self.path_segment!r}"
        if self.path is not None:
            base += f" | path={self.path!r}"
        return base


class CyclicStructureError(LightdashError, ValueError):
    """Raised when a deep traversal re-enters a container on its own path."""

    def __init__(self, message: str, *, container: Any = None, trail: Optional[Sequence[Any]] = None):
        super().__init__(message)
        self.container = container
        self.trail = list(trail) if trail is not None else []
