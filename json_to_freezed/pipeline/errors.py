"""
Exceptions raised by the generation pipeline and its collaborators.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for errors raised while generating or writing Freezed models."""

    pass


class DepthLimitExceeded(GenerationError):
    """Raised when the JSON document nests deeper than the configured bound.

    Attributes:
        path: JSON path of the value that crossed the bound (e.g. "$.a.b[0]")
        max_depth: The configured bound
    """

    def __init__(self, path: str, max_depth: int):
        super().__init__(f"JSON nesting at {path} exceeds the maximum depth of {max_depth}")
        self.path = path
        self.max_depth = max_depth
