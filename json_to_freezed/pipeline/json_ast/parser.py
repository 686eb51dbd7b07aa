"""
Parser that turns decoded JSON data into JSON value nodes.

Phase 1 of the pipeline: classify every value of a document produced by
json.load/json.loads without inferring any types or names.
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import MAX_DEPTH_LIMIT
from ..errors import DepthLimitExceeded
from .nodes import (
    JsonArray,
    JsonBool,
    JsonFloat,
    JsonInt,
    JsonNull,
    JsonObject,
    JsonString,
    JsonValue,
)

logger = logging.getLogger(__name__)


class JsonParser:
    """Parses decoded JSON data into JsonValue nodes."""

    def __init__(self, max_depth: int = 100):
        """
        Initialize the parser.

        Args:
            max_depth: Maximum nesting of objects/arrays below the root value,
                capped at MAX_DEPTH_LIMIT
        """
        self.max_depth = min(max_depth, MAX_DEPTH_LIMIT)

    def parse(self, data: Any) -> JsonValue:
        """
        Parse decoded JSON data.

        Args:
            data: Output of json.load/json.loads

        Returns:
            The root JsonValue

        Raises:
            DepthLimitExceeded: If containers nest deeper than max_depth
            TypeError: If data contains values that are not JSON data
        """
        return self._parse_value(data, "$", 0)

    def _parse_value(self, value: Any, path: str, depth: int) -> JsonValue:
        if value is None:
            return JsonNull()

        # bool is a subclass of int, check it first
        if isinstance(value, bool):
            return JsonBool(value)

        if isinstance(value, int):
            return JsonInt(value)

        if isinstance(value, float):
            if value.is_integer():
                return JsonInt(int(value))
            return JsonFloat(value)

        if isinstance(value, str):
            return JsonString(value)

        if isinstance(value, dict):
            self._check_depth(path, depth)
            return JsonObject(tuple((str(key), self._parse_value(item, f"{path}.{key}", depth + 1)) for key, item in value.items()))

        if isinstance(value, (list, tuple)):
            self._check_depth(path, depth)
            return JsonArray(tuple(self._parse_value(item, f"{path}[{index}]", depth + 1) for index, item in enumerate(value)))

        raise TypeError(f"Unsupported JSON value at {path}: {type(value).__name__}")

    def _check_depth(self, path: str, depth: int) -> None:
        if depth > self.max_depth:
            logger.warning("Maximum JSON depth exceeded at %s", path)
            raise DepthLimitExceeded(path, self.max_depth)
