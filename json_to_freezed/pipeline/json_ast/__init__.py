"""JSON value nodes and the parser that builds them."""

from __future__ import annotations

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
from .parser import JsonParser

__all__ = [
    "JsonArray",
    "JsonBool",
    "JsonFloat",
    "JsonInt",
    "JsonNull",
    "JsonObject",
    "JsonParser",
    "JsonString",
    "JsonValue",
]
