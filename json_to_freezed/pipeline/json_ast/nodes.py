"""
JSON value node definitions.

A parsed JSON document as a closed set of node types. Each value's kind is
decided once by the parser, so later phases dispatch on node type instead of
re-inspecting raw Python values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class JsonNull:
    """The JSON null literal."""


@dataclass(frozen=True)
class JsonBool:
    value: bool


@dataclass(frozen=True)
class JsonInt:
    """A number without a fractional part (1, -3, 30.0)."""

    value: int


@dataclass(frozen=True)
class JsonFloat:
    """A number with a fractional part, or NaN/Infinity."""

    value: float


@dataclass(frozen=True)
class JsonString:
    value: str


@dataclass(frozen=True)
class JsonObject:
    """A JSON object with members kept in document order."""

    members: tuple[tuple[str, JsonValue], ...] = field(default_factory=tuple)

    def keys(self) -> list[str]:
        return [key for key, _ in self.members]


@dataclass(frozen=True)
class JsonArray:
    items: tuple[JsonValue, ...] = field(default_factory=tuple)


JsonValue = Union[JsonNull, JsonBool, JsonInt, JsonFloat, JsonString, JsonObject, JsonArray]
