"""
Name resolver for Dart identifiers.

Sanitizes JSON keys into Dart identifiers, keeps class and field names
unique, and avoids names that would shadow Dart core or annotation types.
"""

from __future__ import annotations

import re

# Dart reserved words and built-in identifiers that cannot name a parameter
DART_RESERVED_WORDS = {
    "abstract",
    "as",
    "assert",
    "async",
    "await",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "covariant",
    "default",
    "deferred",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "extension",
    "external",
    "factory",
    "false",
    "final",
    "finally",
    "for",
    "Function",
    "get",
    "hide",
    "if",
    "import",
    "in",
    "interface",
    "is",
    "late",
    "library",
    "mixin",
    "new",
    "null",
    "on",
    "operator",
    "part",
    "required",
    "rethrow",
    "return",
    "show",
    "static",
    "super",
    "switch",
    "sync",
    "this",
    "throw",
    "true",
    "try",
    "typedef",
    "var",
    "void",
    "while",
    "with",
    "yield",
}

# Class names that would shadow dart:core types or the annotations used in generated code
DISALLOWED_CLASS_NAMES = {
    "List",
    "Map",
    "Set",
    "Iterable",
    "Object",
    "String",
    "Function",
    "Null",
    "Type",
    "Record",
    "Enum",
    "Future",
    "Stream",
    "DateTime",
    "Duration",
    "Uri",
    "Default",
    "Freezed",
    "JsonKey",
    "JsonConverter",
    "IntJsonConverter",
    "DoubleJsonConverter",
    "BoolJsonConverter",
    "StringJsonConverter",
}

FALLBACK_IDENTIFIER = "field"
RESERVED_WORD_SUFFIX = "Field"

_INVALID_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")


def sanitize_identifier(text: str) -> str:
    """Make text a legal Dart parameter name.

    Strips characters outside [A-Za-z0-9_], falls back to "field" when nothing
    is left, prefixes "field" before a leading digit and suffixes "Field" on
    reserved words ("class" -> "classField").
    """
    result = _INVALID_IDENTIFIER_CHARS.sub("", text)
    if not result:
        result = FALLBACK_IDENTIFIER

    if result[0].isdigit():
        result = f"{FALLBACK_IDENTIFIER}{result}"

    if result in DART_RESERVED_WORDS:
        result = f"{result}{RESERVED_WORD_SUFFIX}"

    return result


def ensure_safe_class_name(name: str, suffix: str) -> str:
    """Append suffix when name would shadow a core or annotation type ("List" -> "ListItem")."""
    if name in DISALLOWED_CLASS_NAMES:
        return f"{name}{suffix}"
    return name


class NameRegistry:
    """Hands out unique names by counting occurrences of each base name.

    The first request for a base name returns it unchanged; later requests
    return it with the occurrence number appended ("Foo", "Foo2", "Foo3").
    """

    def __init__(self):
        self._counts: dict[str, int] = {}
        self._issued: set[str] = set()

    def unique(self, base: str) -> str:
        count = self._counts.get(base, 0)
        while True:
            count += 1
            candidate = base if count == 1 else f"{base}{count}"
            # A suffixed name may already have been handed out for a literal key ("userId2")
            if candidate not in self._issued:
                break

        self._counts[base] = count
        self._issued.add(candidate)
        return candidate

    def __contains__(self, name: str) -> bool:
        return name in self._issued
