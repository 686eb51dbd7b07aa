"""
Utility functions for JSON to Freezed generator.
"""

import re

# Boundary between a lowercase letter or digit and an uppercase letter
_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")

# Runs of characters that separate words
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def _split_into_words(text: str) -> list[str]:
    """Split text into words on separators and camelCase boundaries."""
    spaced = _CASE_BOUNDARY.sub(r"\1 \2", text)
    return [word for word in _SEPARATORS.split(spaced) if word]


def _capitalize_and_join(words: list[str]) -> str:
    """Uppercase the first letter of each word and join them together.

    The rest of each word is kept as-is so that acronyms survive ("userURL" -> "UserURL").
    """
    return "".join(word[0].upper() + word[1:] for word in words)


def to_pascal_case(text: str) -> str:
    """Convert snake_case, kebab-case, camelCase or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "user-id" -> "UserId"
        "userId" -> "UserId"
        "3d_model" -> "X3dModel"
        "" -> ""

    Args:
        text: The text to convert

    Returns:
        PascalCase string, prefixed with "X" when it would start with a digit
    """
    words = _split_into_words(text)
    if not words:
        return ""
    result = _capitalize_and_join(words)
    if result[0].isdigit():
        result = f"X{result}"
    return result


def to_camel_case(text: str) -> str:
    """Convert text to camelCase ("user_id" -> "userId")."""
    pascal = to_pascal_case(text)
    if not pascal:
        return ""
    return pascal[0].lower() + pascal[1:]


def to_snake_case(text: str) -> str:
    """Convert text to lower snake_case ("UserEntity" -> "user_entity")."""
    snake = _CASE_BOUNDARY.sub(r"\1_\2", text)
    snake = _SEPARATORS.sub("_", snake).lower().strip("_")
    if snake and snake[0].isdigit():
        snake = f"x{snake}"
    return snake


def singularize(text: str) -> str:
    """Drop a trailing "s" ("users" -> "user"). No irregular plurals."""
    if len(text) > 1 and text.endswith("s"):
        return text[:-1]
    return text


def escape_dart_string(text: str) -> str:
    """Escape text for use inside a single-quoted Dart string literal."""
    escaped = text.replace("\\", "\\\\").replace("'", "\\'").replace("$", "\\$")
    return escaped.replace("\n", "\\n").replace("\r", "\\r")


def ensure_entity_suffix(text: str) -> str:
    """Append "_entity" to a class name unless it already ends with it."""
    if not text:
        return text
    if text.lower().endswith("_entity"):
        return text
    return f"{text}_entity"
