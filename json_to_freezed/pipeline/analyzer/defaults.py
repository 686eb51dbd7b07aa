"""
Default value policy.

Maps a resolved field type to the Dart expression used in @Default(...),
based on the literals configured by the user.
"""

from __future__ import annotations

import math
import re

from ...utils import escape_dart_string
from ..config import DefaultValues
from .ir_nodes import PrimitiveKind, TypeKind, TypeRef

EMPTY_LIST_LITERAL = "const []"

# Leading integer / floating point number, parsed the way a lenient number input would
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class DefaultValuePolicy:
    """Computes @Default(...) literals for inferred field types."""

    def __init__(self, defaults: DefaultValues):
        """
        Initialize the policy.

        Args:
            defaults: User-configured raw literals per field kind
        """
        self.defaults = defaults

    def literal_for(self, type_ref: TypeRef) -> str | None:
        """
        Compute the default literal for a type.

        Args:
            type_ref: The field type, after nullability was applied

        Returns:
            A Dart expression, or None when the type gets no generated default
        """
        if type_ref.kind == TypeKind.LIST:
            list_value = self.defaults.list_value.strip()
            return list_value if list_value else EMPTY_LIST_LITERAL

        if type_ref.kind != TypeKind.PRIMITIVE:
            # Class references and untyped values never get a generated default
            return None

        if type_ref.primitive == PrimitiveKind.STRING:
            return f"'{escape_dart_string(self.defaults.string_value)}'"

        if type_ref.primitive == PrimitiveKind.INT:
            return self._int_literal(self.defaults.int_value)

        if type_ref.primitive == PrimitiveKind.FLOAT:
            return self._float_literal(self.defaults.double_value)

        if type_ref.primitive == PrimitiveKind.BOOL:
            raw = self.defaults.bool_value.strip().lower()
            return raw if raw in ("true", "false") else "false"

        return None

    def _int_literal(self, raw: str) -> str:
        match = _INT_PREFIX.match(raw)
        if not match:
            return "0"
        return str(int(match.group(1)))

    def _float_literal(self, raw: str) -> str:
        match = _FLOAT_PREFIX.match(raw)
        if not match:
            return "0.0"
        value = float(match.group(1))
        if not math.isfinite(value):
            return "0.0"
        return repr(value)
