"""Schema inference: JSON value nodes to IR."""

from __future__ import annotations

from .analyzer import InferenceState, SchemaInferencer
from .defaults import DefaultValuePolicy
from .ir_nodes import IR, ClassDef, FieldDef, PrimitiveKind, TypeKind, TypeRef
from .name_resolver import NameRegistry, ensure_safe_class_name, sanitize_identifier

__all__ = [
    "IR",
    "ClassDef",
    "DefaultValuePolicy",
    "FieldDef",
    "InferenceState",
    "NameRegistry",
    "PrimitiveKind",
    "SchemaInferencer",
    "TypeKind",
    "TypeRef",
    "ensure_safe_class_name",
    "sanitize_identifier",
]
