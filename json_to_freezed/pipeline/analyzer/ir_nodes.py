"""
IR (Intermediate Representation) node definitions.

These nodes represent the inferred model classes, ready for code
generation. All names are final and all types are resolved.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"  # String, int, double, bool
    CLASS = "class"  # A generated class
    LIST = "list"  # List<T>
    UNTYPED = "untyped"  # dynamic


class PrimitiveKind(Enum):
    """Primitive JSON scalar kinds."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


@dataclass(frozen=True)
class TypeRef:
    """A resolved type reference."""

    kind: TypeKind = TypeKind.UNTYPED

    # For primitive types
    primitive: PrimitiveKind | None = None

    # For class types: the generated class name
    name: str = ""

    # For list types: the element type
    item_type: TypeRef | None = None

    # Whether this type is wrapped as nullable
    is_nullable: bool = False

    @staticmethod
    def of_primitive(primitive: PrimitiveKind) -> TypeRef:
        return TypeRef(kind=TypeKind.PRIMITIVE, primitive=primitive)

    @staticmethod
    def of_class(name: str) -> TypeRef:
        return TypeRef(kind=TypeKind.CLASS, name=name)

    @staticmethod
    def list_of(item_type: TypeRef) -> TypeRef:
        return TypeRef(kind=TypeKind.LIST, item_type=item_type)

    @staticmethod
    def untyped() -> TypeRef:
        return TypeRef(kind=TypeKind.UNTYPED)

    @property
    def accepts_null(self) -> bool:
        """Untyped values are nullable without an explicit wrapper."""
        return self.is_nullable or self.kind == TypeKind.UNTYPED

    def as_nullable(self) -> TypeRef:
        """Return this type wrapped as nullable (no-op for nullable or untyped types)."""
        if self.accepts_null:
            return self
        return replace(self, is_nullable=True)


@dataclass
class FieldDef:
    """A field (constructor parameter) of a generated class."""

    name: str = ""
    original_name: str = ""  # Original JSON key
    type_ref: TypeRef = field(default_factory=TypeRef.untyped)

    # Whether @JsonKey(name: ...) is needed to map back to the JSON key
    needs_key_annotation: bool = False

    # Scalar kind used to pick a coercion converter, if any
    converter: PrimitiveKind | None = None

    # Dart expression for @Default(...), if any
    default_literal: str | None = None

    is_required: bool = False


@dataclass
class ClassDef:
    """A generated class definition."""

    name: str = ""
    original_name: str = ""  # JSON key (or root name) the class was created from

    fields: list[FieldDef] = field(default_factory=list)


@dataclass
class IR:
    """The complete Intermediate Representation."""

    root_name: str = ""

    # All class definitions, root first, then in discovery order
    classes: list[ClassDef] = field(default_factory=list)

    # Import path of the coercion converter module
    converter_import_path: str = ""
