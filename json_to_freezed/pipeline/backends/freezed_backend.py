"""
Dart code generation backend.

Generates freezed/json_serializable model classes from IR.
"""

from __future__ import annotations

from typing import Any

from ...utils import escape_dart_string, to_snake_case
from ..analyzer.ir_nodes import IR, FieldDef, PrimitiveKind, TypeKind, TypeRef
from .base import CodeBackend

FREEZED_ANNOTATION_IMPORT = "package:freezed_annotation/freezed_annotation.dart"

DEFAULT_FILE_STEM = "model"


class FreezedBackend(CodeBackend):
    """Dart freezed code generation backend."""

    TEMPLATE_LANG = "dart"
    FILE_EXTENSION = "dart"

    TYPE_MAP = {
        PrimitiveKind.STRING: "String",
        PrimitiveKind.INT: "int",
        PrimitiveKind.FLOAT: "double",
        PrimitiveKind.BOOL: "bool",
    }

    # Coercion converters defined in the json_value_converter.dart module
    CONVERTER_MAP = {
        PrimitiveKind.STRING: "StringJsonConverter",
        PrimitiveKind.INT: "IntJsonConverter",
        PrimitiveKind.FLOAT: "DoubleJsonConverter",
        PrimitiveKind.BOOL: "BoolJsonConverter",
    }

    def generate(self, ir: IR) -> str:
        """Generate a Dart source file from IR."""
        prefix = self.prefix_template.render(
            annotation_import=FREEZED_ANNOTATION_IMPORT,
            converter_import_path=ir.converter_import_path,
            file_stem=self.file_stem(ir.root_name),
        )

        classes = [self.class_template.render(self._prepare_class_context(class_def)) for class_def in ir.classes]

        return "\n\n".join([prefix, *classes]) + "\n"

    @staticmethod
    def file_stem(class_name: str) -> str:
        """File name stem shared by the model file and its part files ("UserEntity" -> "user_entity")."""
        return to_snake_case(class_name) or DEFAULT_FILE_STEM

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate IR type to a Dart type string."""
        if type_ref.kind == TypeKind.UNTYPED:
            return "dynamic"

        if type_ref.kind == TypeKind.PRIMITIVE:
            result = self.TYPE_MAP[type_ref.primitive]
        elif type_ref.kind == TypeKind.CLASS:
            result = type_ref.name
        else:
            item_type = self.translate_type(type_ref.item_type) if type_ref.item_type else "dynamic"
            result = f"List<{item_type}>"

        if type_ref.is_nullable:
            result = f"{result}?"

        return result

    def format_string_literal(self, value: str) -> str:
        return escape_dart_string(value)

    def _prepare_field_context(self, field: FieldDef) -> dict[str, Any]:
        ctx = super()._prepare_field_context(field)
        if field.converter is not None:
            ctx["CONVERTER"] = self.CONVERTER_MAP[field.converter]
        return ctx
