"""
Base class for code generation backends.

Defines the interface that all target-language backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.ir_nodes import IR, ClassDef, FieldDef, TypeRef

TEMPLATE_ROOT = Path(__file__).parent.parent.parent / "templates"


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = TEMPLATE_ROOT / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate(self, ir: IR) -> str:
        """
        Generate code from IR.

        Args:
            ir: The intermediate representation

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type string.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string
        """

    @abstractmethod
    def format_string_literal(self, value: str) -> str:
        """Escape a value for use inside the language's string literal quotes."""

    def _prepare_class_context(self, class_def: ClassDef) -> dict[str, Any]:
        """
        Prepare the template context for a class.

        Args:
            class_def: The class definition

        Returns:
            Dictionary of template variables
        """
        return {
            "CLASS_NAME": class_def.name,
            "fields": [self._prepare_field_context(field) for field in class_def.fields],
        }

    def _prepare_field_context(self, field: FieldDef) -> dict[str, Any]:
        """
        Prepare the template context for a field.

        Args:
            field: The field definition

        Returns:
            Dictionary of template variables
        """
        return {
            "NAME": field.name,
            "TYPE": self.translate_type(field.type_ref),
            "JSON_KEY": self.format_string_literal(field.original_name) if field.needs_key_annotation else None,
            "CONVERTER": None,
            "DEFAULT": field.default_literal,
            "REQUIRED": field.is_required,
        }
