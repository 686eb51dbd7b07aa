"""
Pipeline generator: sample JSON in, Dart freezed source out.

1. Phase 1 (Parser): Classify decoded JSON data into JsonValue nodes
2. Phase 2 (Inferencer): Infer classes, fields, names and defaults into IR
3. Phase 3 (Backend): Render the IR with the Dart templates
"""

from __future__ import annotations

import logging
from typing import Any

from .analyzer import IR, SchemaInferencer
from .backends import FreezedBackend
from .config import CodeGeneratorConfig, FieldOverride
from .json_ast import JsonObject, JsonParser

logger = logging.getLogger(__name__)

DEFAULT_CONVERTER_IMPORT = "json_value_converter.dart"


class PipelineGenerator:
    """Generates freezed model classes for a sample JSON object."""

    def __init__(
        self,
        class_name: str,
        data: dict[str, Any] | JsonObject,
        config: CodeGeneratorConfig | None = None,
        converter_import_path: str = DEFAULT_CONVERTER_IMPORT,
        overrides: list[FieldOverride] | None = None,
    ):
        """
        Initialize the generator.

        Args:
            class_name: Root class name, already a valid PascalCase Dart identifier
            data: The decoded JSON object (or its parsed JsonObject)
            config: Code generation configuration
            converter_import_path: Import path of json_value_converter.dart,
                relative to the generated file
            overrides: Per-field overrides for the root object's keys
        """
        self.class_name = class_name
        self.data = data
        self.config = config or CodeGeneratorConfig()
        self.converter_import_path = converter_import_path
        self.overrides = overrides or []

    def generate_ir(self) -> IR:
        """Run the parser and the inferencer."""
        if isinstance(self.data, JsonObject):
            root = self.data
        else:
            root = JsonParser(self.config.max_depth).parse(self.data)

        if not isinstance(root, JsonObject):
            raise TypeError(f"The root JSON value must be an object, got {type(self.data).__name__}")

        inferencer = SchemaInferencer(self.config)
        ir = inferencer.analyze(self.class_name, root, self.converter_import_path, self.overrides)
        logger.debug("Inferred %d classes for %s", len(ir.classes), self.class_name)
        return ir

    def generate(self) -> str:
        """Generate the Dart source file."""
        return FreezedBackend().generate(self.generate_ir())
