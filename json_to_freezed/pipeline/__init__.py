"""
Pipeline - sample JSON to Dart freezed model generator.

This module provides a multi-phase architecture for generating
immutable model classes from a sample JSON document:

1. Phase 1 (Parser): Parse decoded JSON into JsonValue nodes
2. Phase 2 (Inferencer): Infer classes, field types and names into IR
3. Phase 3 (Backend): Render the IR into Dart source with Jinja2 templates
"""

from __future__ import annotations

from .config import MAX_DEPTH_LIMIT, CodeGeneratorConfig, DefaultValues, FieldOverride, OutputConfig, OutputMode
from .errors import DepthLimitExceeded, GenerationError
from .generator import DEFAULT_CONVERTER_IMPORT, PipelineGenerator

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "DefaultValues",
    "FieldOverride",
    "OutputConfig",
    "OutputMode",
    "GenerationError",
    "DepthLimitExceeded",
    "MAX_DEPTH_LIMIT",
    "DEFAULT_CONVERTER_IMPORT",
]
