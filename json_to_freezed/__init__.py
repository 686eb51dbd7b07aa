"""JSON to Freezed Generator

A Python package for generating Dart freezed model classes from sample
JSON documents. Infers nested classes, list element types, field names,
nullability and default values, and renders one Dart source file.
"""

__version__ = "1.0.0"

from .pipeline import (
    CodeGeneratorConfig,
    DefaultValues,
    DepthLimitExceeded,
    FieldOverride,
    GenerationError,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "DefaultValues",
    "FieldOverride",
    "OutputConfig",
    "OutputMode",
    "GenerationError",
    "DepthLimitExceeded",
]
