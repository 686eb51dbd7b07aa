"""
Configuration for the JSON to Freezed pipeline.

Holds the generation options collected by the host surface (CLI or editor),
the per-field overrides, and the write-back options.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

# Upper bound for max_depth, keeps the recursive walk below the interpreter recursion limit
MAX_DEPTH_LIMIT = 200


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True


@dataclass
class DefaultValues:
    """User-configured literals used by the default value policy.

    Each value is the raw text typed by the user; the policy parses and
    normalizes it for the field kind it applies to.
    """

    string_value: str = ""
    int_value: str = ""
    double_value: str = ""
    bool_value: str = ""
    list_value: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any]) -> DefaultValues:
        """Create default values from a dictionary, stringifying each value."""
        values = DefaultValues()
        for k, v in d.items():
            if hasattr(values, k) and v is not None:
                setattr(values, k, str(v))
        return values


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Wrap every inferred field type as nullable
    make_nullable: bool = False

    # Emit @Default(...) annotations computed from `defaults`
    use_default_values: bool = False

    # Literals used when `use_default_values` is set
    defaults: DefaultValues = field(default_factory=DefaultValues)

    # Maximum nesting of objects/arrays below the root object, capped at MAX_DEPTH_LIMIT
    max_depth: int = 100

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "defaults":
                if not isinstance(v, dict):
                    raise ValueError(f"'defaults' must be a mapping, got {type(v).__name__}")
                config.defaults = DefaultValues.from_dict(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "make_nullable": self.make_nullable,
            "use_default_values": self.use_default_values,
            "defaults": asdict(self.defaults),
            "max_depth": self.max_depth,
        }


@dataclass
class FieldOverride:
    """User override for one root-level JSON key.

    Attributes:
        json_key: The JSON key the override applies to
        target_name: Dart parameter name to use instead of the camelCase key
        nullable: Explicit nullability, or None to follow the global flag
        default_value: Dart expression used verbatim in @Default(...)
    """

    json_key: str
    target_name: str = ""
    nullable: bool | None = None
    default_value: str = ""

    # Editor payload spelling -> attribute name
    _ALIASES = {
        "jsonKey": "json_key",
        "dartName": "target_name",
        "defaultValue": "default_value",
    }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> FieldOverride:
        """Create an override from a dictionary (snake_case or editor camelCase keys)."""
        values = {}
        for k, v in d.items():
            name = FieldOverride._ALIASES.get(k, k)
            if name in ("json_key", "target_name", "nullable", "default_value"):
                values[name] = v
        if "json_key" not in values:
            raise ValueError(f"Field override is missing its JSON key: {d!r}")
        for name in ("target_name", "default_value"):
            if values.get(name) is not None:
                values[name] = str(values[name])
        return FieldOverride(**values)
