"""
Schema inferencer that transforms JSON value nodes to IR.

Phase 2 of the pipeline: walk a sample JSON document depth-first, create
one class per object-shaped value, infer field types, and assign
unique Dart names, nullability and defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...utils import singularize, to_camel_case, to_pascal_case
from ..config import MAX_DEPTH_LIMIT, CodeGeneratorConfig, FieldOverride
from ..errors import DepthLimitExceeded
from ..json_ast.nodes import (
    JsonArray,
    JsonBool,
    JsonFloat,
    JsonInt,
    JsonNull,
    JsonObject,
    JsonString,
    JsonValue,
)
from .defaults import DefaultValuePolicy
from .ir_nodes import IR, ClassDef, FieldDef, PrimitiveKind, TypeKind, TypeRef
from .name_resolver import NameRegistry, ensure_safe_class_name, sanitize_identifier

logger = logging.getLogger(__name__)

# (fallback name, disallowed-name suffix) per kind of class site
ROOT_CLASS_NAMING = ("Model", "Model")
NESTED_CLASS_NAMING = ("Nested", "Model")
ITEM_CLASS_NAMING = ("Item", "Item")


@dataclass
class InferenceState:
    """Mutable state of one analyze() call.

    Created fresh per call and threaded through the walk, so a single
    SchemaInferencer can serve independent calls concurrently.
    """

    class_names: NameRegistry = field(default_factory=NameRegistry)
    classes: list[ClassDef] = field(default_factory=list)


class SchemaInferencer:
    """Infers model classes from a sample JSON document."""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the inferencer.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self.default_policy = DefaultValuePolicy(config.defaults)

    def analyze(
        self,
        root_name: str,
        root: JsonObject,
        converter_import_path: str = "",
        overrides: list[FieldOverride] | None = None,
    ) -> IR:
        """
        Infer the classes for a JSON object.

        Args:
            root_name: Name of the root class (already a valid PascalCase identifier)
            root: The root JSON object
            converter_import_path: Import path of the coercion converter module
            overrides: Per-field overrides for the root object's keys

        Returns:
            IR with the root class first, then nested classes in discovery order
        """
        state = InferenceState()
        root_overrides = {override.json_key: override for override in overrides or []}

        self._create_class(state, root_name, root, ROOT_CLASS_NAMING, root_overrides, "$", 0)

        return IR(
            root_name=root_name,
            classes=state.classes,
            converter_import_path=converter_import_path,
        )

    def _create_class(
        self,
        state: InferenceState,
        name_hint: str,
        obj: JsonObject,
        naming: tuple[str, str],
        overrides: dict[str, FieldOverride],
        path: str,
        depth: int,
    ) -> str:
        """Register a class for obj and infer its fields. Returns the class name."""
        self._check_depth(path, depth)

        fallback_name, disallowed_suffix = naming
        base_name = to_pascal_case(name_hint) or fallback_name
        class_name = state.class_names.unique(ensure_safe_class_name(base_name, disallowed_suffix))
        logger.debug("Creating class %s for %s", class_name, path)

        # Appended before the fields are walked so nested classes follow their parent
        class_def = ClassDef(name=class_name, original_name=name_hint)
        state.classes.append(class_def)

        field_names = NameRegistry()
        for key, value in obj.members:
            field_def = self._infer_field(state, key, value, field_names, overrides.get(key), f"{path}.{key}", depth)
            class_def.fields.append(field_def)

        return class_name

    def _infer_field(
        self,
        state: InferenceState,
        key: str,
        value: JsonValue,
        field_names: NameRegistry,
        override: FieldOverride | None,
        path: str,
        depth: int,
    ) -> FieldDef:
        """Build the field for one JSON member."""
        target_name = override.target_name.strip() if override and override.target_name else ""
        base_name = sanitize_identifier(target_name or to_camel_case(key))
        name = field_names.unique(base_name)

        inferred_type = self._infer_type(state, key, value, path, depth)

        if override is not None and override.nullable is not None:
            make_nullable = override.nullable
        else:
            make_nullable = self.config.make_nullable
        type_ref = inferred_type.as_nullable() if make_nullable else inferred_type

        converter = type_ref.primitive if type_ref.kind == TypeKind.PRIMITIVE else None

        default_literal = None
        if override is not None and override.default_value and override.default_value.strip():
            default_literal = override.default_value
        elif self.config.use_default_values:
            default_literal = self.default_policy.literal_for(type_ref)

        return FieldDef(
            name=name,
            original_name=key,
            type_ref=type_ref,
            needs_key_annotation=name != key,
            converter=converter,
            default_literal=default_literal,
            is_required=not type_ref.accepts_null and default_literal is None,
        )

    def _infer_type(self, state: InferenceState, key: str, value: JsonValue, path: str, depth: int) -> TypeRef:
        """Infer the type of a JSON value found under key."""
        if isinstance(value, JsonNull):
            return TypeRef.untyped()

        if isinstance(value, JsonArray):
            return self._infer_array_type(state, key, value, path, depth + 1)

        if isinstance(value, JsonObject):
            class_name = self._create_class(state, key, value, NESTED_CLASS_NAMING, {}, path, depth + 1)
            return TypeRef.of_class(class_name)

        if isinstance(value, JsonString):
            return TypeRef.of_primitive(PrimitiveKind.STRING)

        if isinstance(value, JsonInt):
            return TypeRef.of_primitive(PrimitiveKind.INT)

        if isinstance(value, JsonFloat):
            return TypeRef.of_primitive(PrimitiveKind.FLOAT)

        if isinstance(value, JsonBool):
            return TypeRef.of_primitive(PrimitiveKind.BOOL)

        return TypeRef.untyped()

    def _infer_array_type(self, state: InferenceState, key: str, array: JsonArray, path: str, depth: int) -> TypeRef:
        """Infer List<T> from the first non-null element of an array.

        Later elements are not reconciled with the first one; a null anywhere
        in the array makes the element type nullable.
        """
        self._check_depth(path, depth)

        item_type = TypeRef.untyped()
        resolved = False
        has_null = False

        for index, item in enumerate(array.items):
            if isinstance(item, JsonNull):
                has_null = True
                continue

            if resolved:
                continue

            item_path = f"{path}[{index}]"
            if isinstance(item, JsonArray):
                item_type = self._infer_array_type(state, key, item, item_path, depth + 1)
            elif isinstance(item, JsonObject):
                class_name = self._create_class(state, singularize(key), item, ITEM_CLASS_NAMING, {}, item_path, depth + 1)
                item_type = TypeRef.of_class(class_name)
            else:
                item_type = self._infer_type(state, key, item, item_path, depth)
            resolved = True
            logger.debug("Resolved element type of %s from index %d", path, index)

        if has_null:
            item_type = item_type.as_nullable()

        return TypeRef.list_of(item_type)

    def _check_depth(self, path: str, depth: int) -> None:
        max_depth = min(self.config.max_depth, MAX_DEPTH_LIMIT)
        if depth > max_depth:
            logger.warning("Maximum JSON depth exceeded at %s", path)
            raise DepthLimitExceeded(path, max_depth)
