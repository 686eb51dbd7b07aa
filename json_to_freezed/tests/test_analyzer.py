"""
Tests for the schema inferencer (JSON value nodes to IR).
"""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from json_to_freezed.pipeline import MAX_DEPTH_LIMIT, CodeGeneratorConfig, DepthLimitExceeded, FieldOverride, PipelineGenerator
from json_to_freezed.pipeline.analyzer import PrimitiveKind, SchemaInferencer, TypeKind, TypeRef
from json_to_freezed.pipeline.json_ast import JsonInt, JsonObject, JsonParser

DART_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def infer(data, config=None, overrides=None, root_name="Root"):
    return PipelineGenerator(root_name, data, config, overrides=overrides).generate_ir()


def count_class_sites(value) -> int:
    """Count the object sites the depth-first walk turns into classes."""
    if isinstance(value, dict):
        return 1 + sum(count_class_sites(item) for item in value.values())
    if isinstance(value, list):
        for item in value:
            if item is not None:
                return count_class_sites(item)
    return 0


def load_sample_documents():
    documents = []
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file) as f:
            documents.extend(case["data"] for case in json.load(f))
    cases_dir = Path(__file__).parent / "test_data" / "test_cases"
    for input_file in sorted(cases_dir.glob("*/input.json")):
        with open(input_file) as f:
            documents.append(json.load(f))
    return documents


CONFIGS = [
    CodeGeneratorConfig(),
    CodeGeneratorConfig(make_nullable=True),
    CodeGeneratorConfig(use_default_values=True),
    CodeGeneratorConfig(make_nullable=True, use_default_values=True),
]


class TestScenarios:
    def test_flat_object(self):
        ir = infer({"name": "Alice", "age": 30})
        assert [c.name for c in ir.classes] == ["Root"]
        name, age = ir.classes[0].fields
        assert (name.name, name.type_ref, name.is_required) == ("name", TypeRef.of_primitive(PrimitiveKind.STRING), True)
        assert (age.name, age.type_ref, age.is_required) == ("age", TypeRef.of_primitive(PrimitiveKind.INT), True)
        assert name.converter == PrimitiveKind.STRING
        assert not name.needs_key_annotation

    def test_list_of_strings(self):
        ir = infer({"tags": ["a", "b"]})
        assert len(ir.classes) == 1
        tags = ir.classes[0].fields[0]
        assert tags.type_ref == TypeRef.list_of(TypeRef.of_primitive(PrimitiveKind.STRING))
        assert tags.converter is None

    def test_nested_object(self):
        ir = infer({"address": {"city": "NYC"}})
        assert [c.name for c in ir.classes] == ["Root", "Address"]
        assert ir.classes[0].fields[0].type_ref == TypeRef.of_class("Address")
        assert ir.classes[1].fields[0].name == "city"
        assert ir.classes[1].original_name == "address"

    def test_list_of_objects_with_null(self):
        ir = infer({"items": [{"id": 1}, None]})
        assert [c.name for c in ir.classes] == ["Root", "Item"]
        assert ir.classes[0].fields[0].type_ref == TypeRef.list_of(TypeRef.of_class("Item").as_nullable())

    def test_only_first_element_decides_the_shape(self):
        ir = infer({"values": [{"a": 1}, {"b": "x"}, 3]})
        assert [c.name for c in ir.classes] == ["Root", "Value"]
        assert [f.name for f in ir.classes[1].fields] == ["a"]

    def test_mixed_scalars_take_first_kind(self):
        ir = infer({"values": [1, "x", 2.5]})
        assert ir.classes[0].fields[0].type_ref == TypeRef.list_of(TypeRef.of_primitive(PrimitiveKind.INT))

    def test_disallowed_class_names(self):
        ir = infer({"list": {"a": 1}, "strings": [{"b": 1}]})
        assert [c.name for c in ir.classes] == ["Root", "ListModel", "StringItem"]

    def test_colliding_field_names(self):
        ir = infer({"user-id": 1, "userId": 2})
        first, second = ir.classes[0].fields
        assert (first.name, first.needs_key_annotation) == ("userId", True)
        assert (second.name, second.needs_key_annotation) == ("userId2", True)

    def test_root_name_reused_by_nested_key(self):
        ir = infer({"address": {"city": "x"}}, root_name="Address")
        assert [c.name for c in ir.classes] == ["Address", "Address2"]
        assert ir.root_name == "Address"

    def test_disallowed_root_name(self):
        ir = infer({"a": 1}, root_name="List")
        assert ir.classes[0].name == "ListModel"
        assert ir.root_name == "List"

    def test_discovery_order_is_depth_first(self):
        ir = infer({"a": {"b": {"c": 1}}, "d": {"e": 1}})
        assert [c.name for c in ir.classes] == ["Root", "A", "B", "D"]

    def test_null_is_untyped_and_optional(self):
        ir = infer({"meta": None}, CodeGeneratorConfig(make_nullable=True, use_default_values=True))
        meta = ir.classes[0].fields[0]
        assert meta.type_ref == TypeRef.untyped()
        assert meta.type_ref.accepts_null
        assert meta.default_literal is None
        assert meta.is_required is False

    def test_nullable_flag(self):
        ir = infer({"a": 1, "b": [1], "c": {"x": 1}}, CodeGeneratorConfig(make_nullable=True))
        fields = ir.classes[0].fields
        assert all(f.type_ref.is_nullable for f in fields)
        assert not any(f.is_required for f in fields)
        assert fields[0].converter == PrimitiveKind.INT

    def test_defaults_disabled_by_default(self):
        ir = infer({"a": 1, "b": "x", "c": []})
        assert all(f.default_literal is None for f in ir.classes[0].fields)


class TestOverrides:
    def test_override_applies_to_root_only(self):
        overrides = [FieldOverride(json_key="id", target_name="identifier", nullable=True)]
        ir = infer({"id": 1, "child": {"id": 2}}, overrides=overrides)
        root_id = ir.classes[0].fields[0]
        child_id = ir.classes[1].fields[0]
        assert (root_id.name, root_id.type_ref.is_nullable, root_id.is_required) == ("identifier", True, False)
        assert (child_id.name, child_id.type_ref.is_nullable, child_id.is_required) == ("id", False, True)

    def test_override_can_disable_global_nullability(self):
        overrides = [FieldOverride(json_key="a", nullable=False)]
        ir = infer({"a": 1, "b": 2}, CodeGeneratorConfig(make_nullable=True), overrides)
        a, b = ir.classes[0].fields
        assert not a.type_ref.is_nullable and a.is_required
        assert b.type_ref.is_nullable

    def test_override_default_applies_even_when_defaults_are_disabled(self):
        overrides = [FieldOverride(json_key="count", default_value="10")]
        ir = infer({"count": 1}, overrides=overrides)
        count = ir.classes[0].fields[0]
        assert count.default_literal == "10"
        assert count.is_required is False

    def test_blank_override_default_uses_policy(self):
        config = CodeGeneratorConfig(use_default_values=True)
        overrides = [FieldOverride(json_key="count", default_value="  ")]
        ir = infer({"count": 1}, config, overrides)
        assert ir.classes[0].fields[0].default_literal == "0"

    def test_override_name_is_sanitized_and_unique(self):
        overrides = [FieldOverride(json_key="a", target_name="class"), FieldOverride(json_key="b", target_name="classField")]
        ir = infer({"a": 1, "b": 2}, overrides=overrides)
        assert [f.name for f in ir.classes[0].fields] == ["classField", "classField2"]


@pytest.mark.parametrize("config", CONFIGS)
@pytest.mark.parametrize("document", load_sample_documents())
class TestInvariants:
    def test_class_count(self, document, config):
        ir = infer(document, config)
        assert len(ir.classes) == count_class_sites(document)

    def test_names_are_unique_identifiers(self, document, config):
        ir = infer(document, config)
        class_names = [c.name for c in ir.classes]
        assert len(set(class_names)) == len(class_names)
        for class_def in ir.classes:
            assert DART_IDENTIFIER.match(class_def.name)
            field_names = [f.name for f in class_def.fields]
            assert len(set(field_names)) == len(field_names)
            assert all(DART_IDENTIFIER.match(name) for name in field_names)

    def test_field_flags(self, document, config):
        ir = infer(document, config)
        for class_def in ir.classes:
            for field in class_def.fields:
                assert field.is_required == (not field.type_ref.accepts_null and field.default_literal is None)
                assert field.needs_key_annotation == (field.name != field.original_name)
                if field.converter is not None:
                    assert field.type_ref.kind == TypeKind.PRIMITIVE


class TestInferencer:
    def test_inferencer_is_reusable(self):
        inferencer = SchemaInferencer(CodeGeneratorConfig())
        root = JsonParser().parse({"user": {"a": 1}})
        first = inferencer.analyze("Root", root)
        second = inferencer.analyze("Root", root)
        assert [c.name for c in first.classes] == [c.name for c in second.classes] == ["Root", "User"]

    def test_depth_limit(self):
        data = {"a": {"b": {"c": {"d": 1}}}}
        config = CodeGeneratorConfig(max_depth=2)
        with pytest.raises(DepthLimitExceeded):
            infer(data, config)

    def test_depth_limit_checked_by_inferencer(self):
        root = JsonParser().parse({"a": [[{"b": 1}]]})
        with pytest.raises(DepthLimitExceeded) as exc_info:
            SchemaInferencer(CodeGeneratorConfig(max_depth=2)).analyze("Root", root)
        assert exc_info.value.path == "$.a[0][0]"

    def test_deep_document_within_default_bound(self):
        data: dict = {}
        node = data
        for _ in range(90):
            node["child"] = {}
            node = node["child"]
        ir = infer(data)
        assert len(ir.classes) == 91

    def test_large_max_depth_is_capped(self):
        data: dict = {}
        node = data
        for _ in range(600):
            node["child"] = {}
            node = node["child"]
        with pytest.raises(DepthLimitExceeded) as exc_info:
            infer(data, CodeGeneratorConfig(max_depth=2000))
        assert exc_info.value.max_depth == MAX_DEPTH_LIMIT

    def test_large_max_depth_is_capped_by_inferencer(self):
        root = JsonObject((("leaf", JsonInt(1)),))
        for _ in range(600):
            root = JsonObject((("child", root),))
        with pytest.raises(DepthLimitExceeded) as exc_info:
            SchemaInferencer(CodeGeneratorConfig(max_depth=2000)).analyze("Root", root)
        assert exc_info.value.max_depth == MAX_DEPTH_LIMIT

    def test_non_object_root_is_rejected(self):
        with pytest.raises(TypeError):
            PipelineGenerator("Root", [1, 2]).generate_ir()
