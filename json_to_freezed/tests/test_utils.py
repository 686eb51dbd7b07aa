import pytest

from json_to_freezed.utils import (
    ensure_entity_suffix,
    escape_dart_string,
    singularize,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("first_name", "FirstName"),
        ("user-id", "UserId"),
        ("userId", "UserId"),
        ("user id", "UserId"),
        ("userURL", "UserURL"),
        ("address2Line", "Address2Line"),
        ("3d_model", "X3dModel"),
        ("__a__b__", "AB"),
        ("", ""),
        ("---", ""),
    ],
)
def test_to_pascal_case(text, expected):
    assert to_pascal_case(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("first_name", "firstName"),
        ("user-id", "userId"),
        ("UserId", "userId"),
        ("URL", "uRL"),
        ("2fa", "x2fa"),
        ("", ""),
    ],
)
def test_to_camel_case(text, expected):
    assert to_camel_case(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("UserEntity", "user_entity"),
        ("userId", "user_id"),
        ("User-Profile Entity", "user_profile_entity"),
        ("HTTPServer", "httpserver"),
        ("_Model_", "model"),
        ("3dModel", "x3d_model"),
        ("", ""),
    ],
)
def test_to_snake_case(text, expected):
    assert to_snake_case(text) == expected


@pytest.mark.parametrize("text", ["UserId", "X3dModel", "UserURL", "A", "Address2Line"])
def test_pascal_case_is_idempotent(text):
    assert to_pascal_case(to_pascal_case(text)) == to_pascal_case(text)
    assert to_pascal_case(text) == text


@pytest.mark.parametrize("text", ["userId", "x2fa", "uRL", "displayName"])
def test_camel_case_is_idempotent(text):
    assert to_camel_case(text) == text


@pytest.mark.parametrize("text", ["user_entity", "x3d_model", "a_b_c"])
def test_snake_case_is_idempotent(text):
    assert to_snake_case(text) == text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("users", "user"),
        ("categories", "categorie"),
        ("s", "s"),
        ("data", "data"),
        ("", ""),
    ],
)
def test_singularize(text, expected):
    assert singularize(text) == expected


def test_escape_dart_string():
    assert escape_dart_string("it's") == "it\\'s"
    assert escape_dart_string("a\\b") == "a\\\\b"
    assert escape_dart_string("$id") == "\\$id"
    assert escape_dart_string("a\nb") == "a\\nb"
    assert escape_dart_string("plain") == "plain"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("user", "user_entity"),
        ("user_entity", "user_entity"),
        ("User_Entity", "User_Entity"),
        ("UserEntity", "UserEntity_entity"),
        ("", ""),
    ],
)
def test_ensure_entity_suffix(text, expected):
    assert ensure_entity_suffix(text) == expected
