import pytest

from json_to_freezed.pipeline.config import CodeGeneratorConfig, DefaultValues, FieldOverride


class TestCodeGeneratorConfig:
    def test_defaults(self):
        config = CodeGeneratorConfig()
        assert config.make_nullable is False
        assert config.use_default_values is False
        assert config.defaults == DefaultValues()
        assert config.max_depth == 100

    def test_from_dict(self):
        config = CodeGeneratorConfig.from_dict(
            {
                "make_nullable": True,
                "use_default_values": True,
                "defaults": {"int_value": 5, "bool_value": "true", "unknown": "x"},
                "max_depth": 10,
                "not_an_option": 1,
            }
        )
        assert config.make_nullable is True
        assert config.use_default_values is True
        assert config.defaults.int_value == "5"
        assert config.defaults.bool_value == "true"
        assert config.defaults.string_value == ""
        assert config.max_depth == 10
        assert not hasattr(config, "not_an_option")

    @pytest.mark.parametrize("defaults", ["oops", ["0"], 5])
    def test_from_dict_rejects_non_mapping_defaults(self, defaults):
        with pytest.raises(ValueError, match="'defaults' must be a mapping"):
            CodeGeneratorConfig.from_dict({"defaults": defaults})

    def test_round_trip(self):
        config = CodeGeneratorConfig(make_nullable=True, defaults=DefaultValues(list_value="const []"))
        assert CodeGeneratorConfig.from_dict(config.to_dict()) == config


class TestFieldOverride:
    def test_snake_case_keys(self):
        override = FieldOverride.from_dict({"json_key": "a", "target_name": "b", "nullable": True, "default_value": "1"})
        assert override == FieldOverride(json_key="a", target_name="b", nullable=True, default_value="1")

    def test_editor_keys(self):
        override = FieldOverride.from_dict({"jsonKey": "a", "dartName": "b", "type": "int", "nullable": False, "defaultValue": ""})
        assert override == FieldOverride(json_key="a", target_name="b", nullable=False, default_value="")

    def test_nullable_defaults_to_global_flag(self):
        assert FieldOverride.from_dict({"json_key": "a"}).nullable is None

    def test_missing_key(self):
        with pytest.raises(ValueError):
            FieldOverride.from_dict({"target_name": "b"})
