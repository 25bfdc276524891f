import json

import pytest

from dx_vue_generator.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults():
    config = load_config()
    assert config == GeneratorConfig()
    assert config.vue_version == 3
    assert config.widgets_package == "devextreme"
    assert config.file_extension == ".ts"
    assert config.generate_reexports is False


def test_file_values_override_defaults(tmp_path):
    config_file = write_json(tmp_path / "generator.json", {"vue_version": 2, "components_dir": "out"})
    config = ConfigManager().get_config(config_file=config_file)
    assert config.vue_version == 2
    assert config.components_dir == "out"
    assert config.widgets_package == "devextreme"


def test_explicit_overrides_beat_file(tmp_path):
    config_file = write_json(tmp_path / "generator.json", {"vue_version": 2})
    config = ConfigManager().get_config({"vue_version": 3}, config_file)
    assert config.vue_version == 3


def test_none_overrides_are_ignored():
    config = ConfigManager().get_config({"components_dir": None, "vue_version": 2})
    assert config.components_dir == "src"
    assert config.vue_version == 2


def test_unknown_keys_go_to_custom(tmp_path):
    config_file = write_json(tmp_path / "generator.json", {"banner": "// generated"})
    config = ConfigManager().get_config(config_file=config_file)
    assert config.custom == {"banner": "// generated"}


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        ConfigManager().get_config(config_file=tmp_path / "missing.json")


def test_config_file_must_be_json(tmp_path):
    path = tmp_path / "generator.yaml"
    path.write_text("vue_version: 2", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be JSON"):
        ConfigManager().get_config(config_file=path)


def test_invalid_json_config(tmp_path):
    path = tmp_path / "generator.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        ConfigManager().get_config(config_file=path)


def test_config_must_be_object(tmp_path):
    path = write_json(tmp_path / "generator.json", ["vue_version"])
    with pytest.raises(ConfigError, match="JSON object"):
        ConfigManager().get_config(config_file=path)


def test_save_and_reload(tmp_path):
    manager = ConfigManager()
    config = GeneratorConfig(vue_version=2, custom={"banner": "x"})
    path = tmp_path / "saved.json"

    manager.save_config(config, path)

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["vue_version"] == 2
    assert saved["banner"] == "x"
    assert "custom" not in saved
    assert manager.get_config(config_file=path) == config


def test_validate_config():
    manager = ConfigManager()
    assert manager.validate_config(GeneratorConfig()) == []

    warnings = manager.validate_config(
        GeneratorConfig(vue_version=4, file_extension="ts", widgets_package="")
    )
    assert "Unsupported vue_version: 4" in warnings
    assert any("file_extension" in w for w in warnings)
    assert "Empty setting: widgets_package" in warnings
