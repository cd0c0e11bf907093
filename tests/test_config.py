from pathlib import Path

import pytest

from kubebrowse.config import Config, ConfigError, ContextInfo, default_config_path


def _sample() -> Config:
    return Config(
        current_context="dev",
        contexts=[
            ContextInfo("dev", "default", "pods"),
            ContextInfo("prod", "kube-system", "services"),
        ],
    )


def test_save_and_load_round_trip(tmp_path: Path):
    path = tmp_path / "config.yaml"
    config = _sample()
    config.save(path)
    assert Config.load(path) == config


def test_dict_round_trip_keeps_theme():
    config = _sample()
    config.theme = {"colors": {"text": "white"}}
    assert Config.from_dict(config.to_dict()) == config


def test_load_missing_file_is_io_error(tmp_path: Path):
    with pytest.raises(ConfigError) as info:
        Config.load(tmp_path / "missing.yaml")
    assert info.value.serialization is False


def test_load_malformed_is_serialization_error(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("contexts: 5\n", encoding="utf-8")
    with pytest.raises(ConfigError) as info:
        Config.load(path)
    assert info.value.serialization is True


def test_load_or_create_creates_missing_file(tmp_path: Path):
    path = tmp_path / "config.yaml"
    config = Config.load_or_create(path)
    assert config == Config()
    assert path.exists()
    assert Config.load(path) == Config()


def test_load_or_create_keeps_malformed_file(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- not a mapping\n", encoding="utf-8")
    assert Config.load_or_create(path) == Config()
    assert path.read_text(encoding="utf-8") == "- not a mapping\n"


def test_load_or_create_reads_existing(tmp_path: Path):
    path = tmp_path / "config.yaml"
    _sample().save(path)
    assert Config.load_or_create(path) == _sample()


def test_save_into_missing_directory_fails(tmp_path: Path):
    with pytest.raises(ConfigError):
        _sample().save(tmp_path / "nope" / "config.yaml")


def test_context_lookups():
    config = _sample()
    assert config.context_index("prod") == 1
    assert config.context_index("other") is None
    assert config.get_kind("dev") == "pods"
    assert config.get_namespace("prod") == "kube-system"
    assert config.get_kind("other") is None
    assert config.get_namespace("other") is None


def test_context_update_partial():
    info = ContextInfo("dev", "default", "pods")
    info.update(None, "kube-system")
    assert (info.kind, info.namespace) == ("pods", "kube-system")
    info.update("services", None)
    assert (info.kind, info.namespace) == ("services", "kube-system")


def test_default_config_path_file_name():
    assert default_config_path().name == "config.yaml"