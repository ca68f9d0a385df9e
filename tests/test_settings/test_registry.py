"""Тесты SettingsRegistry."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from dockerrun.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)
from dockerrun.settings.registry import SettingsRegistry


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "config.json"


@pytest.fixture
def registry(config_path: Path) -> SettingsRegistry:
    SettingsRegistry._instance = None  # type: ignore[attr-defined]
    registry = SettingsRegistry(config_path)
    registry.reset_to_defaults()
    yield registry
    SettingsRegistry._instance = None  # type: ignore[attr-defined]


def test_singleton_instance(registry: SettingsRegistry) -> None:
    assert SettingsRegistry() is registry


def test_get_and_set_value(registry: SettingsRegistry) -> None:
    registry.set_value("docker", "max_parallel_operations", 8)
    assert registry.get_value("docker", "max_parallel_operations") == 8


def test_get_value_with_default(registry: SettingsRegistry) -> None:
    assert registry.get_value("docker", "unknown", default="fallback") == "fallback"


def test_set_value_invalid_raises(registry: SettingsRegistry) -> None:
    with pytest.raises(SettingsValidationError):
        registry.set_value("docker", "base_url", "docker.sock")


def test_unknown_group_raises(registry: SettingsRegistry) -> None:
    with pytest.raises(SettingsNotFoundError):
        registry.get_value("unknown", "key")


def test_save_and_load_persists_data(config_path: Path, registry: SettingsRegistry) -> None:
    registry.set_value("workspace", "config_file_name", ".workspace.json")
    registry.save_to_disk()

    SettingsRegistry._instance = None  # type: ignore[attr-defined]
    loaded = SettingsRegistry(config_path)
    loaded.load_from_disk()
    assert loaded.get_value("workspace", "config_file_name") == ".workspace.json"


def test_load_creates_defaults_if_missing(tmp_path: Path) -> None:
    SettingsRegistry._instance = None  # type: ignore[attr-defined]
    config_path = tmp_path / "missing.json"
    registry = SettingsRegistry(config_path)
    registry.load_from_disk()
    content = json.loads(config_path.read_text(encoding="utf-8"))
    assert content["version"] == "1.0.0"
    assert content["docker"]["stop_timeout_sec"] == 10
    SettingsRegistry._instance = None  # type: ignore[attr-defined]


def test_load_merges_partial_file(config_path: Path, registry: SettingsRegistry) -> None:
    config_path.write_text(json.dumps({"logging": {"level": "DEBUG"}}), encoding="utf-8")
    registry.load_from_disk()
    assert registry.get_value("logging", "level") == "DEBUG"
    assert registry.get_value("logging", "max_archived_files") == 5


def test_load_invalid_json_raises(config_path: Path, registry: SettingsRegistry) -> None:
    config_path.write_text("not json", encoding="utf-8")
    with pytest.raises(SettingsIOError):
        registry.load_from_disk()


def test_load_invalid_value_raises(config_path: Path, registry: SettingsRegistry) -> None:
    config_path.write_text(
        json.dumps({"docker": {"max_parallel_operations": 0}}), encoding="utf-8"
    )
    with pytest.raises(SettingsValidationError):
        registry.load_from_disk()
