"""Тесты исключений подсистемы настроек."""

from __future__ import annotations

from pathlib import Path

import pytest

from dockerrun.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)


def test_not_found_message_and_logging(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    error = SettingsNotFoundError("docker", "base_url")
    assert str(error) == "Setting 'docker.base_url' not found"
    assert "docker.base_url" in caplog.text


def test_validation_error_contains_reason(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    error = SettingsValidationError("logging.level", "INVALID", "unknown level")
    assert error.key == "logging.level"
    assert error.value == "INVALID"
    assert error.reason == "unknown level"
    assert "unknown level" in str(error)
    assert "INVALID" in caplog.text


def test_io_error_contains_path(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    fake_path = tmp_path / "config.json"
    error = SettingsIOError(fake_path, "permission denied")
    assert str(fake_path) in str(error)
    assert error.context["reason"] == "permission denied"
    assert "permission denied" in caplog.text
