"""Группы настроек с валидацией значений."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from dockerrun.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from dockerrun.settings.validators import (
    DockerUrlValidator,
    FileNameValidator,
    FlagValidator,
    IntRangeValidator,
    LogLevelValidator,
    Validator,
)


class SettingsGroup(ABC):
    """Абстрактная база для конкретных групп настроек."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Задаёт значения по умолчанию для группы."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает валидаторы к ключам группы."""

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._defaults.keys())

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values.get(key, default)

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        """Применяет валидатор ключа; ключи без валидатора принимаются как есть."""

        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение, выбрасывая ошибку при невалидных данных."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
            )
        self._values[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Заполняет значениями из словаря, неизвестные ключи пропускаются."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)


class LoggingSettings(SettingsGroup):
    """Настройки логирования приложения."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "enabled": True,
            "level": "INFO",
            "max_file_size_mb": 10,
            "max_archived_files": 5,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "enabled": FlagValidator(),
            "level": LogLevelValidator(["DEBUG", "INFO", "WARNING", "ERROR"]),
            "max_file_size_mb": IntRangeValidator(1, 1000),
            "max_archived_files": IntRangeValidator(1, 50),
        }


class DockerSettings(SettingsGroup):
    """Параметры подключения к Docker daemon и пакетных операций."""

    group_name = "docker"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "base_url": "",  # пусто: берём DOCKER_HOST/окружение
            "connection_timeout_sec": 5,
            "stop_timeout_sec": 10,
            "max_parallel_operations": 4,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "base_url": DockerUrlValidator(),
            "connection_timeout_sec": IntRangeValidator(0, 120),
            "stop_timeout_sec": IntRangeValidator(0, 600),
            "max_parallel_operations": IntRangeValidator(1, 64),
        }


class WorkspaceSettings(SettingsGroup):
    """Настройки файла рабочего пространства."""

    group_name = "workspace"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "config_file_name": ".dockerrc",
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "config_file_name": FileNameValidator(),
        }
