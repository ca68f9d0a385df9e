"""Валидаторы значений настроек.

Каждый валидатор возвращает пару (успех, описание ошибки) и не бросает
исключений: решение об ошибке принимает группа настроек.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, Tuple
from urllib.parse import urlsplit

DOCKER_URL_SCHEMES = ("unix", "npipe", "tcp", "http", "https", "ssh")
# схемы, для которых обязателен host:port
NETWORK_SCHEMES = ("tcp", "http", "https")
FILE_NAME_PATTERN = re.compile(r"[A-Za-z0-9._-]+")


class Validator(ABC):
    """Абстрактный валидатор значения."""

    @abstractmethod
    def validate(self, value: Any) -> Tuple[bool, str]:
        """Возвращает (True, "") при успехе либо (False, описание ошибки)."""


class FlagValidator(Validator):
    """Строго bool: 0/1 и строки не принимаются."""

    def validate(self, value: Any) -> Tuple[bool, str]:
        if isinstance(value, bool):
            return True, ""
        return False, f"Expected true or false, got {type(value).__name__}"


class IntRangeValidator(Validator):
    """Целое число (не bool) в пределах [min_value, max_value]."""

    def __init__(self, min_value: int, max_value: int) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> Tuple[bool, str]:
        if isinstance(value, bool) or not isinstance(value, int):
            return False, f"Expected an integer, got {type(value).__name__}"
        if not self.min_value <= value <= self.max_value:
            return False, f"Value {value} is out of range [{self.min_value}, {self.max_value}]"
        return True, ""


class LogLevelValidator(Validator):
    """Имя уровня логирования без учёта регистра."""

    def __init__(self, levels: Iterable[str]) -> None:
        self.levels = tuple(level.upper() for level in levels)

    def validate(self, value: Any) -> Tuple[bool, str]:
        if isinstance(value, str) and value.upper() in self.levels:
            return True, ""
        return False, f"Value {value!r} not in allowed values: {list(self.levels)}"


class DockerUrlValidator(Validator):
    """Адрес Docker daemon.

    Пустая строка означает настройки окружения (DOCKER_HOST). Допускаются
    абсолютный путь к сокету и URL с известной схемой; для сетевых схем
    нужен host:port.
    """

    def validate(self, value: Any) -> Tuple[bool, str]:
        if not isinstance(value, str):
            return False, f"Expected a string, got {type(value).__name__}"
        if value == "" or value.startswith("/"):
            return True, ""

        parts = urlsplit(value)
        if parts.scheme not in DOCKER_URL_SCHEMES:
            return False, f"Unsupported docker url '{value}'"
        if parts.scheme in ("unix", "npipe"):
            if not parts.path:
                return False, f"Socket path is missing in '{value}'"
            return True, ""
        if not parts.hostname:
            return False, f"Host is missing in '{value}'"
        if parts.scheme in NETWORK_SCHEMES:
            try:
                port = parts.port
            except ValueError:
                return False, f"Invalid port in '{value}'"
            if port is None:
                return False, f"Port is missing in '{value}'"
        return True, ""


class FileNameValidator(Validator):
    """Имя файла внутри каталога рабочего пространства, без путей."""

    def validate(self, value: Any) -> Tuple[bool, str]:
        if not isinstance(value, str):
            return False, f"Expected a string, got {type(value).__name__}"
        if value in (".", "..") or not FILE_NAME_PATTERN.fullmatch(value):
            return False, f"'{value}' is not a plain file name"
        return True, ""
