"""Централизованное описание путей приложения."""

from __future__ import annotations

import os
from pathlib import Path

# CONFIG_DIR: базовая директория, где сохраняются настройки и логи
CONFIG_DIR = Path.home() / ".dockerrun"


def resolve_home_dir() -> Path:
    """Возвращает рабочую директорию приложения с учётом DOCKERRUN_HOME."""

    override = os.environ.get("DOCKERRUN_HOME")
    if override:
        return Path(override).expanduser() / ".dockerrun"
    return CONFIG_DIR


def resolve_workspace_dir() -> Path:
    """Каталог открытого рабочего пространства (DOCKERRUN_WORKSPACE или cwd)."""

    return Path(os.environ.get("DOCKERRUN_WORKSPACE") or Path.cwd()).expanduser().resolve()
