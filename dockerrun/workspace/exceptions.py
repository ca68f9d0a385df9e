"""Исключения конфигурации рабочего пространства."""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class WorkspaceConfigError(Exception):
    """Файл рабочего пространства не читается или имеет неверный формат."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        self.context = {"path": str(path), "reason": reason}
        super().__init__(f"Invalid workspace config '{path}': {reason}")
        LOGGER.error("%s | context=%s", self, self.context)
