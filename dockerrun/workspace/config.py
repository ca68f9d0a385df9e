"""Хранилище идентификаторов контейнеров рабочего пространства.

Формат файла `.dockerrc` в корне рабочего пространства::

    {"containers": ["<container id>", ...]}

Отсутствующий файл означает пустое рабочее пространство.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from dockerrun.workspace.exceptions import WorkspaceConfigError

DEFAULT_CONFIG_FILE_NAME = ".dockerrc"
CONTAINERS_KEY = "containers"


class WorkspaceConfigStore:
    """Читает и записывает список отслеживаемых контейнеров."""

    def __init__(
        self,
        workspace_dir: Path,
        config_file_name: str = DEFAULT_CONFIG_FILE_NAME,
    ) -> None:
        self._workspace_dir = workspace_dir
        self._file_path = workspace_dir / config_file_name
        self._logger = logging.getLogger(__name__)

    @property
    def file_path(self) -> Path:
        return self._file_path

    # ------------------------------------------------------------------- reads --
    def read_tracked_ids(self) -> List[str]:
        """Возвращает идентификаторы в порядке файла без повторов.

        Файл перечитывается при каждом вызове.
        """

        if not self._file_path.exists():
            return []
        try:
            content: Any = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise WorkspaceConfigError(self._file_path, str(exc)) from exc

        if not isinstance(content, dict):
            raise WorkspaceConfigError(self._file_path, "top-level JSON value must be an object")
        raw_ids = content.get(CONTAINERS_KEY, [])
        if not isinstance(raw_ids, list) or not all(isinstance(item, str) for item in raw_ids):
            raise WorkspaceConfigError(
                self._file_path, f"'{CONTAINERS_KEY}' must be a list of strings"
            )
        return _unique(raw_ids)

    # ------------------------------------------------------------------ writes --
    def write_tracked_ids(self, container_ids: Iterable[str]) -> None:
        ids = _unique(container_ids)
        payload: Dict[str, Any] = {CONTAINERS_KEY: ids}
        try:
            self._workspace_dir.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as exc:
            raise WorkspaceConfigError(self._file_path, str(exc)) from exc
        self._logger.info("Workspace config saved: path=%s containers=%s", self._file_path, len(ids))

    def add_ids(self, container_ids: Iterable[str]) -> List[str]:
        """Добавляет идентификаторы в конец списка, возвращает только новые."""

        current = self.read_tracked_ids()
        added = [item for item in _unique(container_ids) if item not in current]
        if added:
            self.write_tracked_ids(current + added)
        return added

    def remove_ids(self, container_ids: Iterable[str]) -> List[str]:
        """Удаляет идентификаторы, возвращает действительно удалённые."""

        to_remove = set(container_ids)
        current = self.read_tracked_ids()
        removed = [item for item in current if item in to_remove]
        if removed:
            self.write_tracked_ids([item for item in current if item not in to_remove])
        return removed

    def clear(self) -> None:
        self.write_tracked_ids([])


def _unique(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))
