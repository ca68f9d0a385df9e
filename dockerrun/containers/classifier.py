"""Разбиение контейнеров runtime на отслеживаемые/посторонние и запущенные/остановленные."""

from __future__ import annotations

import logging
from typing import Set

from dockerrun.containers.models import Container, ContainerList
from dockerrun.docker_api.runtime import ContainerRuntime
from dockerrun.workspace.config import WorkspaceConfigStore


class ContainerClassifier:
    """Только читает состояние: runtime и конфигурация опрашиваются при каждом вызове."""

    def __init__(self, runtime: ContainerRuntime, config_store: WorkspaceConfigStore) -> None:
        self._runtime = runtime
        self._config_store = config_store
        self._logger = logging.getLogger(__name__)

    def classify(self, tracked_only: bool, running_only: bool) -> ContainerList:
        """Возвращает контейнеры рабочего пространства (`tracked_only=True`) или
        посторонние (`False`), при `running_only` только запущенные.

        Порядок совпадает с порядком перечисления runtime. `RuntimeUnavailableError`
        не перехватывается.
        """

        tracked_ids: Set[str] = set(self._config_store.read_tracked_ids())
        summaries = self._runtime.list_containers()

        result: ContainerList = []
        seen: Set[str] = set()
        for summary in summaries:
            if summary.identifier in seen:
                continue
            seen.add(summary.identifier)
            is_tracked = summary.identifier in tracked_ids
            if is_tracked != tracked_only:
                continue
            if running_only and not summary.is_running:
                continue
            result.append(Container.from_summary(summary, is_tracked=is_tracked))

        self._logger.debug(
            "Classified containers: tracked_only=%s running_only=%s total=%s matched=%s",
            tracked_only,
            running_only,
            len(summaries),
            len(result),
        )
        return result

    def workspace_containers(self, running_only: bool = False) -> ContainerList:
        return self.classify(True, running_only)

    def global_containers(self, running_only: bool = False) -> ContainerList:
        return self.classify(False, running_only)
