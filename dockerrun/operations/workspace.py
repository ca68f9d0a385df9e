"""Команды «Add» и «Remove»: изменение состава рабочего пространства."""

from __future__ import annotations

from dockerrun.containers.classifier import ContainerClassifier
from dockerrun.operations import messages
from dockerrun.operations.base import ContainerOperation, OperationResult, OperationStatus
from dockerrun.ui.surface import InteractionSurface
from dockerrun.workspace.config import WorkspaceConfigStore


class AddOperation(ContainerOperation):
    """Добавляет выбранные посторонние контейнеры в .dockerrc."""

    command_id = "docker-run.add"

    def __init__(
        self,
        classifier: ContainerClassifier,
        config_store: WorkspaceConfigStore,
        surface: InteractionSurface,
    ) -> None:
        super().__init__(surface)
        self._classifier = classifier
        self._config_store = config_store

    def run(self) -> OperationResult:
        candidates = self._classifier.global_containers()
        if not candidates:
            return self._warn(messages.NOTHING_TO_ADD, OperationStatus.NO_CONTAINERS)

        selected = self._select(candidates, messages.PICK_TO_ADD)
        if not selected:
            return self._warn(messages.SELECT_TO_ADD, OperationStatus.EMPTY_SELECTION)

        self._config_store.add_ids(container.id for container in selected)
        for container in selected:
            self._surface.show_info(messages.ADDED.format(label=container.label))
        self._logger.info("Added %s containers to workspace", len(selected))
        return OperationResult(status=OperationStatus.COMPLETED, succeeded=selected)


class RemoveOperation(ContainerOperation):
    """Убирает выбранные контейнеры из .dockerrc, сами контейнеры не трогает."""

    command_id = "docker-run.remove"

    def __init__(
        self,
        classifier: ContainerClassifier,
        config_store: WorkspaceConfigStore,
        surface: InteractionSurface,
    ) -> None:
        super().__init__(surface)
        self._classifier = classifier
        self._config_store = config_store

    def run(self) -> OperationResult:
        candidates = self._classifier.workspace_containers()
        if not candidates:
            return self._warn(messages.ADD_AT_LEAST_ONE, OperationStatus.NO_CONTAINERS)

        selected = self._select(candidates, messages.PICK_TO_REMOVE)
        if not selected:
            return self._warn(messages.SELECT_TO_REMOVE, OperationStatus.EMPTY_SELECTION)

        self._config_store.remove_ids(container.id for container in selected)
        for container in selected:
            self._surface.show_info(messages.REMOVED.format(label=container.label))
        self._logger.info("Removed %s containers from workspace", len(selected))
        return OperationResult(status=OperationStatus.COMPLETED, succeeded=selected)
