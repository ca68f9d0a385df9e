"""Регистрация команд и сборка операций из зависимостей."""

from __future__ import annotations

import logging
from typing import Dict, List

from dockerrun.containers.classifier import ContainerClassifier
from dockerrun.docker_api.runtime import ContainerRuntime
from dockerrun.operations import (
    AddOperation,
    BatchExecutor,
    ContainerOperation,
    OperationResult,
    RemoveOperation,
    StartOperation,
    StopNonRelatedOperation,
    StopOperation,
)
from dockerrun.ui.surface import InteractionSurface
from dockerrun.workspace.config import WorkspaceConfigStore

LOGGER = logging.getLogger(__name__)


class CommandRegistry:
    """Сопоставляет идентификаторы команд с операциями."""

    def __init__(self) -> None:
        self._operations: Dict[str, ContainerOperation] = {}

    def register(self, operation: ContainerOperation) -> None:
        if not operation.command_id:
            raise ValueError(f"{type(operation).__name__} has no command id")
        if operation.command_id in self._operations:
            raise ValueError(f"Command '{operation.command_id}' already registered")
        self._operations[operation.command_id] = operation

    def command_ids(self) -> List[str]:
        return list(self._operations)

    def get(self, command_id: str) -> ContainerOperation:
        try:
            return self._operations[command_id]
        except KeyError:
            raise KeyError(f"Command '{command_id}' not found") from None

    def execute(self, command_id: str) -> OperationResult:
        """Выполняет команду; ошибки недоступности runtime пробрасываются вызывающему."""

        operation = self.get(command_id)
        LOGGER.info("Command started: %s", command_id)
        result = operation.run()
        LOGGER.info("Command finished: %s status=%s", command_id, result.status.value)
        return result


def build_registry(
    runtime: ContainerRuntime,
    config_store: WorkspaceConfigStore,
    surface: InteractionSurface,
    *,
    max_workers: int = 4,
) -> CommandRegistry:
    """Собирает все команды поверх общего классификатора и исполнителя."""

    classifier = ContainerClassifier(runtime, config_store)
    executor = BatchExecutor(runtime, surface, max_workers=max_workers)

    registry = CommandRegistry()
    registry.register(AddOperation(classifier, config_store, surface))
    registry.register(RemoveOperation(classifier, config_store, surface))
    registry.register(StartOperation(classifier, executor, surface))
    registry.register(StopOperation(classifier, executor, surface))
    registry.register(StopNonRelatedOperation(classifier, executor, surface))
    return registry
