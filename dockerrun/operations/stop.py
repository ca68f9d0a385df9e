"""Команда «Stop»: остановка выбранных контейнеров рабочего пространства."""

from __future__ import annotations

from dockerrun.containers.classifier import ContainerClassifier
from dockerrun.operations import messages
from dockerrun.operations.base import ContainerOperation, OperationResult, OperationStatus
from dockerrun.operations.batch import BatchExecutor, describe
from dockerrun.ui.surface import InteractionSurface


class StopOperation(ContainerOperation):
    """Предлагает выбрать среди запущенных контейнеров рабочего пространства и останавливает выбранные."""

    command_id = "docker-run.stop"

    def __init__(
        self,
        classifier: ContainerClassifier,
        executor: BatchExecutor,
        surface: InteractionSurface,
    ) -> None:
        super().__init__(surface)
        self._classifier = classifier
        self._executor = executor

    def run(self) -> OperationResult:
        if not self._classifier.workspace_containers():
            return self._warn(messages.ADD_AT_LEAST_ONE, OperationStatus.NO_CONTAINERS)

        running = self._classifier.workspace_containers(running_only=True)
        if not running:
            return self._warn(messages.ALL_STOPPED, OperationStatus.NO_CONTAINERS)

        selected = self._select(running, messages.PICK_TO_STOP)
        if not selected:
            return self._warn(messages.SELECT_TO_STOP, OperationStatus.EMPTY_SELECTION)

        self._logger.info("Stopping workspace containers: %s", describe(selected))
        report = self._surface.with_progress(
            messages.PROGRESS_STOPPING,
            lambda: self._executor.stop_all(selected, message_template=messages.STOPPED),
        )
        return OperationResult.from_report(report)
