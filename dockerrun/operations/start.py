"""Команда «Start»: запуск выбранных остановленных контейнеров рабочего пространства."""

from __future__ import annotations

from dockerrun.containers.classifier import ContainerClassifier
from dockerrun.operations import messages
from dockerrun.operations.base import ContainerOperation, OperationResult, OperationStatus
from dockerrun.operations.batch import BatchExecutor, describe
from dockerrun.ui.surface import InteractionSurface


class StartOperation(ContainerOperation):
    command_id = "docker-run.start"

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
        tracked = self._classifier.workspace_containers()
        if not tracked:
            return self._warn(messages.ADD_AT_LEAST_ONE, OperationStatus.NO_CONTAINERS)

        stopped = [container for container in tracked if not container.is_running]
        if not stopped:
            return self._warn(messages.ALL_RUNNING, OperationStatus.NO_CONTAINERS)

        selected = self._select(stopped, messages.PICK_TO_START)
        if not selected:
            return self._warn(messages.SELECT_TO_START, OperationStatus.EMPTY_SELECTION)

        self._logger.info("Starting workspace containers: %s", describe(selected))
        report = self._surface.with_progress(
            messages.PROGRESS_STARTING,
            lambda: self._executor.start_all(selected, message_template=messages.STARTED),
        )
        return OperationResult.from_report(report)
