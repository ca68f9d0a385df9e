"""Команда «Stop Non Related»: остановка всех посторонних запущенных контейнеров."""

from __future__ import annotations

from dockerrun.containers.classifier import ContainerClassifier
from dockerrun.operations import messages
from dockerrun.operations.base import ContainerOperation, OperationResult, OperationStatus
from dockerrun.operations.batch import BatchExecutor, describe
from dockerrun.ui.surface import InteractionSurface


class StopNonRelatedOperation(ContainerOperation):
    """Останавливает без выбора всё, что запущено и не входит в рабочее пространство.

    Индикатор прогресса открывается ровно один раз, даже если останавливать нечего.
    """

    command_id = "docker-run.stop:non-related"

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
        return self._surface.with_progress(messages.PROGRESS_STOPPING_NON_RELATED, self._stop)

    def _stop(self) -> OperationResult:
        containers = self._present(self._classifier.global_containers(running_only=True))
        if not containers:
            return self._warn(messages.NO_NON_RELATED, OperationStatus.NO_CONTAINERS)

        self._logger.info("Stopping non related containers: %s", describe(containers))
        report = self._executor.stop_all(containers, message_template=messages.STOPPED_NON_RELATED)
        return OperationResult.from_report(report)
