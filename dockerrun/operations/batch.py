"""Пакетное выполнение действий над контейнерами с упорядоченными уведомлениями.

Вызовы runtime выполняются параллельно в пуле потоков, но уведомления
выдаются только после завершения всего пакета и строго в порядке входного
списка. Ошибка одного контейнера не влияет на остальные.

Потеря связи с daemon фатальна для всего пакета: остальные итоги всё равно
выдаются по порядку, после чего `RuntimeUnavailableError` пробрасывается.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from dockerrun.containers.models import Container, ContainerList
from dockerrun.docker_api.exceptions import DockerAPIError, RuntimeUnavailableError
from dockerrun.docker_api.runtime import ContainerRuntime
from dockerrun.operations import messages
from dockerrun.ui.surface import InteractionSurface

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4


@dataclass(slots=True)
class BatchReport:
    """Итог пакета в порядке входного списка."""

    succeeded: ContainerList = field(default_factory=list)
    failed: ContainerList = field(default_factory=list)


class BatchExecutor:
    """Выполняет start/stop для списка контейнеров."""

    def __init__(
        self,
        runtime: ContainerRuntime,
        surface: InteractionSurface,
        *,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self._runtime = runtime
        self._surface = surface
        self._max_workers = max(1, max_workers)

    def stop_all(
        self,
        containers: ContainerList,
        *,
        message_template: str = messages.STOPPED,
    ) -> BatchReport:
        return self._run_batch(
            containers,
            self._runtime.stop_container,
            action_name="stop",
            success_template=message_template,
            failure_template=messages.STOP_FAILED,
        )

    def start_all(
        self,
        containers: ContainerList,
        *,
        message_template: str = messages.STARTED,
    ) -> BatchReport:
        return self._run_batch(
            containers,
            self._runtime.start_container,
            action_name="start",
            success_template=message_template,
            failure_template=messages.START_FAILED,
        )

    def _run_batch(
        self,
        containers: ContainerList,
        action: Callable[[str], None],
        *,
        action_name: str,
        success_template: str,
        failure_template: str,
    ) -> BatchReport:
        report = BatchReport()
        if not containers:
            return report

        workers = min(self._max_workers, len(containers))
        LOGGER.info("Batch %s started: containers=%s workers=%s", action_name, len(containers), workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix=f"batch-{action_name}") as pool:
            futures: List[Future[None]] = [pool.submit(action, item.id) for item in containers]
        # выход из with дожидается всех вызовов

        unavailable: Optional[RuntimeUnavailableError] = None
        unexpected: Optional[BaseException] = None
        for container, future in zip(containers, futures):
            error = future.exception()
            if error is None:
                report.succeeded.append(container)
                LOGGER.info("Container %s (%s) %s: ok", container.id, container.label, action_name)
                self._surface.show_info(success_template.format(label=container.label))
            elif isinstance(error, RuntimeUnavailableError):
                report.failed.append(container)
                LOGGER.error(
                    "Container %s (%s) %s aborted: %s",
                    container.id,
                    container.label,
                    action_name,
                    error,
                )
                unavailable = unavailable or error
            elif isinstance(error, DockerAPIError):
                report.failed.append(container)
                LOGGER.error(
                    "Container %s (%s) %s failed: %s",
                    container.id,
                    container.label,
                    action_name,
                    error,
                )
                self._surface.show_error(
                    failure_template.format(label=container.label, reason=_reason(error))
                )
            else:
                report.failed.append(container)
                LOGGER.error(
                    "Container %s (%s) %s raised unexpected error",
                    container.id,
                    container.label,
                    action_name,
                    exc_info=error,
                )
                unexpected = unexpected or error

        LOGGER.info(
            "Batch %s finished: succeeded=%s failed=%s",
            action_name,
            len(report.succeeded),
            len(report.failed),
        )
        if unavailable is not None:
            raise unavailable
        if unexpected is not None:
            raise unexpected
        return report


def _reason(error: DockerAPIError) -> str:
    return str(getattr(error, "reason", "") or error)


def describe(containers: List[Container]) -> str:
    """Строка для логов: метки через запятую."""

    return ", ".join(item.label for item in containers)
