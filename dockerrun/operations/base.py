"""Общая основа команд над контейнерами."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from dockerrun.containers.models import ContainerList
from dockerrun.operations.batch import BatchReport
from dockerrun.ui.surface import InteractionSurface


class OperationStatus(str, Enum):
    """Итог выполнения команды."""

    COMPLETED = "completed"
    PARTIAL_FAILURE = "partial_failure"
    NO_CONTAINERS = "no_containers"
    EMPTY_SELECTION = "empty_selection"


@dataclass(slots=True)
class OperationResult:
    """Результат команды и списки обработанных контейнеров."""

    status: OperationStatus
    succeeded: ContainerList = field(default_factory=list)
    failed: ContainerList = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.COMPLETED

    @classmethod
    def from_report(cls, report: BatchReport) -> "OperationResult":
        status = OperationStatus.PARTIAL_FAILURE if report.failed else OperationStatus.COMPLETED
        return cls(status=status, succeeded=list(report.succeeded), failed=list(report.failed))


class ContainerOperation(ABC):
    """Команда: классификация, при необходимости выбор, затем действие."""

    command_id: str = ""

    def __init__(self, surface: InteractionSurface) -> None:
        self._surface = surface
        self._logger = logging.getLogger(self.__class__.__module__)

    @abstractmethod
    def run(self) -> OperationResult:
        """Выполняет команду целиком."""

    def _warn(self, text: str, status: OperationStatus) -> OperationResult:
        self._logger.info("%s finished without action: %s", self.command_id, text)
        self._surface.show_warning(text)
        return OperationResult(status=status)

    def _present(self, candidates: ContainerList) -> ContainerList:
        return [container.labelled() for container in candidates]

    def _select(self, candidates: ContainerList, placeholder: str) -> ContainerList:
        """Спрашивает пользователя; повторные id в ответе отбрасываются.

        Метки, изменённые интерфейсом выбора, сохраняются.
        """

        chosen = self._surface.present_selection(self._present(candidates), placeholder=placeholder)
        return self._present(list(dict.fromkeys(chosen or [])))
