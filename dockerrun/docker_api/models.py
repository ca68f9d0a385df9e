"""Упрощённые структуры данных для описания объектов Docker."""

from __future__ import annotations

from dataclasses import dataclass

RUNNING_STATUS = "running"


@dataclass(frozen=True, slots=True)
class ContainerSummary:
    """Контейнер в том виде, в каком его перечисляет runtime."""

    identifier: str  # полный идентификатор из docker ps --no-trunc
    name: str = ""
    status: str = ""

    @property
    def is_running(self) -> bool:
        return self.status.strip().lower() == RUNNING_STATUS
