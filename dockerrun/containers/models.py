"""Контейнер в терминах рабочего пространства."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, List

from dockerrun.docker_api.models import ContainerSummary
from dockerrun.utils.helpers import short_id


@dataclass(frozen=True, slots=True, eq=False)
class Container:
    """Снимок контейнера на момент классификации.

    Идентичность определяется только `id`. Классификатор оставляет `label`
    пустым: метку назначает команда, когда показывает список пользователю.
    """

    id: str
    name: str = ""
    label: str = ""
    is_tracked: bool = False
    is_running: bool = False

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Container):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def with_label(self, label: str) -> "Container":
        return replace(self, label=label)

    def labelled(self) -> "Container":
        """Копия с меткой по умолчанию, если метка ещё не назначена."""

        return self if self.label else self.with_label(display_label(self))

    @classmethod
    def from_summary(cls, summary: ContainerSummary, *, is_tracked: bool) -> "Container":
        return cls(
            id=summary.identifier,
            name=summary.name,
            is_tracked=is_tracked,
            is_running=summary.is_running,
        )


ContainerList = List[Container]


def display_label(container: Container) -> str:
    """Имя для показа: имя контейнера или короткий идентификатор."""

    return container.name or short_id(container.id)
