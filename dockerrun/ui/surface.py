"""Протокол поверхности взаимодействия с пользователем."""

from __future__ import annotations

from typing import Callable, Protocol, Sequence, TypeVar

from dockerrun.containers.models import Container, ContainerList

T = TypeVar("T")


class InteractionSurface(Protocol):
    """То, что операции умеют просить у интерфейса."""

    def present_selection(
        self, items: Sequence[Container], *, placeholder: str
    ) -> ContainerList:  # pragma: no cover - протокол
        """Показывает список (метка + id) и возвращает выбранное подмножество, возможно пустое."""

    def show_warning(self, text: str) -> None:  # pragma: no cover - протокол
        ...

    def show_info(self, text: str) -> None:  # pragma: no cover - протокол
        ...

    def show_error(self, text: str) -> None:  # pragma: no cover - протокол
        ...

    def with_progress(self, title: str, body: Callable[[], T]) -> T:  # pragma: no cover - протокол
        """Выполняет body под индикатором прогресса и возвращает его результат."""
