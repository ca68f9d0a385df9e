"""Исключения слоя docker_api."""

from __future__ import annotations

from typing import Any, Dict, Optional


class DockerAPIError(Exception):
    """Базовая ошибка взаимодействия с Docker."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)


class RuntimeUnavailableError(DockerAPIError):
    """Docker daemon недоступен: команда не может быть выполнена."""

    def __init__(self, reason: str, *, base_url: str = "") -> None:
        target = base_url or "environment defaults"
        super().__init__(
            f"Docker runtime unavailable ({target}): {reason}",
            context={"base_url": base_url, "reason": reason},
        )
        self.reason = reason


class ContainerActionError(DockerAPIError):
    """Ошибка действия над конкретным контейнером."""

    action = "operate on"

    def __init__(self, container_id: str, reason: str) -> None:
        self.container_id = container_id
        self.reason = reason
        super().__init__(
            f"Cannot {self.action} container {container_id}: {reason}",
            context={"container_id": container_id, "action": self.action, "reason": reason},
        )


class StopCallError(ContainerActionError):
    """Не удалось остановить контейнер."""

    action = "stop"


class StartCallError(ContainerActionError):
    """Не удалось запустить контейнер."""

    action = "start"
