"""Различные вспомогательные функции."""

from __future__ import annotations


_SOCKET_SCHEMES = ("unix://", "tcp://", "npipe://", "http://", "https://", "ssh://")


def normalize_socket_path(raw_value: str) -> str:
    """Возвращает адрес Docker daemon с корректным префиксом unix://."""

    value = raw_value.strip()
    if not value:
        return value
    lowered = value.lower()
    if lowered.startswith(_SOCKET_SCHEMES):
        return value
    if value.startswith("/"):
        return f"unix://{value}"
    return value


def short_id(container_id: str, length: int = 12) -> str:
    """Короткая форма идентификатора контейнера, как в `docker ps`."""

    value = container_id.strip()
    if value.startswith("sha256:"):
        value = value[len("sha256:") :]
    return value[:length]
