"""Функции для работы с контейнерами через Docker client."""

from __future__ import annotations

from typing import Any, List, Optional

from docker.errors import DockerException, NotFound
from requests.exceptions import ConnectionError as RequestsConnectionError

from dockerrun.docker_api.client import DockerClientWrapper
from dockerrun.docker_api.exceptions import (
    RuntimeUnavailableError,
    StartCallError,
    StopCallError,
)
from dockerrun.docker_api.models import ContainerSummary


def list_containers(client: DockerClientWrapper) -> List[ContainerSummary]:
    """Возвращает все контейнеры (включая остановленные) в порядке перечисления daemon."""

    raw = client.get_raw_client()
    try:
        listed = raw.containers.list(all=True)
    except (DockerException, RequestsConnectionError) as exc:
        raise RuntimeUnavailableError(str(exc), base_url=client.base_url) from exc
    return [
        ContainerSummary(
            identifier=container.id,
            name=_container_name(container),
            status=getattr(container, "status", "") or "",
        )
        for container in listed
    ]


def start_container(client: DockerClientWrapper, container_id: str) -> None:
    """Запускает контейнер; приостановленный контейнер снимается с паузы."""

    raw = client.get_raw_client()
    try:
        container = raw.containers.get(container_id)
    except NotFound as exc:
        raise StartCallError(container_id, "container not found") from exc
    except RequestsConnectionError as exc:
        raise RuntimeUnavailableError(str(exc), base_url=client.base_url) from exc
    except DockerException as exc:
        raise StartCallError(container_id, str(exc)) from exc
    try:
        container.start()
    except RequestsConnectionError as exc:
        raise RuntimeUnavailableError(str(exc), base_url=client.base_url) from exc
    except DockerException as exc:
        if "paused" in str(exc).lower():
            try:
                container.unpause()
                return
            except DockerException as unpause_exc:
                raise StartCallError(container_id, str(unpause_exc)) from unpause_exc
        raise StartCallError(container_id, str(exc)) from exc


def stop_container(
    client: DockerClientWrapper,
    container_id: str,
    *,
    timeout: Optional[int] = None,
) -> None:
    """Останавливает контейнер; повторная остановка не считается ошибкой."""

    raw = client.get_raw_client()
    kwargs = {} if timeout is None else {"timeout": timeout}
    try:
        raw.containers.get(container_id).stop(**kwargs)
    except NotFound as exc:
        raise StopCallError(container_id, "container not found") from exc
    except RequestsConnectionError as exc:
        raise RuntimeUnavailableError(str(exc), base_url=client.base_url) from exc
    except DockerException as exc:
        raise StopCallError(container_id, str(exc)) from exc


def _container_name(container: Any) -> str:
    name = getattr(container, "name", None)
    if not name:
        names = (getattr(container, "attrs", None) or {}).get("Names") or []
        name = names[0] if names else ""
    return str(name).lstrip("/")
