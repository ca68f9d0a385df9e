"""Runtime-клиент контейнеров поверх docker SDK.

`DockerRuntime` хранит одно долгоживущее соединение с daemon и передаётся в
классификатор и операции явно, через конструктор. Тесты подставляют вместо
него любой объект, удовлетворяющий протоколу `ContainerRuntime`.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, TimeoutError
from typing import List, Optional, Protocol

from dockerrun.docker_api import containers
from dockerrun.docker_api.client import DockerClientWrapper
from dockerrun.docker_api.exceptions import RuntimeUnavailableError
from dockerrun.docker_api.models import ContainerSummary
from dockerrun.settings.registry import SettingsRegistry

LOGGER = logging.getLogger(__name__)


class ContainerRuntime(Protocol):
    """Минимальный набор возможностей runtime, нужный операциям."""

    def list_containers(self) -> List[ContainerSummary]:  # pragma: no cover - протокол
        """Все контейнеры в порядке перечисления."""

    def start_container(self, container_id: str) -> None:  # pragma: no cover - протокол
        """Запускает контейнер."""

    def stop_container(self, container_id: str) -> None:  # pragma: no cover - протокол
        """Останавливает контейнер."""


class DockerRuntime:
    """Реализация `ContainerRuntime` через `DockerClientWrapper`."""

    def __init__(
        self,
        settings: SettingsRegistry,
        client: Optional[DockerClientWrapper] = None,
    ) -> None:
        self._settings = settings
        self._client = client
        self._lock = threading.Lock()

    # ------------------------------------------------------------------ helpers
    def _get_client(self) -> DockerClientWrapper:
        """Создаёт клиент при первом обращении и переиспользует его дальше."""

        with self._lock:
            if self._client is None:
                self._client = self._create_client()
            return self._client

    def _create_client(self) -> DockerClientWrapper:
        base_url = str(self._settings.get_value("docker", "base_url", default=""))
        timeout = int(self._settings.get_value("docker", "connection_timeout_sec", default=5))
        if timeout <= 0:
            return DockerClientWrapper(base_url)

        # зависший вызов остаётся в фоновом потоке, ждать его не нужно
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="docker-connect")
        future = executor.submit(DockerClientWrapper, base_url)
        try:
            return future.result(timeout=timeout)
        except TimeoutError as exc:
            LOGGER.error(
                "Docker client creation timeout via %s after %s seconds",
                base_url or "environment",
                timeout,
            )
            raise RuntimeUnavailableError(
                f"connection timeout after {timeout} seconds", base_url=base_url
            ) from exc
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    def _stop_timeout(self) -> int:
        return int(self._settings.get_value("docker", "stop_timeout_sec", default=10))

    # ---------------------------------------------------------------- operations
    def list_containers(self) -> List[ContainerSummary]:
        return containers.list_containers(self._get_client())

    def start_container(self, container_id: str) -> None:
        LOGGER.debug("Starting container %s", container_id)
        containers.start_container(self._get_client(), container_id)

    def stop_container(self, container_id: str) -> None:
        LOGGER.debug("Stopping container %s", container_id)
        containers.stop_container(
            self._get_client(), container_id, timeout=self._stop_timeout()
        )

    def close(self) -> None:
        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None
