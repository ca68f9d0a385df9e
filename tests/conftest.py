"""Общие фейки для тестов: runtime в памяти и записывающая поверхность."""

from __future__ import annotations

import threading
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple

import pytest

from dockerrun.containers.classifier import ContainerClassifier
from dockerrun.containers.models import Container
from dockerrun.docker_api.exceptions import RuntimeUnavailableError, StartCallError, StopCallError
from dockerrun.docker_api.models import ContainerSummary
from dockerrun.operations.batch import BatchExecutor
from dockerrun.workspace.config import WorkspaceConfigStore


class FakeRuntime:
    """Runtime в памяти: порядок перечисления = порядок добавления."""

    def __init__(self) -> None:
        self._state: Dict[str, Tuple[str, bool]] = {}
        self._lock = threading.Lock()
        self.stop_calls: List[str] = []
        self.start_calls: List[str] = []
        self.completed: List[str] = []
        self.list_calls = 0
        self.failing: Set[str] = set()
        self.delays: Dict[str, float] = {}
        self.unavailable = False

    def add(self, identifier: str, name: str = "", running: bool = False) -> None:
        self._state[identifier] = (name or identifier, running)

    def is_running(self, identifier: str) -> bool:
        return self._state[identifier][1]

    def list_containers(self) -> List[ContainerSummary]:
        if self.unavailable:
            raise RuntimeUnavailableError("daemon is down")
        self.list_calls += 1
        return [
            ContainerSummary(identifier, name, "running" if running else "exited")
            for identifier, (name, running) in self._state.items()
        ]

    def stop_container(self, container_id: str) -> None:
        self._call(container_id, self.stop_calls, running=False, error=StopCallError)

    def start_container(self, container_id: str) -> None:
        self._call(container_id, self.start_calls, running=True, error=StartCallError)

    def _call(self, container_id: str, calls: List[str], *, running: bool, error: type) -> None:
        with self._lock:
            calls.append(container_id)
        time.sleep(self.delays.get(container_id, 0))
        if self.unavailable:
            raise RuntimeUnavailableError("daemon is down")
        if container_id in self.failing:
            raise error(container_id, "simulated failure")
        with self._lock:
            name, _ = self._state[container_id]
            self._state[container_id] = (name, running)
            self.completed.append(container_id)


class RecordingSurface:
    """Запоминает все обращения операций к интерфейсу."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, object]] = []
        self.offered: List[List[Container]] = []
        self.placeholders: List[str] = []
        self.choose: Callable[[List[Container]], List[Container]] = lambda items: list(items)

    @property
    def warnings(self) -> List[str]:
        return [str(payload) for kind, payload in self.events if kind == "warning"]

    @property
    def infos(self) -> List[str]:
        return [str(payload) for kind, payload in self.events if kind == "info"]

    @property
    def errors(self) -> List[str]:
        return [str(payload) for kind, payload in self.events if kind == "error"]

    @property
    def progress_titles(self) -> List[str]:
        return [str(payload) for kind, payload in self.events if kind == "progress"]

    def kinds(self) -> List[str]:
        return [kind for kind, _ in self.events]

    def present_selection(self, items: Sequence[Container], *, placeholder: str) -> List[Container]:
        offered = list(items)
        self.offered.append(offered)
        self.placeholders.append(placeholder)
        self.events.append(("select", offered))
        return self.choose(offered)

    def show_warning(self, text: str) -> None:
        self.events.append(("warning", text))

    def show_info(self, text: str) -> None:
        self.events.append(("info", text))

    def show_error(self, text: str) -> None:
        self.events.append(("error", text))

    def with_progress(self, title: str, body: Callable[[], object]) -> object:
        self.events.append(("progress", title))
        return body()


@pytest.fixture
def runtime() -> FakeRuntime:
    return FakeRuntime()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def store(tmp_path: Path) -> WorkspaceConfigStore:
    return WorkspaceConfigStore(tmp_path / "workspace")


@pytest.fixture
def classifier(runtime: FakeRuntime, store: WorkspaceConfigStore) -> ContainerClassifier:
    return ContainerClassifier(runtime, store)


@pytest.fixture
def executor(runtime: FakeRuntime, surface: RecordingSurface) -> BatchExecutor:
    return BatchExecutor(runtime, surface, max_workers=4)


def pick(*identifiers: str, labels: Optional[Dict[str, str]] = None) -> Callable[[List[Container]], List[Container]]:
    """Стратегия выбора: вернуть контейнеры с указанными id, опционально с новыми метками."""

    def choose(items: List[Container]) -> List[Container]:
        by_id = {item.id: item for item in items}
        chosen = [by_id[identifier] for identifier in identifiers if identifier in by_id]
        if labels:
            chosen = [item.with_label(labels.get(item.id, item.label)) for item in chosen]
        return chosen

    return choose
