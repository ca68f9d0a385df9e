"""Высокоуровневые утилиты для создания и запуска GUI приложения."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from PySide6 import QtWidgets

from dockerrun.commands import build_registry
from dockerrun.docker_api.runtime import ContainerRuntime
from dockerrun.settings.registry import SettingsRegistry
from dockerrun.ui.main_window import MainWindow
from dockerrun.ui.qt_surface import QtInteractionSurface
from dockerrun.workspace.config import WorkspaceConfigStore


class RunnableApp(Protocol):
    """Приложение, которое можно запустить и получить код возврата."""

    def run(self) -> int:  # pragma: no cover - протокол
        """Запускает цикл приложения и возвращает код завершения."""


@dataclass
class GUIApp:
    """Приложение PySide6 с одним окном рабочего пространства."""

    settings: SettingsRegistry
    runtime: ContainerRuntime
    config_store: WorkspaceConfigStore
    workspace_dir: Path

    def __post_init__(self) -> None:
        self._qt_app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
        surface = QtInteractionSurface()
        registry = build_registry(
            self.runtime,
            self.config_store,
            surface,
            max_workers=int(
                self.settings.get_value("docker", "max_parallel_operations", default=4)
            ),
        )
        self._window = MainWindow(
            registry=registry,
            surface=surface,
            workspace_dir=self.workspace_dir,
        )

    def run(self) -> int:
        self._window.show()
        return self._qt_app.exec()


def create_application(
    settings: SettingsRegistry,
    runtime: ContainerRuntime,
    config_store: WorkspaceConfigStore,
    workspace_dir: Path,
) -> RunnableApp:
    """Фабрика GUI приложения."""

    return GUIApp(
        settings=settings,
        runtime=runtime,
        config_store=config_store,
        workspace_dir=workspace_dir,
    )
