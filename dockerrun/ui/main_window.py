"""Главное окно Docker Run: кнопки команд и лента уведомлений."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Tuple

from PySide6 import QtCore, QtGui, QtWidgets

from dockerrun import __version__
from dockerrun.commands import CommandRegistry
from dockerrun.docker_api.exceptions import RuntimeUnavailableError
from dockerrun.ui.qt_surface import APP_TITLE, QtInteractionSurface
from dockerrun.workspace.exceptions import WorkspaceConfigError

# (идентификатор команды, подпись кнопки, горячая клавиша)
COMMAND_BUTTONS: Tuple[Tuple[str, str, str], ...] = (
    ("docker-run.add", "Add", "Ctrl+Alt+A"),
    ("docker-run.remove", "Remove", "Ctrl+Alt+R"),
    ("docker-run.start", "Start", "Ctrl+Alt+S"),
    ("docker-run.stop", "Stop", "Ctrl+Alt+X"),
    ("docker-run.stop:non-related", "Stop Non Related", "Ctrl+Alt+N"),
)


class MainWindow(QtWidgets.QMainWindow):
    """Окно рабочего пространства."""

    def __init__(
        self,
        *,
        registry: CommandRegistry,
        surface: QtInteractionSurface,
        workspace_dir: Path,
    ) -> None:
        super().__init__()
        self._logger = logging.getLogger(__name__)
        self._registry = registry
        self._surface = surface
        self._workspace_dir = workspace_dir
        self._buttons: Dict[str, QtWidgets.QPushButton] = {}
        self._notifications = QtWidgets.QListWidget()

        self._surface.set_parent(self)
        self._surface.set_notifier(self.add_notification)

        self.setWindowTitle(f"{APP_TITLE} {__version__} - {workspace_dir.name}")
        self.resize(640, 420)
        self._build_ui()

    def _build_ui(self) -> None:
        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)

        buttons_row = QtWidgets.QHBoxLayout()
        available = set(self._registry.command_ids())
        for command_id, caption, hotkey in COMMAND_BUTTONS:
            if command_id not in available:
                continue
            button = QtWidgets.QPushButton(caption)
            button.setToolTip(f"{command_id} ({hotkey})")
            button.clicked.connect(lambda _=False, cid=command_id: self.run_command(cid))
            QtGui.QShortcut(QtGui.QKeySequence(hotkey), self, activated=button.click)
            buttons_row.addWidget(button)
            self._buttons[command_id] = button
        layout.addLayout(buttons_row)

        layout.addWidget(QtWidgets.QLabel("Notifications"))
        layout.addWidget(self._notifications)

        clear_button = QtWidgets.QPushButton("Clear")
        clear_button.clicked.connect(self._notifications.clear)
        layout.addWidget(clear_button, alignment=QtCore.Qt.AlignmentFlag.AlignRight)

        self.setCentralWidget(central)
        self.statusBar().showMessage(str(self._workspace_dir))

    def add_notification(self, level: str, text: str) -> None:
        """Добавляет строку в ленту уведомлений."""

        stamp = datetime.now().strftime("%H:%M:%S")
        item = QtWidgets.QListWidgetItem(f"[{stamp}] {text}")
        if level == "error":
            item.setForeground(QtGui.QBrush(QtGui.QColor("#c01547")))
        self._notifications.addItem(item)
        self._notifications.scrollToBottom()

    def run_command(self, command_id: str) -> None:
        self._set_buttons_enabled(False)
        try:
            result = self._registry.execute(command_id)
        except RuntimeUnavailableError as exc:
            self._logger.error("Command %s aborted: %s", command_id, exc)
            QtWidgets.QMessageBox.critical(self, APP_TITLE, str(exc))
            self.statusBar().showMessage("Docker is not available")
            return
        except WorkspaceConfigError as exc:
            QtWidgets.QMessageBox.critical(self, APP_TITLE, str(exc))
            return
        finally:
            self._set_buttons_enabled(True)
        self.statusBar().showMessage(f"{command_id}: {result.status.value}")

    def _set_buttons_enabled(self, enabled: bool) -> None:
        for button in self._buttons.values():
            button.setEnabled(enabled)
        QtWidgets.QApplication.processEvents()
