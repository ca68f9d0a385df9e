"""Реализация InteractionSurface на PySide6."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, TypeVar

from PySide6 import QtCore, QtWidgets

from dockerrun.containers.models import Container, ContainerList
from dockerrun.ui.dialogs.selection import ContainerSelectionDialog

T = TypeVar("T")

APP_TITLE = "Docker Run"


class QtInteractionSurface:
    """Диалоги выбора, окна предупреждений и индикатор прогресса.

    Информационные сообщения и ошибки отдельных контейнеров уходят в
    `notify(level, text)`, если он задан (лента уведомлений главного окна),
    иначе показываются окнами.
    """

    def __init__(
        self,
        parent: QtWidgets.QWidget | None = None,
        notify: Optional[Callable[[str, str], None]] = None,
    ) -> None:
        self._parent = parent
        self._notify = notify
        self._logger = logging.getLogger(__name__)

    def set_parent(self, parent: QtWidgets.QWidget) -> None:
        self._parent = parent

    def set_notifier(self, notify: Callable[[str, str], None]) -> None:
        self._notify = notify

    def present_selection(self, items: Sequence[Container], *, placeholder: str) -> ContainerList:
        dialog = ContainerSelectionDialog(items, placeholder=placeholder, parent=self._parent)
        if dialog.exec() != QtWidgets.QDialog.DialogCode.Accepted:
            return []
        return dialog.selected_containers()

    def show_warning(self, text: str) -> None:
        QtWidgets.QMessageBox.warning(self._parent, APP_TITLE, text)

    def show_info(self, text: str) -> None:
        if self._notify is not None:
            self._notify("info", text)
            return
        QtWidgets.QMessageBox.information(self._parent, APP_TITLE, text)

    def show_error(self, text: str) -> None:
        if self._notify is not None:
            self._notify("error", text)
            return
        QtWidgets.QMessageBox.critical(self._parent, APP_TITLE, text)

    def with_progress(self, title: str, body: Callable[[], T]) -> T:
        dialog = QtWidgets.QProgressDialog(title, "", 0, 0, self._parent)
        dialog.setWindowTitle(APP_TITLE)
        dialog.setCancelButton(None)
        dialog.setWindowModality(QtCore.Qt.WindowModality.WindowModal)
        dialog.setMinimumDuration(0)
        dialog.show()
        QtWidgets.QApplication.processEvents()
        self._logger.debug("Progress opened: %s", title)
        try:
            return body()
        finally:
            dialog.close()
            dialog.deleteLater()
