"""Диалог множественного выбора контейнеров."""

from __future__ import annotations

from typing import Sequence

from PySide6 import QtCore, QtWidgets

from dockerrun.containers.models import Container, ContainerList

CONTAINER_ID_ROLE = QtCore.Qt.ItemDataRole.UserRole


class ContainerSelectionDialog(QtWidgets.QDialog):
    """Список контейнеров с флажками: метка для показа, id как ключ выбора."""

    def __init__(
        self,
        items: Sequence[Container],
        *,
        placeholder: str,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._items = list(items)
        self.setWindowTitle(placeholder)
        self.resize(420, 360)
        self._list = QtWidgets.QListWidget()
        self._build_ui(placeholder)

    def _build_ui(self, placeholder: str) -> None:
        layout = QtWidgets.QVBoxLayout(self)
        layout.addWidget(QtWidgets.QLabel(placeholder))

        for container in self._items:
            item = QtWidgets.QListWidgetItem(container.label)
            item.setToolTip(container.id)
            item.setData(CONTAINER_ID_ROLE, container.id)
            item.setFlags(item.flags() | QtCore.Qt.ItemFlag.ItemIsUserCheckable)
            item.setCheckState(QtCore.Qt.CheckState.Unchecked)
            self._list.addItem(item)
        self._list.itemActivated.connect(self._toggle_item)
        layout.addWidget(self._list)

        toggle_all = QtWidgets.QCheckBox("Select All")
        toggle_all.toggled.connect(self._set_all_checked)
        layout.addWidget(toggle_all)

        buttons = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok
            | QtWidgets.QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _toggle_item(self, item: QtWidgets.QListWidgetItem) -> None:
        checked = item.checkState() == QtCore.Qt.CheckState.Checked
        item.setCheckState(
            QtCore.Qt.CheckState.Unchecked if checked else QtCore.Qt.CheckState.Checked
        )

    def _set_all_checked(self, checked: bool) -> None:
        state = QtCore.Qt.CheckState.Checked if checked else QtCore.Qt.CheckState.Unchecked
        for row in range(self._list.count()):
            self._list.item(row).setCheckState(state)

    def selected_containers(self) -> ContainerList:
        """Отмеченные контейнеры в порядке списка."""

        chosen = {
            self._list.item(row).data(CONTAINER_ID_ROLE)
            for row in range(self._list.count())
            if self._list.item(row).checkState() == QtCore.Qt.CheckState.Checked
        }
        return [container for container in self._items if container.id in chosen]
