"""Пакет диалоговых окон."""

from .selection import ContainerSelectionDialog

__all__ = [
    "ContainerSelectionDialog",
]
