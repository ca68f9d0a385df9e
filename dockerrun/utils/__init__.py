"""Вспомогательные утилиты приложения."""
