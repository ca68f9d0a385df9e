"""Подсистема настроек Docker Run."""
