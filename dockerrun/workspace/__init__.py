"""Конфигурация рабочего пространства (.dockerrc)."""
