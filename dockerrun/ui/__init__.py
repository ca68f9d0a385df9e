"""Пользовательский интерфейс: протокол взаимодействия и реализация на PySide6."""
