"""Docker Run: управление контейнерами рабочего пространства."""

__version__ = "1.0.0"
