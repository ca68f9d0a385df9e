"""Точка входа в приложение Docker Run."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from dockerrun import __version__
from dockerrun.app import create_application
from dockerrun.docker_api.runtime import DockerRuntime
from dockerrun.settings.registry import SettingsRegistry
from dockerrun.utils.logger import configure_logging
from dockerrun.utils.paths import resolve_home_dir, resolve_workspace_dir
from dockerrun.workspace.config import WorkspaceConfigStore

LOGGER = logging.getLogger(__name__)


def initialize_settings(config_path: Path) -> SettingsRegistry:
    """Получает singleton реестр настроек и загружает config.json."""

    registry = SettingsRegistry(config_path=config_path)
    registry.load_from_disk()
    return registry


def setup_logging_from_settings(base_dir: Path, settings: SettingsRegistry) -> None:
    """Настраивает логирование по группе настроек logging."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    configure_logging(
        log_dir=base_dir / "logs",
        level_name=logging_settings.get("level", "INFO"),
        max_bytes=logging_settings.get("max_file_size_mb", 10) * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files", 5),
    )


def initialize_workdir(base_dir: Path) -> bool:
    """Создаёт рабочую структуру (~/.dockerrun, logs)."""

    try:
        base_dir.mkdir(parents=True, exist_ok=True)
        (base_dir / "logs").mkdir(exist_ok=True)
        return True
    except OSError as exc:
        LOGGER.error("Cannot initialize work directory %s: %s", base_dir, exc)
        return False


def create_config_store(workspace_dir: Path, settings: SettingsRegistry) -> WorkspaceConfigStore:
    file_name = settings.get_value("workspace", "config_file_name", default=".dockerrc")
    return WorkspaceConfigStore(workspace_dir, file_name)


def main() -> int:
    """Основная точка входа: готовит окружение и запускает приложение."""

    base_dir = resolve_home_dir()
    if not initialize_workdir(base_dir):
        return 1
    configure_logging(base_dir / "logs")

    settings = initialize_settings(base_dir / "config.json")
    setup_logging_from_settings(base_dir, settings)

    workspace_dir = resolve_workspace_dir()
    runtime = DockerRuntime(settings)
    config_store = create_config_store(workspace_dir, settings)

    LOGGER.info("Starting Docker Run %s for workspace %s", __version__, workspace_dir)
    app = create_application(
        settings=settings,
        runtime=runtime,
        config_store=config_store,
        workspace_dir=workspace_dir,
    )
    try:
        return app.run()
    finally:
        runtime.close()


if __name__ == "__main__":
    sys.exit(main())
