"""Схема config.json по умолчанию."""

from __future__ import annotations

from typing import Any, Dict

# DEFAULT_CONFIG служит шаблоном для начального config.json
DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "logging": {
        "enabled": True,
        "level": "INFO",
        "max_file_size_mb": 10,
        "max_archived_files": 5,
    },
    "docker": {
        "base_url": "",
        "connection_timeout_sec": 5,
        "stop_timeout_sec": 10,
        "max_parallel_operations": 4,
    },
    "workspace": {
        "config_file_name": ".dockerrc",
    },
}
