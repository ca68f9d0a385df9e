"""Тесты реестра команд."""

from __future__ import annotations

import pytest
from conftest import pick

from dockerrun.commands import CommandRegistry, build_registry
from dockerrun.docker_api.exceptions import RuntimeUnavailableError
from dockerrun.operations import OperationStatus


def test_build_registry_registers_all_commands(runtime, store, surface) -> None:
    registry = build_registry(runtime, store, surface)
    assert registry.command_ids() == [
        "docker-run.add",
        "docker-run.remove",
        "docker-run.start",
        "docker-run.stop",
        "docker-run.stop:non-related",
    ]


def test_execute_stop_command(runtime, store, surface) -> None:
    runtime.add("a", "alpha", running=True)
    store.write_tracked_ids(["a"])
    surface.choose = pick("a")
    registry = build_registry(runtime, store, surface)

    result = registry.execute("docker-run.stop")

    assert result.status is OperationStatus.COMPLETED
    assert surface.infos == ["Successfully Stopped alpha"]


def test_execute_unknown_command(runtime, store, surface) -> None:
    registry = build_registry(runtime, store, surface)
    with pytest.raises(KeyError):
        registry.execute("docker-run.unknown")


def test_duplicate_registration_rejected(runtime, store, surface) -> None:
    registry = build_registry(runtime, store, surface)
    operation = registry.get("docker-run.stop")
    with pytest.raises(ValueError):
        registry.register(operation)


def test_empty_registry_has_no_commands() -> None:
    assert CommandRegistry().command_ids() == []


def test_runtime_unavailable_reaches_caller(runtime, store, surface) -> None:
    runtime.unavailable = True
    registry = build_registry(runtime, store, surface)
    with pytest.raises(RuntimeUnavailableError):
        registry.execute("docker-run.stop:non-related")
