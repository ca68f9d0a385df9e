"""Тесты команды запуска контейнеров рабочего пространства."""

from __future__ import annotations

import pytest
from conftest import pick

from dockerrun.operations import OperationStatus, StartOperation


@pytest.fixture
def operation(classifier, executor, surface) -> StartOperation:
    return StartOperation(classifier, executor, surface)


def test_empty_workspace_warns(surface, operation: StartOperation) -> None:
    assert operation.run().status is OperationStatus.NO_CONTAINERS
    assert surface.warnings == ["Please Add At Least One Container To Workspace"]


def test_all_running_warns(runtime, store, surface, operation: StartOperation) -> None:
    runtime.add("a", running=True)
    store.write_tracked_ids(["a"])
    assert operation.run().status is OperationStatus.NO_CONTAINERS
    assert surface.warnings == ["All Containers For Current Workspace Are Running"]


def test_offers_only_stopped(runtime, store, surface, operation: StartOperation) -> None:
    runtime.add("up", running=True)
    runtime.add("down", running=False)
    store.write_tracked_ids(["up", "down"])
    surface.choose = lambda items: []

    result = operation.run()

    assert [item.id for item in surface.offered[0]] == ["down"]
    assert result.status is OperationStatus.EMPTY_SELECTION
    assert surface.warnings == ["Please Select At least One Container To Start"]


def test_selected_are_started(runtime, store, surface, operation: StartOperation) -> None:
    runtime.add("a", "alpha", running=False)
    runtime.add("b", "beta", running=False)
    store.write_tracked_ids(["a", "b"])
    surface.choose = pick("b")

    result = operation.run()

    assert result.ok
    assert runtime.start_calls == ["b"]
    assert surface.progress_titles == ["Starting Containers"]
    assert surface.infos == ["Successfully Started beta"]
    assert runtime.is_running("b") and not runtime.is_running("a")
