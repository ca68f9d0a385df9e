"""Тесты команд добавления и удаления контейнеров рабочего пространства."""

from __future__ import annotations

from conftest import pick

from dockerrun.operations import AddOperation, OperationStatus, RemoveOperation


def test_add_nothing_available(surface, classifier, store) -> None:
    result = AddOperation(classifier, store, surface).run()
    assert result.status is OperationStatus.NO_CONTAINERS
    assert surface.warnings == ["No Container Available To Add"]


def test_add_empty_selection(runtime, surface, classifier, store) -> None:
    runtime.add("a")
    surface.choose = lambda items: []
    result = AddOperation(classifier, store, surface).run()
    assert result.status is OperationStatus.EMPTY_SELECTION
    assert surface.warnings == ["Please Select At least One Container To Add"]
    assert store.read_tracked_ids() == []


def test_add_offers_untracked_regardless_of_state(runtime, surface, classifier, store) -> None:
    runtime.add("tracked", running=True)
    runtime.add("up", "up", running=True)
    runtime.add("down", "down", running=False)
    store.write_tracked_ids(["tracked"])
    surface.choose = pick("down", "up")

    result = AddOperation(classifier, store, surface).run()

    assert [item.id for item in surface.offered[0]] == ["up", "down"]
    assert store.read_tracked_ids() == ["tracked", "down", "up"]
    assert surface.infos == ["Successfully Added down", "Successfully Added up"]
    assert result.ok


def test_remove_requires_workspace_containers(surface, classifier, store) -> None:
    result = RemoveOperation(classifier, store, surface).run()
    assert result.status is OperationStatus.NO_CONTAINERS
    assert surface.warnings == ["Please Add At Least One Container To Workspace"]


def test_remove_selected(runtime, surface, classifier, store) -> None:
    runtime.add("a", "alpha", running=True)
    runtime.add("b", "beta")
    store.write_tracked_ids(["a", "b"])
    surface.choose = pick("a")

    RemoveOperation(classifier, store, surface).run()

    assert store.read_tracked_ids() == ["b"]
    assert surface.infos == ["Successfully Removed alpha"]
    assert runtime.is_running("a")
    assert runtime.stop_calls == []


def test_remove_empty_selection(runtime, surface, classifier, store) -> None:
    runtime.add("a")
    store.write_tracked_ids(["a"])
    surface.choose = lambda items: []
    result = RemoveOperation(classifier, store, surface).run()
    assert result.status is OperationStatus.EMPTY_SELECTION
    assert surface.warnings == ["Please Select At least One Container To Remove"]
    assert store.read_tracked_ids() == ["a"]
