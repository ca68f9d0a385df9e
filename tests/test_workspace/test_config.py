"""Тесты хранилища .dockerrc."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from dockerrun.workspace.config import WorkspaceConfigStore
from dockerrun.workspace.exceptions import WorkspaceConfigError


def test_missing_file_means_empty_workspace(tmp_path: Path) -> None:
    store = WorkspaceConfigStore(tmp_path)
    assert store.read_tracked_ids() == []
    assert not store.file_path.exists()


def test_write_and_read_preserve_order(tmp_path: Path) -> None:
    store = WorkspaceConfigStore(tmp_path)
    store.write_tracked_ids(["b", "a", "b"])
    assert store.read_tracked_ids() == ["b", "a"]
    content = json.loads((tmp_path / ".dockerrc").read_text(encoding="utf-8"))
    assert content == {"containers": ["b", "a"]}


def test_add_and_remove_ids(tmp_path: Path) -> None:
    store = WorkspaceConfigStore(tmp_path)
    assert store.add_ids(["a", "b"]) == ["a", "b"]
    assert store.add_ids(["b", "c"]) == ["c"]
    assert store.remove_ids(["a", "missing"]) == ["a"]
    assert store.read_tracked_ids() == ["b", "c"]
    store.clear()
    assert store.read_tracked_ids() == []


def test_custom_file_name(tmp_path: Path) -> None:
    store = WorkspaceConfigStore(tmp_path, ".workspace.json")
    store.write_tracked_ids(["x"])
    assert (tmp_path / ".workspace.json").exists()


def test_invalid_json_raises(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    (tmp_path / ".dockerrc").write_text("{broken", encoding="utf-8")
    with pytest.raises(WorkspaceConfigError):
        WorkspaceConfigStore(tmp_path).read_tracked_ids()
    assert ".dockerrc" in caplog.text


@pytest.mark.parametrize(
    "payload",
    [[], {"containers": "abc"}, {"containers": [1, 2]}],
)
def test_wrong_shape_raises(tmp_path: Path, payload: object) -> None:
    (tmp_path / ".dockerrc").write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(WorkspaceConfigError):
        WorkspaceConfigStore(tmp_path).read_tracked_ids()


def test_file_without_key_is_empty(tmp_path: Path) -> None:
    (tmp_path / ".dockerrc").write_text("{}", encoding="utf-8")
    assert WorkspaceConfigStore(tmp_path).read_tracked_ids() == []
