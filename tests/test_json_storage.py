"""
Smoke tests for ProjectStorage against a temporary JSON document.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Make the package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from transport_api.repositories.json_storage import ProjectStorage  # noqa: E402


@pytest.fixture()
def storage(tmp_path):
    return ProjectStorage(tmp_path / "data" / "projects.json")


def test_missing_document_loads_as_empty(storage):
    assert storage.load() == []
    assert not storage.path.exists()


def test_save_creates_directory_and_round_trips_in_order(storage):
    records = [{"id": "a", "name": "Первый"}, {"id": "b", "name": "Second"}]
    assert storage.save(records) is True
    assert storage.path.parent.is_dir()
    assert storage.load() == records
    # non-ASCII text is stored as-is
    assert "Первый" in storage.path.read_text(encoding="utf-8")


def test_save_leaves_no_temp_files(storage):
    storage.save([{"id": "a"}])
    storage.save([{"id": "b"}])
    assert [p.name for p in storage.path.parent.iterdir()] == ["projects.json"]


def test_corrupt_document_is_empty_and_preserved(storage):
    storage.ensure_directory()
    storage.path.write_text("{not json", encoding="utf-8")

    assert storage.load() == []

    backups = list(storage.path.parent.glob("projects.json.corrupt-*"))
    assert len(backups) == 1
    assert backups[0].read_text(encoding="utf-8") == "{not json"
    assert storage.path.read_text(encoding="utf-8") == "{not json"


def test_corrupt_document_is_backed_up_once(storage):
    storage.ensure_directory()
    storage.path.write_text("not json", encoding="utf-8")

    for _ in range(5):
        assert storage.load() == []
    # a fresh storage over the same file finds the existing backup
    assert ProjectStorage(storage.path).load() == []
    assert len(list(storage.path.parent.glob("projects.json.corrupt-*"))) == 1

    storage.path.write_text("still not json, but longer", encoding="utf-8")
    storage.load()
    storage.load()
    assert len(list(storage.path.parent.glob("projects.json.corrupt-*"))) == 2


def test_non_array_document_is_ignored(storage):
    storage.ensure_directory()
    storage.path.write_text(json.dumps({"projects": []}), encoding="utf-8")
    assert storage.load() == []


def test_save_failure_is_reported_as_false(storage, monkeypatch):
    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("transport_api.repositories.json_storage.os.replace", broken_replace)
    assert storage.save([{"id": "a"}]) is False
    assert not storage.path.exists()
    assert list(storage.path.parent.iterdir()) == []


def test_unserialisable_records_are_reported_as_false(storage):
    assert storage.save([{"id": "a", "bad": object()}]) is False
    assert storage.load() == []


def test_transaction_yields_loaded_records(storage):
    storage.save([{"id": "a"}])
    with storage.transaction() as records:
        assert records == [{"id": "a"}]
