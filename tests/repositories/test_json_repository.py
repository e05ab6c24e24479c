"""Tests for the JSON file task repository."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from tasktracker_cli.exceptions import StorageError
from tasktracker_cli.models import Status, Task
from tasktracker_cli.repositories import JsonTaskRepository

VALID_RECORD = {
    "id": "abc12345",
    "description": "Buy milk",
    "status": "DONE",
    "createdAt": "2024-05-01 09:30:00",
    "updatedAt": "2024-05-01 10:00:00",
}


class TestInitialize:
    def test_creates_missing_file_with_empty_array(self, repository, tasks_file):
        repository.initialize()
        assert json.loads(tasks_file.read_text()) == []

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "tasks.json"
        JsonTaskRepository(path).initialize()
        assert path.exists()

    def test_leaves_existing_file_alone(self, repository, tasks_file):
        tasks_file.write_text(json.dumps([VALID_RECORD]))
        repository.initialize()
        assert json.loads(tasks_file.read_text()) == [VALID_RECORD]

    def test_failure_is_fatal(self, repository):
        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(StorageError, match="denied"):
                repository.initialize()


class TestLoad:
    def test_empty_file_loads_empty(self, repository, tasks_file):
        tasks_file.write_text("")
        assert repository.load() == []

    def test_whitespace_file_loads_empty(self, repository, tasks_file):
        tasks_file.write_text("  \n\t ")
        assert repository.load() == []

    def test_loads_records_in_file_order(self, repository, tasks_file):
        second = dict(VALID_RECORD, id="def67890", description="Walk dog", status="NOT_STARTED")
        tasks_file.write_text(json.dumps([VALID_RECORD, second]))
        tasks = repository.load()
        assert [t.id for t in tasks] == ["abc12345", "def67890"]
        assert tasks[0].status is Status.DONE

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            json.dumps({"tasks": []}),
            json.dumps([dict(VALID_RECORD, status="TODO")]),
            json.dumps([dict(VALID_RECORD, description="")]),
            json.dumps([{"id": "abc12345"}]),
            json.dumps([dict(VALID_RECORD, createdAt="May 1st")]),
            json.dumps(["just a string"]),
            json.dumps([dict(VALID_RECORD, createdAt="2024-5-1 9:30:00")]),
        ],
    )
    def test_malformed_content_degrades_to_empty(self, repository, tasks_file, content):
        tasks_file.write_text(content)
        assert repository.load() == []

    @pytest.mark.parametrize(
        "content",
        ["[" * 100_000 + "]" * 100_000, "[" + "1" * 5000 + "]"],
        ids=["deep-nesting", "oversized-integer"],
    )
    def test_content_the_decoder_cannot_handle_degrades_to_empty(
        self, repository, tasks_file, content
    ):
        tasks_file.write_text(content)
        assert repository.load() == []

    def test_malformed_content_is_logged(self, repository, tasks_file):
        tasks_file.write_text("{not json")
        with patch.object(repository.logger, "warning") as warning:
            repository.load()
        warning.assert_called_once()
        assert str(tasks_file) in [str(arg) for arg in warning.call_args.args]

    def test_missing_file_degrades_to_empty(self, tmp_path):
        assert JsonTaskRepository(tmp_path / "absent.json").load() == []

    def test_undecodable_file_degrades_to_empty(self, repository, tasks_file):
        tasks_file.write_bytes(b"\xff\xfe\x00garbage")
        assert repository.load() == []


class TestSave:
    def test_writes_json_array(self, repository, tasks_file):
        task = Task.from_record(VALID_RECORD)
        repository.save([task])
        assert json.loads(tasks_file.read_text()) == [VALID_RECORD]

    def test_overwrites_previous_content(self, repository, tasks_file):
        repository.save([Task.from_record(VALID_RECORD)])
        repository.save([])
        assert json.loads(tasks_file.read_text()) == []

    def test_round_trip_preserves_content(self, repository, tasks_file):
        records = [
            VALID_RECORD,
            dict(VALID_RECORD, id="def67890", description="Café ☕", status="IN_PROGRESS"),
        ]
        tasks_file.write_text(json.dumps(records))
        repository.save(repository.load())
        assert json.loads(tasks_file.read_text(encoding="utf-8")) == records

    def test_unencodable_task_leaves_file_intact(self, repository, tasks_file):
        repository.save([Task.from_record(VALID_RECORD)])
        before = tasks_file.read_bytes()
        task = Task.new("placeholder")
        task.description = "caf\udcff"
        with pytest.raises(StorageError):
            repository.save([Task.from_record(VALID_RECORD), task])
        assert tasks_file.read_bytes() == before

    def test_write_failure_is_fatal(self, repository):
        with patch("builtins.open", side_effect=OSError("disk full")):
            with pytest.raises(StorageError, match="disk full"):
                repository.save([Task.new("Buy milk")])
