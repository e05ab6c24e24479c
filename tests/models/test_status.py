"""Tests for Status parsing."""

from __future__ import annotations

import pytest

from tasktracker_cli.exceptions import InvalidArgumentError, InvalidStatusError
from tasktracker_cli.models import Status


class TestParse:
    @pytest.mark.parametrize("status", list(Status))
    def test_round_trips_canonical_name(self, status):
        assert Status.parse(str(status)) is status

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("done", Status.DONE),
            ("  In_Progress ", Status.IN_PROGRESS),
            ("not_started\n", Status.NOT_STARTED),
            ("DONE", Status.DONE),
        ],
    )
    def test_ignores_case_and_whitespace(self, raw, expected):
        assert Status.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["todo", "", "   ", "finished", "in progress"])
    def test_rejects_unknown_tokens(self, raw):
        with pytest.raises(InvalidStatusError) as exc_info:
            Status.parse(raw)
        assert exc_info.value.raw == raw

    def test_rejects_none(self):
        with pytest.raises(InvalidStatusError):
            Status.parse(None)

    def test_error_names_accepted_values(self):
        with pytest.raises(InvalidStatusError) as exc_info:
            Status.parse("later")
        message = str(exc_info.value)
        for name in ("NOT_STARTED", "IN_PROGRESS", "DONE"):
            assert name in message
        assert exc_info.value.accepted == ("NOT_STARTED", "IN_PROGRESS", "DONE")

    def test_invalid_status_is_a_validation_error(self):
        with pytest.raises(InvalidArgumentError):
            Status.parse("nope")
        with pytest.raises(ValueError):
            Status.parse("nope")


def test_string_form_is_canonical_name():
    assert str(Status.IN_PROGRESS) == "IN_PROGRESS"


def test_labels():
    assert Status.NOT_STARTED.label == "Not started"
    assert Status.IN_PROGRESS.label == "In progress"
    assert Status.DONE.label == "Done"
