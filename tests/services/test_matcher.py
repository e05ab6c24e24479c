"""Tests for fuzzy search ranking."""

from __future__ import annotations

import pytest

from tasktracker_cli.models import Task
from tasktracker_cli.services import matcher
from tasktracker_cli.services.matcher import TaskMatch, levenshtein, rank, score, search


def _tasks(*descriptions):
    return [Task.new(description) for description in descriptions]


class TestLevenshtein:
    @pytest.mark.parametrize(
        "source, target, expected",
        [
            ("kitten", "sitting", 3),
            ("sitting", "kitten", 3),
            ("", "", 0),
            ("", "abc", 3),
            ("abc", "", 3),
            ("flaw", "lawn", 2),
            ("same", "same", 0),
            ("a", "b", 1),
        ],
    )
    def test_distances(self, source, target, expected):
        assert levenshtein(source, target) == expected


class TestScore:
    def test_classic_example(self):
        assert score("kitten", "sitting") == 3

    def test_substring_scores_zero(self):
        assert score("buy milk", "milk") == 0

    def test_case_insensitive(self):
        assert score("Buy MILK today", "milk") == 0
        assert score("KITTEN", "sitting") == 3

    def test_non_substring_uses_whole_strings(self):
        assert score("walk dog", "buy") == levenshtein("walk dog", "buy")

    def test_empty_query_is_plain_edit_distance(self):
        assert score("buy milk", "") == len("buy milk")


class TestRank:
    def test_substring_hits_first_in_stored_order(self):
        tasks = _tasks("buy milk", "buy bread", "walk dog")
        matches = rank("buy", tasks)
        assert [m.task.description for m in matches] == ["buy milk", "buy bread", "walk dog"]
        assert [m.distance for m in matches[:2]] == [0, 0]
        assert matches[2].distance > 0

    def test_limit_one_keeps_first_hit(self):
        tasks = _tasks("buy milk", "buy bread", "walk dog")
        assert [t.description for t in search("buy", tasks, limit=1)] == ["buy milk"]

    def test_ties_keep_original_order(self):
        tasks = _tasks("walk dog", "buy milk", "walk cat", "buy bread")
        matches = rank("buy", tasks)
        assert [m.task.description for m in matches[:2]] == ["buy milk", "buy bread"]

    def test_sorted_ascending(self):
        tasks = _tasks("zzzzzzzzzz", "mlik", "milk shake")
        distances = [m.distance for m in rank("milk", tasks)]
        assert distances == sorted(distances)
        assert rank("milk", tasks)[0].task.description == "milk shake"

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit_is_empty(self, limit):
        assert rank("buy", _tasks("buy milk"), limit) == []

    def test_limit_larger_than_collection(self):
        tasks = _tasks("buy milk", "walk dog")
        assert len(rank("buy", tasks, limit=10)) == 2

    def test_default_limit(self):
        tasks = _tasks(*[f"task {i}" for i in range(8)])
        assert len(rank("task", tasks)) == matcher.DEFAULT_LIMIT == 5

    def test_empty_query_orders_by_length(self):
        tasks = _tasks("long description", "short", "mid size")
        assert [m.task.description for m in rank("", tasks)] == [
            "short",
            "mid size",
            "long description",
        ]

    def test_returns_task_matches(self):
        task = Task.new("buy milk")
        assert rank("milk", [task]) == [TaskMatch(task, 0)]
