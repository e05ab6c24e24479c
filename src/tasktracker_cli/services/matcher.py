"""Fuzzy search ranking for tasks.

A task whose description contains the query scores 0; any other task
scores the Levenshtein distance between its description and the query.
Both sides are case-folded first. Ranking is a stable ascending sort, so
equal scores keep their stored order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tasktracker_cli.models import Task

DEFAULT_LIMIT = 5


@dataclass(frozen=True, slots=True)
class TaskMatch:
    """A task paired with its distance to a search query."""

    task: Task
    distance: int


def levenshtein(source: str, target: str) -> int:
    """Minimum number of single-character inserts, deletes and substitutions
    turning ``source`` into ``target``."""
    if len(source) < len(target):
        source, target = target, source
    if not target:
        return len(source)

    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            cost = 0 if source_char == target_char else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current
    return previous[-1]


def score(description: str, query: str) -> int:
    """Distance of a description from a query; 0 means a substring hit."""
    folded_description = description.casefold()
    folded_query = query.casefold()
    if folded_query and folded_query in folded_description:
        return 0
    return levenshtein(folded_description, folded_query)


def rank(query: str, tasks: Iterable[Task], limit: int = DEFAULT_LIMIT) -> list[TaskMatch]:
    """Score every task and return the best ``limit`` matches."""
    if limit <= 0:
        return []
    matches = [TaskMatch(task, score(task.description, query)) for task in tasks]
    matches.sort(key=lambda match: match.distance)
    return matches[:limit]


def search(query: str, tasks: Iterable[Task], limit: int = DEFAULT_LIMIT) -> list[Task]:
    """The tasks of :func:`rank`, best first."""
    return [match.task for match in rank(query, tasks, limit)]
