"""Filter predicates and sort comparators for TaskStore queries.

Predicates take a task and return whether it should be kept. Comparators
take two tasks and return True when the first must come before the second;
tasks a comparator does not order keep their store order.
"""

from __future__ import annotations

from dataclasses import dataclass

from tasktrack.models import Priority, Status, Task


@dataclass(frozen=True)
class StatusEquals:
    """Keep tasks with the given status."""

    status: Status

    def __call__(self, task: Task) -> bool:
        return task.status == self.status


@dataclass(frozen=True)
class PriorityEquals:
    """Keep tasks with the given priority."""

    priority: Priority

    def __call__(self, task: Task) -> bool:
        return task.priority == self.priority


def by_priority_descending(a: Task, b: Task) -> bool:
    """High priority first, low priority last."""
    return a.priority.value > b.priority.value


def by_priority_ascending(a: Task, b: Task) -> bool:
    """Low priority first, high priority last."""
    return a.priority.value < b.priority.value
