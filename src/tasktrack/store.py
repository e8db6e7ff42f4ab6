"""In-memory task store.

The store is the only owner of the task collection. Tasks are kept in
insertion order and handed out as immutable snapshots; updates replace the
stored record, so a failed validation never leaves a half-written task.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import replace
from functools import cmp_to_key
from uuid import UUID, uuid4

from tasktrack.errors import AmbiguousTaskId, EmptyTitle, TaskNotFound
from tasktrack.models import Priority, Status, Task

Predicate = Callable[[Task], bool]
Comparator = Callable[[Task, Task], bool]


class TaskStore:
    """Ordered collection of tasks with CRUD and query operations."""

    def __init__(
        self,
        require_unique_prefix: bool = False,
        id_factory: Callable[[], UUID] | None = None,
    ) -> None:
        self.require_unique_prefix = require_unique_prefix
        self._id_factory = id_factory or uuid4
        self._tasks: list[Task] = []
        self._issued_ids: set[UUID] = set()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.list_tasks())

    # ---- queries ----

    def list_tasks(self) -> list[Task]:
        """Return all tasks in store order."""
        return list(self._tasks)

    def get(self, key: str) -> Task:
        """Return the task whose id starts with ``key``.

        Raises:
            TaskNotFound: If no task matches.
            AmbiguousTaskId: If several tasks match and unique prefixes are required.
        """
        return self._tasks[self._resolve(key)]

    def filter(self, predicate: Predicate) -> list[Task]:
        """Return the tasks for which ``predicate`` holds, in store order."""
        return [task for task in self._tasks if predicate(task)]

    def sort(self, comparator: Comparator) -> list[Task]:
        """Return all tasks ordered by ``comparator`` without touching store order.

        ``comparator(a, b)`` is True when ``a`` must come before ``b``. The sort
        is stable.
        """

        def compare(a: Task, b: Task) -> int:
            if comparator(a, b):
                return -1
            if comparator(b, a):
                return 1
            return 0

        return sorted(self._tasks, key=cmp_to_key(compare))

    # ---- mutations ----

    def add(
        self,
        title: str,
        description: str = "",
        priority: Priority = Priority.MEDIUM,
        status: Status = Status.TODO,
    ) -> Task:
        """Create a task and append it to the end of the store.

        Raises:
            EmptyTitle: If the title is empty after trimming.
        """
        trimmed = _clean_title(title)
        task = Task(
            id=self._new_id(),
            title=trimmed,
            description=description,
            priority=priority,
            status=status,
        )
        self._tasks.append(task)
        return task

    def update(
        self,
        key: str,
        title: str | None = None,
        description: str | None = None,
        priority: Priority | None = None,
        status: Status | None = None,
    ) -> Task:
        """Apply the supplied fields to the task matching ``key``.

        Fields left as None are unchanged. A supplied title is validated
        before anything is written.

        Raises:
            TaskNotFound: If no task matches.
            AmbiguousTaskId: If several tasks match and unique prefixes are required.
            EmptyTitle: If a supplied title is empty after trimming.
        """
        index = self._resolve(key)
        changes: dict[str, object] = {}

        if title is not None:
            changes["title"] = _clean_title(title)
        if description is not None:
            changes["description"] = description
        if priority is not None:
            changes["priority"] = priority
        if status is not None:
            changes["status"] = status

        updated = replace(self._tasks[index], **changes)
        self._tasks[index] = updated
        return updated

    def delete(self, key: str) -> Task:
        """Remove the task matching ``key`` and return it.

        Raises:
            TaskNotFound: If no task matches.
            AmbiguousTaskId: If several tasks match and unique prefixes are required.
        """
        index = self._resolve(key)
        return self._tasks.pop(index)

    # ---- helpers ----

    def _new_id(self) -> UUID:
        task_id = self._id_factory()
        while task_id in self._issued_ids:
            task_id = self._id_factory()
        self._issued_ids.add(task_id)
        return task_id

    def _resolve(self, key: str) -> int:
        """Return the index of the first task whose id starts with ``key``."""
        prefix = key.strip().lower()
        if not prefix:
            raise TaskNotFound(key)

        matches = [
            index
            for index, task in enumerate(self._tasks)
            if str(task.id).lower().startswith(prefix)
        ]
        if not matches:
            raise TaskNotFound(key)
        if self.require_unique_prefix and len(matches) > 1:
            raise AmbiguousTaskId(key, len(matches))
        return matches[0]


def _clean_title(title: str) -> str:
    trimmed = title.strip()
    if not trimmed:
        raise EmptyTitle()
    return trimmed
