"""Error kinds raised by the task store and the console driver."""

from __future__ import annotations


class TaskError(Exception):
    """Base class for recoverable task tracker errors."""


class EmptyTitle(TaskError):
    """A task title was empty or whitespace-only."""

    def __init__(self) -> None:
        super().__init__("Title cannot be empty")


class InvalidInput(TaskError):
    """A menu or enumeration choice could not be parsed."""

    def __init__(self, raw: str, expected: str = "") -> None:
        self.raw = raw
        message = f"Invalid choice: {raw!r}"
        if expected:
            message += f" (expected {expected})"
        super().__init__(message)


class TaskNotFound(TaskError):
    """A lookup key resolved to no task."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No task matches id prefix {key!r}")


class AmbiguousTaskId(TaskError):
    """A lookup key matched more than one task while unique prefixes are required."""

    def __init__(self, key: str, matches: int) -> None:
        self.key = key
        self.matches = matches
        super().__init__(f"Id prefix {key!r} matches {matches} tasks")
