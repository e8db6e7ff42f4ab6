"""Data models for tasktrack."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from tasktrack.errors import InvalidInput


class Priority(Enum):
    """Task priority levels, ordered by value."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        """Human-readable name shown in menus and listings."""
        return _PRIORITY_LABELS[self]

    @classmethod
    def from_choice(cls, raw: str) -> Priority:
        """Map a numeric menu choice ("1"-"3") to a priority.

        Raises:
            InvalidInput: If the choice is not a number in range.
        """
        return _from_choice(cls, raw)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.value < other.value


class Status(Enum):
    """Task progress states."""

    TODO = 1
    IN_PROGRESS = 2
    DONE = 3

    @property
    def label(self) -> str:
        """Human-readable name shown in menus and listings."""
        return _STATUS_LABELS[self]

    @classmethod
    def from_choice(cls, raw: str) -> Status:
        """Map a numeric menu choice ("1"-"3") to a status.

        Raises:
            InvalidInput: If the choice is not a number in range.
        """
        return _from_choice(cls, raw)


_PRIORITY_LABELS: dict[Priority, str] = {
    Priority.LOW: "Low",
    Priority.MEDIUM: "Medium",
    Priority.HIGH: "High",
}

_STATUS_LABELS: dict[Status, str] = {
    Status.TODO: "To Do",
    Status.IN_PROGRESS: "In Progress",
    Status.DONE: "Done",
}


def _from_choice(enum_cls, raw: str):
    expected = f"1-{len(enum_cls)}"
    text = raw.strip()
    if not text.isdigit():
        raise InvalidInput(raw, expected)
    try:
        return enum_cls(int(text))
    except ValueError:
        raise InvalidInput(raw, expected) from None


@dataclass(frozen=True)
class Task:
    """A single tracked task.

    Instances are immutable snapshots; the store replaces a record when it
    is updated.
    """

    id: UUID
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    status: Status = Status.TODO

    def short_id(self, length: int = 6) -> str:
        """Return the leading characters of the id for display."""
        return str(self.id)[:length]

    def __str__(self) -> str:
        return f"[{self.short_id()}] {self.title}"
