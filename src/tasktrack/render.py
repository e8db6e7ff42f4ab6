"""Rendering of task snapshots as rich tables or plain text blocks."""

from __future__ import annotations

from collections.abc import Sequence

from jinja2 import BaseLoader, Environment
from rich.table import Table
from rich.text import Text

from tasktrack.models import Priority, Status, Task

TASK_TEMPLATE = """\
[{{ short_id }}] {{ task.title }}
  Description: {{ task.description }}
  Priority: {{ task.priority.label }}
  Status: {{ task.status.label }}"""

PRIORITY_STYLES: dict[Priority, str] = {
    Priority.LOW: "green",
    Priority.MEDIUM: "yellow",
    Priority.HIGH: "bold red",
}

STATUS_STYLES: dict[Status, str] = {
    Status.TODO: "white",
    Status.IN_PROGRESS: "cyan",
    Status.DONE: "green",
}

_env = Environment(loader=BaseLoader())
_task_template = _env.from_string(TASK_TEMPLATE)


def format_task(task: Task, id_length: int = 6) -> str:
    """Render a task as a plain multi-line block.

    Args:
        task: The task to render
        id_length: Number of id characters to show

    Returns:
        The rendered block, without a trailing newline
    """
    return _task_template.render(task=task, short_id=task.short_id(id_length))


def format_tasks(tasks: Sequence[Task], id_length: int = 6) -> str:
    """Render several tasks as plain blocks separated by blank lines."""
    return "\n\n".join(format_task(task, id_length) for task in tasks)


def task_table(tasks: Sequence[Task], title: str = "Tasks", id_length: int = 6) -> Table:
    """Build a rich table listing the given tasks in order."""
    table = Table(title=title, show_header=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Description", style="dim")
    table.add_column("Priority")
    table.add_column("Status")

    for task in tasks:
        table.add_row(
            task.short_id(id_length),
            Text(task.title),
            Text(task.description),
            Text(task.priority.label, style=PRIORITY_STYLES[task.priority]),
            Text(task.status.label, style=STATUS_STYLES[task.status]),
        )

    return table
