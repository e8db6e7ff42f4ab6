"""Interactive menu driver for tasktrack.

The driver owns all prompting and rendering. It turns raw input into store
calls, and reports any TaskError with a generic message before showing the
menu again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

import click
from rich.console import Console
from rich.markup import escape

from tasktrack.config import TrackerConfig
from tasktrack.errors import InvalidInput, TaskError
from tasktrack.models import Priority, Status, Task
from tasktrack.queries import StatusEquals, by_priority_descending
from tasktrack.render import format_tasks, task_table
from tasktrack.store import TaskStore

logger = logging.getLogger(__name__)

MENU = """\
----------------------------
Personal Task Tracker
1) Add task
2) List tasks
3) Update task
4) Delete task
5) Filter by status
6) Sort by priority
0) Exit
----------------------------"""

GENERIC_ERROR = "An error occurred. Please try again."
EXIT_CHOICE = "0"


class ConsoleDriver:
    """Menu loop that calls into a TaskStore and renders the results."""

    def __init__(
        self,
        store: TaskStore,
        config: TrackerConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.store = store
        self.config = config or TrackerConfig()
        self.console = console or Console()
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_task,
            "2": self.list_tasks,
            "3": self.update_task,
            "4": self.delete_task,
            "5": self.filter_by_status,
            "6": self.sort_by_priority,
        }

    def run(self) -> int:
        """Show the menu until the user exits. Returns the exit code."""
        logger.debug("Menu loop started")
        while True:
            self.console.print(MENU, markup=False, highlight=False)
            try:
                choice = self._ask("Select option: ").strip()
                if choice == EXIT_CHOICE:
                    logger.debug("Exit requested")
                    return 0
                self.handle(choice)
            except click.Abort:
                # EOF or Ctrl-C at a prompt
                self.console.print()
                logger.debug("Input closed, leaving menu")
                return 0
            except TaskError as e:
                logger.info("%s: %s", type(e).__name__, e)
                self._report_error(e)

    def handle(self, choice: str) -> None:
        """Run the menu action for ``choice``.

        Raises:
            InvalidInput: If the choice is not a menu option.
        """
        action = self._actions.get(choice.strip())
        if action is None:
            raise InvalidInput(choice, "0-6")
        action()

    # ---- menu actions ----

    def add_task(self) -> None:
        title = self._ask("Title: ")
        description = self._ask("Description: ")
        priority = self.choose_priority()
        status = self.choose_status()

        task = self.store.add(title, description, priority, status)
        logger.info("Added task %s", task.id)
        self.console.print("[green]Task added.[/green]")

    def list_tasks(self) -> None:
        tasks = self.store.list_tasks()
        if not tasks:
            self.console.print("[dim]No tasks available.[/dim]")
            return
        self._show(tasks, "Task list")

    def update_task(self) -> None:
        self.list_tasks()
        key = self._ask("Enter task id prefix: ")
        new_title = self._ask("New title (leave empty to skip): ")
        new_description = self._ask("New description (leave empty to skip): ")
        priority = self.choose_priority() if self._ask_yes("Change priority? (y/n): ") else None
        status = self.choose_status() if self._ask_yes("Change status? (y/n): ") else None

        task = self.store.update(
            key,
            title=new_title or None,
            description=new_description or None,
            priority=priority,
            status=status,
        )
        logger.info("Updated task %s", task.id)
        self.console.print("[green]Task updated.[/green]")

    def delete_task(self) -> None:
        self.list_tasks()
        key = self._ask("Enter task id prefix: ")

        task = self.store.delete(key)
        logger.info("Deleted task %s", task.id)
        self.console.print("[green]Task deleted.[/green]")

    def filter_by_status(self) -> None:
        status = self.choose_status()
        tasks = self.store.filter(StatusEquals(status))
        if not tasks:
            self.console.print(f"[dim]No tasks with status {status.label}.[/dim]")
            return
        self._show(tasks, f"Status: {status.label}")

    def sort_by_priority(self) -> None:
        tasks = self.store.sort(by_priority_descending)
        if not tasks:
            self.console.print("[dim]No tasks available.[/dim]")
            return
        self._show(tasks, "By priority")

    # ---- choosers ----

    def choose_priority(self) -> Priority:
        self.console.print("Choose priority: 1) Low  2) Medium  3) High", highlight=False)
        return Priority.from_choice(self._ask("> "))

    def choose_status(self) -> Status:
        self.console.print("Choose status: 1) To Do  2) In Progress  3) Done", highlight=False)
        return Status.from_choice(self._ask("> "))

    # ---- helpers ----

    def _ask(self, text: str) -> str:
        return click.prompt(text, default="", show_default=False, prompt_suffix="")

    def _ask_yes(self, text: str) -> bool:
        return self._ask(text).strip().lower() == "y"

    def _show(self, tasks: Sequence[Task], title: str) -> None:
        id_length = self.config.display.id_length
        if self.config.display.style == "plain":
            self.console.print(format_tasks(tasks, id_length), markup=False, highlight=False)
        else:
            self.console.print(task_table(tasks, title=title, id_length=id_length))

    def _report_error(self, error: TaskError) -> None:
        self.console.print(f"[red]{GENERIC_ERROR}[/red]")
        if self.config.display.verbose_errors:
            self.console.print(f"[dim]{escape(str(error))}[/dim]")
