"""Console rendering for tasks and user-facing messages."""

from __future__ import annotations

from typing import Literal

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from taskdash.registry import Task, TaskState

STATE_STYLES: dict[TaskState, str] = {
    TaskState.PENDING: "yellow",
    TaskState.IN_PROGRESS: "cyan",
    TaskState.COMPLETED: "green",
}


def format_task(task: Task) -> str:
    """Return the plain one-line form of a task."""
    return f"Task: {task.title} [{task.state.name}]"


def _styled_state(state: TaskState) -> str:
    style = STATE_STYLES[state]
    return f"[{style}]{state.name}[/{style}]"


def print_tasks(
    console: Console,
    tasks: list[Task],
    style: Literal["table", "plain"] = "table",
) -> None:
    """Print all tasks numbered from 1."""
    if not tasks:
        console.print("[dim]No tasks registered yet.[/dim]")
        return

    if style == "plain":
        console.print("Task list:")
        for i, task in enumerate(tasks, 1):
            console.print(f"{i}. {escape(format_task(task))}", highlight=False)
        return

    table = Table(title="Tasks", show_header=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="white")
    table.add_column("State")
    for i, task in enumerate(tasks, 1):
        table.add_row(str(i), escape(task.title), _styled_state(task.state))

    console.print(table)


def print_tasks_by_state(
    console: Console,
    state: TaskState,
    tasks: list[Task],
    style: Literal["table", "plain"] = "table",
) -> None:
    """Print the tasks matching a state.

    Rows are not numbered: positions in a filtered view do not match the
    positions used by remove and change-state.
    """
    if not tasks:
        console.print(f"[dim]No tasks with state: {state.name}[/dim]")
        return

    if style == "plain":
        console.print(f"Tasks with state {state.name}:")
        for task in tasks:
            console.print(escape(format_task(task)), highlight=False)
        return

    table = Table(title=f"Tasks with state {state.name}:", show_header=True)
    table.add_column("Title", style="white")
    table.add_column("State")
    for task in tasks:
        table.add_row(escape(task.title), _styled_state(task.state))

    console.print(table)


def print_success(console: Console, message: str) -> None:
    console.print(f"[green]{message}[/green]")


def print_error(console: Console, message: str) -> None:
    console.print(f"[red]{message}[/red]")


def print_info(console: Console, message: str) -> None:
    console.print(message, markup=False, highlight=False)
