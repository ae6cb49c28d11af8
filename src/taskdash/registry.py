"""In-memory task registry.

Tasks are identified only by their position in the registry. Removing a task
shifts every later task down by one, so positions captured before a removal
must not be reused.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

logger = logging.getLogger(__name__)


class TaskState(Enum):
    """Lifecycle states of a task.

    Any state can be set from any other; there is no terminal state.
    """

    PENDING = "Pending"
    IN_PROGRESS = "In progress"
    COMPLETED = "Completed"

    @property
    def label(self) -> str:
        """Human-readable label for menus."""
        return self.value


@dataclass(frozen=True)
class Task:
    """A titled unit of work."""

    title: str
    state: TaskState = TaskState.PENDING


class TaskRegistry:
    """Ordered, positionally indexed collection of tasks.

    Fallible operations return ``False`` for an out-of-range position
    instead of raising.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def add(self, title: str) -> None:
        """Append a new pending task."""
        self._tasks.append(Task(title=title))
        logger.debug("Added task %r at position %d", title, len(self._tasks) - 1)

    def list_all(self) -> list[Task]:
        """Return all tasks in insertion order."""
        return list(self._tasks)

    def list_by_state(self, state: TaskState) -> list[Task]:
        """Return the tasks in ``state``, keeping their relative order."""
        return [task for task in self._tasks if task.state is state]

    def remove_at(self, position: int) -> bool:
        """Remove the task at a zero-based position. Returns True if removed."""
        if not self._in_range(position):
            logger.debug("Rejected remove at position %d (size %d)", position, len(self._tasks))
            return False

        removed = self._tasks.pop(position)
        logger.debug("Removed task %r from position %d", removed.title, position)
        return True

    def set_state_at(self, position: int, new_state: TaskState) -> bool:
        """Set the state of the task at a zero-based position. Returns True if set."""
        if not self._in_range(position):
            logger.debug(
                "Rejected state change at position %d (size %d)", position, len(self._tasks)
            )
            return False

        self._tasks[position] = replace(self._tasks[position], state=new_state)
        logger.debug("Task at position %d is now %s", position, new_state.name)
        return True

    def _in_range(self, position: int) -> bool:
        # Negative positions are out of range, never counted from the end.
        return 0 <= position < len(self._tasks)
