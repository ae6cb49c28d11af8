"""Interactive menu loop driving the task registry."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console

from taskdash.config import TaskdashConfig
from taskdash.menu import (
    MenuChoice,
    parse_choice,
    parse_int,
    render_banner,
    render_menu,
    render_state_menu,
    state_for_choice,
)
from taskdash.registry import TaskRegistry, TaskState
from taskdash.render import (
    print_error,
    print_info,
    print_success,
    print_tasks,
    print_tasks_by_state,
)

logger = logging.getLogger(__name__)

FAREWELL = "Thanks for using the dashboard. Goodbye."


class Dashboard:
    """Console controller for a TaskRegistry.

    Reads one line per prompt through ``read_line`` and maps menu selections
    to registry calls. Positions are shown 1-based and converted to 0-based
    before reaching the registry. Bad input is reported and never raises.
    """

    def __init__(
        self,
        registry: TaskRegistry,
        console: Console,
        read_line: Callable[[], str],
        config: TaskdashConfig | None = None,
    ) -> None:
        self.registry = registry
        self.console = console
        self.read_line = read_line
        self.config = config or TaskdashConfig()

    def run(self) -> int:
        """Run the menu loop until the user exits. Returns the exit code."""
        if self.config.display.show_banner:
            print_info(self.console, render_banner(self.config))

        try:
            self._loop()
        except EOFError:
            logger.debug("Input closed, ending session")
            self.console.print()

        print_info(self.console, FAREWELL)
        return 0

    def _loop(self) -> None:
        handlers: dict[int, Callable[[], None]] = {
            MenuChoice.REGISTER: self.register_task,
            MenuChoice.LIST_ALL: self.list_tasks,
            MenuChoice.REMOVE: self.remove_task,
            MenuChoice.CHANGE_STATE: self.change_state,
            MenuChoice.FILTER_BY_STATE: self.filter_by_state,
        }

        while True:
            print_info(self.console, render_menu(self.config))
            choice = parse_choice(self.read_line())
            logger.debug("Menu selection: %d", choice)

            if choice == MenuChoice.EXIT:
                break

            handler = handlers.get(choice)
            if handler is None:
                print_error(self.console, "Invalid option. Try again.")
            else:
                handler()

    def register_task(self) -> None:
        print_info(self.console, "Enter the task title:")
        title = self.read_line()
        self.registry.add(title)
        print_success(self.console, "Task registered.")

    def list_tasks(self) -> None:
        print_tasks(self.console, self.registry.list_all(), self.config.display.style)

    def remove_task(self) -> None:
        self.list_tasks()
        print_info(self.console, "Enter the number of the task to remove:")
        number = parse_int(self.read_line())
        if number is None:
            print_error(self.console, "Invalid entry.")
            return

        if self.registry.remove_at(number - 1):
            print_success(self.console, "Task removed.")
        else:
            print_error(self.console, "Invalid number.")

    def change_state(self) -> None:
        self.list_tasks()
        print_info(self.console, "Enter the number of the task to update:")
        number = parse_int(self.read_line())
        if number is None:
            print_error(self.console, "Invalid number.")
            return

        state = self._read_state("Select the new state:", "Invalid state.")
        if state is None:
            return

        if self.registry.set_state_at(number - 1, state):
            print_success(self.console, "State updated.")
        else:
            print_error(self.console, "Could not update.")

    def filter_by_state(self) -> None:
        state = self._read_state("Select a state to filter by:", "Invalid entry.")
        if state is None:
            return

        print_tasks_by_state(
            self.console,
            state,
            self.registry.list_by_state(state),
            self.config.display.style,
        )

    def _read_state(self, prompt: str, parse_error: str) -> TaskState | None:
        """Show the state menu and read a choice, reporting bad input."""
        print_info(self.console, render_state_menu(prompt))
        number = parse_int(self.read_line())
        if number is None:
            print_error(self.console, parse_error)
            return None

        state = state_for_choice(number)
        if state is None:
            print_error(self.console, "Invalid option.")
        return state
