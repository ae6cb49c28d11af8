"""Menu text and selection parsing for the dashboard."""

from __future__ import annotations

import re
from enum import IntEnum
from pathlib import Path

from jinja2 import BaseLoader, Environment

from taskdash.config import TaskdashConfig
from taskdash.registry import TaskState

# Selection value used when input is not an integer
INVALID_CHOICE = -1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class MenuChoice(IntEnum):
    """Main menu actions."""

    EXIT = 0
    REGISTER = 1
    LIST_ALL = 2
    REMOVE = 3
    CHANGE_STATE = 4
    FILTER_BY_STATE = 5


STATE_CHOICES: dict[int, TaskState] = {
    1: TaskState.PENDING,
    2: TaskState.IN_PROGRESS,
    3: TaskState.COMPLETED,
}

BANNER_TEMPLATE = """\
=================================
Welcome to the {{ title }}
{% if author -%}
Author: {{ author }}
{% endif -%}
================================="""

DEFAULT_MENU_TEMPLATE = """\

Select an option:
1. Register new task
2. Show all tasks
3. Remove task
4. Change task state
5. Show tasks by state
0. Exit"""

COMPACT_MENU_TEMPLATE = """\

[1] Add  [2] List  [3] Remove  [4] State  [5] Filter  [0] Exit"""

STATE_MENU_TEMPLATE = """\
{{ prompt }}
{% for number, state in choices.items() -%}
{{ number }}. {{ state.label }}
{% endfor -%}"""


def parse_int(text: str) -> int | None:
    """Parse a decimal integer, ignoring surrounding whitespace.

    Returns None when the text is not an integer.
    """
    text = text.strip()
    if not _INT_PATTERN.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # Digit strings past the interpreter's conversion limit
        return None


def parse_choice(text: str) -> int:
    """Parse a main menu selection, mapping bad input to INVALID_CHOICE."""
    value = parse_int(text)
    return INVALID_CHOICE if value is None else value


def state_for_choice(number: int) -> TaskState | None:
    """Map a state menu number to its TaskState."""
    return STATE_CHOICES.get(number)


def render_banner(config: TaskdashConfig) -> str:
    """Render the welcome banner."""
    return _render(
        BANNER_TEMPLATE,
        title=config.display.title,
        author=config.display.author,
    )


def render_menu(config: TaskdashConfig) -> str:
    """Render the main menu."""
    return _render(_get_template(config))


def render_state_menu(prompt: str) -> str:
    """Render the state selection menu under a prompt line."""
    return _render(STATE_MENU_TEMPLATE, prompt=prompt, choices=STATE_CHOICES)


def _get_template(config: TaskdashConfig) -> str:
    """Get the main menu template based on config."""
    if config.menu.custom_path:
        custom_path = Path(config.menu.custom_path)
        if custom_path.is_file():
            return custom_path.read_text()

    if config.menu.template == "compact":
        return COMPACT_MENU_TEMPLATE

    return DEFAULT_MENU_TEMPLATE


def _render(template_str: str, **context: object) -> str:
    env = Environment(loader=BaseLoader())
    template = env.from_string(template_str)
    return template.render(**context).rstrip("\n")
