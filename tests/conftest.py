"""Shared fixtures for taskdash tests."""

from __future__ import annotations

import io
import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from rich.console import Console

from taskdash.registry import TaskRegistry


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_taskdash_dir(temp_project: Path) -> Path:
    """Create a temporary .taskdash directory."""
    taskdash_dir = temp_project / ".taskdash"
    taskdash_dir.mkdir()
    return taskdash_dir


@pytest.fixture
def output() -> io.StringIO:
    """Buffer capturing console output."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """A wide, colourless console writing to the output buffer."""
    return Console(file=output, width=120, color_system=None)


@pytest.fixture
def registry() -> TaskRegistry:
    """An empty registry."""
    return TaskRegistry()


@pytest.fixture
def populated_registry() -> TaskRegistry:
    """A registry holding tasks A, B and C, all pending."""
    registry = TaskRegistry()
    for title in ("A", "B", "C"):
        registry.add(title)
    return registry


def scripted_input(*lines: str) -> Callable[[], str]:
    """Build a read_line callable that replays lines, then raises EOFError."""
    remaining = iter(lines)

    def read_line() -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read_line


@pytest.fixture
def script() -> Callable[..., Callable[[], str]]:
    """Factory for scripted input readers."""
    return scripted_input
