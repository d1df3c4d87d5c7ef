from __future__ import annotations

import re
from enum import Enum

from rich.console import Console
from rich.prompt import IntPrompt, InvalidResponse
from rich.text import Text

from logcurrent.models import FileRecord


NO_ACTIVE_FILES_MESSAGE = "No log files are currently active."
INDEX_PATTERN = re.compile(r"[0-9]+")


class SelectionMode(str, Enum):
    LIST_ONLY = "list"
    AUTO = "auto"
    INTERACTIVE = "interactive"


class IndexPrompt(IntPrompt):
    """Integer prompt that only accepts values in ``[0, upper]``."""

    def __init__(self, upper: int, *, console: Console | None = None) -> None:
        super().__init__(Text(f"[0-{upper}]"), console=console)
        self.upper = upper

    def process_response(self, value: str) -> int:
        if not INDEX_PATTERN.fullmatch(value.strip()):
            raise InvalidResponse(self.validate_error_message)
        index = super().process_response(value)
        if not 0 <= index <= self.upper:
            raise InvalidResponse(
                f"[prompt.invalid]Please enter a number between 0 and {self.upper}"
            )
        return index


def _print_name(console: Console, line: str) -> None:
    console.out(line, highlight=False)


def _prompt_index(console: Console, upper: int) -> int | None:
    try:
        return IndexPrompt(upper, console=console)()
    except EOFError:
        console.out("")
        return None


def select_record(
    changed: list[FileRecord],
    mode: SelectionMode,
    console: Console,
) -> FileRecord | None:
    """Show the changed files and return the one to open, if any.

    ``LIST_ONLY`` prints bare names and never selects. ``AUTO`` picks the
    first record without prompting. ``INTERACTIVE`` offers a numbered menu
    whose last entry quits; end of input also counts as quitting.
    """
    if not changed:
        if mode is not SelectionMode.LIST_ONLY:
            console.print(NO_ACTIVE_FILES_MESSAGE)
        return None

    if mode is SelectionMode.LIST_ONLY:
        for record in changed:
            _print_name(console, record.name)
        return None

    console.print("Active log files:\n")

    if mode is SelectionMode.AUTO:
        selected = changed[0]
        _print_name(console, selected.name)
        return selected

    for index, record in enumerate(changed):
        _print_name(console, f"{index}: {record.name}")
    quit_index = len(changed)
    _print_name(console, f"{quit_index}: Quit")

    choice = _prompt_index(console, quit_index)
    if choice is None or choice == quit_index:
        return None
    return changed[choice]
