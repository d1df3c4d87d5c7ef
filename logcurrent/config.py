from __future__ import annotations

import os
import threading
from dataclasses import dataclass

from logcurrent.filters import NameFilter, build_name_filter
from logcurrent.selector import SelectionMode


# Build-time defaults. Packagers edit these to suit the target system.
DEFAULT_LOG_DIR = "/var/log/"
DEFAULT_COMMAND = "tail -f"
DEFAULT_WAIT_SECONDS = 2
# Longest delay time.sleep accepts on this platform.
MAX_WAIT_SECONDS = int(threading.TIMEOUT_MAX)


@dataclass(frozen=True, slots=True)
class RunConfig:
    directory: str
    command: str = DEFAULT_COMMAND
    wait_seconds: int = DEFAULT_WAIT_SECONDS
    auto_select: bool = False
    list_only: bool = False
    prefix: str | None = None
    suffix: str | None = None

    @property
    def mode(self) -> SelectionMode:
        # Listing wins over auto selection and over any configured command.
        if self.list_only:
            return SelectionMode.LIST_ONLY
        if self.auto_select:
            return SelectionMode.AUTO
        return SelectionMode.INTERACTIVE

    @property
    def name_filter(self) -> NameFilter:
        return build_name_filter(self.prefix, self.suffix)

    def path_for(self, name: str) -> str:
        return f"{self.directory}{name}"


def normalize_directory(directory: str) -> str:
    value = directory or os.curdir
    if value.endswith(os.sep):
        return value
    return value + os.sep


def build_run_config(
    *,
    directory: str | None = None,
    command: str | None = None,
    wait_seconds: int = DEFAULT_WAIT_SECONDS,
    auto_select: bool = False,
    list_only: bool = False,
    prefix: str | None = None,
    suffix: str | None = None,
) -> RunConfig:
    if not 0 <= wait_seconds <= MAX_WAIT_SECONDS:
        raise ValueError(f"wait_seconds must be between 0 and {MAX_WAIT_SECONDS}")
    return RunConfig(
        directory=normalize_directory(directory if directory is not None else DEFAULT_LOG_DIR),
        command=command if command is not None else DEFAULT_COMMAND,
        wait_seconds=wait_seconds,
        auto_select=auto_select,
        list_only=list_only,
        prefix=prefix or None,
        suffix=suffix or None,
    )
