from __future__ import annotations

import time
from typing import TYPE_CHECKING

from logcurrent.config import RunConfig
from logcurrent.models import FileRecord
from logcurrent.scanner import scan_directory
from logcurrent.selector import SelectionMode

if TYPE_CHECKING:
    from rich.console import Console


def diff_snapshots(
    before: list[FileRecord],
    after: list[FileRecord],
    *,
    first_only: bool = False,
) -> list[FileRecord]:
    """Return the records of ``after`` that are new or changed size since ``before``.

    Files that disappeared are not reported. With ``first_only`` the search
    stops at the first changed record.
    """
    previous = {record.name: record.size for record in before}
    changed: list[FileRecord] = []

    for record in after:
        old_size = previous.get(record.name)
        if old_size is not None and old_size == record.size:
            continue
        changed.append(record)
        if first_only:
            break

    return changed


def wait_seconds(seconds: int) -> None:
    if seconds > 0:
        time.sleep(seconds)


def _waiting_message(seconds: int) -> str:
    return f"Waiting {seconds} second{'' if seconds == 1 else 's'}..."


def detect_active_files(config: RunConfig, console: "Console | None" = None) -> list[FileRecord]:
    name_filter = config.name_filter
    before = scan_directory(config.directory, name_filter)

    if console is not None and not config.list_only:
        console.print(_waiting_message(config.wait_seconds), highlight=False)
    wait_seconds(config.wait_seconds)

    after = scan_directory(config.directory, name_filter)
    return diff_snapshots(before, after, first_only=config.mode is SelectionMode.AUTO)
