from __future__ import annotations

import os
from pathlib import Path

from logcurrent.filters import NameFilter, is_hidden
from logcurrent.models import FileRecord


class DirectoryAccessError(OSError):
    """The watched directory is missing, not a directory, or not listable."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"{directory} can't be opened for reading")
        self.directory = directory


class FileAccessError(OSError):
    """A directory entry could not be opened to measure its size."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Failed to open {name} for reading")
        self.name = name


def ensure_directory(directory: str) -> None:
    try:
        with os.scandir(directory):
            pass
    except OSError as exc:
        raise DirectoryAccessError(directory) from exc


def _file_size(path: Path, name: str) -> int | None:
    """Return the size of ``path`` measured by seeking to its end.

    Returns ``None`` if the entry vanished after it was listed. Any other
    failure to open the file is fatal for the whole scan: a snapshot that
    silently leaves out unreadable files would hide active logs.
    """
    try:
        with path.open("rb") as fh:
            return fh.seek(0, os.SEEK_END)
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise FileAccessError(name) from exc


def scan_directory(directory: str, name_filter: NameFilter | None = None) -> list[FileRecord]:
    """Snapshot the regular, non-hidden files of ``directory``.

    Entries keep the order the operating system lists them in.
    """
    name_filter = name_filter or NameFilter()
    records: list[FileRecord] = []

    try:
        entries = os.scandir(directory)
    except OSError as exc:
        raise DirectoryAccessError(directory) from exc

    with entries:
        for entry in entries:
            if is_hidden(entry.name):
                continue
            if not name_filter.matches(entry.name):
                continue
            if not entry.is_file():
                continue
            size = _file_size(Path(entry.path), entry.name)
            if size is None:
                continue
            records.append(FileRecord(name=entry.name, size=size))

    return records
