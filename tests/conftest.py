from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Callable

import pytest


PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def write_bytes(path: Path, size: int) -> Path:
    path.write_bytes(b"x" * size)
    return path


def append_bytes(path: Path, size: int) -> None:
    with path.open("ab") as fh:
        fh.write(b"y" * size)


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "logs"
    directory.mkdir()
    return directory


@pytest.fixture
def stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    """Replace standard input with canned operator replies."""

    def _feed(text: str) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return _feed


@pytest.fixture
def on_wait(monkeypatch: pytest.MonkeyPatch) -> Callable[[Callable[[], None]], list[int]]:
    """Run a callback instead of sleeping between the two snapshots.

    Returns the list of requested wait durations.
    """
    from logcurrent import activity

    def _install(callback: Callable[[], None]) -> list[int]:
        calls: list[int] = []

        def _fake_wait(seconds: int) -> None:
            calls.append(seconds)
            callback()

        monkeypatch.setattr(activity, "wait_seconds", _fake_wait)
        return calls

    return _install
