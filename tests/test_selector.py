from __future__ import annotations

import io

import pytest
from rich.console import Console

from logcurrent.models import FileRecord
from logcurrent.selector import NO_ACTIVE_FILES_MESSAGE, SelectionMode, select_record


CHANGED = [FileRecord("app.log", 50), FileRecord("db.log", 7), FileRecord("[odd].log", 1)]


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120)


def _output(console: Console) -> str:
    return console.file.getvalue()


class TestEmptyChangedSet:
    @pytest.mark.parametrize("mode", [SelectionMode.AUTO, SelectionMode.INTERACTIVE])
    def test_prints_notice(self, console: Console, mode: SelectionMode) -> None:
        assert select_record([], mode, console) is None
        assert _output(console) == f"{NO_ACTIVE_FILES_MESSAGE}\n"

    def test_list_only_prints_nothing(self, console: Console) -> None:
        assert select_record([], SelectionMode.LIST_ONLY, console) is None
        assert _output(console) == ""


class TestListOnly:
    def test_prints_bare_names(self, console: Console) -> None:
        assert select_record(CHANGED, SelectionMode.LIST_ONLY, console) is None
        assert _output(console) == "app.log\ndb.log\n[odd].log\n"


class TestAutoSelect:
    def test_picks_first_without_prompting(self, console: Console, stdin) -> None:
        stdin("")
        selected = select_record(CHANGED, SelectionMode.AUTO, console)

        assert selected == CHANGED[0]
        output = _output(console)
        assert output == "Active log files:\n\napp.log\n"
        assert "[0-" not in output


class TestInteractive:
    def test_shows_numbered_menu_with_quit(self, console: Console, stdin) -> None:
        stdin("1\n")
        selected = select_record(CHANGED, SelectionMode.INTERACTIVE, console)

        assert selected == CHANGED[1]
        output = _output(console)
        assert "0: app.log\n1: db.log\n2: [odd].log\n3: Quit\n" in output
        assert "[0-3]: " in output

    def test_quit_entry_selects_nothing(self, console: Console, stdin) -> None:
        stdin("3\n")
        assert select_record(CHANGED, SelectionMode.INTERACTIVE, console) is None

    def test_invalid_replies_reprompt(self, console: Console, stdin) -> None:
        stdin("abc\n-1\n4\n1 2\n2\n")
        selected = select_record(CHANGED, SelectionMode.INTERACTIVE, console)

        assert selected == CHANGED[2]
        output = _output(console)
        assert output.count("[0-3]: ") == 5
        assert "Please enter a valid integer number" in output
        assert "Please enter a number between 0 and 3" in output

    def test_end_of_input_quits(self, console: Console, stdin) -> None:
        stdin("nope\n")
        assert select_record(CHANGED, SelectionMode.INTERACTIVE, console) is None

    def test_single_entry_menu(self, console: Console, stdin) -> None:
        stdin("0\n")
        changed = [FileRecord("app.log", 50)]

        assert select_record(changed, SelectionMode.INTERACTIVE, console) == changed[0]
        output = _output(console)
        assert "0: app.log\n1: Quit\n" in output
        assert "[0-1]: " in output

    @pytest.mark.parametrize("reply", ["1_0", "+1", "0x1", "１"])
    def test_only_plain_digits_are_accepted(self, console: Console, stdin, reply: str) -> None:
        stdin(f"{reply}\n0\n")
        changed = [FileRecord(f"f{index}.log", index) for index in range(11)]

        assert select_record(changed, SelectionMode.INTERACTIVE, console) == changed[0]
        output = _output(console)
        assert output.count("[0-11]: ") == 2
        assert "Please enter a valid integer number" in output
