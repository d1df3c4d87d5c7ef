from __future__ import annotations

import sys

import typer
from rich.console import Console
from rich.markup import escape

from logcurrent import __version__
from logcurrent.activity import detect_active_files
from logcurrent.config import (
    DEFAULT_LOG_DIR,
    DEFAULT_WAIT_SECONDS,
    MAX_WAIT_SECONDS,
    RunConfig,
    build_run_config,
)
from logcurrent.runner import build_invocation, run_command
from logcurrent.scanner import DirectoryAccessError, FileAccessError, ensure_directory
from logcurrent.selector import SelectionMode, select_record


PROG_NAME = "log-current"
CONTRADICTION_WARNING = "--command (-c) and --list (-l) contradict each other"

# typer may run on a bundled copy of click, so resolve the base class from the
# exceptions it re-exports rather than from the standalone package.
ClickException = next(
    base for base in typer.BadParameter.__mro__ if base.__name__ == "ClickException"
)

app = typer.Typer(
    help="Observe which log files in a directory are currently being written to.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _warn(message: str) -> None:
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}", soft_wrap=True)


def _fail(message: str, hint: str) -> int:
    err_console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)
    err_console.print(hint, soft_wrap=True)
    return 1


def _run(config: RunConfig) -> int:
    try:
        ensure_directory(config.directory)
    except DirectoryAccessError as exc:
        return _fail(
            str(exc),
            f"Check if the directory exists or try running {PROG_NAME} as super user",
        )

    try:
        changed = detect_active_files(config, console)
    except (FileAccessError, DirectoryAccessError) as exc:
        return _fail(str(exc), f"Try running {PROG_NAME} as super user")

    selected = select_record(changed, config.mode, console)
    if selected is None or config.mode is SelectionMode.LIST_ONLY:
        return 0

    run_command(build_invocation(config.command, config.path_for(selected.name)))
    return 0


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{PROG_NAME} {__version__}", highlight=False)
        raise typer.Exit()


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def watch(
    auto: bool = typer.Option(
        False,
        "--auto",
        "-a",
        help="Automatically select the first active log file and ignore all others.",
    ),
    command: str | None = typer.Option(
        None,
        "--command",
        "-c",
        help="Command to run on the selected log file.",
    ),
    directory: str | None = typer.Option(
        None,
        "--directory",
        "-d",
        help=f"Directory to observe. Defaults to {DEFAULT_LOG_DIR}.",
    ),
    list_only: bool = typer.Option(
        False,
        "--list",
        "-l",
        help="Only list active files; never run a command.",
    ),
    prefix: str | None = typer.Option(
        None,
        "--prefix",
        "-p",
        help="Only consider files whose name starts with this string.",
    ),
    suffix: str | None = typer.Option(
        None,
        "--suffix",
        "-s",
        help="Only consider files whose name ends with this string.",
    ),
    wait: int = typer.Option(
        DEFAULT_WAIT_SECONDS,
        "--wait",
        "-w",
        min=0,
        max=MAX_WAIT_SECONDS,
        help="Seconds to wait between the two directory snapshots.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Snapshot a directory twice and act on the log files that changed in between."""
    if list_only and command is not None:
        _warn(CONTRADICTION_WARNING)

    config = build_run_config(
        directory=directory,
        command=command,
        wait_seconds=wait,
        auto_select=auto,
        list_only=list_only,
        prefix=prefix,
        suffix=suffix,
    )
    raise typer.Exit(code=_run(config))


def main(argv: list[str] | None = None) -> int:
    command = typer.main.get_command(app)
    try:
        result = command.main(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except ClickException as exc:
        exc.show(file=sys.stderr)
        return 1
    except (typer.Abort, KeyboardInterrupt):
        err_console.print("[yellow]Interrupted.[/yellow]")
        return 130
    return result if isinstance(result, int) else 0


def run() -> None:
    raise SystemExit(main())
