from __future__ import annotations

import shlex
import subprocess


def build_invocation(template: str, path: str) -> str:
    return f"{template} {shlex.quote(path)}"


def run_command(invocation: str) -> None:
    """Run ``invocation`` through the system shell and wait for it.

    The child inherits our standard streams; its exit status is not checked.
    """
    subprocess.run(invocation, shell=True, check=False)
