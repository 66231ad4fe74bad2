# executor.py
from __future__ import annotations

import os
import subprocess
from typing import List

from .errors import ExecutionError
from .ui.console import get_console

EXEC_FAILED = "exec: failed to execute command"


def trim_output(text: str) -> str:
    """Drop one trailing line break and a stray leading backslash."""
    if text.endswith("\r\n"):
        text = text[:-2]
    elif text.endswith("\n"):
        text = text[:-1]
    if text.startswith("\\"):
        text = text[1:]
    return text


def execute(argv: List[str], cwd: str | None = None) -> str:
    """
    Run one command to completion and return its trimmed stdout.

    Raises:
        ExecutionError: non-zero exit (message is the trimmed stderr, or a
            generic message when stderr is empty) or the program could not
            be started.
    """
    if not argv:
        raise ExecutionError(EXEC_FAILED, argv=[])

    if cwd is not None and not os.path.isdir(cwd):
        raise ExecutionError(f"exec: working directory not found: {cwd}", argv=list(argv))

    get_console().print_debug(f"exec: {argv!r}")

    try:
        proc = subprocess.run(
            argv,
            cwd=cwd,
            text=True,
            capture_output=True,
        )
    except FileNotFoundError:
        raise ExecutionError(f"exec: {argv[0]}: command not found", argv=list(argv)) from None
    except PermissionError as e:
        raise ExecutionError(f"exec: {argv[0]}: {e.strerror}", argv=list(argv)) from None

    if proc.returncode != 0:
        raise ExecutionError(
            trim_output(proc.stderr) or EXEC_FAILED,
            argv=list(argv),
            exit_code=proc.returncode,
        )

    return trim_output(proc.stdout)
