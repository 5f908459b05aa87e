"""Running commands one after another, each fed by the previous one."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from contextlib import suppress
from pathlib import Path
from typing import BinaryIO, TextIO

from .errors import COMMAND_NOT_FOUND, write_error
from .paths import resolve_command
from .redirect import HERE_DOC, TMP_INPUT
from .text import split

__all__ = ["NOT_FOUND_STATUS", "EXEC_FAILED_STATUS", "cleanup", "run_pipeline"]

NOT_FOUND_STATUS = 127
EXEC_FAILED_STATUS = 126


def cleanup() -> None:
    """Remove the temporary input files left in the working directory."""
    for name in (HERE_DOC, TMP_INPUT):
        with suppress(FileNotFoundError):
            Path(name).unlink()


def _run(
    argv: list[str],
    executable: str,
    source: BinaryIO | bytes | None,
    sink: BinaryIO | int | None,
) -> subprocess.CompletedProcess[bytes] | None:
    options: dict[str, object] = {"executable": executable, "env": {}, "stdout": sink}
    if isinstance(source, bytes):
        options["input"] = source
    else:
        options["stdin"] = source
    try:
        return subprocess.run(argv, check=False, **options)
    except OSError:
        return None


def run_pipeline(
    paths: Sequence[str],
    commands: Sequence[str],
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
    stream: TextIO | None = None,
) -> list[int]:
    """Run *commands* in turn, piping each one's output into the next.

    The first reads *stdin* and the last writes *stdout*; ``None`` means the
    process's own stream.  A command that cannot be found produces no output
    and is reported on *stream*.  Returns the exit status of every command.
    """
    statuses: list[int] = []
    source: BinaryIO | bytes | None = stdin
    last = len(commands) - 1
    for index, line in enumerate(commands):
        argv = split(line, " ")
        name = argv[0] if argv else None
        executable = resolve_command(paths, name)
        is_last = index == last
        sink = stdout if is_last else subprocess.PIPE
        if executable is None:
            status = NOT_FOUND_STATUS
            output = b""
        else:
            result = _run(argv, executable, source, sink)
            if result is None:
                status = EXEC_FAILED_STATUS
                output = b""
            else:
                status = result.returncode
                output = result.stdout or b""
        if executable is None:
            write_error(COMMAND_NOT_FOUND, name, None, stream)
        statuses.append(status)
        source = output
    return statuses