"""Argument validation, here-documents and file redirection."""

from __future__ import annotations

import errno
import os
import sys
from collections.abc import Iterable, Sequence
from contextlib import suppress
from dataclasses import dataclass, field
from typing import BinaryIO, TextIO

from .errors import write_error
from .lines import LineReader
from .text import strcmp, strncmp

__all__ = [
    "HERE_DOC",
    "HERE_DOC_KEYWORD",
    "TMP_INPUT",
    "Invocation",
    "check_permissions",
    "read_here_doc",
    "prepare",
]

HERE_DOC = ".here_doc"
TMP_INPUT = ".tmp"
HERE_DOC_KEYWORD = "here_doc"
_FILE_MODE = 0o755


@dataclass
class Invocation:
    """Commands to run and the files standing in for their input and output.

    ``None`` for *input* or *output* means the process's own stream is used.
    """

    commands: list[str]
    input: BinaryIO | None = None
    output: BinaryIO | None = None
    here_doc: bool = False
    _closed: bool = field(default=False, repr=False)

    def close(self) -> None:
        for handle in (self.input, self.output):
            if handle is not None:
                handle.close()
        self._closed = True

    def __enter__(self) -> Invocation:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _is_here_doc(args: Sequence[str]) -> bool:
    return strcmp(HERE_DOC_KEYWORD, args[0]) == 0


def _open(path: str, flags: int, mode: str) -> BinaryIO | None:
    try:
        fd = os.open(path, flags, _FILE_MODE)
    except OSError:
        return None
    return os.fdopen(fd, mode)


def check_permissions(args: Sequence[str], stream: TextIO | None = None) -> bool:
    """Check the input and output files named in *args*.

    Returns False when the input file is missing or unreadable; an output
    file that exists but is not writable is reported without failing.
    """
    outfile = args[-1]
    here_doc = _is_here_doc(args)
    if here_doc and not os.access(outfile, os.W_OK):
        with suppress(FileNotFoundError):
            os.unlink(HERE_DOC)
    if not here_doc:
        infile = args[0]
        if not os.access(infile, os.F_OK):
            write_error(errno.ENOENT, infile, None, stream)
            return False
        if not os.access(infile, os.R_OK):
            write_error(errno.EACCES, infile, None, stream)
            return False
    if os.access(outfile, os.F_OK) and not os.access(outfile, os.W_OK):
        write_error(errno.EACCES, outfile, None, stream)
    return True


def read_here_doc(
    limiter: str,
    source: Iterable[str],
    sink: TextIO,
    prompt: TextIO | None = None,
) -> int:
    """Copy lines from *source* to *sink* until one starts with *limiter*.

    A ``>`` prompt is written before each line is read.  Returns the number
    of lines copied; raises EOFError if *source* ends first.
    """
    lines = iter(source)
    copied = 0
    while True:
        if prompt is not None:
            prompt.write(">")
            prompt.flush()
        line = next(lines, None)
        if line is None:
            raise EOFError("input ended before the limiter was seen")
        if strncmp(line, limiter, len(limiter)) == 0:
            return copied
        sink.write(line)
        copied += 1


def prepare(
    args: Sequence[str],
    stdin: Iterable[str] | None = None,
    stream: TextIO | None = None,
) -> Invocation:
    """Validate *args* and open the files the pipeline reads and writes.

    *args* is ``infile cmd... outfile`` or ``here_doc LIMITER cmd... outfile``.
    Here-document lines come from *stdin*, standard input by default.
    """
    args = list(args)
    if len(args) < 4:
        raise ValueError("expected an input, at least two commands and an output")
    outfile = args[-1]

    if _is_here_doc(args):
        output = _open(outfile, os.O_WRONLY | os.O_CREAT | os.O_APPEND, "ab")
        source = LineReader(0) if stdin is None else stdin
        with open(HERE_DOC, "w", encoding="utf-8", newline="") as sink:
            try:
                read_here_doc(args[1], source, sink, sys.stdout)
            except EOFError:
                write_error(errno.ENOMEM, None, None, stream)
            check_permissions(args, stream)
        data = _open(HERE_DOC, os.O_RDONLY, "rb")
        return Invocation(args[2:-1], data, output, True)

    if check_permissions(args, stream):
        commands = args[1:-1]
        data = _open(args[0], os.O_RDONLY, "rb")
    else:
        commands = args[2:-1]
        data = _open(TMP_INPUT, os.O_RDONLY | os.O_TRUNC | os.O_CREAT, "rb")
    output = _open(outfile, os.O_WRONLY | os.O_TRUNC | os.O_CREAT, "wb")
    return Invocation(commands, data, output, False)