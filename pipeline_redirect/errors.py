"""Shell-style error messages."""

from __future__ import annotations

import os
import sys
from typing import TextIO

__all__ = ["COMMAND_NOT_FOUND", "format_error", "write_error"]

COMMAND_NOT_FOUND = 129
_PREFIX = "zsh: "


def format_error(code: int, subject: str | None = None, detail: str | None = None) -> str:
    """Build the message for error *code*, naming *subject* and *detail*."""
    if code == COMMAND_NOT_FOUND:
        text = "command not found: "
    else:
        text = os.strerror(code)
    parts = [_PREFIX, text]
    if subject is not None:
        if code != COMMAND_NOT_FOUND:
            parts.append(": ")
        parts.append(subject)
    if detail is not None:
        parts.extend((" ", detail))
    parts.append("\n")
    return "".join(parts)


def write_error(
    code: int,
    subject: str | None = None,
    detail: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write the message for *code* to *stream*, standard error by default."""
    out = sys.stderr if stream is None else stream
    out.write(format_error(code, subject, detail))
    out.flush()