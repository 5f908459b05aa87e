"""Search-path handling for command lookup."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from .text import split

__all__ = ["find_path", "resolve_command"]


def find_path(env: Mapping[str, str]) -> list[str] | None:
    """Return the directories listed in ``PATH``, or None when it is unset."""
    value = env.get("PATH")
    if value is None:
        return None
    return split(value, ":")


def resolve_command(paths: Sequence[str], name: str | None) -> str | None:
    """Locate *name*, returning the first existing candidate or None.

    Before each directory is tried, ``/`` + *name* is checked on its own, so
    absolute names are found as long as *paths* is not empty.
    """
    if not name:
        return None
    rooted = "/" + name
    for directory in paths:
        if os.path.exists(rooted):
            return rooted
        candidate = directory + rooted
        if os.path.exists(candidate):
            return candidate
    return None