"""Command-line entry point: infile cmd1 ... cmdN outfile."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence

from .paths import find_path
from .pipeline import cleanup, run_pipeline
from .redirect import prepare

__all__ = ["main"]


def main(argv: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> int:
    """Run the pipeline described by *argv* and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    environment = os.environ if env is None else env
    if len(args) < 4:
        return 1
    paths = find_path(environment)
    invocation = prepare(args, None, sys.stderr)
    with invocation:
        if paths is None:
            return 0
        run_pipeline(paths, invocation.commands, invocation.input, invocation.output, sys.stderr)
    cleanup()
    return 0


if __name__ == "__main__":
    sys.exit(main())