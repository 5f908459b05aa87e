# pipeline-redirect

Run a chain of commands between an input file and an output file, much as
a shell pipeline with redirections would.

## Usage

```
pipeline-redirect infile "cmd1" "cmd2" ... "cmdN" outfile
```

works like

```
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

The output file is created if needed and truncated before writing.

If the input file does not exist or cannot be read, a message such as

```
zsh: No such file or directory: infile
```

is written to standard error, the first command is dropped, and the
remaining commands run with empty input (an empty `.tmp` file in the
working directory). An output file that exists but is not writable is
reported as `Permission denied`.

The same command can be started with `python -m pipeline_redirect.cli`.

### Here-documents

```
pipeline-redirect here_doc LIMITER "cmd1" ... "cmdN" outfile
```

works like

```
cmd1 << LIMITER | ... | cmdN >> outfile
```

Lines are read from standard input, with a `>` prompt written to standard
output before each one, until a line that starts with `LIMITER`. They are
stored in `.here_doc` in the working directory and fed to the first
command. Output is appended to the output file. If standard input ends
before the limiter is seen, `zsh: Cannot allocate memory` is reported and
the lines read so far are used.

### Commands

Each command string is split on spaces into a program name and its
arguments; empty fields are dropped and no quoting is interpreted. The
program is looked up in the directories listed in `PATH`. A command that
cannot be found is reported as

```
zsh: command not found: name
```

and the rest of the pipeline still runs, the next command receiving empty
input. Commands are started with an empty environment.

`.here_doc` and `.tmp` are removed once the pipeline has finished.

With fewer than four arguments the program exits with status 1 and does
nothing. If `PATH` is not set, the files are opened but no command is run.

## Using it from Python

- `pipeline_redirect.cli.main(argv=None, env=None)` runs the whole program
  and returns its exit status.
- `pipeline_redirect.redirect.prepare(args, stdin=None, stream=None)`
  validates the arguments, reads any here-document and returns an
  `Invocation` (a context manager) holding the commands and the opened
  input and output files. `check_permissions` and `read_here_doc` are the
  steps it is built from.
- `pipeline_redirect.pipeline.run_pipeline(paths, commands, stdin=None,
  stdout=None, stream=None)` runs the commands and returns the exit status
  of each: 127 for a command that was not found, 126 for one that could not
  be started. `cleanup()` removes the temporary files.
- `pipeline_redirect.paths.find_path(env)` and
  `resolve_command(paths, name)` handle the `PATH` lookup.
- `pipeline_redirect.errors.format_error` and `write_error` build and write
  the error messages.
- `pipeline_redirect.lines.LineReader(fd, buffer_size=1)` reads a file
  descriptor line by line.
- `pipeline_redirect.text` holds the string helpers `split`, `strcmp`,
  `strncmp`, `atoi`, `itoa`, `strtrim`, `strnstr` and `substr`.

## What it does not do

- Commands run one after another, not at the same time: each one finishes
  and its whole output is held in memory before the next starts, so
  commands that wait on each other or never end will not behave as in a
  shell pipe.
- There is no shell syntax: no quoting, globbing, variables or nested
  redirections.
- Exit statuses of the commands are not passed on; the program returns 0
  once it has run the pipeline.

## Installing

```
pip install .
```

Tests need the `test` extra:

```
pip install .[test]
pytest
```