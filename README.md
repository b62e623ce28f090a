# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file, and the second command writes to an output file. It does the same
job as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command-line use

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

The tool takes exactly four arguments. With any other number it prints
`Usage: ./pipex infile cmd1 cmd2 outfile` to standard error and exits with
status 1.

Each command is split on spaces into a program name and its arguments; runs of
spaces count as one and empty pieces are dropped. There is no shell quoting,
so an argument cannot contain a space. The program is looked up as follows:

- A name that starts with `/` or `.` is used as a path. That path must exist
  and be executable.
- Any other name is searched for in each directory of the `PATH` environment
  variable, and the first executable match is used.

The files are handled as follows:

- The input file is opened first. If it cannot be opened, the error is
  written to standard error and the tool exits with status 1.
- The output file is then created or truncated, with mode `0644`. If that
  fails, the tool also reports it and exits with status 1.
- A command that cannot be found (or an environment without `PATH`) is
  reported on standard error as `Command not found: ...`. The other command
  still runs.

Once both files are open, `pipex` exits with status 0, whatever the exit
statuses of the two commands.

## Library use

The pipeline and command lookup can also be called from Python:

```python
import os
from pipex.pipeline import run_pipeline
from pipex.command import find_path, resolve_command

statuses = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
# (status of cmd1, status of cmd2)

find_path("ls", dict(os.environ))           # e.g. "/bin/ls", or None
resolve_command("ls -l", dict(os.environ))  # (path, ["ls", "-l"])
```

- `run_pipeline(inpath, cmd1, cmd2, outpath, env=None)` uses `os.environ`
  when no environment is given. It returns the two exit statuses; a command
  that cannot be found gives 127, and one that cannot be started gives 1. It
  raises `OSError` when a file cannot be opened.
- `open_files(inpath, outpath)` opens the input for reading and creates or
  truncates the output, returning both as binary file objects.
- `get_path(env)` returns the value of `PATH` and raises `PathNotFoundError`
  when it is missing.
- `check_cmd(paths, cmd)` returns the first `directory/cmd` that is
  executable, or `None`.
- `find_path(cmd, env)` resolves a program name as described above and
  returns `None` when nothing matches.
- `resolve_command(cmd, env)` splits a command line and resolves its program.
  It raises `CommandNotFoundError` for an empty command or one that cannot be
  found.

The package also has some small helpers:

- `pipex.textops` holds string helpers: `atoi`, `itoa`, `split`, `trim`,
  `substr`, `find_within`, `compare_prefix`, `map_indexed`, `find_char` and
  `rfind_char`.
- `pipex.formatting` holds a printf-style formatter. It supports `%c`, `%s`,
  `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and `%%`; unknown conversions produce
  nothing. `format_string` returns the text, and `printf` writes it to
  standard output and returns the number of characters written.

## What it does not do

`pipex` joins exactly two commands. It does not take longer chains of
commands, here-documents, appending to the output file, or shell syntax such
as quotes, variables or globbing.

## Running the tests

```sh
pip install ".[test]"
pytest
```