# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file and the second writes to an output file, in the same way as this
shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

Exactly four arguments are required. With any other number, `pipex` writes

```
Invalid argument call: ./pipex infile cmd1 cmd2 outfile
```

to standard error and exits without running anything.

Each command is split on spaces into a program name and its arguments; runs
of spaces count as one separator and there is no quoting. The program name is
looked up in the directories of the search path taken from the environment
(any variable whose name begins with `PATH`; if several do, the last one
wins). The first directory in which `directory/name` exists is used. The
output file is created if it is missing (mode `0777` before the umask) and
emptied if it already exists.

The two stages are started independently. If the input file cannot be opened
or the first command cannot be found, the second stage still runs, and the
other way round. Such problems are reported on standard error, for example
`Open file error: ...` or `Path is empty: command not found: 'name'`.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

## Using it from Python

```python
import os
from pipex.pipeline import run_pipeline

statuses = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", dict(os.environ))
```

`run_pipeline` waits for both processes and returns a pair with the exit
status of each stage. A stage that could not be started reports
`FAILURE_STATUS` (255). `pipex.pipeline.main(argv)` is the command-line entry
point; `open_input` and `open_output` open the two files, and `UsageError` is
raised for a wrong argument count.

`pipex.pathsearch` holds the lookup:

- `find_path_variable(env)` returns the search path from a mapping, or `None`.
- `search_path(directories, command)` returns the first existing
  `directory/command`, or `None`.
- `resolve_command(command, env)` resolves the first word of a command line
  and raises `CommandNotFoundError` when it cannot be found.

`pipex.textutil` provides small string helpers: `split`, `atoi`, `itoa`,
`strtrim`, `substr`, `strnstr` and `strncmp`.

## What it does not do

`pipex` connects exactly two commands. It has no here-document mode, no
appending to the output file, no quoting or escaping in command lines, and no
lookup of commands given as absolute or relative paths: every program name is
searched for in the `PATH` directories.

## Running the tests

```sh
pip install ".[test]"
pytest
```