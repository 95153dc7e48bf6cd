# pipex

`pipex` connects commands with pipes and redirects their input and output to
files, the way a shell does for a line such as

```
< infile cmd1 | cmd2 > outfile
```

Commands are looked up through the directories in `PATH`. A command argument
that contains `/` anywhere is run directly, its first word taken as the program
path. Arguments are split on spaces only; there is no quoting, globbing or
variable expansion.

## Installation

```
pip install .
```

## Command line

### Two commands

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

Reads `infile`, feeds it to `cmd1`, pipes the output of `cmd1` into `cmd2`, and
writes the result to `outfile`. The output file is created if it is missing
(mode `0644`) and truncated if it exists. Exactly four arguments are required.

Example:

```
pipex input.txt "grep error" "wc -l" count.txt
```

### Any number of commands

```
pipex-bonus infile "cmd1" "cmd2" ... "cmdN" outfile
```

The same as above, with as many commands in the chain as you like (at least
two).

### Here-document input

```
pipex-bonus here_doc LIMITER "cmd1" "cmd2" ... outfile
```

Instead of reading a file, lines are read from standard input, each after a
`pipe heredoc> ` prompt written to standard output, until the limiter line
(`LIMITER` followed by its newline) or the end of input. The text before it
becomes the input of the first command. In this mode the output is appended to
`outfile` rather than replacing it, like `cmd1 << LIMITER | cmd2 >> outfile`.
At least two commands are required.

### Errors

Invalid arguments print a usage hint to standard error. A command that cannot
be found is reported as `command not found : <name>`; a file that cannot be
opened is reported as `<name>: <system error message>`. A command that fails
to start does not stop the others: the next command in the chain simply reads
empty input.

## Python API

The pipeline can also be driven from Python:

```python
import os
from pipex.pipeline import run_pipeline, run_here_doc

statuses = run_pipeline("input.txt", ["grep error", "wc -l"], "count.txt", os.environ)
```

`run_pipeline` returns the exit status of each command, with 1 for a command
that could not be started. `run_here_doc(limiter, commands, outfile, env,
source, prompt)` does the same for here-document input, reading lines from the
`source` stream (standard input by default) and appending to `outfile`.

Lower-level helpers are available as well:

- `pipex.paths.resolve_command(arg, env)` returns the program path and
  argument list for a command string, using `parse_command(arg)`,
  `search_dirs(env)` and `find_executable(dirs, name)`; a missing command
  raises `pipex.errors.CommandNotFoundError`.
- `pipex.files` has `detect_here_doc(argv)`, `collect_here_doc(limiter,
  source, prompt)`, `open_infile(path)` and `open_outfile(path, append)`.
- `pipex.errors` defines `PipexError`, `UsageError` and
  `CommandNotFoundError`, plus `format_message` and `print_msg`.
- `pipex.linereader.LineReader(stream, buffer_size=50)` reads a text or binary
  stream line by line in fixed-size chunks, via `read_line()` or iteration.
- `pipex.formatting.format_printf(fmt, *args)` formats the `%c %s %d %i %u %x
  %X %p %%` conversions; `printf(fmt, *args, file=None)` writes the result and
  returns its length.
- `pipex.textutils` holds small string helpers: `atoi`, `itoa`, `split_words`,
  `strtrim`, `substr`, `strnstr` and `strncmp`.

## Running the tests

```
pip install ".[test]"
pytest
```