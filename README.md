# shellkit

`shellkit` provides the parts a small POSIX-style shell is built from. It has
no third-party dependencies and runs on Python 3.10 and later.

- **`shellkit.environment`** stores environment entries (`NAME=value`) in
  order. It can look entries up, update them, remove them and return them as
  strings.
- **`shellkit.builtins`** has the builtins `cd`, `echo`, `env`, `exit`,
  `export`, `pwd` and `unset`. They write to the streams you pass in (standard
  output or error by default) and return exit statuses.
- **`shellkit.execution`** resolves commands along `PATH`, checks and opens
  redirection targets, copies here-documents, maps return codes to shell
  statuses, and runs builtins or external commands.
- **`shellkit.conversions`**, **`shellkit.ctype`**, **`shellkit.fnvdict`** and
  **`shellkit.lineio`** are lower-level helpers. They cover C-style integer
  parsing and formatting with 32/64-bit wrap-around, ASCII character classes
  returning `CharClass` flags, an FNV-1a hashed open-addressing table, and
  output helpers plus a buffered line reader for file descriptors.

## What it does not do

`shellkit` is a library, not a ready-to-run shell. It has no prompt or
read-eval loop and installs no command. It does not tokenise or parse command
lines, expand variables or quotes, or build and run pipelines. You split a
line into an argument list yourself. You decide where redirections and
here-documents go and call the helpers below for them.

## Environment

```python
from shellkit.environment import Environment, is_valid_name

env = Environment(["HOME=/home/user", "PATH=/usr/bin:/bin"])
env.get("HOME")            # "/home/user"
env.update("EDITOR=vi")    # new name: appended
env.update("HOME=/tmp")    # existing name with a value: replaced
env.update("HOME")         # existing name without '=': left unchanged
env.remove("EDITOR")
env.strings()              # copy of the "NAME=value" strings, in order
len(env)                   # number of entries

is_valid_name("MY_VAR=1")  # True
is_valid_name("1VAR")      # False
```

`Environment.get` returns `None` for names that are unset or were stored
without a value.

## Builtins

Each builtin takes its argument list with the command name first and returns
an exit status.

```python
import io
from shellkit.builtins import run_echo, run_export, run_exit

out = io.StringIO()
run_echo(["echo", "-n", "hello", "world"], out)
out.getvalue()             # "hello world"

run_export(env, ["export", "GREETING=hi"], out)
env.get("GREETING")        # "hi"

outcome = run_exit(["exit", "3"])
outcome.status, outcome.should_exit   # (3, True)
```

`run_export` with no arguments lists every entry, sorted, as
`export NAME="value"`. `run_cd` updates `OLDPWD` and `PWD`, and `cd -` goes
back to `OLDPWD`.

## Executing commands

```python
from shellkit.execution import (
    ShellState,
    is_builtin,
    resolve_command,
    run_builtin,
    run_command,
)

is_builtin("cd")                  # True
resolve_command("ls", env)        # e.g. "/usr/bin/ls", or None if not found

state = ShellState(env)
run_builtin(["pwd"], state)       # 0
status = run_command(["ls", "-l"], state)
```

`run_builtin` sets `state.should_exit` when `exit` asks the shell to stop.
`run_command` starts the program with the environment in `state.env`. It
returns 126 when the path is a directory and 127 when the command cannot be
found or started. A command ended by a signal gets 128 plus the signal number.

Redirection helpers (`check_infile`, `check_outfile`, `open_infile`,
`open_outfile`) raise `RedirectError` with a shell-style `message` when a file
cannot be used. `read_heredoc` copies lines into a stream up to the delimiter
line and returns `False` if interrupted. `heredoc_file_name` names the
temporary file for a numbered here-document. `exit_status` and `signal_notice`
turn a child's return code into the status and the message a shell prints.

## Helpers

```python
from shellkit.conversions import atoi, itoa, itoa_base
from shellkit.fnvdict import FnvDict
from shellkit.lineio import LineReader, put_endl

atoi("  -42abc")                     # -42
itoa(-7)                             # "-7"
itoa_base(255, "0123456789abcdef")   # "ff"

table = FnvDict()
table.set("key", 1)
table.get("key")                     # 1
"key" in table                       # True
table.capacity                       # 32, doubles when half full

for line in LineReader(fd):          # lines keep their trailing newline
    ...
```

## Running the tests

Install the `test` extra and run `pytest` from the project root.