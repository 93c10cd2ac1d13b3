"""Command lookup, redirections, here-documents and running commands."""

from __future__ import annotations

import errno
import os
import signal
import stat
import subprocess
import sys
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence, TextIO

from shellkit.builtins import (
    run_cd,
    run_echo,
    run_env,
    run_exit,
    run_export,
    run_pwd,
    run_unset,
)
from shellkit.conversions import itoa
from shellkit.ctype import tolower
from shellkit.environment import Environment

__all__ = [
    "BUILTINS",
    "RedirectError",
    "ShellState",
    "access_error_message",
    "check_infile",
    "check_outfile",
    "command_not_found_message",
    "directory_message",
    "exit_status",
    "heredoc_file_name",
    "is_builtin",
    "open_infile",
    "open_outfile",
    "read_heredoc",
    "resolve_command",
    "run_builtin",
    "run_command",
    "signal_notice",
]

BUILTINS = frozenset({"echo", "cd", "pwd", "export", "unset", "env", "exit"})

_HEREDOC_NAME_LIMIT = 13
_QUIT_NOTICE = "Quit (core dumped)\n"


class RedirectError(Exception):
    """A redirection could not be set up; ``message`` is ready to print."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


@dataclass
class ShellState:
    """State shared by the commands of one shell session."""

    env: Environment = field(default_factory=Environment)
    interactive: bool = False
    should_exit: bool = False
    last_status: int = 0


def is_builtin(name: str) -> bool:
    """Return whether ``name`` is one of the shell's built-in commands."""
    return name in BUILTINS


def run_builtin(
    args: Sequence[str],
    state: ShellState,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Run the builtin named by ``args[0]`` and return its status."""
    if not args or not is_builtin(args[0]):
        raise ValueError(f"not a builtin: {args[0] if args else ''!r}")
    name = args[0]
    env = state.env
    if name == "echo":
        return run_echo(args, out)
    if name == "cd":
        return run_cd(args, env, err)
    if name == "pwd":
        return run_pwd(out)
    if name == "export":
        return run_export(env, args, out)
    if name == "unset":
        return run_unset(args, env)
    if name == "env":
        return run_env(env.strings(), out)
    outcome = run_exit(args, state.interactive, err)
    state.should_exit = outcome.should_exit
    return outcome.status & 0xFF


def resolve_command(cmd: str, env: Environment) -> Optional[str]:
    """Find the file to run for ``cmd``.

    A name holding a '/' or starting with '.' is used as given; otherwise
    each non-empty PATH entry is tried in order. Returns None when nothing
    executable is found or PATH is unset.
    """
    if "/" in cmd or cmd.startswith("."):
        return cmd
    paths = env.get("PATH")
    if paths is None:
        return None
    for directory in filter(None, paths.split(":")):
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None


def command_not_found_message(cmd: str) -> str:
    """Message printed when ``cmd`` cannot be executed."""
    return f"{cmd}: command not found\n"


def directory_message(path: str) -> str:
    """Message printed when the command path is a directory."""
    return f"msh: {path}: Is a directory\n"


def access_error_message(error: str, file: str) -> str:
    """Format an access error; the first letter of ``error`` is lower-cased."""
    if error:
        error = tolower(error[0]) + error[1:]
    return f"minishell: {error}: {file}\n"


def _access_failure(path: str) -> RedirectError:
    code = errno.EACCES if os.path.lexists(path) else errno.ENOENT
    return RedirectError(access_error_message(os.strerror(code), path))


def check_outfile(path: str) -> None:
    """Raise RedirectError when ``path`` exists but is not writable."""
    if not os.access(path, os.F_OK):
        return
    if not os.access(path, os.W_OK):
        raise _access_failure(path)


def check_infile(path: str) -> None:
    """Raise RedirectError when ``path`` cannot be read."""
    if not os.access(path, os.R_OK):
        raise _access_failure(path)


def open_outfile(path: str, append: bool = False) -> TextIO:
    """Open ``path`` for output, truncating or appending, mode 0644."""
    check_outfile(path)
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        fd = os.open(path, flags, 0o644)
    except OSError as exc:
        raise RedirectError(access_error_message(exc.strerror or "", path)) from exc
    return os.fdopen(fd, "a" if append else "w")


def open_infile(path: str) -> TextIO:
    """Open ``path`` for input."""
    check_infile(path)
    try:
        return open(path, "r")
    except OSError as exc:
        raise RedirectError(access_error_message(exc.strerror or "", path)) from exc


def heredoc_file_name(index: int) -> str:
    """Name of the temporary file that holds the here-document ``index``."""
    return ("tmp_file_" + itoa(index))[:_HEREDOC_NAME_LIMIT]


def read_heredoc(
    delimiter: Optional[str], lines: Iterable[str], stream: TextIO
) -> bool:
    """Copy ``lines`` to ``stream`` until one equals ``delimiter``.

    Each line is written with a trailing newline. Returns False when the
    reading was interrupted, True otherwise. A missing delimiter raises
    RedirectError.
    """
    if delimiter is None:
        raise RedirectError("msh: parse error near `\\n'\n")
    try:
        for line in lines:
            line = line.removesuffix("\n")
            if line == delimiter:
                break
            stream.write(line + "\n")
    except KeyboardInterrupt:
        return False
    return True


def exit_status(returncode: int) -> int:
    """Turn a process return code into a shell status (128 + signal)."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def signal_notice(status: int) -> str:
    """Text printed after a command ended by SIGINT or SIGQUIT."""
    if status in (signal.SIGINT, 128 + signal.SIGINT):
        return "\n"
    if status == 128 + signal.SIGQUIT:
        return _QUIT_NOTICE
    return ""


def _child_environment(env: Environment) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for entry in env:
        name, sep, value = entry.partition("=")
        if sep:
            result[name] = value
    return result


def _is_directory(path: str) -> bool:
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return False


def run_command(args: Sequence[str], state: ShellState) -> int:
    """Run an external command and return its shell status.

    A directory gives 126 and a command that cannot be started gives 127.
    """
    if not args:
        raise ValueError("empty command")
    path = resolve_command(args[0], state.env)
    if path is not None and _is_directory(path):
        sys.stderr.write(directory_message(path))
        return 126
    if path is None:
        sys.stderr.write(command_not_found_message(args[0]))
        return 127
    try:
        proc = subprocess.Popen(
            [args[0], *args[1:]],
            executable=path,
            env=_child_environment(state.env),
        )
    except OSError:
        sys.stderr.write(command_not_found_message(args[0]))
        return 127
    try:
        returncode = proc.wait()
    except KeyboardInterrupt:
        returncode = proc.wait()
    status = exit_status(returncode)
    notice = signal_notice(status)
    if notice:
        sys.stdout.write(notice)
    state.last_status = status
    return status