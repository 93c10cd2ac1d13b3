"""The shell's built-in commands."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, TextIO

from shellkit.conversions import atoi
from shellkit.environment import Environment, is_valid_name

__all__ = [
    "ExitOutcome",
    "run_cd",
    "run_echo",
    "run_env",
    "run_exit",
    "run_export",
    "run_pwd",
    "run_unset",
]


@dataclass(frozen=True)
class ExitOutcome:
    """Result of the ``exit`` builtin: the status and whether to leave."""

    status: int
    should_exit: bool


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _err(stream: Optional[TextIO]) -> TextIO:
    return sys.stderr if stream is None else stream


def _record_cwd(env: Environment, prefix: str) -> None:
    try:
        cwd = os.getcwd()
    except OSError:
        return
    env.update(prefix + cwd)


def _go_to_variable(env: Environment, name: str, err: TextIO) -> int:
    path = env.get(name)
    if path is None:
        err.write(f"minishell: cd: {name} not set\n")
        return 1
    _record_cwd(env, "OLDPWD=")
    try:
        os.chdir(path)
    except OSError:
        return 1
    return 0


def run_cd(args: Sequence[str], env: Environment, err: Optional[TextIO] = None) -> int:
    """Change directory, keeping PWD and OLDPWD up to date."""
    err = _err(err)
    if len(args) < 2:
        return _go_to_variable(env, "HOME", err)
    target = args[1]
    if target == "-":
        return _go_to_variable(env, "OLDPWD", err)
    _record_cwd(env, "OLDPWD=")
    status = 0
    try:
        os.chdir(target)
    except OSError as exc:
        status = 1
        if len(args) > 2:
            err.write("minishell: cd: too many arguments\n")
        else:
            err.write(f"minishell: cd: {exc.strerror}: {target}\n")
    _record_cwd(env, "PWD=")
    return status


def _is_newline_flag(arg: str) -> bool:
    return arg.startswith("-n") and arg[2:3] != "-"


def run_echo(args: Sequence[str], out: Optional[TextIO] = None) -> int:
    """Print the arguments separated by spaces; leading ``-n`` drops the newline."""
    out = _out(out)
    words = list(args[1:])
    newline = True
    while words and _is_newline_flag(words[0]):
        newline = False
        words.pop(0)
    out.write(" ".join(words))
    if newline:
        out.write("\n")
    return 0


def run_env(env: Iterable[str], out: Optional[TextIO] = None) -> int:
    """Print every environment entry on its own line."""
    out = _out(out)
    for entry in env:
        out.write(f"{entry}\n")
    return 0


def _is_numeric(text: str) -> bool:
    digits = text[1:] if text[:1] in ("+", "-") else text
    return bool(digits) and all("0" <= c <= "9" for c in digits)


def run_exit(
    args: Sequence[str], interactive: bool = False, err: Optional[TextIO] = None
) -> ExitOutcome:
    """Work out the status for ``exit`` and whether the shell should stop."""
    err = _err(err)
    end = "\n" if interactive else ""
    if interactive:
        err.write("exit\n")
    if len(args) > 1 and not _is_numeric(args[1]):
        err.write(f"minishell: exit: {args[1]}: numeric argument required{end}")
        return ExitOutcome(2, True)
    if len(args) > 2:
        err.write(f"minishell: exit: too many arguments{end}")
        return ExitOutcome(1, False)
    if len(args) > 1:
        return ExitOutcome(atoi(args[1]), True)
    return ExitOutcome(0, True)


def _export_line(entry: str) -> str:
    quoted = entry.replace("=", '="')
    if "=" in entry:
        quoted += '"'
    return f"export {quoted}\n"


def run_export(env: Environment, args: Sequence[str], out: Optional[TextIO] = None) -> int:
    """Set variables, or list them sorted when no arguments are given."""
    out = _out(out)
    if len(args) < 2:
        ordered: List[str] = sorted(env.strings(), key=lambda s: s.encode("utf-8"))
        for entry in ordered:
            out.write(_export_line(entry))
        return 0
    status = 0
    for arg in args[1:]:
        if is_valid_name(arg):
            env.update(arg)
        else:
            out.write(f"minishell: export: '{arg}': not a valid identifier\n")
            status = 1
    return status


def run_pwd(out: Optional[TextIO] = None) -> int:
    """Print the current working directory."""
    out = _out(out)
    try:
        cwd = os.getcwd()
    except OSError:
        return 1
    out.write(f"{cwd}\n")
    return 0


def run_unset(args: Sequence[str], env: Environment) -> int:
    """Remove each named variable."""
    for name in args[1:]:
        env.remove(name)
    return 0