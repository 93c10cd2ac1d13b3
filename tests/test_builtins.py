import io
import os

import pytest

from shellkit.builtins import (
    ExitOutcome,
    run_cd,
    run_echo,
    run_env,
    run_exit,
    run_export,
    run_pwd,
    run_unset,
)
from shellkit.environment import Environment


def test_echo_joins_arguments():
    out = io.StringIO()
    assert run_echo(["echo", "hello", "world"], out) == 0
    assert out.getvalue() == "hello world\n"


def test_echo_no_arguments_prints_newline():
    out = io.StringIO()
    run_echo(["echo"], out)
    assert out.getvalue() == "\n"


def test_echo_n_flags_suppress_newline():
    out = io.StringIO()
    run_echo(["echo", "-n", "-nnn", "hi"], out)
    assert out.getvalue() == "hi"


def test_echo_flag_followed_by_dash_is_text():
    out = io.StringIO()
    run_echo(["echo", "-n-", "x"], out)
    assert out.getvalue() == "-n- x\n"


def test_env_prints_entries():
    out = io.StringIO()
    env = Environment(["A=1", "B=2"])
    assert run_env(env, out) == 0
    assert out.getvalue().splitlines() == ["A=1", "B=2"]


def test_export_lists_sorted_and_quoted():
    out = io.StringIO()
    env = Environment(["B=2", "A=1", "C"])
    assert run_export(env, ["export"], out) == 0
    assert out.getvalue() == 'export A="1"\nexport B="2"\nexport C\n'


def test_export_sets_variables():
    env = Environment(["A=1"])
    assert run_export(env, ["export", "A=5", "NEW=x"], io.StringIO()) == 0
    assert env.get("A") == "5"
    assert env.get("NEW") == "x"


def test_export_reports_invalid_identifier():
    out = io.StringIO()
    env = Environment()
    assert run_export(env, ["export", "1bad=x", "GOOD=y"], out) == 1
    assert out.getvalue() == "minishell: export: '1bad=x': not a valid identifier\n"
    assert env.strings() == ["GOOD=y"]


def test_unset_removes_variables():
    env = Environment(["A=1", "B=2", "C=3"])
    assert run_unset(["unset", "A", "C"], env) == 0
    assert env.strings() == ["B=2"]


def test_pwd_prints_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    assert run_pwd(out) == 0
    assert out.getvalue() == os.getcwd() + "\n"


def test_cd_changes_directory_and_updates_pwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    start = os.getcwd()
    target = tmp_path / "sub"
    target.mkdir()
    env = Environment()
    assert run_cd(["cd", str(target)], env, io.StringIO()) == 0
    assert os.path.samefile(os.getcwd(), target)
    assert env.get("OLDPWD") == start
    assert env.get("PWD") == os.getcwd()


def test_cd_without_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    err = io.StringIO()
    assert run_cd(["cd"], Environment(), err) == 1
    assert err.getvalue() == "minishell: cd: HOME not set\n"


def test_cd_goes_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    env = Environment([f"HOME={home}"])
    assert run_cd(["cd"], env, io.StringIO()) == 0
    assert os.path.samefile(os.getcwd(), home)


def test_cd_dash_returns_to_oldpwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    start = os.getcwd()
    sub = tmp_path / "sub"
    sub.mkdir()
    env = Environment()
    run_cd(["cd", str(sub)], env, io.StringIO())
    assert run_cd(["cd", "-"], env, io.StringIO()) == 0
    assert os.getcwd() == start


def test_cd_missing_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    err = io.StringIO()
    missing = str(tmp_path / "missing")
    assert run_cd(["cd", missing], Environment(), err) == 1
    message = err.getvalue()
    assert message.startswith("minishell: cd: ")
    assert message.endswith(f": {missing}\n")


def test_cd_missing_directory_too_many_arguments(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    err = io.StringIO()
    missing = str(tmp_path / "missing")
    assert run_cd(["cd", missing, "extra"], Environment(), err) == 1
    assert err.getvalue() == "minishell: cd: too many arguments\n"


def test_exit_without_arguments():
    err = io.StringIO()
    assert run_exit(["exit"], False, err) == ExitOutcome(0, True)
    assert err.getvalue() == ""


def test_exit_interactive_announces():
    err = io.StringIO()
    run_exit(["exit"], True, err)
    assert err.getvalue() == "exit\n"


def test_exit_with_status():
    assert run_exit(["exit", "42"], False, io.StringIO()) == ExitOutcome(42, True)


def test_exit_non_numeric():
    err = io.StringIO()
    outcome = run_exit(["exit", "abc"], False, err)
    assert outcome == ExitOutcome(2, True)
    assert err.getvalue() == "minishell: exit: abc: numeric argument required"


def test_exit_too_many_arguments_keeps_running():
    err = io.StringIO()
    outcome = run_exit(["exit", "1", "2"], True, err)
    assert outcome == ExitOutcome(1, False)
    assert err.getvalue() == "exit\nminishell: exit: too many arguments\n"


@pytest.mark.parametrize("arg", ["-7", "+3", "0"])
def test_exit_signed_numbers_are_numeric(arg):
    outcome = run_exit(["exit", arg], False, io.StringIO())
    assert outcome.should_exit is True
    assert outcome.status == int(arg)