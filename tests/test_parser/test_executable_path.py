import sys

import pytest

from argloom.parser import ArgumentParser
from argloom.parser.utils import strip_executable_path
from argloom.utils import current_executable_path


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "prog"
    path.write_text("#!/bin/sh\n", encoding="UTF-8")
    return path


def test_absolute_path_is_dropped(program):
    tokens = strip_executable_path([str(program), "a"], lambda: program)
    assert tokens == ["a"]


def test_relative_path_is_dropped(program, monkeypatch):
    monkeypatch.chdir(program.parent)
    assert strip_executable_path(["prog", "a"], lambda: program) == ["a"]
    assert strip_executable_path(["./prog", "a"], lambda: program) == ["a"]


def test_other_path_is_kept(program, tmp_path):
    other = str(tmp_path / "other")
    assert strip_executable_path([other, "a"], lambda: program) == [other, "a"]


def test_only_first_token_is_checked(program):
    tokens = ["a", str(program)]
    assert strip_executable_path(tokens, lambda: program) == tokens


def test_empty_tokens():
    assert strip_executable_path([], lambda: "/bin/prog") == []


def test_unknown_executable_keeps_tokens(program):
    assert strip_executable_path([str(program)], lambda: None) == [str(program)]


def test_failing_capability_keeps_tokens(program):
    def broken():
        raise OSError("no executable")

    assert strip_executable_path([str(program), "a"], broken) == [str(program), "a"]


def test_parse_args_strips_executable(program):
    parser = ArgumentParser("prog")
    parser.add_argument("name")
    result = parser.parse_args([str(program), "alice"], executable_path=lambda: program)
    assert not result.error
    assert result.get("name").values() == ["alice"]


def test_parse_args_defaults_to_sys_argv(program, monkeypatch):
    monkeypatch.setattr(sys, "argv", [str(program), "alice"])
    parser = ArgumentParser("prog")
    parser.add_argument("name")
    result = parser.parse_args()
    assert not result.error
    assert result.get("name").values() == ["alice"]


def test_no_execute_filename_keeps_first_token(program):
    parser = ArgumentParser("prog")
    parser.add_argument("name")
    result = parser.parse_args_no_execute_filename([str(program), "alice"])
    assert result.error
    assert "too many positional arguments" in result.message


def test_missing_token_never_matches(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    tokens = ["-c", "3"]
    assert strip_executable_path(tokens, lambda: tmp_path / "-c") == tokens


@pytest.mark.parametrize("argv0", ["-c", "-"])
def test_interpreter_flag_is_not_an_executable(argv0, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", [argv0])
    assert current_executable_path() is None


def test_option_matching_interpreter_flag_is_kept(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["-c", "-c", "3"])
    parser = ArgumentParser("prog")
    parser.add_argument("count").add_name("-c").fixed(1)
    result = parser.parse_args(["-c", "3"])
    assert not result.error
    assert result.get("count").values() == ["3"]


def test_current_executable_path(program, monkeypatch):
    monkeypatch.setattr(sys, "argv", [str(program)])
    assert current_executable_path() == program.resolve()


def test_current_executable_path_rejects_directories(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", [str(tmp_path)])
    assert current_executable_path() is None
