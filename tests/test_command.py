import os

import pytest

from pipex.command import (
    CommandNotFoundError,
    PathNotFoundError,
    check_cmd,
    find_path,
    get_path,
    resolve_command,
)


def _make_file(directory, name, executable=True):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755 if executable else 0o644)
    return path


def test_get_path_returns_value():
    assert get_path({"HOME": "/home", "PATH": "/a:/b"}) == "/a:/b"


def test_get_path_missing_raises():
    with pytest.raises(PathNotFoundError):
        get_path({"HOME": "/home"})


def test_check_cmd_finds_executable(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    bindir = tmp_path / "bin"
    bindir.mkdir()
    _make_file(bindir, "tool")
    assert check_cmd([str(empty), str(bindir)], "tool") == f"{bindir}/tool"


def test_check_cmd_prefers_first_directory(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_file(first, "tool")
    _make_file(second, "tool")
    assert check_cmd([str(first), str(second)], "tool") == f"{first}/tool"


def test_check_cmd_skips_non_executable(tmp_path):
    _make_file(tmp_path, "data", executable=False)
    assert check_cmd([str(tmp_path)], "data") is None


def test_find_path_uses_path_variable(tmp_path):
    _make_file(tmp_path, "tool")
    env = {"PATH": f"::{tmp_path}:"}
    assert find_path("tool", env) == f"{tmp_path}/tool"


def test_find_path_absolute(tmp_path):
    tool = _make_file(tmp_path, "tool")
    assert find_path(str(tool), {}) == str(tool)


def test_find_path_absolute_missing(tmp_path):
    assert find_path(str(tmp_path / "absent"), {"PATH": str(tmp_path)}) is None


def test_find_path_relative(tmp_path, monkeypatch):
    _make_file(tmp_path, "tool")
    monkeypatch.chdir(tmp_path)
    assert find_path("./tool", {}) == "./tool"


def test_find_path_without_path_raises(tmp_path):
    with pytest.raises(PathNotFoundError):
        find_path("tool", {})


def test_find_path_unknown_command(tmp_path):
    assert find_path("absent", {"PATH": str(tmp_path)}) is None


def test_resolve_command_splits_arguments(tmp_path):
    _make_file(tmp_path, "tool")
    path, args = resolve_command("  tool -l   x ", {"PATH": str(tmp_path)})
    assert path == f"{tmp_path}/tool"
    assert args == ["tool", "-l", "x"]
    assert os.access(path, os.X_OK)


def test_resolve_command_empty_raises(tmp_path):
    with pytest.raises(CommandNotFoundError):
        resolve_command("   ", {"PATH": str(tmp_path)})


def test_resolve_command_unknown_raises(tmp_path):
    with pytest.raises(CommandNotFoundError):
        resolve_command("absent arg", {"PATH": str(tmp_path)})