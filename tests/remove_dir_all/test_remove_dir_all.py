"""
Tests for remove_dir_all: success, failure kinds, and the empty-path guard
that comes from the filesystem primitive itself.
"""
from __future__ import annotations

import os
import sys
import threading

import pytest

from pgmgr.commands import build_registry
from pgmgr.commands.remove_dir_all import remove_dir_all
from pgmgr.utils.exceptions import CommandError, RemoveDirError


# ---------------------------------------------------------------------------
# Success
# ---------------------------------------------------------------------------

def test_removes_directory_with_one_file(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    (target / "file.txt").write_text("x", encoding="utf-8")

    assert remove_dir_all(str(target)) is None
    assert not target.exists()
    assert not (target / "file.txt").exists()


def test_removes_nested_tree(tmp_path):
    target = tmp_path / "target"
    (target / "a" / "b" / "c").mkdir(parents=True)
    (target / "a" / "b" / "c" / "deep.txt").write_text("x", encoding="utf-8")
    (target / "a" / "top.txt").write_text("x", encoding="utf-8")

    remove_dir_all(str(target))
    assert not target.exists()
    assert tmp_path.exists()


def test_removes_empty_directory(tmp_path):
    target = tmp_path / "empty"
    target.mkdir()
    remove_dir_all(str(target))
    assert not target.exists()


def test_relative_path_resolves_from_cwd(tmp_path, monkeypatch):
    (tmp_path / "rel").mkdir()
    monkeypatch.chdir(tmp_path)
    remove_dir_all("rel")
    assert not (tmp_path / "rel").exists()


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

def test_nonexistent_path_reports_not_found():
    with pytest.raises(RemoveDirError) as info:
        remove_dir_all("/nonexistent/path/xyz")
    err = info.value
    assert err.kind == "not_found"
    assert "/nonexistent/path/xyz" in str(err)
    assert isinstance(err.cause, FileNotFoundError)
    assert err.path == "/nonexistent/path/xyz"


def test_empty_path_fails_and_leaves_cwd(tmp_path, monkeypatch):
    (tmp_path / "keep.txt").write_text("x", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    with pytest.raises(RemoveDirError) as info:
        remove_dir_all("")
    assert str(info.value)
    assert (tmp_path / "keep.txt").exists()


def test_second_call_fails_with_not_found(tmp_path):
    target = tmp_path / "once"
    target.mkdir()
    remove_dir_all(str(target))
    with pytest.raises(RemoveDirError) as info:
        remove_dir_all(str(target))
    assert info.value.kind == "not_found"


def test_regular_file_is_not_a_directory(tmp_path):
    target = tmp_path / "plain.txt"
    target.write_text("x", encoding="utf-8")
    with pytest.raises(RemoveDirError) as info:
        remove_dir_all(str(target))
    assert info.value.kind == "not_a_directory"
    assert target.exists()


@pytest.mark.skipif(
    sys.platform == "win32" or os.geteuid() == 0,
    reason="permission bits are not enforced for root or on Windows",
)
def test_permission_denied_at_root_deletes_nothing(tmp_path):
    target = tmp_path / "locked"
    target.mkdir()
    (target / "keep.txt").write_text("x", encoding="utf-8")
    target.chmod(0)
    try:
        with pytest.raises(RemoveDirError) as info:
            remove_dir_all(str(target))
    finally:
        target.chmod(0o755)
    assert info.value.kind == "permission_denied"
    assert (target / "keep.txt").exists()


def test_error_is_a_command_error():
    with pytest.raises(CommandError):
        remove_dir_all("/nonexistent/path/xyz")


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------

def test_concurrent_calls_on_disjoint_trees(tmp_path):
    targets = []
    for i in range(8):
        t = tmp_path / f"tree{i}"
        (t / "sub").mkdir(parents=True)
        (t / "sub" / "f.txt").write_text("x", encoding="utf-8")
        targets.append(t)

    errors: list[BaseException] = []

    def worker(path):
        try:
            remove_dir_all(str(path))
        except RemoveDirError as e:
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(t,)) for t in targets]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert errors == []
    assert all(not t.exists() for t in targets)


# ---------------------------------------------------------------------------
# Deep nesting
# ---------------------------------------------------------------------------

_DEPTH = 1500


def _make_chain(root: str, depth: int) -> None:
    """Create root/d/d/.../d, walking by fd so no long path is ever built."""
    fd = os.open(root, os.O_RDONLY)
    try:
        for _ in range(depth):
            os.mkdir("d", dir_fd=fd)
            child = os.open("d", os.O_RDONLY, dir_fd=fd)
            os.close(fd)
            fd = child
    finally:
        os.close(fd)


def _remove_chain(root: str) -> None:
    """Iteratively remove whatever is left of a chain made by _make_chain."""
    if not os.path.isdir(root):
        return
    fd = os.open(root, os.O_RDONLY)
    level = 0
    while True:
        try:
            child = os.open("d", os.O_RDONLY, dir_fd=fd)
        except FileNotFoundError:
            break
        os.close(fd)
        fd = child
        level += 1
    while level > 0:
        parent = os.open("..", os.O_RDONLY, dir_fd=fd)
        os.close(fd)
        os.rmdir("d", dir_fd=parent)
        fd = parent
        level -= 1
    os.close(fd)
    os.rmdir(root)


@pytest.mark.skipif(
    os.mkdir not in os.supports_dir_fd or os.open not in os.supports_dir_fd,
    reason="needs dir_fd support",
)
def test_deep_nesting_is_reported_not_raised(tmp_path):
    root = str(tmp_path / "deep")
    os.mkdir(root)
    _make_chain(root, _DEPTH)
    try:
        result = build_registry().execute("remove_dir_all", {"path": root})
        # rmtree implementations that walk with recursion give up with
        # too_deep; iterative ones remove the whole chain
        if result.ok:
            assert not os.path.exists(root)
        else:
            assert result.kind == "too_deep"
            assert result.error
    finally:
        _remove_chain(root)
