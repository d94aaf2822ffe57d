from __future__ import annotations

import os

from pgmgr.library.models import FileNode, Program, ProgramVersion
from pgmgr.utils.exceptions import LibraryError


def _sort_key(node: FileNode) -> tuple[bool, str]:
    # directories first, then case-insensitive by name
    return (not node.is_directory, node.name.lower())


def read_dir_tree(path: str) -> list[FileNode]:
    """
    List ``path`` recursively as FileNodes.

    An unreadable root yields an empty list; an unreadable subdirectory is
    kept with empty children.
    """
    try:
        entries = list(os.scandir(path))
    except OSError:
        return []

    nodes: list[FileNode] = []
    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        node = FileNode(name=entry.name, path=entry.path, is_directory=is_dir)
        if is_dir:
            node.children = read_dir_tree(entry.path)
        nodes.append(node)

    nodes.sort(key=_sort_key)
    return nodes


def _subdirectories(path: str) -> list[os.DirEntry]:
    with os.scandir(path) as it:
        dirs = [e for e in it if e.is_dir(follow_symlinks=False)]
    return sorted(dirs, key=lambda e: e.name.lower())


def load_programs(local_path: str) -> list[Program]:
    """Scan the local storage path: programs -> versions -> module trees."""
    try:
        os.makedirs(local_path, exist_ok=True)
        program_dirs = _subdirectories(local_path)
    except OSError as e:
        raise LibraryError("scan_failed", f"Error loading programs: {e}") from e

    programs: list[Program] = []
    for program_dir in program_dirs:
        try:
            version_dirs = _subdirectories(program_dir.path)
        except OSError:
            version_dirs = []
        versions = [
            ProgramVersion(
                version=v.name,
                path=v.path,
                modules=read_dir_tree(v.path),
            )
            for v in version_dirs
        ]
        programs.append(Program(name=program_dir.name, versions=versions))
    return programs


def find_program(programs: list[Program], name: str) -> Program | None:
    for p in programs:
        if p.name == name:
            return p
    return None


def _check_segment(kind: str, value: str) -> None:
    if not value or value in (".", "..") or "/" in value or "\\" in value:
        raise LibraryError("invalid_name", f"Invalid {kind} name: {value!r}")


def create_program(local_path: str, name: str) -> str:
    _check_segment("program", name)
    program_path = os.path.join(local_path, name)
    try:
        os.makedirs(program_path, exist_ok=True)
    except OSError as e:
        raise LibraryError("create_failed", f"Error creating program: {e}") from e
    return program_path


def create_version(local_path: str, program: str, version: str) -> str:
    _check_segment("program", program)
    _check_segment("version", version)
    version_path = os.path.join(local_path, program, version)
    try:
        os.makedirs(version_path, exist_ok=True)
    except OSError as e:
        raise LibraryError("create_failed", f"Error creating version: {e}") from e
    return version_path


def resolve_version_path(programs: list[Program], program: str, version: str) -> str:
    found = find_program(programs, program)
    match = found.find_version(version) if found is not None else None
    if match is None:
        raise LibraryError("not_found", f"No version {version!r} of program {program!r}")
    return match.path
