"""Local file and directory helpers: stat, listing, mtime, mkdir -p and rm -r."""

from __future__ import annotations

import os
import stat as _stat
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

DEFAULT_MKDIR_ACCESS = 0o750

_SEPARATORS = "/\\"
_OTHER_SEP = "\\" if os.sep == "/" else "/"

OnEntry = Callable[["LocalFileInfo", Optional["LocalFileInfo"]], None]


@dataclass(eq=False)
class LocalFileInfo:
    """A file or directory found on the local disk.

    For a directory, ``filecount`` is the number of entries listed beneath
    it, counted recursively.
    """

    path: Optional[str]
    filename: Optional[str]
    isdir: bool
    mtime: int = 0
    size: int = 0
    parent: Optional["LocalFileInfo"] = field(default=None, repr=False)
    filecount: int = 0
    userdata: Any = None


def _normalise(path: str) -> tuple[str, str]:
    """Drop one trailing separator, unify separators and find the last name."""
    if path and path[-1] in _SEPARATORS:
        path = path[:-1]
    path = path.replace(_OTHER_SEP, os.sep)
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path, path[cut + 1:]


def _make_info(
    parent_path: Optional[str],
    filename: Optional[str],
    isdir: bool,
    mtime: int,
    size: int,
    parent: Optional[LocalFileInfo],
) -> LocalFileInfo:
    if not parent_path:
        path = filename or None
        name = filename or None
    elif filename:
        path = parent_path + os.sep + filename
        name = filename
    else:
        path, name = _normalise(parent_path)
    info = LocalFileInfo(path, name, isdir, mtime, size, parent)
    ancestor = parent
    while ancestor is not None:
        ancestor.filecount += 1
        ancestor = ancestor.parent
    return info


def get_local_file_info(path: str) -> Optional[LocalFileInfo]:
    """Return information on ``path``, or None if it is missing or not a file or directory."""
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return None
    if _stat.S_ISDIR(st.st_mode):
        return _make_info(path, None, True, int(st.st_mtime), 0, None)
    if _stat.S_ISREG(st.st_mode):
        return _make_info(path, None, False, int(st.st_mtime), st.st_size, None)
    return None


def _list_into(
    directory: str,
    relative: Optional[str],
    recursive: bool,
    parent: Optional[LocalFileInfo],
    on: Optional[OnEntry],
    out: list[LocalFileInfo],
) -> None:
    with os.scandir(directory) as entries:
        for entry in entries:
            full = os.path.join(directory, entry.name)
            st = os.stat(full)
            if _stat.S_ISDIR(st.st_mode):
                info = _make_info(relative, entry.name, True, int(st.st_mtime), 0, parent)
                out.append(info)
                if on is not None:
                    on(info, parent)
                if recursive:
                    _list_into(full, info.path, recursive, info, on, out)
            elif _stat.S_ISREG(st.st_mode):
                info = _make_info(
                    relative, entry.name, False, int(st.st_mtime), st.st_size, parent
                )
                out.append(info)
                if on is not None:
                    on(info, parent)
            else:
                raise OSError(f"not a regular file or directory: {full}")


def get_directory_files(
    directory: str,
    recursive: bool = False,
    on: Optional[OnEntry] = None,
) -> list[LocalFileInfo]:
    """List the files and directories under ``directory``.

    Paths in the result are relative to ``directory``. ``on`` is called with
    each entry and its parent directory entry (None at the top level) as it
    is found. Raises OSError if the directory cannot be read.
    """
    if not directory:
        raise FileNotFoundError("empty directory path")
    result: list[LocalFileInfo] = []
    _list_into(directory, None, recursive, None, on, result)
    return result


def set_file_last_modify_time(path: str, mtime: float) -> None:
    """Set both access and modification time of ``path`` to ``mtime``."""
    os.utime(path, (mtime, mtime))


def _is_root(path: str) -> bool:
    if os.name == "nt":
        drive = path[:1]
        if path[1:2] == ":" and drive.isascii() and drive.isalpha():
            return len(path) == 2 or (len(path) == 3 and path[2] in _SEPARATORS)
        return False
    return path == "/"


def _ensure_dir(path: str) -> None:
    info = get_local_file_info(path)
    if info is not None:
        if not info.isdir:
            raise NotADirectoryError(f"exists and is a file: {path}")
        return
    os.mkdir(path, DEFAULT_MKDIR_ACCESS)


def create_directory_recursive(path: str) -> None:
    """Create ``path`` and any missing parents.

    Raises NotADirectoryError if the target or one of its parents is a file,
    and OSError if a directory cannot be created.
    """
    if not path or _is_root(path):
        return
    info = get_local_file_info(path)
    if info is not None:
        if not info.isdir:
            raise NotADirectoryError(f"exists and is a file: {path}")
        return
    first = 1 if path[0] in _SEPARATORS else 0
    for index, char in enumerate(path):
        if index < first or char not in _SEPARATORS:
            continue
        prefix = path[:index]
        if prefix in (".", ".."):
            continue
        _ensure_dir(prefix)
    if path[-1] not in _SEPARATORS:
        os.mkdir(path, DEFAULT_MKDIR_ACCESS)


def delete_file_recursive(path: str) -> None:
    """Delete a file, or a directory and everything in it.

    A missing path is not an error; any failure to delete raises OSError.
    """
    if os.path.islink(path):
        os.remove(path)
        return
    info = get_local_file_info(path)
    if info is None:
        return
    if info.isdir:
        with os.scandir(path) as entries:
            children = [os.path.join(path, entry.name) for entry in entries]
        for child in children:
            delete_file_recursive(child)
        os.rmdir(path)
    else:
        os.remove(path)