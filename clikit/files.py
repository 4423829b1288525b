"""File system helpers: existence checks, reading, copying, paths and grep."""

from __future__ import annotations

import glob as _glob
import os
import re
from collections.abc import Iterable

from clikit.errors import with_stack_trace, with_stack_trace_and_prefix


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return True if the given path exists."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def is_dir(path: str | os.PathLike[str]) -> bool:
    """Return True if the path points to a directory."""
    return os.path.isdir(path)


def read_file_as_string(path: str | os.PathLike[str]) -> str:
    """Return the contents of the file at ``path`` as a string."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            return handle.read()
    except OSError as err:
        raise with_stack_trace_and_prefix(err, "Error reading file at path %s", os.fspath(path)) from err


def copy_file(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> None:
    """Copy ``source`` to ``destination``, keeping the source's permissions."""
    try:
        with open(source, "rb") as handle:
            contents = handle.read()
    except OSError as err:
        raise with_stack_trace(err) from err
    write_file_with_same_permissions(source, destination, contents)


def write_file_with_same_permissions(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    contents: bytes | str,
) -> None:
    """Write ``contents`` to ``destination`` using the permissions of ``source``.

    As with a freshly created file, the mode only applies when ``destination``
    does not exist yet, and the process umask is honoured.
    """
    try:
        mode = os.stat(source).st_mode & 0o7777
    except OSError as err:
        raise with_stack_trace(err) from err

    data = contents.encode("utf-8") if isinstance(contents, str) else contents
    try:
        descriptor = os.open(destination, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(descriptor, "wb") as handle:
            handle.write(data)
    except OSError as err:
        raise with_stack_trace(err) from err


def canonical_path(path: str, base_path: str) -> str:
    """Return ``path`` as an absolute, normalised path.

    A relative ``path`` is taken to be relative to ``base_path``.
    """
    if not os.path.isabs(path):
        path = os.path.join(base_path, path)
    return os.path.normpath(os.path.abspath(path))


def canonical_paths(paths: Iterable[str], base_path: str) -> list[str]:
    """Return the canonical form of every path, each relative to ``base_path``."""
    return [canonical_path(path, base_path) for path in paths]


def grep(regex: re.Pattern[str] | re.Pattern[bytes] | str, glob_pattern: str) -> bool:
    """Return True if ``regex`` matches within any file selected by ``glob_pattern``.

    ``**`` in the pattern matches zero or more directories. Directories are skipped.
    """
    pattern = re.compile(regex) if isinstance(regex, str) else regex
    for match in _glob.glob(glob_pattern, recursive=True):
        if is_dir(match):
            continue
        try:
            with open(match, "rb") as handle:
                data = handle.read()
        except OSError as err:
            raise with_stack_trace(err) from err

        if isinstance(pattern.pattern, bytes):
            found = pattern.search(data)
        else:
            found = pattern.search(data.decode("utf-8", errors="replace"))
        if found:
            return True
    return False


def get_path_relative_to(path: str, base_path: str) -> str:
    """Return the relative path, with forward slashes, from ``base_path`` to ``path``.

    Symbolic links in either path are resolved first; both paths must exist.
    """
    path = path or "."
    base_path = base_path or "."
    try:
        base_abs = os.path.abspath(os.path.realpath(base_path, strict=True))
        path_abs = os.path.abspath(os.path.realpath(path, strict=True))
        relative = os.path.relpath(path_abs, base_abs)
    except (OSError, ValueError) as err:
        raise with_stack_trace(err) from err
    return relative.replace(os.sep, "/")