"""Utility functions for coursesite.

This module contains the small path and file helpers used by the build.

Key functions:
    replace_extension: Swap the extension of a relative path.
    write_if_changed: Write a file only when its content differs.
    copy_if_changed: Copy a file only when its bytes differ.
"""

from __future__ import annotations

import shutil
from pathlib import Path, PurePosixPath


def replace_extension(path: str, extension: str) -> str:
    """Replace the extension of a relative path.

    Args:
        path: Relative path, using forward slashes.
        extension: New extension including the leading dot.

    Returns:
        The path with its final suffix replaced (or added when absent).

    Examples:
        >>> replace_extension("week-1.md", ".html")
        'week-1.html'

        >>> replace_extension("notes/intro", ".html")
        'notes/intro.html'
    """
    return PurePosixPath(path).with_suffix(extension).as_posix()


def write_if_changed(path: Path, text: str) -> bool:
    """Write text to a file unless it already holds exactly that text.

    Parent directories are created as needed.

    Args:
        path: Destination file.
        text: Content to write, encoded as UTF-8.

    Returns:
        True if the file was written.
    """
    data = text.encode("utf-8")
    if path.is_file() and path.read_bytes() == data:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return True


def copy_if_changed(src: Path, dest: Path) -> bool:
    """Copy a file verbatim unless the destination already matches it.

    Args:
        src: Source file.
        dest: Destination file.

    Returns:
        True if the file was copied.
    """
    if dest.is_file() and dest.read_bytes() == src.read_bytes():
        return False
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(src, dest)
    return True
