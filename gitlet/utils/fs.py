"""Filesystem helpers shared by the object store, index, refs and checkout."""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def write_atomic(path: PathLike, data: bytes) -> None:
    """
    Write bytes to path so readers see either the old file or the new one.

    The data goes to a temporary file in the same directory which is then
    renamed over the destination.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix='.tmp-')
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        os.replace(tmp_name, str(path))
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def write_text_atomic(path: PathLike, text: str) -> None:
    """Text variant of write_atomic."""
    write_atomic(path, text.encode())


def write_file(path: PathLike, data: bytes) -> None:
    """Write a working-tree file, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


def remove_file(path: PathLike, stop_at: PathLike) -> bool:
    """
    Delete a file and prune any directories it leaves empty.

    Pruning never goes above stop_at.

    Returns:
        True if a file was deleted
    """
    path = Path(path)
    if not path.is_file():
        return False
    path.unlink()

    stop = Path(stop_at)
    parent = path.parent
    while parent != stop and stop in parent.parents:
        try:
            parent.rmdir()
        except OSError:
            break
        parent = parent.parent
    return True


def list_files(root: PathLike, exclude: str = '') -> List[str]:
    """
    List every regular file below root.

    Args:
        root: Directory to walk
        exclude: Top-level directory name to skip (e.g. '.gitlet')

    Returns:
        Sorted POSIX-style paths relative to root
    """
    root = Path(root)
    if not root.is_dir():
        return []

    files = []
    for path in root.rglob('*'):
        rel_path = path.relative_to(root)
        if exclude and rel_path.parts[0] == exclude:
            continue
        if path.is_file():
            files.append(rel_path.as_posix())
    return sorted(files)


def remove_empty_tree(root: PathLike) -> None:
    """
    Remove a directory that holds nothing but (possibly nested) empty directories.

    Raises:
        OSError: If a file is found below root
    """
    root = Path(root)
    for path in sorted(root.rglob('*'), key=lambda p: len(p.parts), reverse=True):
        path.rmdir()
    root.rmdir()
