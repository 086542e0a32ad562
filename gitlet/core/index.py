"""Index (staging area) implementation."""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping

from gitlet.core.errors import NothingToRemoveError, WorkingFileNotFoundError
from gitlet.core.hash import hash_object
from gitlet.core.store import ObjectStore
from gitlet.utils.fs import list_files, remove_file, write_atomic

logger = logging.getLogger(__name__)


@dataclass
class StagedChanges:
    """
    Point-in-time copy of the staging area.

    additions maps path -> working content to record in the next commit,
    removals maps path -> content of the blob being dropped from tracking.
    """
    additions: Dict[str, bytes] = field(default_factory=dict)
    removals: Dict[str, bytes] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.additions and not self.removals

    def __repr__(self) -> str:
        return f"StagedChanges(additions={sorted(self.additions)}, removals={sorted(self.removals)})"


class StagingIndex:
    """
    Gitlet staging area.

    Two disjoint sets of pending entries, each stored as one file per
    path so the on-disk state is always the source of truth:

    - staging/add/<path>     content staged for addition
    - staging/remove/<path>  content of a tracked file staged for removal

    A path is never present in both areas at once.
    """

    def __init__(self, staging_dir: Path, work_tree: Path, store: ObjectStore):
        """
        Initialize staging index.

        Args:
            staging_dir: Directory holding the add/ and remove/ areas
            work_tree: Working tree root, used by add_file and stage_remove
            store: Object store holding HEAD's blobs
        """
        self.staging_dir = Path(staging_dir)
        self.add_dir = self.staging_dir / 'add'
        self.remove_dir = self.staging_dir / 'remove'
        self.work_tree = Path(work_tree)
        self.store = store

    def _discard(self, area: Path, path: str) -> bool:
        return remove_file(area / path, stop_at=area)

    def _drop_overlapping(self, path: str) -> None:
        """Drop pending additions that cannot coexist with a file at path."""
        parts = path.split('/')
        for depth in range(1, len(parts)):
            parent = '/'.join(parts[:depth])
            if self._discard(self.add_dir, parent):
                logger.debug("Unstaged %s: now a directory", parent)
        if (self.add_dir / path).is_dir():
            shutil.rmtree(self.add_dir / path)
            logger.debug("Unstaged everything under %s: now a file", path)

    def stage_add(self, path: str, content: bytes, head_tree: Mapping[str, str]) -> bool:
        """
        Stage working content for path.

        Any pending removal of path is cancelled first. If the content is
        exactly what HEAD already tracks, a pending addition is dropped
        instead of written. Pending additions at a parent directory of
        path, or below path, are stale once path is a file and are dropped.

        Returns:
            True if path is now staged for addition
        """
        self._discard(self.remove_dir, path)
        self._drop_overlapping(path)

        blob_id = hash_object(path, content)
        if head_tree.get(path) == blob_id:
            if self._discard(self.add_dir, path):
                logger.debug("Unstaged %s: matches HEAD", path)
            return False

        write_atomic(self.add_dir / path, content)
        logger.debug("Staged %s for addition (%s)", path, blob_id)
        return True

    def add_file(self, path: str, head_tree: Mapping[str, str]) -> bool:
        """
        Stage the current working-tree copy of path.

        Raises:
            WorkingFileNotFoundError: If the file is not in the working tree
        """
        file_path = self.work_tree / path
        if not file_path.is_file():
            raise WorkingFileNotFoundError(path)
        return self.stage_add(path, file_path.read_bytes(), head_tree)

    def stage_remove(self, path: str, head_tree: Mapping[str, str]) -> None:
        """
        Stop tracking path.

        If HEAD tracks the file, its committed content is recorded as a
        pending removal and the working copy is deleted. If it is only
        staged for addition, the pending addition is dropped. Both may
        apply.

        Raises:
            NothingToRemoveError: If path is neither staged nor tracked
        """
        is_staged = (self.add_dir / path).is_file()
        is_tracked = path in head_tree

        if not is_staged and not is_tracked:
            raise NothingToRemoveError(path)

        if is_tracked:
            content = self.store.get_blob(head_tree[path])
            write_atomic(self.remove_dir / path, content)
            if remove_file(self.work_tree / path, stop_at=self.work_tree):
                logger.debug("Deleted working copy of %s", path)

        if is_staged:
            self._discard(self.add_dir, path)

        logger.debug("Staged %s for removal (tracked=%s, staged=%s)", path, is_tracked, is_staged)

    def staged_paths(self) -> List[str]:
        """Paths staged for addition, sorted."""
        return list_files(self.add_dir)

    def removed_paths(self) -> List[str]:
        """Paths staged for removal, sorted."""
        return list_files(self.remove_dir)

    def read_staged(self, path: str) -> bytes:
        """Content staged for addition at path."""
        return (self.add_dir / path).read_bytes()

    def snapshot(self) -> StagedChanges:
        """Copy both areas into memory."""
        return StagedChanges(
            additions={p: (self.add_dir / p).read_bytes() for p in self.staged_paths()},
            removals={p: (self.remove_dir / p).read_bytes() for p in self.removed_paths()},
        )

    def is_empty(self) -> bool:
        return not self.staged_paths() and not self.removed_paths()

    def clear(self) -> None:
        """Remove every pending entry from both areas."""
        for area in (self.add_dir, self.remove_dir):
            if area.exists():
                shutil.rmtree(area)
            area.mkdir(parents=True, exist_ok=True)
        logger.debug("Cleared staging area")

    def __len__(self) -> int:
        """Number of pending entries in both areas."""
        return len(self.staged_paths()) + len(self.removed_paths())

    def __repr__(self) -> str:
        return f"StagingIndex(add={len(self.staged_paths())}, remove={len(self.removed_paths())})"
