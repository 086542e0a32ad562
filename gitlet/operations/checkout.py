"""Working-tree synchronization: reconcile the files on disk with a commit."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from gitlet.core.errors import FileNotInCommitError, UntrackedFileConflictError
from gitlet.core.store import ObjectStore
from gitlet.utils.fs import list_files, remove_empty_tree, remove_file, write_file

logger = logging.getLogger(__name__)


@dataclass
class CheckoutPlan:
    """
    Every file-system change a reconcile will make.

    Built and validated before anything is touched; blob contents are
    loaded up front so applying the plan cannot fail on a missing object.
    """
    deletes: List[str] = field(default_factory=list)
    writes: Dict[str, bytes] = field(default_factory=dict)

    @property
    def file_count(self) -> int:
        return len(self.deletes) + len(self.writes)

    def __repr__(self) -> str:
        return f"CheckoutPlan(deletes={len(self.deletes)}, writes={len(self.writes)})"


class WorkingTreeSync:
    """
    Rewrites the working tree to match a target tree.

    Untracked files are protected: a file the current tree does not
    track but the target does would be silently replaced, so the whole
    checkout is refused. Files untracked by both trees are never touched.
    """

    def __init__(self, work_tree: Path, store: ObjectStore, exclude: str = '.gitlet'):
        """
        Args:
            work_tree: Working tree root
            store: Object store holding the target tree's blobs
            exclude: Metadata directory name never treated as working files
        """
        self.work_tree = Path(work_tree)
        self.store = store
        self.exclude = exclude

    def working_files(self) -> List[str]:
        """All working-tree files as sorted repository-relative paths."""
        return list_files(self.work_tree, exclude=self.exclude)

    def plan(
        self,
        current_tree: Mapping[str, str],
        target_tree: Mapping[str, str],
        working_files: Optional[Iterable[str]] = None,
    ) -> CheckoutPlan:
        """
        Validate a checkout and work out what it would change.

        For every working file:
        - untracked now, tracked by target -> conflict
        - tracked now, untracked by target -> delete
        - tracked by both -> rewrite with target content
        - untracked by both -> leave alone
        Target files missing from the working tree are written fresh.

        A target file also conflicts with a working file that sits where
        one of its parent directories must go, and with a directory at its
        own path that still holds files after the deletions, unless the
        checkout deletes those files first.

        Raises:
            UntrackedFileConflictError: Listing every conflicting path
        """
        if working_files is None:
            working_files = self.working_files()
        present = set(working_files)

        deletes = sorted(
            path for path in present
            if path in current_tree and path not in target_tree
        )
        kept = present.difference(deletes)

        conflicts = {
            path for path in present
            if path not in current_tree and path in target_tree
        }
        for path in target_tree:
            parts = path.split('/')
            for depth in range(1, len(parts)):
                parent = '/'.join(parts[:depth])
                if parent in kept:
                    conflicts.add(parent)
            if path not in present and (self.work_tree / path).is_dir():
                prefix = path + '/'
                blocking = [p for p in kept if p.startswith(prefix)]
                conflicts.update(blocking)
        if conflicts:
            conflicts = sorted(conflicts)
            logger.debug("Untracked files in the way: %s", conflicts)
            raise UntrackedFileConflictError(conflicts)

        plan = CheckoutPlan(deletes=deletes)
        for path, blob_id in sorted(target_tree.items()):
            plan.writes[path] = self.store.get_blob(blob_id)
        return plan

    def apply(self, plan: CheckoutPlan) -> None:
        """Carry out a validated plan: deletions first, then writes."""
        for path in plan.deletes:
            remove_file(self.work_tree / path, stop_at=self.work_tree)
            logger.debug("Removed %s", path)

        for path, content in plan.writes.items():
            target = self.work_tree / path
            if target.is_dir():
                # Only empty directories are left here once plan() passed.
                remove_empty_tree(target)
            elif target.is_file():
                target.unlink()
            write_file(target, content)
            logger.debug("Wrote %s", path)

    def reconcile(
        self,
        current_tree: Mapping[str, str],
        target_tree: Mapping[str, str],
        working_files: Optional[Iterable[str]] = None,
    ) -> CheckoutPlan:
        """
        Make the working tree hold exactly target_tree's files.

        All validation runs before the first mutation, so on
        UntrackedFileConflictError the working tree is unchanged.

        Returns:
            The plan that was applied
        """
        plan = self.plan(current_tree, target_tree, working_files)
        self.apply(plan)
        logger.info(
            "Checked out %d file(s), removed %d", len(plan.writes), len(plan.deletes)
        )
        return plan

    def restore_file(self, tree: Mapping[str, str], path: str) -> None:
        """
        Overwrite (or create) one working file from a tree.

        Raises:
            FileNotInCommitError: If the tree does not track path
            UntrackedFileConflictError: If a directory occupies path, or a
                file occupies one of its parent directories
        """
        if path not in tree:
            raise FileNotInCommitError(path)

        parts = path.split('/')
        blocking = [
            '/'.join(parts[:depth]) for depth in range(1, len(parts))
            if self.work_tree.joinpath(*parts[:depth]).is_file()
        ]
        if (self.work_tree / path).is_dir():
            blocking.append(path)
        if blocking:
            raise UntrackedFileConflictError(blocking)

        content = self.store.get_blob(tree[path])
        target = self.work_tree / path
        if target.is_file():
            target.unlink()
        write_file(target, content)
        logger.debug("Restored %s from %s", path, tree[path])
