"""Repository management for Gitlet."""

import logging
from pathlib import Path
from typing import Dict, Iterator, Optional, Set

from gitlet.core.errors import (
    AlreadyInitializedError,
    AlreadyOnBranchError,
    BranchNotFoundError,
    NoChangesError,
    NotInitializedError,
    PathOutsideRepositoryError,
)
from gitlet.core.objects import Commit

logger = logging.getLogger(__name__)

GITLET_DIR_NAME = '.gitlet'


def _drop_displaced(tree: Dict[str, str], path: str) -> None:
    """Remove tracked entries that a file at path replaces: its parents and anything below it."""
    parts = path.split('/')
    for depth in range(1, len(parts)):
        tree.pop('/'.join(parts[:depth]), None)
    prefix = path + '/'
    for tracked in [p for p in tree if p.startswith(prefix)]:
        del tree[tracked]


class Repository:
    """
    Represents a Gitlet repository.

    A repository owns the .gitlet directory and hands out the
    independent sub-stores that each command works through:
    objects (ObjectStore), graph (CommitGraph), index (StagingIndex),
    refs (RefManager) and sync (WorkingTreeSync). Every sub-store keeps
    its state on disk, so no repository-wide state has to be saved
    at the end of a command.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.gitlet_dir = self.work_tree / GITLET_DIR_NAME
        self.objects_dir = self.gitlet_dir / 'objects'
        self.staging_dir = self.gitlet_dir / 'staging'
        self.branches_dir = self.gitlet_dir / 'branches'
        self.head_file = self.gitlet_dir / 'HEAD'
        self.head_commit_file = self.gitlet_dir / 'HEAD_COMMIT'
        self.config_file = self.gitlet_dir / 'config'

        self._config = None
        self._objects = None
        self._graph = None
        self._index = None
        self._refs = None
        self._sync = None

    @property
    def config(self):
        """Get Config instance."""
        if self._config is None:
            from .config import Config
            self._config = Config(self.config_file)
        return self._config

    @property
    def objects(self):
        """Get ObjectStore instance."""
        if self._objects is None:
            from .store import ObjectStore
            self._objects = ObjectStore(self.objects_dir, self.config.compression_level())
        return self._objects

    @property
    def graph(self):
        """Get CommitGraph instance."""
        if self._graph is None:
            from .graph import CommitGraph
            self._graph = CommitGraph(self.objects)
        return self._graph

    @property
    def index(self):
        """Get StagingIndex instance."""
        if self._index is None:
            from .index import StagingIndex
            self._index = StagingIndex(self.staging_dir, self.work_tree, self.objects)
        return self._index

    @property
    def refs(self):
        """Get RefManager instance."""
        if self._refs is None:
            from .refs import RefManager
            self._refs = RefManager(self.gitlet_dir)
        return self._refs

    @property
    def sync(self):
        """Get WorkingTreeSync instance."""
        if self._sync is None:
            from gitlet.operations.checkout import WorkingTreeSync
            self._sync = WorkingTreeSync(self.work_tree, self.objects, exclude=GITLET_DIR_NAME)
        return self._sync

    def is_initialized(self) -> bool:
        return self.gitlet_dir.is_dir()

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .gitlet directory structure:
        .gitlet/
        ├── objects/          # Blobs and commits, keyed by id
        ├── staging/
        │   ├── add/          # Files staged for addition
        │   └── remove/       # Files staged for removal
        ├── branches/         # One pointer file per branch
        ├── HEAD              # Active branch name
        ├── HEAD_COMMIT       # Active commit id
        └── config            # Repository configuration

        and stores the root commit, with the default branch pointing at it.

        Returns:
            Repository: self for method chaining

        Raises:
            AlreadyInitializedError: If repository already exists
        """
        if self.gitlet_dir.exists():
            raise AlreadyInitializedError()

        self.gitlet_dir.mkdir(parents=True)
        self.config_file.write_text('[core]\n\trepositoryformatversion = 0\n')
        self.objects_dir.mkdir()
        self.branches_dir.mkdir()
        self.index.clear()

        root = Commit.root()
        self.objects.put_commit(root)
        self.refs.update_head(self.config.default_branch(), root.hash)

        logger.info("Initialized repository at %s", self.gitlet_dir)
        return self

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / GITLET_DIR_NAME).is_dir():
                return cls(str(current))

            if current == current.parent:
                return None

            current = current.parent

    @classmethod
    def require(cls, path: str = '.') -> 'Repository':
        """
        Like find_repository, but raise when there is none.

        Raises:
            NotInitializedError
        """
        repo = cls.find_repository(path)
        if repo is None:
            raise NotInitializedError()
        return repo

    def _check_initialized(self) -> None:
        if not self.is_initialized():
            raise NotInitializedError()

    def normalize_path(self, path: str) -> str:
        """
        Turn a path into the repository-relative POSIX form used as a key.

        Relative paths are taken relative to the work tree.

        Raises:
            PathOutsideRepositoryError: For paths outside the work tree or
                inside .gitlet
        """
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.work_tree / candidate
        resolved = candidate.resolve()

        try:
            rel_path = resolved.relative_to(self.work_tree)
        except ValueError:
            raise PathOutsideRepositoryError(str(path))

        if not rel_path.parts or rel_path.parts[0] == GITLET_DIR_NAME:
            raise PathOutsideRepositoryError(str(path))
        return rel_path.as_posix()

    def head_commit(self) -> Commit:
        """The commit HEAD points at."""
        self._check_initialized()
        return self.objects.get_commit(self.refs.head_commit_id())

    def head_tree(self) -> Dict[str, str]:
        """Tracked files of the HEAD commit."""
        return dict(self.head_commit().tree)

    def resolve_commit(self, commit_ref: str) -> str:
        """Full id for a full or abbreviated commit id."""
        self._check_initialized()
        return self.objects.resolve_commit(commit_ref)

    def add(self, path: str) -> bool:
        """
        Stage the working copy of a file.

        Returns:
            True if staged, False if it matched HEAD and was unstaged

        Raises:
            WorkingFileNotFoundError: If the file does not exist
        """
        self._check_initialized()
        rel_path = self.normalize_path(path)
        return self.index.add_file(rel_path, self.head_tree())

    def remove(self, path: str) -> None:
        """
        Unstage a file and, if HEAD tracks it, stage its removal.

        Raises:
            NothingToRemoveError: If the file is neither staged nor tracked
        """
        self._check_initialized()
        rel_path = self.normalize_path(path)
        self.index.stage_remove(rel_path, self.head_tree())

    def commit(self, message: str, timestamp: Optional[int] = None) -> Commit:
        """
        Record the staged changes as a new commit on the current branch.

        New blobs and the commit record are written before any pointer
        moves. The staging area is cleared after the pointers, since a
        leftover entry that matches HEAD is harmless while lost staged
        work is not.

        Raises:
            NoChangesError: If nothing is staged
            EmptyMessageError: If message is empty
        """
        self._check_initialized()
        staged = self.index.snapshot()
        if staged.is_empty():
            raise NoChangesError()

        head = self.head_commit()
        tree = dict(head.tree)

        for path, content in staged.additions.items():
            _drop_displaced(tree, path)
            tree[path] = self.objects.put_blob(path, content)
        for path in staged.removals:
            tree.pop(path, None)

        commit = self.graph.create_commit(message, head.hash, tree, timestamp=timestamp)

        branch = self.refs.current_branch()
        self.refs.update_head(branch, commit.hash)
        self.index.clear()

        logger.info("Committed %s on %s", commit.hash[:7], branch)
        return commit

    def _checkout(self, branch: str, commit_id: str) -> int:
        """
        Move the working tree, staging area and HEAD to commit_id.

        Raises:
            UntrackedFileConflictError: Nothing has changed when raised
        """
        target = self.objects.get_commit(commit_id)
        plan = self.sync.reconcile(self.head_tree(), target.tree)
        self.index.clear()
        self.refs.update_head(branch, commit_id)
        return plan.file_count

    def switch(self, branch: str) -> int:
        """
        Make another branch active and check out its tip.

        Returns:
            Number of working files written or removed

        Raises:
            BranchNotFoundError: If the branch does not exist
            AlreadyOnBranchError: If it is already active
            UntrackedFileConflictError: If an untracked file is in the way
        """
        self._check_initialized()
        if not self.refs.branch_exists(branch):
            raise BranchNotFoundError(branch)
        if branch == self.refs.current_branch():
            raise AlreadyOnBranchError(branch)

        count = self._checkout(branch, self.refs.read_branch(branch))
        logger.info("Switched to %s", branch)
        return count

    def reset(self, commit_ref: str) -> str:
        """
        Check out an arbitrary commit and move the current branch to it.

        Returns:
            Full id of the commit now at HEAD

        Raises:
            CommitNotFoundError: If the id does not resolve
            UntrackedFileConflictError: If an untracked file is in the way
        """
        self._check_initialized()
        commit_id = self.objects.resolve_commit(commit_ref)
        self._checkout(self.refs.current_branch(), commit_id)
        logger.info("Reset %s to %s", self.refs.current_branch(), commit_id[:7])
        return commit_id

    def restore(self, path: str, commit_ref: Optional[str] = None) -> None:
        """
        Overwrite one working file with its version in a commit (HEAD by default).

        Neither the staging area nor any pointer changes.

        Raises:
            CommitNotFoundError: If commit_ref does not resolve
            FileNotInCommitError: If the commit does not track the file
            UntrackedFileConflictError: If a directory or file blocks the path
        """
        self._check_initialized()
        if commit_ref is None:
            tree = self.head_tree()
        else:
            tree = self.objects.get_commit(self.objects.resolve_commit(commit_ref)).tree
        self.sync.restore_file(tree, self.normalize_path(path))

    def branch(self, name: str) -> str:
        """
        Create a branch at the HEAD commit.

        Returns:
            Commit id the branch points at
        """
        self._check_initialized()
        commit_id = self.refs.head_commit_id()
        self.refs.create_branch(name, commit_id)
        return commit_id

    def remove_branch(self, name: str) -> None:
        """Delete a branch pointer; never the active one."""
        self._check_initialized()
        self.refs.delete_branch(name)

    def log(self) -> Iterator[Commit]:
        """First-parent history from HEAD to the root."""
        self._check_initialized()
        return self.graph.history(self.refs.head_commit_id())

    def global_log(self) -> Iterator[Commit]:
        """Every commit ever made, in storage order."""
        self._check_initialized()
        return self.graph.all_commits()

    def find(self, message: str) -> Set[str]:
        """Ids of commits with exactly this message; empty if none."""
        self._check_initialized()
        return self.graph.find_by_message(message)

    def status(self):
        """Compute a StatusReport for this repository."""
        self._check_initialized()
        from gitlet.operations.status import compute_status
        return compute_status(self)

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
