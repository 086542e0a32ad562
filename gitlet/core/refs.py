"""Reference management for Gitlet."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from gitlet.core.errors import (
    BranchExistsError,
    BranchNotFoundError,
    CurrentBranchError,
    InvalidBranchNameError,
)
from gitlet.utils.fs import list_files, remove_file, write_text_atomic

logger = logging.getLogger(__name__)


class RefManager:
    """
    Manages branch pointers and HEAD.

    Layout:
    - branches/<name>  commit id the branch points at
    - HEAD             name of the active branch
    - HEAD_COMMIT      commit id of the active branch's tip

    HEAD_COMMIT always equals the active branch's pointer once an
    operation has returned; update_head() is the one place both HEAD
    records change together.
    """

    def __init__(self, gitlet_dir: Path):
        """
        Initialize reference manager.

        Args:
            gitlet_dir: The repository's .gitlet directory
        """
        self.gitlet_dir = Path(gitlet_dir)
        self.branches_dir = self.gitlet_dir / 'branches'
        self.head_file = self.gitlet_dir / 'HEAD'
        self.head_commit_file = self.gitlet_dir / 'HEAD_COMMIT'

    @staticmethod
    def validate_branch_name(name: str) -> None:
        """
        Reject names that cannot be stored as a ref file.

        Raises:
            InvalidBranchNameError
        """
        parts = name.split('/')
        if (
            not name
            or name.startswith('/')
            or name.endswith('/')
            or any(not part or part.startswith('.') for part in parts)
            or any(c.isspace() for c in name)
            or '\\' in name
        ):
            raise InvalidBranchNameError(name)

    def _branch_path(self, name: str) -> Path:
        self.validate_branch_name(name)
        return self.branches_dir / name

    def branch_exists(self, name: str) -> bool:
        """Check if a branch exists."""
        try:
            return self._branch_path(name).is_file()
        except InvalidBranchNameError:
            return False

    def read_branch(self, name: str) -> str:
        """
        Get the commit id a branch points at.

        Raises:
            BranchNotFoundError: If the branch does not exist
        """
        if not self.branch_exists(name):
            raise BranchNotFoundError(name)
        return self._branch_path(name).read_text().strip()

    def list_branches(self) -> List[Tuple[str, str]]:
        """
        List all branches.

        Returns:
            List of (branch_name, commit_id) tuples sorted by name
        """
        return [
            (name, (self.branches_dir / name).read_text().strip())
            for name in list_files(self.branches_dir)
            if not Path(name).name.startswith('.')
        ]

    def create_branch(self, name: str, commit_id: str) -> None:
        """
        Create a new branch.

        Raises:
            BranchExistsError: If the name is taken
            InvalidBranchNameError: If the name is not usable
        """
        branch_path = self._branch_path(name)
        if branch_path.exists():
            raise BranchExistsError(name)
        write_text_atomic(branch_path, commit_id + '\n')
        logger.debug("Created branch %s at %s", name, commit_id)

    def move_branch(self, name: str, commit_id: str) -> None:
        """Point a branch at commit_id, creating or overwriting it."""
        write_text_atomic(self._branch_path(name), commit_id + '\n')
        logger.debug("Moved branch %s to %s", name, commit_id)

    def delete_branch(self, name: str) -> None:
        """
        Delete a branch pointer. The commits it pointed at are kept.

        Raises:
            BranchNotFoundError: If the branch does not exist
            CurrentBranchError: If name is the active branch
        """
        if not self.branch_exists(name):
            raise BranchNotFoundError(name, "A branch with that name does not exist.")
        if name == self.current_branch():
            raise CurrentBranchError(name)
        remove_file(self._branch_path(name), stop_at=self.branches_dir)
        logger.debug("Deleted branch %s", name)

    def current_branch(self) -> Optional[str]:
        """Name of the active branch, or None before init."""
        if not self.head_file.exists():
            return None
        return self.head_file.read_text().strip()

    def set_current_branch(self, name: str) -> None:
        self.validate_branch_name(name)
        write_text_atomic(self.head_file, name + '\n')

    def head_commit_id(self) -> Optional[str]:
        """Commit id HEAD points at, or None before init."""
        if not self.head_commit_file.exists():
            return None
        return self.head_commit_file.read_text().strip()

    def set_head_commit_id(self, commit_id: str) -> None:
        write_text_atomic(self.head_commit_file, commit_id + '\n')

    def update_head(self, branch: str, commit_id: str) -> None:
        """
        Make branch active and point it and HEAD at commit_id.

        The branch pointer is written first and HEAD_COMMIT last, so an
        interrupted update never leaves HEAD naming a commit that its
        branch does not.
        """
        self.move_branch(branch, commit_id)
        self.set_current_branch(branch)
        self.set_head_commit_id(commit_id)
        logger.debug("HEAD is now %s at %s", branch, commit_id)

    def is_consistent(self) -> bool:
        """True if HEAD_COMMIT matches the active branch's pointer."""
        branch = self.current_branch()
        if branch is None or not self.branch_exists(branch):
            return False
        return self.read_branch(branch) == self.head_commit_id()

    def __repr__(self) -> str:
        return f"RefManager(branch={self.current_branch()}, head={self.head_commit_id()})"
