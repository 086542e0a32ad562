"""Gitlet exception hierarchy.

All Gitlet-specific exceptions inherit from GitletError. Each one is a
terminal, user-visible outcome for the command that raised it; the CLI
prints the message and aborts.
"""

from typing import Iterable


class GitletError(Exception):
    """Base exception for all Gitlet errors."""


class NotInitializedError(GitletError):
    """Raised when an operation runs outside a Gitlet repository."""

    def __init__(self, message: str = "Not in an initialized Gitlet directory.") -> None:
        super().__init__(message)


class AlreadyInitializedError(GitletError):
    """Raised by init when a repository already exists."""

    def __init__(self) -> None:
        super().__init__(
            "A Gitlet version-control system already exists in the current directory."
        )


class PathOutsideRepositoryError(GitletError):
    """Raised when a path points outside the work tree or into .gitlet."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path is outside the repository: {path}")


class WorkingFileNotFoundError(GitletError):
    """Raised when add names a file missing from the working tree."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__("File does not exist.")


class FileNotInCommitError(GitletError):
    """Raised when restore names a file the commit does not track."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__("File does not exist in that commit.")


class NothingToRemoveError(GitletError):
    """Raised when rm names a file that is neither staged nor tracked."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__("No reason to remove the file.")


class NoChangesError(GitletError):
    """Raised when committing with an empty staging index."""

    def __init__(self) -> None:
        super().__init__("No changes added to the commit.")


class EmptyMessageError(GitletError, ValueError):
    """Raised when a commit message is empty."""

    def __init__(self) -> None:
        super().__init__("Please enter a commit message.")


class BranchExistsError(GitletError):
    """Raised when a branch name is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("A branch with that name already exists.")


class BranchNotFoundError(GitletError):
    """Raised when a branch lookup fails."""

    def __init__(self, name: str, message: str = "No such branch exists.") -> None:
        self.name = name
        super().__init__(message)


class InvalidBranchNameError(GitletError, ValueError):
    """Raised for branch names that cannot be stored as a ref file."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid branch name: {name!r}")


class CurrentBranchError(GitletError):
    """Raised when trying to delete the active branch."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Cannot remove the current branch.")


class AlreadyOnBranchError(GitletError):
    """Raised when switching to the branch that is already active."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("No need to switch to the current branch.")


class ObjectNotFoundError(GitletError):
    """Raised when an object id is not in the object store."""

    def __init__(self, object_id: str, message: str = "") -> None:
        self.object_id = object_id
        super().__init__(message or f"Object {object_id} not found")


class CommitNotFoundError(ObjectNotFoundError):
    """Raised when a commit id (or prefix) does not name a commit."""

    def __init__(self, commit_id: str, message: str = "No commit with that id exists.") -> None:
        super().__init__(commit_id, message)


class AmbiguousCommitIdError(CommitNotFoundError):
    """Raised when a commit id prefix matches more than one commit."""

    def __init__(self, prefix: str, matches: Iterable[str]) -> None:
        self.matches = sorted(matches)
        candidates = ", ".join(m[:10] for m in self.matches)
        super().__init__(prefix, f"Commit id prefix '{prefix}' is ambiguous: {candidates}")


class CorruptObjectError(GitletError):
    """Raised when an object file cannot be decoded."""


class UntrackedFileConflictError(GitletError):
    """
    Raised when a checkout would overwrite an untracked working file.

    Carries every conflicting path; no file has been touched when this
    is raised.
    """

    def __init__(self, paths: Iterable[str]) -> None:
        self.paths = sorted(paths)
        super().__init__(
            "There is an untracked file in the way; delete it, or add and commit it first."
        )
