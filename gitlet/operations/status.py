"""Status computation: compare HEAD, the staging area and the working tree."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from gitlet.core.hash import hash_object


@dataclass
class StatusReport:
    """
    Everything `gitlet status` shows.

    modified holds (path, kind) pairs where kind is 'modified' or
    'deleted'. All lists are sorted by path.
    """
    current_branch: Optional[str]
    branches: List[str] = field(default_factory=list)
    staged: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    modified: List[Tuple[str, str]] = field(default_factory=list)
    untracked: List[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.removed or self.modified or self.untracked)


def compute_status(repo) -> StatusReport:
    """
    Build a StatusReport for a repository.

    Modifications not staged for commit:
    - tracked in HEAD, changed in the working tree, not staged
    - staged for addition with different working content
    - staged for addition but deleted from the working tree
    - tracked in HEAD, not staged for removal, deleted from the working tree

    Untracked files are working files neither staged for addition nor
    tracked, which includes files staged for removal and then re-created.

    Args:
        repo: Repository instance
    """
    head_tree = repo.head_tree()
    index = repo.index
    staged = index.staged_paths()
    removed = index.removed_paths()
    staged_set = set(staged)
    removed_set = set(removed)

    working = {}
    for path in repo.sync.working_files():
        working[path] = hash_object(path, (repo.work_tree / path).read_bytes())

    modified = []
    for path in sorted(set(head_tree) | staged_set):
        if path in staged_set:
            staged_id = hash_object(path, index.read_staged(path))
            if path not in working:
                modified.append((path, 'deleted'))
            elif working[path] != staged_id:
                modified.append((path, 'modified'))
        elif path in removed_set:
            continue
        elif path not in working:
            modified.append((path, 'deleted'))
        elif working[path] != head_tree[path]:
            modified.append((path, 'modified'))

    untracked = sorted(
        path for path in working
        if path not in staged_set and (path not in head_tree or path in removed_set)
    )

    return StatusReport(
        current_branch=repo.refs.current_branch(),
        branches=[name for name, _ in repo.refs.list_branches()],
        staged=staged,
        removed=removed,
        modified=modified,
        untracked=untracked,
    )
