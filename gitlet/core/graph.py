"""Commit graph creation and traversal."""

import logging
from typing import Dict, Iterator, Optional, Set

from gitlet.core.objects import Commit
from gitlet.core.store import ObjectStore

logger = logging.getLogger(__name__)


class CommitGraph:
    """
    The DAG of commits stored in an ObjectStore.

    Commits only ever point at parents that were written before them,
    so every first-parent walk ends at the root commit.
    """

    def __init__(self, store: ObjectStore):
        self.store = store

    def create_commit(
        self,
        message: str,
        parent_id: Optional[str],
        tree: Dict[str, str],
        timestamp: Optional[int] = None,
    ) -> Commit:
        """
        Create and store a commit.

        Two commits with the same message, timestamp and parents share an
        id; the second write is then a no-op.

        Raises:
            EmptyMessageError: If message is empty
        """
        parents = [parent_id] if parent_id else []
        commit = Commit.create(message, parents, tree, timestamp=timestamp)
        self.store.put_commit(commit)
        logger.debug("Created commit %s (parents=%s)", commit.hash, parents)
        return commit

    def get(self, commit_id: str) -> Commit:
        return self.store.get_commit(commit_id)

    def history(self, start_id: str) -> Iterator[Commit]:
        """
        Walk first parents from start_id back to the root.

        Second parents are ignored. Each call starts a fresh walk.
        """
        commit_id: Optional[str] = start_id
        while commit_id:
            commit = self.store.get_commit(commit_id)
            yield commit
            commit_id = commit.parent

    def all_commits(self) -> Iterator[Commit]:
        """
        Yield every stored commit in storage order.

        The order says nothing about topology or time.
        """
        for commit_id in self.store.iter_commit_ids():
            yield self.store.get_commit(commit_id)

    def find_by_message(self, text: str) -> Set[str]:
        """
        Find ids of commits whose message equals text exactly.

        Returns:
            Possibly empty set of commit ids
        """
        return {commit.hash for commit in self.all_commits() if commit.message == text}
