"""Gitlet objects: blobs and commits."""

import json
import time
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional

from .errors import CorruptObjectError, EmptyMessageError
from .hash import hash_object

ROOT_MESSAGE = 'initial commit'


class GitletObject(ABC):
    """Base class for all Gitlet objects."""

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Serialized object data
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.

        Args:
            data: Serialized object data
        """
        pass

    @abstractmethod
    def identity(self) -> str:
        """Compute the content-addressed id of this object."""
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, commit)
        """
        return self.__class__.__name__.lower()

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = self.identity()
        return self._hash

    @property
    def hash(self) -> str:
        """
        Get object hash.

        Returns:
            str: 40-character SHA-1 hash
        """
        return self.compute_hash()


class Blob(GitletObject):
    """
    Represents the content of one tracked file at commit time.

    The id is the hash of the file's path followed by its content, so
    identical content stored under two names yields two distinct blobs.
    Renaming a file therefore always writes a new object.
    """

    def __init__(self, path: str = '', data: Optional[bytes] = None):
        """
        Initialize a blob.

        Args:
            path: Repository-relative path the content belongs to
            data: File content as bytes
        """
        super().__init__()
        self.path = path
        self.data = data or b''

    def identity(self) -> str:
        return hash_object(self.path, self.data)

    def serialize(self) -> bytes:
        """
        Serialize blob to bytes.

        Returns:
            bytes: Raw file content
        """
        return self.data

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize blob from bytes.

        The path is not part of the payload; a blob read back from the
        store keeps whatever path it was constructed with.

        Args:
            data: Raw file content
        """
        self.data = data
        self._hash = None

    @classmethod
    def from_file(cls, filepath: str, path: str) -> 'Blob':
        """
        Create blob from a working-tree file.

        Args:
            filepath: Filesystem location to read
            path: Repository-relative path used for the blob id

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(path, f.read())

    def __repr__(self) -> str:
        """String representation of blob."""
        return f"Blob(hash={self.hash[:7]}, path={self.path!r}, size={len(self.data)})"


class Commit(GitletObject):
    """
    Represents an immutable snapshot of the tracked files.

    A commit captures:
    - The complete tree (path -> blob id), not a delta
    - Parent commit id(s); only the root commit has none
    - Timestamp (seconds since the epoch)
    - Commit message
    """

    def __init__(self):
        """Initialize empty commit."""
        super().__init__()
        self.message: str = ''
        self.parents: List[str] = []
        self.timestamp: int = 0
        self.tree: Dict[str, str] = {}

    def identity(self) -> str:
        return hash_object(self.message, str(self.timestamp), ','.join(self.parents))

    @property
    def parent(self) -> Optional[str]:
        """First parent id, or None for the root commit."""
        return self.parents[0] if self.parents else None

    def serialize(self) -> bytes:
        """
        Serialize commit to JSON.

        Tree entries are written in path order so the same commit always
        serializes to the same bytes.

        Returns:
            bytes: Serialized commit data
        """
        record = {
            'message': self.message,
            'parents': list(self.parents),
            'timestamp': self.timestamp,
            'tree': dict(sorted(self.tree.items())),
        }
        return json.dumps(record, sort_keys=True).encode()

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from JSON.

        Args:
            data: Serialized commit data
        """
        try:
            record = json.loads(data.decode())
            self.message = record['message']
            self.parents = list(record['parents'])
            self.timestamp = int(record['timestamp'])
            self.tree = dict(sorted(record['tree'].items()))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise CorruptObjectError(f"Invalid commit record: {e}") from e
        self._hash = None

    @classmethod
    def create(
        cls,
        message: str,
        parents: List[str],
        tree: Dict[str, str],
        timestamp: Optional[int] = None,
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            message: Commit message, must be non-empty
            parents: Ordered parent commit ids
            tree: Complete mapping of tracked path to blob id
            timestamp: Unix timestamp (defaults to current time)

        Returns:
            Commit: New commit object

        Raises:
            EmptyMessageError: If message is empty
        """
        if not message:
            raise EmptyMessageError()

        commit = cls()
        commit.message = message
        commit.parents = list(parents)
        commit.tree = dict(sorted(tree.items()))
        commit.timestamp = int(time.time()) if timestamp is None else int(timestamp)
        return commit

    @classmethod
    def root(cls) -> 'Commit':
        """The distinguished initial commit; its id never changes."""
        return cls.create(ROOT_MESSAGE, [], {}, timestamp=0)

    def formatted_timestamp(self) -> str:
        """Render the timestamp in local time, e.g. 'Thu Jan 01 00:00:00 1970 +0000'."""
        dt = datetime.fromtimestamp(self.timestamp).astimezone()
        return dt.strftime("%a %b %d %H:%M:%S %Y %z")

    def __repr__(self) -> str:
        """String representation."""
        parent_info = f", parents={len(self.parents)}" if self.parents else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
