"""Content-addressed object storage for Gitlet."""

import logging
import zlib
from pathlib import Path
from typing import Iterator, Optional, Set

from gitlet.core.errors import (
    AmbiguousCommitIdError,
    CommitNotFoundError,
    CorruptObjectError,
    ObjectNotFoundError,
)
from gitlet.core.objects import Blob, Commit, GitletObject
from gitlet.utils.fs import write_atomic

logger = logging.getLogger(__name__)

# Enough decompressed bytes to read any "<type> <size>\0" header.
HEADER_PEEK = 64
HEX_DIGITS = frozenset('0123456789abcdef')


class ObjectStore:
    """
    Stores blobs and commits in one directory, keyed by their id.

    Objects live in subdirectories named by the first 2 characters of
    the id, with the remaining 38 characters as the filename. Each file
    is zlib-compressed and starts with a ``<type> <size>\\0`` header, so
    blobs and commits share the same id scheme and can be told apart
    without a second index.

    Objects are never rewritten once present.
    """

    def __init__(self, objects_dir: Path, compression: int = zlib.Z_DEFAULT_COMPRESSION):
        """
        Initialize object store.

        Args:
            objects_dir: Directory holding the object files
            compression: zlib compression level for new objects
        """
        self.objects_dir = Path(objects_dir)
        self.compression = compression

    def object_path(self, object_id: str) -> Path:
        """
        Get filesystem path for an object.

        Example: ab/cdef0123456789... for id abcdef0123456789...
        """
        return self.objects_dir / object_id[:2] / object_id[2:]

    def exists(self, object_id: str) -> bool:
        """Check if an object with this exact id is stored."""
        if len(object_id) < 3:
            return False
        return self.object_path(object_id).is_file()

    def write_object(self, obj: GitletObject) -> str:
        """
        Write object to the store.

        Writing an id that is already present is a no-op and leaves the
        existing file untouched.

        Returns:
            str: Id of the object
        """
        object_id = obj.hash
        path = self.object_path(object_id)

        if path.exists():
            logger.debug("Object %s already stored", object_id)
            return object_id

        data = obj.serialize()
        header = f"{obj.type} {len(data)}\0".encode()
        write_atomic(path, zlib.compress(header + data, self.compression))
        logger.debug("Wrote %s %s (%d bytes)", obj.type, object_id, len(data))

        return object_id

    def _read_raw(self, object_id: str):
        path = self.object_path(object_id)
        if len(object_id) < 3 or not path.is_file():
            raise ObjectNotFoundError(object_id)

        try:
            content = zlib.decompress(path.read_bytes())
            null_idx = content.index(b'\0')
            obj_type, size_str = content[:null_idx].decode().split(' ', 1)
            size = int(size_str)
        except (zlib.error, ValueError) as e:
            raise CorruptObjectError(f"Invalid object {object_id}: {e}") from e

        data = content[null_idx + 1:]
        if len(data) != size:
            raise CorruptObjectError(
                f"Object size mismatch for {object_id}: expected {size}, got {len(data)}"
            )
        return obj_type, data

    def object_type(self, object_id: str) -> Optional[str]:
        """
        Peek at an object's type without inflating the whole payload.

        Returns:
            'blob', 'commit', or None if the object is missing or unreadable
        """
        path = self.object_path(object_id)
        if len(object_id) < 3 or not path.is_file():
            return None
        try:
            head = zlib.decompressobj().decompress(path.read_bytes(), HEADER_PEEK)
            return head[:head.index(b' ')].decode()
        except (zlib.error, ValueError):
            return None

    def put_blob(self, path: str, content: bytes) -> str:
        """
        Store file content for a tracked path.

        Returns:
            str: Blob id, hash(path + content)
        """
        return self.write_object(Blob(path, content))

    def get_blob(self, blob_id: str) -> bytes:
        """
        Read a blob's content.

        Raises:
            ObjectNotFoundError: If no blob with that id exists
        """
        obj_type, data = self._read_raw(blob_id)
        if obj_type != 'blob':
            raise ObjectNotFoundError(blob_id, f"Object {blob_id} is not a blob")
        return data

    def put_commit(self, commit: Commit) -> str:
        """Store a commit record and return its id."""
        return self.write_object(commit)

    def get_commit(self, commit_id: str) -> Commit:
        """
        Read a commit by its full id.

        Raises:
            CommitNotFoundError: If the id is missing or names a blob
        """
        try:
            obj_type, data = self._read_raw(commit_id)
        except ObjectNotFoundError:
            raise CommitNotFoundError(commit_id)
        if obj_type != 'commit':
            raise CommitNotFoundError(commit_id)

        commit = Commit()
        commit.deserialize(data)
        if commit.hash != commit_id:
            raise CorruptObjectError(f"Commit {commit_id} does not match its content")
        return commit

    def iter_ids(self) -> Iterator[str]:
        """Yield every stored object id, in directory order."""
        if not self.objects_dir.exists():
            return
        for subdir in sorted(self.objects_dir.iterdir()):
            if not subdir.is_dir() or len(subdir.name) != 2:
                continue
            for obj_file in sorted(subdir.iterdir()):
                if obj_file.is_file() and not obj_file.name.startswith('.'):
                    yield subdir.name + obj_file.name

    def iter_commit_ids(self) -> Iterator[str]:
        """Yield the id of every stored commit, skipping blobs."""
        for object_id in self.iter_ids():
            if self.object_type(object_id) == 'commit':
                yield object_id

    def find_commits_by_prefix(self, prefix: str) -> Set[str]:
        """
        Find every commit whose id starts with prefix.

        Args:
            prefix: Abbreviated (or full) commit id

        Returns:
            Set of matching commit ids; blobs never match
        """
        prefix = prefix.lower()
        if not prefix or any(c not in HEX_DIGITS for c in prefix):
            return set()

        if len(prefix) >= 2:
            subdir = self.objects_dir / prefix[:2]
            if not subdir.is_dir():
                return set()
            candidates = (
                prefix[:2] + obj_file.name
                for obj_file in subdir.iterdir()
                if obj_file.is_file() and not obj_file.name.startswith('.')
            )
        else:
            candidates = self.iter_ids()

        return {
            object_id for object_id in candidates
            if object_id.startswith(prefix) and self.object_type(object_id) == 'commit'
        }

    def resolve_commit(self, commit_ref: str) -> str:
        """
        Resolve a full or abbreviated commit id.

        Raises:
            CommitNotFoundError: If nothing matches
            AmbiguousCommitIdError: If more than one commit matches
        """
        matches = self.find_commits_by_prefix(commit_ref)
        if not matches:
            raise CommitNotFoundError(commit_ref)
        if len(matches) > 1:
            raise AmbiguousCommitIdError(commit_ref, matches)
        return matches.pop()

    def __repr__(self) -> str:
        return f"ObjectStore(path={self.objects_dir})"
