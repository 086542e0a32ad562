"""Core functionality for Gitlet.

This module contains the core data structures:
- Gitlet objects (Blob, Commit)
- Object store and commit graph
- Staging index
- Reference management
- Repository facade
- Configuration management
- Hashing utilities

For working-tree checkout and status, see gitlet.operations
"""

from gitlet.core.objects import GitletObject, Blob, Commit
from gitlet.core.store import ObjectStore
from gitlet.core.graph import CommitGraph
from gitlet.core.index import StagingIndex, StagedChanges
from gitlet.core.refs import RefManager
from gitlet.core.config import Config, get_config
from gitlet.core.hash import hash_object, hash_file
from gitlet.core.repository import Repository

__all__ = [
    'GitletObject',
    'Blob',
    'Commit',
    'ObjectStore',
    'CommitGraph',
    'StagingIndex',
    'StagedChanges',
    'RefManager',
    'Config',
    'get_config',
    'hash_object',
    'hash_file',
    'Repository',
]
