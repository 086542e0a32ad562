"""Gitlet - a small, local version control system implemented in Python."""

__version__ = '0.1.0'

from gitlet.core.repository import Repository
from gitlet.core.objects import GitletObject, Blob, Commit

__all__ = [
    'Repository',
    'GitletObject',
    'Blob',
    'Commit',
]
