"""Utilities module for common helper functions.

This module contains:
- Filesystem utilities (atomic writes, file listing, pruning)
"""

from gitlet.utils.fs import list_files, remove_empty_tree, remove_file, write_atomic, write_file

__all__ = [
    'list_files', 'remove_empty_tree', 'remove_file', 'write_atomic', 'write_file',
]
