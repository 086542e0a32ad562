"""Hash utilities for Gitlet."""

import hashlib
from typing import Union


def hash_object(*parts: Union[bytes, str]) -> str:
    """
    Compute SHA-1 hash of the concatenation of all parts.

    Strings are UTF-8 encoded before hashing, so
    ``hash_object('a.txt', b'hi') == hash_object(b'a.txthi')``.

    Args:
        *parts: Bytes or strings to hash, in order

    Returns:
        40-character hex string
    """
    digest = hashlib.sha1()
    for part in parts:
        if isinstance(part, str):
            part = part.encode()
        digest.update(part)
    return digest.hexdigest()


def hash_file(filepath: str) -> str:
    """
    Compute SHA-1 hash of file.

    Args:
        filepath: Path to file

    Returns:
        40-character hex string
    """
    with open(filepath, 'rb') as f:
        return hash_object(f.read())
