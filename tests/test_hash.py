"""Hash utilities tests."""

import hashlib
import tempfile
from pathlib import Path

from gitlet.core.hash import hash_object, hash_file


def test_hash_object_empty():
    """Test hashing empty bytes."""
    result = hash_object(b'')
    assert len(result) == 40
    assert result == hashlib.sha1(b'').hexdigest()


def test_hash_object_deterministic():
    """Test hash consistency for same input."""
    assert hash_object(b'hello world') == hash_object(b'hello world')


def test_hash_object_different_data():
    """Test different data produces different hashes."""
    assert hash_object(b'hello') != hash_object(b'world')


def test_hash_object_concatenates_parts():
    """Parts are hashed in order, strings as UTF-8."""
    assert hash_object('a.txt', b'hi') == hashlib.sha1(b'a.txthi').hexdigest()
    assert hash_object('a.txt', b'hi') == hash_object(b'a.txthi')
    assert hash_object('ab', 'c') != hash_object('c', 'ab')


def test_hash_object_unicode():
    """Non-ASCII strings hash as their UTF-8 bytes."""
    assert hash_object('é') == hashlib.sha1('é'.encode('utf-8')).hexdigest()


def test_hash_file():
    """Test hashing file contents."""
    with tempfile.NamedTemporaryFile(mode='wb', delete=False) as f:
        f.write(b'test content')
        temp_path = f.name

    try:
        assert hash_file(temp_path) == hash_object(b'test content')
    finally:
        Path(temp_path).unlink()
