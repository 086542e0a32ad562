"""Shared pytest fixtures for Gitlet tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from gitlet.core.config import Config
from gitlet.core.repository import Repository


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path_factory):
    """Keep tests away from the user's ~/.gitletconfig and GITLET_* variables."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', home / '.gitletconfig')
    for key in ('GITLET_CORE_LOGLEVEL', 'GITLET_CORE_COMPRESSION', 'GITLET_INIT_DEFAULTBRANCH'):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def commit_file():
    """
    Helper to write, stage and commit one file.

    Returns a function (repo, path, content, message) -> Commit.
    """
    def _commit_file(repo, path, content, message, timestamp=None):
        target = repo.work_tree / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
        repo.add(path)
        return repo.commit(message, timestamp=timestamp)

    return _commit_file


@pytest.fixture
def repo_with_commits(repo, commit_file):
    """
    Repository with a couple of commits on main.

    file1.txt is committed first, file2.txt second.
    """
    commit_file(repo, 'file1.txt', 'Hello, World!', 'First commit', timestamp=1000)
    commit_file(repo, 'file2.txt', 'Second file', 'Second commit', timestamp=2000)
    return repo
