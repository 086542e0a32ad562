"""Integration tests for log, global-log and find."""

import pytest
from click.testing import CliRunner
from gitlet.cli.main import cli
from gitlet.core.objects import Commit
from gitlet.core.repository import Repository


@pytest.fixture
def runner(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    runner = CliRunner()
    runner.invoke(cli, ['init'])
    for name, message in (('a.txt', 'first'), ('b.txt', 'second')):
        (temp_dir / name).write_text(name)
        runner.invoke(cli, ['add', name])
        runner.invoke(cli, ['commit', message])
    return runner


def test_log_newest_first(runner, temp_dir):
    repo = Repository(str(temp_dir))

    result = runner.invoke(cli, ['log'])

    assert result.exit_code == 0
    blocks = [b for b in result.output.split('===\n') if b.strip()]
    assert len(blocks) == 3
    assert blocks[0].startswith(f"commit {repo.refs.head_commit_id()}\n")
    assert 'second' in blocks[0]
    assert 'first' in blocks[1]
    assert blocks[2].startswith(f"commit {Commit.root().hash}\n")
    assert 'initial commit' in blocks[2]
    assert 'Date: ' in blocks[0]


def test_log_shows_merge_line(runner, temp_dir):
    repo = Repository(str(temp_dir))
    head = repo.refs.head_commit_id()
    root = Commit.root().hash
    merge = Commit.create('merged', [head, root], repo.head_tree(), timestamp=10)
    repo.objects.put_commit(merge)
    repo.refs.update_head('main', merge.hash)

    result = runner.invoke(cli, ['log'])

    assert f"Merge: {head[:7]} {root[:7]}" in result.output


def test_log_after_reset_hides_later_commits(runner, temp_dir):
    repo = Repository(str(temp_dir))
    first = repo.find('first').pop()
    runner.invoke(cli, ['reset', first])

    result = runner.invoke(cli, ['log'])
    assert 'second' not in result.output

    result = runner.invoke(cli, ['global-log'])
    assert 'second' in result.output
    assert 'first' in result.output
    assert 'initial commit' in result.output


def test_find(runner, temp_dir):
    repo = Repository(str(temp_dir))

    result = runner.invoke(cli, ['find', 'first'])

    assert result.exit_code == 0
    assert result.output.strip() == repo.find('first').pop()


def test_find_multiple(runner, temp_dir):
    (temp_dir / 'a.txt').write_text('again')
    runner.invoke(cli, ['add', 'a.txt'])
    runner.invoke(cli, ['commit', 'first'])

    result = runner.invoke(cli, ['find', 'first'])

    ids = result.output.split()
    assert len(ids) == 2
    assert ids == sorted(ids)


def test_find_nothing(runner):
    result = runner.invoke(cli, ['find', 'no such message'])
    assert result.exit_code == 0
    assert 'Found no commit with that message.' in result.output
