"""Integration tests for the init command and CLI plumbing."""

from click.testing import CliRunner
from gitlet.cli.main import cli
from gitlet.core.objects import Commit
from gitlet.core.repository import Repository


def test_init_in_current_directory(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    runner = CliRunner()

    result = runner.invoke(cli, ['init'])

    assert result.exit_code == 0
    assert 'Initialized empty Gitlet repository' in result.output
    repo = Repository(str(temp_dir))
    assert repo.refs.current_branch() == 'main'
    assert repo.refs.head_commit_id() == Commit.root().hash


def test_init_new_directory(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    runner = CliRunner()

    result = runner.invoke(cli, ['init', 'project'])

    assert result.exit_code == 0
    assert (temp_dir / 'project' / '.gitlet').is_dir()


def test_init_twice(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    runner = CliRunner()
    runner.invoke(cli, ['init'])

    result = runner.invoke(cli, ['init'])

    assert result.exit_code != 0
    assert 'already exists' in result.output


def test_commands_outside_repository(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    runner = CliRunner()

    for args in (['status'], ['log'], ['add', 'x.txt'], ['commit', 'msg'], ['branch', 'b']):
        result = runner.invoke(cli, args)
        assert result.exit_code != 0
        assert 'Not in an initialized Gitlet directory.' in result.output


def test_help_shows_commands():
    runner = CliRunner()
    result = runner.invoke(cli, ['--help'])
    assert result.exit_code == 0
    for name in ('init', 'add', 'commit', 'rm', 'remove', 'global-log', 'find',
                 'rm-branch', 'remove-branch', 'restore', 'reset', 'switch'):
        assert name in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert '0.1.0' in result.output


def test_config_roundtrip(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    runner = CliRunner()
    runner.invoke(cli, ['init'])

    result = runner.invoke(cli, ['config', 'set', 'core.compression', '9'])
    assert result.exit_code == 0

    result = runner.invoke(cli, ['config', 'get', 'core.compression'])
    assert result.output.strip() == '9'

    result = runner.invoke(cli, ['config', 'list'])
    assert 'core.compression=9' in result.output

    result = runner.invoke(cli, ['config', 'unset', 'core.compression'])
    assert result.exit_code == 0

    result = runner.invoke(cli, ['config', 'get', 'core.compression'])
    assert result.exit_code != 0
    assert 'Config key not found' in result.output


def test_config_rejects_bad_key(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    runner = CliRunner()
    runner.invoke(cli, ['init'])

    result = runner.invoke(cli, ['config', 'set', 'nodot', 'x'])

    assert result.exit_code != 0
    assert 'expected section.key' in result.output


def test_global_default_branch(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    runner = CliRunner()
    runner.invoke(cli, ['config', 'set', '--global', 'init.defaultbranch', 'trunk'])

    result = runner.invoke(cli, ['init'])

    assert result.exit_code == 0
    assert Repository(str(temp_dir)).refs.current_branch() == 'trunk'


def test_verbose_logs_to_stderr(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    runner = CliRunner()

    result = runner.invoke(cli, ['-v', 'init'])

    assert result.exit_code == 0
    assert 'DEBUG gitlet.' in result.output
