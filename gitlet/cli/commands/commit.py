"""Commit command - create a commit from staged changes."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error, info


@click.command('commit')
@click.argument('message', required=False)
@click.option('-m', '--message', 'message_opt', help='Commit message')
def commit_cmd(message, message_opt):
    """
    Record changes to the repository.

    Creates a commit from the staged additions and removals. The new
    commit tracks everything the current commit tracks, updated by the
    staging area, which is then cleared.

    Examples:
        gitlet commit "Initial work"
        gitlet commit -m "Fix typo"
    """
    message = message_opt if message_opt is not None else (message or '')

    try:
        repo = Repository.require()
        commit = repo.commit(message)
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    click.echo(success(f"[{repo.refs.current_branch()} {commit.hash[:7]}] {commit.message}"))
    click.echo(info(f"Files tracked: {len(commit.tree)}"))
