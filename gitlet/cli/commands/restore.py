"""Restore command - bring back a file's committed version."""

import click
from pathlib import Path
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error


@click.command('restore')
@click.argument('operands', nargs=-1, required=True)
def restore_cmd(operands):
    """
    Overwrite a working file with its version from a commit.

    Uses HEAD when no commit is given. Neither the staging area nor
    any branch changes.

    Examples:
        gitlet restore -- notes.txt
        gitlet restore a1b2c3d -- notes.txt
    """
    if len(operands) == 1:
        commit_id, path = None, operands[0]
    elif len(operands) == 2:
        commit_id, path = operands
    else:
        click.echo(error("Incorrect operands."))
        raise click.Abort()

    try:
        repo = Repository.require()
        rel_path = repo.normalize_path(str(Path.cwd() / path))
        repo.restore(rel_path, commit_id)
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    source = commit_id or 'HEAD'
    click.echo(success(f"Restored {rel_path} from {source}"))
