"""Rm command - stop tracking a file."""

import click
from pathlib import Path
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error


@click.command('rm')
@click.argument('path')
def rm_cmd(path):
    """
    Unstage a file, and if it is tracked, stage it for removal.

    A tracked file is also deleted from the working directory.

    Examples:
        gitlet rm old.txt
    """
    try:
        repo = Repository.require()
        rel_path = repo.normalize_path(str(Path.cwd() / path))
        repo.remove(rel_path)
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    click.echo(success(f"Removed {rel_path}"))
