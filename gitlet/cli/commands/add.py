"""Add command - stage files for commit."""

import click
from pathlib import Path
from gitlet.core.errors import GitletError, NotInitializedError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error, info, warning


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.

    Stage files for the next commit. Modified files must be added
    again to stage the new changes. Adding a file whose content
    matches the current commit unstages it.

    Examples:
        gitlet add file.txt
        gitlet add a.txt b.txt
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error(str(NotInitializedError())))
        raise click.Abort()

    staged = []
    unchanged = []

    try:
        for path in paths:
            rel_path = repo.normalize_path(str(Path.cwd() / path))
            if repo.add(rel_path):
                staged.append(rel_path)
            else:
                unchanged.append(rel_path)
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    if staged:
        click.echo(success(f"Added {len(staged)} file(s) to staging area"))
        for path in staged:
            click.echo(info(f"  {path}"))
    for path in unchanged:
        click.echo(warning(f"{path} matches the current commit; nothing staged"))
