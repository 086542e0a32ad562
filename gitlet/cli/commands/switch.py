"""Switch command - make another branch active."""

import click
from gitlet.core.errors import GitletError, UntrackedFileConflictError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error, info


@click.command('switch')
@click.argument('branch_name')
def switch_cmd(branch_name):
    """
    Switch to a branch.

    Rewrites the working directory to the branch's tip and clears the
    staging area. Refuses, without touching anything, when an untracked
    file would be overwritten.

    Examples:
        gitlet switch main
        gitlet switch feature
    """
    try:
        repo = Repository.require()
        file_count = repo.switch(branch_name)
    except UntrackedFileConflictError as e:
        click.echo(error(str(e)))
        for path in e.paths:
            click.echo(info(f"  {path}"))
        raise click.Abort()
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    click.echo(success(f"Switched to branch '{branch_name}'"))
    click.echo(info(f"Updated {file_count} file(s)"))
