"""Reset command - move the current branch to another commit."""

import click
from gitlet.core.errors import GitletError, UntrackedFileConflictError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error, info


@click.command('reset')
@click.argument('commit_id')
def reset_cmd(commit_id):
    """
    Check out all files of a commit and move the current branch there.

    COMMIT_ID may be abbreviated as long as it is unambiguous. The
    staging area is cleared.

    Examples:
        gitlet reset a1b2c3d
    """
    try:
        repo = Repository.require()
        full_id = repo.reset(commit_id)
    except UntrackedFileConflictError as e:
        click.echo(error(str(e)))
        for path in e.paths:
            click.echo(info(f"  {path}"))
        raise click.Abort()
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    message = repo.objects.get_commit(full_id).message.split('\n')[0]
    click.echo(success(f"HEAD is now at {full_id[:7]} {message}"))
