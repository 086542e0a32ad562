"""Branch commands - create, list and delete branches."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error, info
from colorama import Fore, Style


@click.command('branch')
@click.argument('name', required=False)
def branch_cmd(name):
    """
    List branches, or create a branch at the current commit.

    Creating a branch does not switch to it.

    Examples:
        gitlet branch              # List all branches
        gitlet branch feature      # Create new branch
    """
    try:
        repo = Repository.require()

        if name is None:
            current = repo.refs.current_branch()
            for branch_name, commit_id in repo.refs.list_branches():
                if branch_name == current:
                    click.echo(f"* {Fore.GREEN}{branch_name}{Style.RESET_ALL} {commit_id[:7]}")
                else:
                    click.echo(f"  {branch_name} {commit_id[:7]}")
            return

        commit_id = repo.branch(name)
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    click.echo(success(f"Created branch '{name}'"))
    click.echo(info(f"Branch points to {commit_id[:7]}"))


@click.command('rm-branch')
@click.argument('name')
def rm_branch_cmd(name):
    """
    Delete a branch pointer.

    Commits made on the branch stay in the repository. The current
    branch cannot be deleted.

    Examples:
        gitlet rm-branch feature
    """
    try:
        repo = Repository.require()
        repo.remove_branch(name)
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    click.echo(success(f"Deleted branch '{name}'"))
