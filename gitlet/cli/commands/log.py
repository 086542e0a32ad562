"""Log commands - show commit history and search it."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.objects import Commit
from gitlet.core.repository import Repository
from gitlet.cli.output import error
from colorama import Fore, Style


def format_commit(commit: Commit) -> str:
    """
    Render one commit the way log and global-log show it.

    ===
    commit <id>
    Merge: <parent1> <parent2>     (merge commits only)
    Date: <local time>
    <message>
    """
    lines = ["===", f"{Fore.YELLOW}commit {commit.hash}{Style.RESET_ALL}"]
    if len(commit.parents) > 1:
        lines.append("Merge: " + " ".join(parent[:7] for parent in commit.parents))
    lines.append(f"Date: {commit.formatted_timestamp()}")
    lines.append(commit.message)
    lines.append("")
    return "\n".join(lines)


@click.command('log')
def log_cmd():
    """
    Show commit history from HEAD back to the initial commit.

    Follows first parents only.

    Examples:
        gitlet log
    """
    try:
        repo = Repository.require()
        for commit in repo.log():
            click.echo(format_commit(commit))
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()


@click.command('global-log')
def global_log_cmd():
    """
    Show every commit ever made, in no particular order.

    Examples:
        gitlet global-log
    """
    try:
        repo = Repository.require()
        for commit in repo.global_log():
            click.echo(format_commit(commit))
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()


@click.command('find')
@click.argument('message')
def find_cmd(message):
    """
    Print the ids of all commits with exactly the given message.

    Examples:
        gitlet find "initial commit"
    """
    try:
        repo = Repository.require()
        matches = repo.find(message)
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    if not matches:
        click.echo("Found no commit with that message.")
        return

    for commit_id in sorted(matches):
        click.echo(commit_id)
