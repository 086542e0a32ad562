"""Status command - show branches, staged files and working tree changes."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import error
from colorama import Fore, Style


def format_status(report) -> str:
    """
    Render a StatusReport as the five status sections.

    Each section is followed by a blank line; the active branch is
    marked with '*'.
    """
    lines = ["=== Branches ==="]
    for name in report.branches:
        if name == report.current_branch:
            lines.append(f"{Fore.GREEN}*{name}{Style.RESET_ALL}")
        else:
            lines.append(name)
    lines.append("")

    lines.append("=== Staged Files ===")
    lines.extend(report.staged)
    lines.append("")

    lines.append("=== Removed Files ===")
    lines.extend(report.removed)
    lines.append("")

    lines.append("=== Modifications Not Staged For Commit ===")
    lines.extend(f"{path} ({kind})" for path, kind in report.modified)
    lines.append("")

    lines.append("=== Untracked Files ===")
    lines.extend(report.untracked)
    lines.append("")

    return "\n".join(lines)


@click.command('status')
def status_cmd():
    """
    Show the working tree status.

    Displays:
    - Branches, with the current one marked
    - Files staged for addition
    - Files staged for removal
    - Modifications not staged for commit
    - Untracked files

    Examples:
        gitlet status
    """
    try:
        repo = Repository.require()
        report = repo.status()
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    click.echo(format_status(report))
