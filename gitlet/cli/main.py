"""Main CLI entry point for Gitlet."""

import logging

import click
from colorama import init

from gitlet.cli.output import BANNER, configure_logging
from gitlet.cli.commands import (init_cmd, add_cmd, commit_cmd, rm_cmd, log_cmd,
                                 global_log_cmd, find_cmd, status_cmd, branch_cmd,
                                 rm_branch_cmd, switch_cmd, reset_cmd, restore_cmd,
                                 config_cmd)
from gitlet.core.config import Config
from gitlet.core.repository import Repository

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class GitletGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=GitletGroup)
@click.version_option(version='0.1.0')
@click.option('-v', '--verbose', is_flag=True, help='Log debug output to stderr')
def cli(verbose):
    if verbose:
        level = logging.DEBUG
    else:
        repo = Repository.find_repository()
        level = Config(repo.config_file if repo else None).log_level()
    configure_logging(level)


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(rm_cmd)
cli.add_command(rm_cmd, name='remove')
cli.add_command(log_cmd)
cli.add_command(global_log_cmd)
cli.add_command(find_cmd)
cli.add_command(status_cmd)
cli.add_command(branch_cmd)
cli.add_command(rm_branch_cmd)
cli.add_command(rm_branch_cmd, name='remove-branch')
cli.add_command(switch_cmd)
cli.add_command(reset_cmd)
cli.add_command(restore_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
