"""CLI commands for Gitlet."""

from gitlet.cli.commands.init import init_cmd
from gitlet.cli.commands.add import add_cmd
from gitlet.cli.commands.commit import commit_cmd
from gitlet.cli.commands.rm import rm_cmd
from gitlet.cli.commands.log import log_cmd, global_log_cmd, find_cmd
from gitlet.cli.commands.status import status_cmd
from gitlet.cli.commands.branch import branch_cmd, rm_branch_cmd
from gitlet.cli.commands.switch import switch_cmd
from gitlet.cli.commands.reset import reset_cmd
from gitlet.cli.commands.restore import restore_cmd
from gitlet.cli.commands.config import config_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'rm_cmd', 'log_cmd', 'global_log_cmd',
           'find_cmd', 'status_cmd', 'branch_cmd', 'rm_branch_cmd', 'switch_cmd',
           'reset_cmd', 'restore_cmd', 'config_cmd']
