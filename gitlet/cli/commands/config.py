"""Config command - manage repository configuration."""

import click
from gitlet.core.config import Config, split_key
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error, info


def _load_config(is_global: bool) -> Config:
    if is_global:
        return Config()
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not in an initialized Gitlet directory. (use --global for global config)"))
        raise click.Abort()
    return Config(repo.config_file)


def _split(key):
    try:
        return split_key(key)
    except ValueError as e:
        click.echo(error(str(e)))
        raise click.Abort()


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.

    Examples:
        gitlet config set core.loglevel DEBUG
        gitlet config set --global init.defaultbranch trunk
    """
    section, option = _split(key)
    _load_config(is_global).set(section, option, value, global_config=is_global)

    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Get global config only')
def config_get(key, is_global):
    """
    Get a config value.

    Examples:
        gitlet config get init.defaultbranch
    """
    section, option = _split(key)
    if is_global:
        config = Config()
    else:
        repo = Repository.find_repository()
        config = Config(repo.config_file if repo else None)

    value = config.get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """
    Remove a config value.

    Examples:
        gitlet config unset core.loglevel
    """
    section, option = _split(key)
    if not _load_config(is_global).unset(section, option, global_config=is_global):
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(success(f"Unset {key}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.

    Examples:
        gitlet config list
        gitlet config list --global
    """
    if is_global:
        config = Config()
    else:
        repo = Repository.find_repository()
        config = Config(repo.config_file if repo else None)

    values = config.list_all()
    if not values:
        click.echo(info("No configuration set"))
        return

    for section, items in sorted(values.items()):
        for key, value in sorted(items.items()):
            click.echo(f"{section}.{key}={value}")
