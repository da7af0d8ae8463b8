"""Main CLI entry point for tagnotes."""

import logging

import click

from .. import __version__
from ..config import get_config, create_sample_config, Config
from ..git import GitClient
from .changelog import changelog


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--config-file', '-c', help='Path to JSON configuration file')
@click.version_option(version=__version__, prog_name="tagnotes")
@click.pass_context
def cli(ctx, debug, config_file):
    """tagnotes - changelog generation from git tags."""

    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    ctx.ensure_object(dict)
    ctx.obj['base_config'] = get_config(config_file)
    ctx.obj['logger'] = logging.getLogger('tagnotes')


def create_client(ctx, repo_path=None):
    """Create a git client, letting a command-line path override the config."""
    base_config = ctx.obj['base_config']
    config = Config(
        repo_path=repo_path or base_config.repo_path,
        git_binary=base_config.git_binary,
        changelog=base_config.changelog,
    )
    return GitClient.from_config(config, ctx.obj['logger']), config


@cli.command()
@click.option('--path', '-p', default='tagnotes.json', help='Path for the config file')
def init_config(path):
    """Create a sample configuration file."""
    try:
        create_sample_config(path)
    except OSError as e:
        click.echo(f"Error creating config file: {e}", err=True)
        raise SystemExit(1)


@cli.command()
def version():
    """Show version information."""
    click.echo(f"tagnotes version {__version__}")


cli.add_command(changelog)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == '__main__':
    main()
