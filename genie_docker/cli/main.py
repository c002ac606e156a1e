"""Main CLI entry point for Genie Docker."""

import logging
from pathlib import Path

import click

from .commands.build import build
from .commands.dockerfile import dockerfile
from .commands.run import run


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--config', 'config_path', envvar='GENIE_DOCKER_CONFIG',
              type=click.Path(dir_okay=False, path_type=Path),
              help='Project configuration file (default: ./genie-docker.yml)')
@click.pass_context
def cli(ctx, verbose, config_path):
    """Genie Docker - Containerize Genie apps with Docker"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    ctx.obj = {'config_path': config_path}


# Register commands
cli.add_command(dockerfile)
cli.add_command(build)
cli.add_command(run)


if __name__ == '__main__':
    cli()
