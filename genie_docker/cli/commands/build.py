"""Build command for Genie Docker."""

import click

from genie_docker.cli.helpers import (
    get_docker_service,
    get_project_config,
    merge_options,
    print_success,
    run_docker,
)


@click.command()
@click.argument('path', required=False, type=click.Path(file_okay=False))
@click.option('--appname', help='Tag of the built image')
@click.option('--no-cache/--cache', 'nocache', default=None, help='Build without using Docker cache (default)')
@click.option('--sudo/--no-sudo', default=None, help='Run docker through sudo (default: on Linux only)')
@click.pass_context
def build(ctx, path, appname, nocache, sudo):
    """Build the Docker image from the Dockerfile in PATH"""
    project_config = get_project_config(ctx)
    config = merge_options(ctx, project_config.build, path=path, appname=appname, nocache=nocache)

    docker_service = get_docker_service(ctx, sudo)
    run_docker(ctx, lambda: docker_service.build(config))

    print_success("Docker image successfully built")
