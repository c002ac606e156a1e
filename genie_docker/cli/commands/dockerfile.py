"""Dockerfile command for Genie Docker."""

import click

from genie_docker.cli.helpers import get_project_config, merge_options, print_error, print_success
from ...core.constants import DOCKERFILE_NAME
from ...core.dockerfile_generator import DockerfileGenerator
from ...services.exceptions import DockerfileExistsError


@click.command()
@click.argument('path', default='.', type=click.Path(file_okay=False))
@click.option('--filename', default=DOCKERFILE_NAME, show_default=True, help='Name of the generated file')
@click.option('--user', help='System user under which the app is run')
@click.option('--env', help='Environment in which the app will run')
@click.option('--host', help='Bind address of the app inside the container')
@click.option('--port', type=int, help='Port of the app inside the container')
@click.option('--dockerport', type=int, help='Port exposed on the host')
@click.option('--websockets-port', type=int, help='Websockets port inside the container')
@click.option('--websockets-dockerport', type=int, help='Websockets port exposed on the host')
@click.option('--platform', help='Target platform of the base image (empty for none)')
@click.option('--base-image', help='Base image to build from')
@click.option('--earlybind/--no-earlybind', default=None, help='Bind the server before the app is loaded')
@click.option('--force', is_flag=True, help='Overwrite an existing file')
@click.pass_context
def dockerfile(ctx, path, filename, user, env, host, port, dockerport, websockets_port,
               websockets_dockerport, platform, base_image, earlybind, force):
    """Generate a Dockerfile optimised for containerizing Genie apps"""
    project_config = get_project_config(ctx)
    config = merge_options(
        ctx,
        project_config.dockerfile,
        user=user,
        env=env,
        host=host,
        port=port,
        dockerport=dockerport,
        websockets_port=websockets_port,
        websockets_dockerport=websockets_dockerport,
        platform=platform,
        base_image=base_image,
        earlybind=earlybind,
    )

    generator = DockerfileGenerator(config)
    try:
        target = generator.write(path, filename, force=force)
    except DockerfileExistsError as e:
        print_error(str(e))
        ctx.exit(1)

    print_success(f"Docker file successfully written at {target}")
