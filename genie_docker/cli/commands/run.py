"""Run command for Genie Docker."""

import click

from genie_docker.cli.helpers import get_docker_service, get_project_config, merge_options, run_docker


@click.command()
@click.argument('command', required=False)
@click.option('--containername', help='Name of the container')
@click.option('--hostport', type=int, help='Port used on the host to access the app')
@click.option('--containerport', type=int, help='Port the app listens on inside the container')
@click.option('--websockets-hostport', type=int, help='Websockets port used on the host')
@click.option('--websockets-containerport', type=int, help='Websockets port inside the container')
@click.option('--appdir', help='Folder of the app within the container')
@click.option('--image', help='Name of the Docker image')
@click.option('--mountapp/--no-mountapp', default=None,
              help='Mount the current directory over the app folder (for development)')
@click.option('--rm/--no-rm', default=None, help='Remove the container upon exit')
@click.option('--it/--no-it', default=None, help='Run interactively with a TTY')
@click.option('--sudo/--no-sudo', default=None, help='Run docker through sudo (default: on Linux only)')
@click.pass_context
def run(ctx, command, containername, hostport, containerport, websockets_hostport,
        websockets_containerport, appdir, image, mountapp, rm, it, sudo):
    """Run the Docker container, optionally overriding its start COMMAND"""
    project_config = get_project_config(ctx)
    config = merge_options(
        ctx,
        project_config.run,
        command=command,
        containername=containername,
        hostport=hostport,
        containerport=containerport,
        websockets_hostport=websockets_hostport,
        websockets_containerport=websockets_containerport,
        appdir=appdir,
        image=image,
        mountapp=mountapp,
        rm=rm,
        it=it,
    )

    docker_service = get_docker_service(ctx, sudo)
    run_docker(ctx, lambda: docker_service.run(config))
