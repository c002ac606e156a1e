"""CLI Helper Functions for Genie Docker.

The helpers provide:
- Lazy loading of the project configuration file
- Layering of command line options over configured values
- Consistent success and error output
- Translation of docker failures into exit codes
"""

import subprocess
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import click
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape

from genie_docker.models.config import ProjectConfig
from genie_docker.services.docker_service import DockerService
from genie_docker.services.exceptions import ConfigError
from genie_docker.utils.config_manager import ConfigManager

ModelT = TypeVar('ModelT', bound=BaseModel)


def print_success(message: str) -> None:
    """Print a success message in green."""
    Console().print(f"[green]{escape(message)}[/green]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message in red on stderr."""
    Console(stderr=True).print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)


def get_project_config(ctx: click.Context) -> ProjectConfig:
    """Load the project configuration once per invocation.

    The group stores the ``--config`` path in ``ctx.obj``; commands invoked
    on their own fall back to ``genie-docker.yml`` in the working directory.
    """
    root = ctx.find_root()
    if root.obj is None:
        root.obj = {}
    if 'project_config' not in root.obj:
        try:
            root.obj['project_config'] = ConfigManager(Path.cwd()).load(root.obj.get('config_path'))
        except ConfigError as e:
            print_error(str(e))
            ctx.exit(1)
    return root.obj['project_config']


def merge_options(ctx: click.Context, base: ModelT, **options: Any) -> ModelT:
    """Layer explicitly given command line options over a configured record.

    Options left at ``None`` keep the configured value (or the record default).
    """
    values = base.model_dump(exclude_unset=True)
    values.update({key: value for key, value in options.items() if value is not None})
    try:
        return type(base)(**values)
    except ValidationError as e:
        print_error(str(e))
        ctx.exit(2)


def get_docker_service(ctx: click.Context, sudo: Optional[bool]) -> DockerService:
    """Create the docker service, resolving sudo from option, config, then host."""
    if sudo is None:
        sudo = get_project_config(ctx).sudo
    return DockerService(sudo=sudo)


def run_docker(ctx: click.Context, operation: Callable[[], int]) -> int:
    """Execute a docker operation, exiting with docker's status on failure.

    Docker prints its own diagnostics; only a short summary is added here.
    """
    try:
        return operation()
    except subprocess.CalledProcessError as e:
        print_error(f"docker exited with status {e.returncode}")
        ctx.exit(e.returncode)
    except OSError as e:
        print_error(f"Could not start docker: {e}")
        ctx.exit(1)
