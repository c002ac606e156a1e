"""Docker service for driving the docker CLI."""

import logging
from pathlib import Path
from typing import List, Optional

import click

from .executor import CommandExecutor, SubprocessExecutor
from ..core.constants import DOCKER_EXECUTABLE, SUDO_EXECUTABLE
from ..models.config import BuildConfig, RunConfig
from ..utils.host import default_sudo

logger = logging.getLogger(__name__)


class DockerService:
    """Service assembling and executing ``docker build`` and ``docker run``."""

    def __init__(self, executor: Optional[CommandExecutor] = None, sudo: Optional[bool] = None):
        """Initialize Docker service.

        Args:
            executor: Runs the assembled commands (defaults to a subprocess executor)
            sudo: Prefix commands with sudo; ``None`` picks the host platform default
        """
        self.executor = executor or SubprocessExecutor()
        self.sudo = default_sudo() if sudo is None else sudo

    def _use_sudo(self, sudo: Optional[bool]) -> bool:
        return self.sudo if sudo is None else sudo

    def docker_command(self, sudo: Optional[bool] = None) -> List[str]:
        """The docker executable, with the privilege escalation prefix if needed."""
        if self._use_sudo(sudo):
            return [SUDO_EXECUTABLE, DOCKER_EXECUTABLE]
        return [DOCKER_EXECUTABLE]

    def build_args(self, config: Optional[BuildConfig] = None, sudo: Optional[bool] = None) -> List[str]:
        """Assemble the ``docker build`` command line."""
        config = config or BuildConfig()
        args = self.docker_command(sudo) + ["build"]
        if config.nocache:
            args.append("--no-cache")
        args.extend(["-t", config.appname, config.path])
        return args

    def run_options(self, config: Optional[RunConfig] = None, cwd: Optional[Path] = None) -> List[str]:
        """Assemble the options following ``docker run``.

        Args:
            config: Run parameters
            cwd: Host directory bind-mounted when ``mountapp`` is set
                (defaults to the current working directory)

        Returns:
            Flags, image reference and optional start command, in order
        """
        config = config or RunConfig()
        options = []

        if config.it:
            options.append("-it")
        if config.rm:
            options.append("--rm")

        options.extend(["-p", f"{config.hostport}:{config.containerport}"])

        if config.has_websockets_mapping:
            options.extend(["-p", f"{config.ws_hostport}:{config.ws_containerport}"])

        options.extend(["--name", config.containername])

        if config.mountapp:
            mount_source = cwd if cwd is not None else Path.cwd()
            options.extend(["-v", f"{mount_source}:{config.appdir}"])

        options.append(config.image)

        if config.command:
            options.append(config.command)

        return options

    def run_args(
        self,
        config: Optional[RunConfig] = None,
        sudo: Optional[bool] = None,
        cwd: Optional[Path] = None,
    ) -> List[str]:
        """Assemble the full ``docker run`` command line."""
        return self.docker_command(sudo) + ["run"] + self.run_options(config, cwd)

    def build(self, config: Optional[BuildConfig] = None, sudo: Optional[bool] = None) -> int:
        """Build the Docker image.

        Returns:
            Exit status of the docker process

        Raises:
            subprocess.CalledProcessError: If docker exits with a non-zero status
            OSError: If docker cannot be started
        """
        args = self.build_args(config, sudo)
        logger.info(f"Building image: {' '.join(args)}")
        return self.executor.execute(args)

    def run(
        self,
        config: Optional[RunConfig] = None,
        sudo: Optional[bool] = None,
        cwd: Optional[Path] = None,
    ) -> int:
        """Run the Docker container, echoing the command line first.

        Returns:
            Exit status of the docker process

        Raises:
            subprocess.CalledProcessError: If docker exits with a non-zero status
            OSError: If docker cannot be started
        """
        args = self.run_args(config, sudo, cwd)
        click.echo(f"Starting docker container with `{' '.join(args)}`")
        return self.executor.execute(args)
