"""Service layer for driving the docker CLI."""

from .docker_service import DockerService
from .executor import CommandExecutor, SubprocessExecutor
from .exceptions import (
    GenieDockerError,
    DockerfileExistsError,
    ConfigError,
)

__all__ = [
    "DockerService",
    "CommandExecutor",
    "SubprocessExecutor",
    "GenieDockerError",
    "DockerfileExistsError",
    "ConfigError",
]
