"""Custom exceptions for Genie Docker.

Failures of the docker CLI itself are not wrapped here: the
``subprocess.CalledProcessError`` or ``OSError`` raised by the executor
reaches the caller unchanged.
"""


class GenieDockerError(Exception):
    """Base exception for all Genie Docker errors."""

    pass


class DockerfileExistsError(GenieDockerError, FileExistsError):
    """Exception raised when the target Dockerfile already exists."""

    pass


class ConfigError(GenieDockerError):
    """Exception raised when the project configuration cannot be loaded."""

    pass
