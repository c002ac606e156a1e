"""Configuration models for Genie Docker."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from ..core.constants import (
    DEFAULT_APPDIR,
    DEFAULT_APPNAME,
    DEFAULT_BASE_IMAGE,
    DEFAULT_CONTAINER_NAME,
    DEFAULT_CONTAINERPORT,
    DEFAULT_DOCKERPORT,
    DEFAULT_ENV,
    DEFAULT_HOST,
    DEFAULT_HOSTPORT,
    DEFAULT_IMAGE,
    DEFAULT_PLATFORM,
    DEFAULT_PORT,
    DEFAULT_USER,
)


class DockerfileConfig(BaseModel):
    """Parameters interpolated into the generated Dockerfile.

    Unset websocket ports fall back to the primary ports. The websocket
    ``EXPOSE`` block and ``ENV WSPORT`` are only rendered when
    ``websockets_port`` differs from ``port``.
    """
    model_config = ConfigDict(extra='forbid')

    user: str = DEFAULT_USER
    env: str = DEFAULT_ENV
    host: str = DEFAULT_HOST
    port: PositiveInt = DEFAULT_PORT
    dockerport: PositiveInt = DEFAULT_DOCKERPORT
    websockets_port: Optional[PositiveInt] = None
    websockets_dockerport: Optional[PositiveInt] = None
    platform: str = DEFAULT_PLATFORM
    earlybind: bool = True
    base_image: str = Field(default=DEFAULT_BASE_IMAGE, min_length=1)

    @property
    def ws_port(self) -> int:
        return self.port if self.websockets_port is None else self.websockets_port

    @property
    def ws_dockerport(self) -> int:
        return self.dockerport if self.websockets_dockerport is None else self.websockets_dockerport

    @property
    def appdir(self) -> str:
        return f"/home/{self.user}/app"

    @property
    def depot_path(self) -> str:
        return f"/home/{self.user}/.julia"

    @property
    def has_websockets_section(self) -> bool:
        return self.ws_port != self.port


class BuildConfig(BaseModel):
    """Parameters for ``docker build``."""
    model_config = ConfigDict(extra='forbid')

    path: str = "."
    appname: str = Field(default=DEFAULT_APPNAME, min_length=1)
    nocache: bool = True


class RunConfig(BaseModel):
    """Parameters for ``docker run``.

    An empty ``command`` keeps the image's default start command. Empty
    ``image`` or ``containername`` values are rejected since they would
    produce a malformed command line.
    """
    model_config = ConfigDict(extra='forbid')

    containername: str = Field(default=DEFAULT_CONTAINER_NAME, min_length=1)
    hostport: PositiveInt = DEFAULT_HOSTPORT
    containerport: PositiveInt = DEFAULT_CONTAINERPORT
    websockets_hostport: Optional[PositiveInt] = None
    websockets_containerport: Optional[PositiveInt] = None
    appdir: str = Field(default=DEFAULT_APPDIR, min_length=1)
    mountapp: bool = False
    image: str = Field(default=DEFAULT_IMAGE, min_length=1)
    command: str = ""
    rm: bool = True
    it: bool = True

    @property
    def ws_hostport(self) -> int:
        return self.hostport if self.websockets_hostport is None else self.websockets_hostport

    @property
    def ws_containerport(self) -> int:
        return self.containerport if self.websockets_containerport is None else self.websockets_containerport

    @property
    def has_websockets_mapping(self) -> bool:
        return (self.ws_hostport, self.ws_containerport) != (
            self.hostport,
            self.containerport,
        )


class ProjectConfig(BaseModel):
    """Contents of a ``genie-docker.yml`` project file."""
    model_config = ConfigDict(extra='forbid')

    dockerfile: DockerfileConfig = Field(default_factory=DockerfileConfig)
    build: BuildConfig = Field(default_factory=BuildConfig)
    run: RunConfig = Field(default_factory=RunConfig)
    sudo: Optional[bool] = None
