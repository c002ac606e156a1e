"""Dockerfile template for Genie apps.

The template is an ordered list of sections. Each section renders its own
lines from a ``DockerfileConfig``; a section with a predicate is left out
entirely when the predicate does not hold.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from ..models.config import DockerfileConfig
from .constants import APP_SCRIPTS, PACKAGE_BOOTSTRAP, START_COMMAND


LineBuilder = Callable[[DockerfileConfig], List[str]]


@dataclass(frozen=True)
class Section:
    """A commented block of Dockerfile instructions."""

    title: str
    lines: LineBuilder
    when: Optional[Callable[[DockerfileConfig], bool]] = None

    def applies(self, config: DockerfileConfig) -> bool:
        return self.when is None or self.when(config)

    def render(self, config: DockerfileConfig) -> str:
        return "\n".join([f"# {self.title}"] + self.lines(config))


def _base_image(config: DockerfileConfig) -> List[str]:
    platform = f"--platform={config.platform} " if config.platform else ""
    return [f"FROM {platform}{config.base_image}"]


def _user(config: DockerfileConfig) -> List[str]:
    return [f"RUN useradd --create-home --shell /bin/bash {config.user}"]


def _app(config: DockerfileConfig) -> List[str]:
    return [
        f"RUN mkdir {config.appdir}",
        f"COPY . {config.appdir}",
        f"WORKDIR {config.appdir}",
    ]


def _permissions(config: DockerfileConfig) -> List[str]:
    lines = [f"RUN chown {config.user}:{config.user} -R *", ""]
    lines.extend(f"RUN chmod +x {script}" for script in APP_SCRIPTS)
    return lines


def _switch_user(config: DockerfileConfig) -> List[str]:
    return [f"USER {config.user}"]


def _packages(config: DockerfileConfig) -> List[str]:
    return [f"RUN {PACKAGE_BOOTSTRAP}"]


def _ports(config: DockerfileConfig) -> List[str]:
    return [f"EXPOSE {config.port}", f"EXPOSE {config.dockerport}"]


def _websockets_ports(config: DockerfileConfig) -> List[str]:
    return [f"EXPOSE {config.ws_port}", f"EXPOSE {config.ws_dockerport}"]


def _environment(config: DockerfileConfig) -> List[str]:
    lines = [
        f'ENV JULIA_DEPOT_PATH "{config.depot_path}"',
        f'ENV GENIE_ENV "{config.env}"',
        f'ENV GENIE_HOST "{config.host}"',
        f'ENV PORT "{config.port}"',
    ]
    if config.has_websockets_section:
        lines.append(f'ENV WSPORT "{config.ws_port}"')
    lines.append(f'ENV EARLYBIND "{str(config.earlybind).lower()}"')
    return lines


def _start(config: DockerfileConfig) -> List[str]:
    return [f'CMD ["{START_COMMAND}"]']


GENIE_DOCKERFILE = (
    Section("pull base image", _base_image),
    Section("create dedicated user", _user),
    Section("set up the app", _app),
    Section("configure permissions", _permissions),
    Section("switch user", _switch_user),
    Section("instantiate Julia packages", _packages),
    Section("ports", _ports),
    Section("websockets ports", _websockets_ports, when=lambda config: config.has_websockets_section),
    Section("set up app environment", _environment),
    Section("run app", _start),
)


def generate_dockerfile(config: Optional[DockerfileConfig] = None) -> str:
    """Generate Dockerfile from configuration."""
    config = config or DockerfileConfig()
    sections = [section.render(config) for section in GENIE_DOCKERFILE if section.applies(config)]
    return "\n\n".join(sections) + "\n"
