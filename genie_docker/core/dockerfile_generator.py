"""Dockerfile generation logic."""

import logging
import os
from pathlib import Path
from typing import Optional

from .constants import DOCKERFILE_NAME
from .dockerfile_template import generate_dockerfile
from ..models.config import DockerfileConfig
from ..services.exceptions import DockerfileExistsError

logger = logging.getLogger(__name__)


class DockerfileGenerator:
    """Generates Dockerfiles for Genie apps."""

    def __init__(self, config: Optional[DockerfileConfig] = None):
        """Initialize generator."""
        self.config = config or DockerfileConfig()

    def render(self) -> str:
        """Render the Dockerfile content without touching the filesystem."""
        return generate_dockerfile(self.config)

    def target_path(self, path: str = ".", filename: str = DOCKERFILE_NAME) -> Path:
        """Absolute, normalised location of the Dockerfile."""
        return Path(os.path.abspath(os.path.normpath(os.path.join(path, filename))))

    def write(self, path: str = ".", filename: str = DOCKERFILE_NAME, force: bool = False) -> Path:
        """Write the Dockerfile under ``path``.

        Args:
            path: Directory where the file is generated
            filename: Name of the file
            force: Replace an existing file instead of refusing

        Returns:
            Absolute path of the written file

        Raises:
            DockerfileExistsError: If the file exists and ``force`` is not set
        """
        target = self.target_path(path, filename)

        if target.is_file() and force:
            logger.debug(f"Removing existing Dockerfile: {target}")
            target.unlink()

        if target.exists():
            raise DockerfileExistsError(
                f"File {target} already exists. Use the `force` option to overwrite the existing file."
            )

        target.write_text(self.render(), encoding="utf-8")
        logger.info(f"Dockerfile written at {target}")
        return target
