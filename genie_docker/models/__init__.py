"""Models for Genie Docker."""

from .config import BuildConfig, DockerfileConfig, ProjectConfig, RunConfig

__all__ = [
    'BuildConfig',
    'DockerfileConfig',
    'ProjectConfig',
    'RunConfig'
]
