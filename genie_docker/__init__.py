"""Genie Docker - Generate Dockerfiles for Genie apps and drive the docker CLI."""

__version__ = "0.1.0"
