"""Utility modules for Genie Docker."""

from .config_manager import ConfigManager
from .host import default_sudo, is_linux

__all__ = ['ConfigManager', 'default_sudo', 'is_linux']
