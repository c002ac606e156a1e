"""Host platform detection."""

import platform


def is_linux() -> bool:
    """Check if we are running on a Linux host."""
    return platform.system() == "Linux"


def default_sudo() -> bool:
    """Whether docker should be invoked through sudo by default.

    Docker Desktop on macOS and Windows runs without elevated privileges,
    a plain Linux install usually does not.
    """
    return is_linux()
