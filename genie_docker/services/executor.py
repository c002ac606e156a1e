"""Command executors used to invoke the docker CLI."""

import logging
import subprocess
from typing import List, Protocol

logger = logging.getLogger(__name__)


class CommandExecutor(Protocol):
    """Runs an argument vector and returns its exit status."""

    def execute(self, args: List[str]) -> int:
        ...


class SubprocessExecutor:
    """Executor backed by ``subprocess.run``.

    Standard streams are inherited so docker's output reaches the operator
    unmodified. A non-zero exit raises ``subprocess.CalledProcessError`` and
    a missing executable raises ``OSError``; neither is caught here.
    """

    def execute(self, args: List[str]) -> int:
        logger.debug(f"Executing: {' '.join(args)}")
        result = subprocess.run(args, check=True)
        return result.returncode
