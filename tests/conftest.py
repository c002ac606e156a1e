import pytest
from click.testing import CliRunner
import tempfile
from pathlib import Path


class RecordingExecutor:
    """Executor double that records argument vectors instead of running them."""

    def __init__(self, returncode=0, error=None):
        self.calls = []
        self.returncode = returncode
        self.error = error

    def execute(self, args):
        self.calls.append(list(args))
        if self.error is not None:
            raise self.error
        return self.returncode


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def recording_executor():
    """Provides an executor that records docker invocations."""
    return RecordingExecutor()


@pytest.fixture
def temp_project_dir():
    """Creates a temporary Genie app directory with the scaffold scripts."""
    with tempfile.TemporaryDirectory() as tmpdir:
        project_path = Path(tmpdir)

        (project_path / "bin").mkdir()
        for script in ("repl", "server", "runtask"):
            (project_path / "bin" / script).write_text("#!/bin/sh\n")
        (project_path / "Project.toml").write_text('name = "App"\n')

        yield project_path


@pytest.fixture
def isolated_cli_runner(cli_runner):
    """Provides a CLI runner with isolated filesystem."""
    with cli_runner.isolated_filesystem():
        yield cli_runner
