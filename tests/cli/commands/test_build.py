import pytest
import subprocess
from unittest.mock import patch
from pathlib import Path
from genie_docker.cli.commands.build import build
from genie_docker.services.docker_service import DockerService


@pytest.fixture
def patched_service(recording_executor):
    """Route the command's DockerService through the recording executor."""
    with patch('genie_docker.cli.helpers.DockerService') as mock_service_class:
        mock_service_class.side_effect = lambda sudo=None: DockerService(recording_executor, sudo=sudo)
        yield mock_service_class


class TestBuildCommand:
    """Tests for the build command."""

    def test_build_command_success(self, isolated_cli_runner, patched_service, recording_executor):
        result = isolated_cli_runner.invoke(build, ['--no-sudo'])

        assert result.exit_code == 0
        assert "Docker image successfully built" in result.output
        assert recording_executor.calls == [["docker", "build", "--no-cache", "-t", "genie", "."]]

    def test_build_command_options(self, isolated_cli_runner, patched_service, recording_executor):
        result = isolated_cli_runner.invoke(build, ['app', '--appname', 'myapp', '--cache', '--sudo'])

        assert result.exit_code == 0
        assert recording_executor.calls == [["sudo", "docker", "build", "-t", "myapp", "app"]]

    def test_build_command_platform_default(self, isolated_cli_runner, patched_service):
        """Test sudo is left to the service when neither option nor config sets it."""
        isolated_cli_runner.invoke(build, [])

        patched_service.assert_called_once_with(sudo=None)

    def test_build_command_sudo_from_config(self, isolated_cli_runner, patched_service, recording_executor):
        Path("genie-docker.yml").write_text("sudo: false\nbuild:\n  appname: fromconfig\n")

        result = isolated_cli_runner.invoke(build, [])

        assert result.exit_code == 0
        assert recording_executor.calls == [["docker", "build", "--no-cache", "-t", "fromconfig", "."]]

    def test_build_command_docker_failure(self, isolated_cli_runner, patched_service, recording_executor):
        """Test the docker exit status becomes the command's exit status."""
        recording_executor.error = subprocess.CalledProcessError(3, ["docker", "build"])

        result = isolated_cli_runner.invoke(build, ['--no-sudo'])

        assert result.exit_code == 3
        assert "docker exited with status 3" in result.output
        assert "successfully built" not in result.output

    def test_build_command_docker_missing(self, isolated_cli_runner, patched_service, recording_executor):
        recording_executor.error = FileNotFoundError(2, "No such file or directory", "docker")

        result = isolated_cli_runner.invoke(build, ['--no-sudo'])

        assert result.exit_code == 1
        assert "Could not start docker" in result.output

    def test_build_command_bad_config(self, isolated_cli_runner, patched_service, recording_executor):
        Path("genie-docker.yml").write_text("build: [broken\n")

        result = isolated_cli_runner.invoke(build, [])

        assert result.exit_code == 1
        assert "Invalid YAML" in result.output
        assert recording_executor.calls == []
