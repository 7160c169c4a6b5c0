"""Test fixtures and utilities."""

import subprocess
from pathlib import Path

import click.testing
import pytest


@pytest.fixture
def runner() -> click.testing.CliRunner:
    """Click CliRunner for testing CLI commands."""
    return click.testing.CliRunner()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository (resolved path, no commits)."""
    repo_dir = tmp_path.resolve() / "repo"
    repo_dir.mkdir()

    subprocess.run(["git", "init", "-q"], cwd=repo_dir, check=True, capture_output=True)

    return repo_dir


@pytest.fixture
def non_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Directory outside any Git repository."""
    outside = tmp_path.resolve() / "not_a_repo"
    outside.mkdir()

    # Keep git from walking up into whatever encloses the temp dir
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(outside.parent))

    return outside


@pytest.fixture
def mock_git_output(monkeypatch: pytest.MonkeyPatch):
    """Mock the subprocess wrapper used by the root probe."""

    def _mock(output: str):
        calls: list[list[str]] = []

        def _run_command_output(cmd, timeout=None):
            calls.append(cmd)
            return output

        monkeypatch.setattr("gitroot.probes.repo.run_command_output", _run_command_output)
        return calls

    return _mock
