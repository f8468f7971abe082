"""Shared test fixtures for glueform-cli tests.

Provides CliRunner fixtures and serverless.yml projects laid out in
temporary directories.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

SERVERLESS_YML_FILENAME = "serverless.yml"


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo configure_logging() after each test.

    The CLI binds structlog to the stderr of the invocation, which CliRunner
    closes when the invocation ends.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    Yields:
        CliRunner instance whose working directory is a fresh temp dir.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def serverless_project(fixtures_dir: Path, tmp_path: Path) -> Path:
    """Copy the valid serverless.yml and its scripts into tmp_path.

    Returns:
        Path to serverless.yml in tmp_path.
    """
    shutil.copytree(fixtures_dir / "scripts", tmp_path / "scripts")
    path = tmp_path / SERVERLESS_YML_FILENAME
    shutil.copy(fixtures_dir / SERVERLESS_YML_FILENAME, path)
    return path


@pytest.fixture
def invalid_serverless_yml(fixtures_dir: Path) -> Path:
    """Return a serverless.yml whose only job has no script."""
    return fixtures_dir / "invalid_serverless.yml"


@pytest.fixture
def create_serverless_yml(tmp_path: Path) -> Callable[[str], Path]:
    """Factory fixture writing serverless.yml with custom content into tmp_path."""

    def _create(content: str, filename: str = SERVERLESS_YML_FILENAME) -> Path:
        path = tmp_path / filename
        path.write_text(content)
        return path

    return _create
