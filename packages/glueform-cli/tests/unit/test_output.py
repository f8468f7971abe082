"""Unit tests for glueform_cli.output module."""

from __future__ import annotations

from collections.abc import Generator

import pytest
import structlog

from glueform_cli import output


@pytest.fixture
def plain_console() -> Generator[None, None, None]:
    """Swap in a colorless console for the duration of a test."""
    original_console = output.console
    output.console = output.create_console(no_color=True)
    yield
    output.console = original_console


class TestCreateConsole:
    def test_no_color(self) -> None:
        assert output.create_console(no_color=True).no_color is True

    def test_set_no_color_replaces_console(self) -> None:
        original_console = output.console
        try:
            output.set_no_color(True)
            assert output.console is not original_console
            assert output.console.no_color is True
        finally:
            output.console = original_console


@pytest.mark.usefixtures("plain_console")
class TestMessages:
    """Tests for the message helpers."""

    def test_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.success("Configuration valid")
        captured = capsys.readouterr().out
        assert "✓" in captured
        assert "Configuration valid" in captured

    def test_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.error("Upload failed")
        captured = capsys.readouterr().out
        assert "✗" in captured
        assert "Upload failed" in captured

    def test_warning(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.warning("No triggers compiled")
        assert "No triggers compiled" in capsys.readouterr().out

    def test_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.info("  Jobs: 1")
        assert "Jobs: 1" in capsys.readouterr().out


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_quiet_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.configure_logging()
        logger = structlog.get_logger("test")
        logger.info("glue_script_uploaded")
        logger.warning("trigger_section_skipped")

        captured = capsys.readouterr()
        assert "glue_script_uploaded" not in captured.err
        assert "trigger_section_skipped" in captured.err
        assert captured.out == ""

    def test_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.configure_logging(verbose=True)
        structlog.get_logger("test").info("glue_script_uploaded")
        assert "glue_script_uploaded" in capsys.readouterr().err
