"""CLI error handling for glueform-cli.

This module maps glueform-core exceptions, YAML errors and Pydantic
validation errors to user-friendly messages and exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click
import yaml
from pydantic import ValidationError as PydanticValidationError

from glueform_cli.output import error
from glueform_core.errors import (
    ArtifactUploadError,
    ConfigurationError,
    GlueformError,
)

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


# Exit codes following sysexits.h convention
EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1  # User error (validation, missing configuration)
EXIT_SYSTEM_ERROR = 2  # System error (missing file, permissions, upload failure)


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting."""
        error(self.format_message())


def format_pydantic_error(err: PydanticValidationError) -> str:
    """Format Pydantic validation error into user-friendly message.

    Input values are left out so secrets never reach the terminal.

    Example:
        >>> format_pydantic_error(err)
        "Validation failed:\\n  - service: Field required"
    """
    errors: list[ErrorDetails] = err.errors(include_input=False, include_url=False)
    lines = ["Validation failed:"]

    for e in errors:
        loc = ".".join(str(x) for x in e["loc"])
        lines.append(f"  - {loc}: {e['msg']}")

    return "\n".join(lines)


def handle_yaml_error(err: yaml.YAMLError, file_path: str) -> NoReturn:
    """Raise a CLIError for a YAML parsing error, with line information."""
    error_msg = str(err)
    mark = getattr(err, "problem_mark", None)
    if mark is not None:
        error_msg = (
            f"YAML syntax error at line {mark.line + 1}, column {mark.column + 1}: "
            f"{getattr(err, 'problem', err)}"
        )

    raise CLIError(f"Invalid YAML in {file_path}: {error_msg}")


def handle_file_not_found(file_path: str) -> NoReturn:
    """Raise a CLIError for a missing serverless.yml."""
    raise CLIError(
        f"File not found: {file_path}\n\nUse --file to specify the path to serverless.yml.",
        exit_code=EXIT_SYSTEM_ERROR,
    )


def handle_permission_error(path: str, operation: str = "access") -> NoReturn:
    """Raise a CLIError for a permission failure."""
    raise CLIError(
        f"Permission denied: Cannot {operation} {path}",
        exit_code=EXIT_SYSTEM_ERROR,
    )


def handle_glueform_error(err: GlueformError) -> NoReturn:
    """Raise a CLIError for a glueform-core exception.

    Upload failures are system errors; configuration, naming and collision
    problems are user errors.
    """
    if isinstance(err, ArtifactUploadError):
        raise CLIError(err.user_message, exit_code=EXIT_SYSTEM_ERROR)
    if isinstance(err, ConfigurationError):
        raise CLIError(err.user_message)
    raise CLIError(f"Compilation failed: {err.user_message}")
