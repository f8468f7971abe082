"""Load serverless.yml for CLI commands.

Wraps ServerlessService.from_yaml() so every command reports missing
files, YAML syntax errors and schema errors the same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError as PydanticValidationError

from glueform_cli.errors import (
    CLIError,
    format_pydantic_error,
    handle_file_not_found,
    handle_glueform_error,
    handle_yaml_error,
)
from glueform_core.errors import GlueformError

if TYPE_CHECKING:
    from glueform_core.schemas import GlueConfig, ServerlessService


def load_service(file_path: str) -> tuple[ServerlessService, GlueConfig]:
    """Load serverless.yml and its validated ``custom.Glue`` block.

    Args:
        file_path: Path to serverless.yml.

    Returns:
        The service definition and its Glue configuration.

    Raises:
        CLIError: On any loading or validation failure.
    """
    # Import here to keep CLI startup fast
    from glueform_core.schemas import ServerlessService

    try:
        service = ServerlessService.from_yaml(file_path)
        return service, service.glue_config()
    except FileNotFoundError:
        handle_file_not_found(file_path)
    except yaml.YAMLError as e:
        handle_yaml_error(e, file_path)
    except PydanticValidationError as e:
        raise CLIError(
            f"Invalid configuration in {file_path}:\n{format_pydantic_error(e)}"
        ) from None
    except GlueformError as e:
        handle_glueform_error(e)
