"""Custom exception hierarchy for glueform-core.

This module defines the exception classes used throughout glueform:
- GlueformError: Base exception for all glueform-related errors
- ValidationError: Raised when a value cannot be turned into a logical id
- ConfigurationError: Raised when the Glue configuration is unusable
- ArtifactUploadError: Raised when a job script cannot be published
- IdentifierCollisionError: Raised when two resources share a logical id

User-facing messages are safe to display. Technical details are logged
internally via structlog and never end up in the exception message.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class GlueformError(Exception):
    """Base exception for glueform.

    Args:
        user_message: Safe message to display to the user. Should NOT contain
            credentials, stack traces, or other internal details.
        internal_details: Optional technical details for logging. This is
            logged internally but NEVER exposed to the user.

    Example:
        >>> raise GlueformError(
        ...     "Configuration invalid",
        ...     internal_details="jobs[0].job.script: field required",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "glueform_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class ValidationError(GlueformError):
    """Raised when a single value fails validation.

    Used by the name normalizer when a resource name is empty or contains
    no letters or digits.
    """

    pass


class ConfigurationError(GlueformError):
    """Raised when configuration file parsing or validation fails.

    Attributes:
        file_path: Path to the configuration file (if known).
        field_path: Dot-separated path to the offending field
            (e.g., "custom.Glue.jobs.0.job.script").

    Example:
        >>> raise ConfigurationError(
        ...     "Glue job is missing a script",
        ...     file_path="serverless.yml",
        ...     field_path="custom.Glue.jobs.0.job.script",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        field_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        context_parts: list[str] = []
        if file_path:
            context_parts.append(f"in {file_path}")
        if field_path:
            context_parts.append(f"field '{field_path}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.file_path = file_path
        self.field_path = field_path


class ConfigurationMissingError(ConfigurationError):
    """Raised when a required configuration section is absent.

    Example:
        >>> raise ConfigurationMissingError(
        ...     "No Glue configuration found",
        ...     field_path="custom.Glue",
        ... )
    """

    pass


class ConfigurationInvalidError(ConfigurationError):
    """Raised when a job or connection entry is missing a mandatory field."""

    pass


class ArtifactUploadError(GlueformError):
    """Raised when a job script cannot be uploaded to object storage.

    Upload failures are never retried and abort the whole compile.

    Attributes:
        script_path: Local path of the script that failed to upload.
        destination: Destination URI the script was headed for.
    """

    def __init__(
        self,
        script_path: str,
        destination: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        user_message = f"Failed to upload Glue script '{script_path}' to {destination}"

        super().__init__(user_message, internal_details=internal_details)

        self.script_path = script_path
        self.destination = destination


class IdentifierCollisionError(GlueformError):
    """Raised when two resources normalize to the same logical id.

    Attributes:
        logical_id: The logical id both resources map to.
        first_source: Description of the resource that claimed the id first.
        second_source: Description of the resource that collided with it.

    Example:
        >>> raise IdentifierCollisionError("EtlJob", "job 'etl-job'", "job 'etl_job'")
        # User sees: "Logical id 'EtlJob' is produced by both job 'etl-job'
        #            and job 'etl_job'"
    """

    def __init__(
        self,
        logical_id: str,
        first_source: str,
        second_source: str,
    ) -> None:
        user_message = (
            f"Logical id '{logical_id}' is produced by both "
            f"{first_source} and {second_source}"
        )

        super().__init__(user_message)

        self.logical_id = logical_id
        self.first_source = first_source
        self.second_source = second_source
