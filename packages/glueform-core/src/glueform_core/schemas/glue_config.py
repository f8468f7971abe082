"""Glue configuration models for glueform.

This module defines the ``custom.Glue`` block of serverless.yml: global
deployment options plus the ``jobs``, ``connections`` and ``triggers``
sections. Each section entry is wrapped in a fixed key
(``job`` / ``connection`` / ``trigger``), and keys keep the camelCase and
PascalCase spellings users write in serverless.yml.

List-valued options (``Connections``, ``MatchCriteria``,
``securityGroupIdList``) are comma-joined strings; use split_list() to turn
them into ordered sequences.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from glueform_core.errors import ConfigurationInvalidError

DEFAULT_S3_PREFIX = "glueJobs/"
"""Key prefix for uploaded job scripts when s3Prefix is not configured."""

NAME_PATTERN = r"[A-Za-z0-9]"
"""Names must contain at least one letter or digit to yield a logical id."""


def split_list(value: str) -> list[str]:
    """Split a comma-joined configuration value.

    Order is preserved and nothing is stripped or deduplicated.

    Example:
        >>> split_list("sg-1,sg-2,sg-3")
        ['sg-1', 'sg-2', 'sg-3']
    """
    return value.split(",")


class JobConfig(BaseModel):
    """One Glue job entry.

    Attributes:
        name: Job name, used as the Glue job name and the logical id source.
        script: Local path of the job script, relative to the service directory.
        glue_version: Glue version, either bare ("2.0") or with a Python
            runtime prefix ("python3-2.0").
        role: IAM role name or ARN the job runs as.
        type: Job type ("spark", "pythonshell", "streaming").
        max_concurrent_runs: Maximum concurrent runs of the job.
        worker_type: Worker type ("Standard", "G.1X", "G.2X").
        number_of_workers: Number of workers.
        connections: Comma-joined Glue connection names.
        temp_dir: Whether the job needs a temporary S3 working directory.

    Example:
        >>> job = JobConfig(name="etl-job", script="scripts/etl.py", tempDir=True)
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str = Field(..., min_length=1, pattern=NAME_PATTERN, description="Job name")
    script: str = Field(..., min_length=1, description="Local path of the job script")
    glue_version: str | None = Field(
        default=None,
        alias="glueVersion",
        description="Glue version, optionally prefixed with the Python runtime",
    )
    role: str | None = Field(default=None, description="IAM role for the job")
    type: str | None = Field(default=None, description="Job type (spark, pythonshell)")
    max_concurrent_runs: int | None = Field(
        default=None,
        alias="MaxConcurrentRuns",
        ge=1,
        description="Maximum concurrent runs",
    )
    worker_type: str | None = Field(default=None, alias="WorkerType")
    number_of_workers: int | None = Field(default=None, alias="NumberOfWorkers", ge=1)
    connections: str | None = Field(
        default=None,
        alias="Connections",
        description="Comma-joined Glue connection names",
    )
    temp_dir: bool = Field(
        default=False,
        alias="tempDir",
        description="Whether the job needs a temporary S3 directory",
    )


class JobEntry(BaseModel):
    """Wrapper for a job entry (``- job: {...}``)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    job: JobConfig


class ConnectionConfig(BaseModel):
    """One Glue connection entry.

    The password is kept as a SecretStr so it never shows up in reprs or
    logs. It is only revealed when the connection is rendered.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str = Field(..., min_length=1, pattern=NAME_PATTERN)
    connection_type: str = Field(..., alias="connectionType", description="e.g. JDBC")
    db_uri: str = Field(..., alias="dbUri", description="JDBC connection URL")
    db_username: str = Field(..., alias="dbUsername")
    db_password: SecretStr = Field(..., alias="dbPassword")
    description: str | None = None
    match_criteria: str | None = Field(
        default=None,
        alias="MatchCriteria",
        description="Comma-joined match criteria",
    )
    security_group_id_list: str | None = Field(
        default=None,
        alias="securityGroupIdList",
        description="Comma-joined security group ids",
    )
    subnet_id: str | None = Field(default=None, alias="subnetId")


class ConnectionEntry(BaseModel):
    """Wrapper for a connection entry (``- connection: {...}``)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    connection: ConnectionConfig


class TriggerJobConfig(BaseModel):
    """A job started by a trigger, with optional arguments and timeout."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Name of the Glue job to start")
    args: dict[str, str] | None = Field(
        default=None,
        description="Arguments passed to the job run",
    )
    timeout: int | None = Field(default=None, ge=1, description="Run timeout in minutes")

    @field_validator("args", mode="before")
    @classmethod
    def stringify_arg_values(cls, v: Any) -> Any:
        """Render scalar argument values as strings.

        YAML reads ``--retries: 3`` and ``--enable-metrics: true`` as int and
        bool, but Glue job arguments are always strings. Booleans use the
        lower-case YAML spelling.
        """
        if not isinstance(v, dict):
            return v
        stringified: dict[Any, Any] = {}
        for key, value in v.items():
            if isinstance(value, bool):
                value = "true" if value else "false"
            elif isinstance(value, (int, float)):
                value = str(value)
            stringified[key] = value
        return stringified


class TriggerJobEntry(BaseModel):
    """Wrapper for a trigger job entry (``- job: {...}``)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    job: TriggerJobConfig


class TriggerConfig(BaseModel):
    """One scheduled Glue trigger.

    Example:
        >>> trigger = TriggerConfig(
        ...     name="nightly",
        ...     schedule="cron(0 2 * * ? *)",
        ...     jobs=[{"job": {"name": "etl-job"}}],
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, pattern=NAME_PATTERN)
    schedule: str = Field(..., min_length=1, description="Schedule expression")
    jobs: list[TriggerJobEntry] = Field(..., description="Jobs started by the trigger")


class TriggerEntry(BaseModel):
    """Wrapper for a trigger entry (``- trigger: {...}``)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    trigger: TriggerConfig


class GlueConfig(BaseModel):
    """The ``custom.Glue`` configuration block.

    The ``triggers`` section is kept unparsed: triggers are optional, and a
    malformed trigger section must not prevent jobs and connections from
    compiling. The compiler parses it separately.

    Attributes:
        bucket_deploy: Bucket job scripts are uploaded to.
        s3_prefix: Key prefix for uploaded scripts.
        temp_dir_bucket: Existing bucket for job temp dirs. When unset, a
            temp bucket is created on demand.
        temp_dir_s3_prefix: Key prefix inside the temp dir bucket.
        jobs: Job entries.
        connections: Connection entries.
        triggers: Raw trigger section, parsed by the compiler.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    bucket_deploy: str | None = Field(default=None, alias="bucketDeploy")
    s3_prefix: str = Field(default=DEFAULT_S3_PREFIX, alias="s3Prefix")
    temp_dir_bucket: str | None = Field(default=None, alias="tempDirBucket")
    temp_dir_s3_prefix: str | None = Field(default=None, alias="tempDirS3Prefix")
    jobs: list[JobEntry] = Field(default_factory=list)
    connections: list[ConnectionEntry] = Field(default_factory=list)
    triggers: Any = None

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        file_path: str | None = None,
        field_prefix: str = "custom.Glue",
    ) -> GlueConfig:
        """Validate a raw ``custom.Glue`` mapping.

        Args:
            data: Parsed mapping from serverless.yml.
            file_path: Source file, used in error messages.
            field_prefix: Dotted path of the block inside the source file.

        Returns:
            Validated GlueConfig.

        Raises:
            ConfigurationInvalidError: If an entry is missing a mandatory field
                or has a value of the wrong type.
        """
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            # Inputs are excluded so passwords never reach the logs
            errors = e.errors(include_input=False, include_url=False)
            locations = [".".join(str(part) for part in err["loc"]) for err in errors]
            first = locations[0]
            field_path = f"{field_prefix}.{first}" if first else field_prefix
            raise ConfigurationInvalidError(
                f"Invalid Glue configuration: {errors[0]['msg']}",
                file_path=file_path,
                field_path=field_path,
                internal_details="; ".join(
                    f"{loc}: {err['msg']}" for loc, err in zip(locations, errors)
                ),
            ) from None
