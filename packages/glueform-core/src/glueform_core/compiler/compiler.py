"""GlueCompiler for glueform.

This module implements the compiler that turns the ``custom.Glue``
configuration into CloudFormation resources:

- Jobs: script upload, optional attributes, temp dir locations
- Connections: catalog connections owned by the configured account
- Triggers: optional scheduled triggers, skipped with a diagnostic when
  the section is absent or malformed
- Temp bucket: one shared bucket, synthesized only when a job needs a temp
  dir and no tempDirBucket is configured

Nothing is written to the template sink until every resource has been
built and every logical id has been checked for collisions, so a failed
compile never leaves a partial template behind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from glueform_core.compiler.models import (
    CompileResult,
    ConnectionSectionResult,
    JobSectionResult,
    TriggerSectionResult,
)
from glueform_core.errors import ConfigurationMissingError, IdentifierCollisionError
from glueform_core.resources import (
    GlueConnection,
    GlueJob,
    GlueTrigger,
    GlueTriggerAction,
    OutputDefinition,
    ResourceDefinition,
    TempBucket,
    command_name_for,
    temp_dir_location,
)
from glueform_core.schemas.glue_config import (
    ConnectionConfig,
    GlueConfig,
    JobConfig,
    TriggerConfig,
    TriggerEntry,
    split_list,
)

if TYPE_CHECKING:
    from glueform_core.publisher import ArtifactPublisher
    from glueform_core.schemas.serverless import ServerlessService
    from glueform_core.template import TemplateSink

logger = structlog.get_logger(__name__)

_TRIGGER_SECTION = TypeAdapter(list[TriggerEntry])


def ensure_unique_logical_ids(resources: list[ResourceDefinition]) -> None:
    """Fail if two resources share a logical id.

    Raises:
        IdentifierCollisionError: Naming both resources that map to the id.
    """
    seen: dict[str, str] = {}
    for resource in resources:
        first_source = seen.get(resource.logical_id)
        if first_source is not None:
            raise IdentifierCollisionError(resource.logical_id, first_source, resource.source)
        seen[resource.logical_id] = resource.source


class GlueCompiler:
    """Compile the ``custom.Glue`` block into CloudFormation resources.

    The compiler keeps no state between compiles; each section is compiled
    into its own result value and the results are combined at the end.

    Attributes:
        publisher: Publishes job scripts and returns their S3 URIs.
        service: Service name, used in the temp bucket name.
        stage: Deployment stage, used in the temp bucket name.
        account_id: Account owning the Glue catalog connections live in.

    Example:
        >>> compiler = GlueCompiler(publisher, service="orders", stage="dev")
        >>> template = CloudFormationTemplate()
        >>> result = compiler.compile(service.glue_config(), template)
        >>> result.logical_ids
        ['EtlJob']
    """

    def __init__(
        self,
        publisher: ArtifactPublisher,
        *,
        service: str,
        stage: str,
        account_id: str | None = None,
    ) -> None:
        self.publisher = publisher
        self.service = service
        self.stage = stage
        self.account_id = account_id

    @classmethod
    def for_service(
        cls,
        service: ServerlessService,
        publisher: ArtifactPublisher,
        *,
        stage: str | None = None,
        account_id: str | None = None,
    ) -> GlueCompiler:
        """Create a compiler for a serverless.yml service definition.

        Args:
            service: Loaded service definition.
            publisher: Script publisher.
            stage: Stage override; defaults to ``provider.stage``.
            account_id: Account id override; defaults to ``custom.accountId``.
        """
        return cls(
            publisher,
            service=service.service,
            stage=stage or service.provider.stage,
            account_id=account_id or service.account_id,
        )

    def compile(self, config: GlueConfig, sink: TemplateSink) -> CompileResult:
        """Compile the configuration and write it to the template sink.

        Args:
            config: Validated ``custom.Glue`` block.
            sink: Template the resources and outputs are written into.

        Returns:
            CompileResult describing everything written.

        Raises:
            ConfigurationMissingError: If bucketDeploy or accountId is needed
                but not configured.
            ArtifactUploadError: If a job script cannot be published.
            IdentifierCollisionError: If two resources share a logical id.
        """
        job_section = self.compile_jobs(config)
        connection_section = self.compile_connections(config)
        trigger_section = self.compile_triggers(config.triggers)

        if not trigger_section.present:
            logger.warning("trigger_section_skipped", reason=trigger_section.diagnostic)

        resources: list[ResourceDefinition] = [
            *(connection.freeze() for connection in connection_section.connections),
            *(job.freeze() for job in job_section.jobs),
            *(trigger.freeze() for trigger in trigger_section.triggers),
        ]
        outputs: list[OutputDefinition] = []

        temp_bucket_created = job_section.temp_dir_requested and not config.temp_dir_bucket
        if temp_bucket_created:
            bucket = TempBucket(self.service, self.stage)
            resources.append(bucket.freeze())
            outputs.append(bucket.output())
            logger.info("temp_bucket_synthesized", bucket_name=bucket.name)

        ensure_unique_logical_ids(resources)

        for resource in resources:
            sink.set_resource(resource.logical_id, resource.to_template())
        for output in outputs:
            sink.set_output(output.output_id, output.to_template())

        logger.info(
            "glue_template_built",
            connections=len(connection_section.connections),
            jobs=len(job_section.jobs),
            triggers=len(trigger_section.triggers),
            temp_bucket=temp_bucket_created,
        )

        return CompileResult(
            resources=tuple(resources),
            outputs=tuple(outputs),
            temp_bucket_created=temp_bucket_created,
            trigger_diagnostic=trigger_section.diagnostic,
        )

    def compile_jobs(self, config: GlueConfig) -> JobSectionResult:
        """Build every job, publishing scripts in declaration order.

        Raises:
            ConfigurationMissingError: If jobs are declared without bucketDeploy.
            ArtifactUploadError: If a script cannot be published.
        """
        if config.jobs and not config.bucket_deploy:
            raise ConfigurationMissingError(
                "Glue jobs need a deployment bucket",
                field_path="custom.Glue.bucketDeploy",
            )

        jobs: list[GlueJob] = []
        temp_dir_requested = False
        for entry in config.jobs:
            job, requested = self.compile_job(entry.job, config)
            jobs.append(job)
            temp_dir_requested = temp_dir_requested or requested

        return JobSectionResult(jobs=tuple(jobs), temp_dir_requested=temp_dir_requested)

    def compile_job(self, job_config: JobConfig, config: GlueConfig) -> tuple[GlueJob, bool]:
        """Build one job.

        Returns:
            The job builder and whether it requested a temp dir.
        """
        job = GlueJob(job_config.name, job_config.script)
        # bucket_deploy is checked by compile_jobs
        script_location = self.publisher.publish(
            job_config.script,
            config.bucket_deploy or "",
            config.s3_prefix,
        )
        job.set_script_location(script_location)

        if job_config.glue_version is not None:
            job.set_glue_version(job_config.glue_version)
        if job_config.role is not None:
            job.set_role(job_config.role)
        if job_config.type is not None:
            job.set_command_name(command_name_for(job_config.type))
        if job_config.max_concurrent_runs is not None:
            job.set_max_concurrent_runs(job_config.max_concurrent_runs)
        if job_config.worker_type is not None:
            job.set_worker_type(job_config.worker_type)
        if job_config.number_of_workers is not None:
            job.set_number_of_workers(job_config.number_of_workers)
        if job_config.connections:
            job.set_connections(split_list(job_config.connections))

        if job_config.temp_dir:
            job.set_temp_dir(
                temp_dir_location(
                    job_config.name,
                    bucket=config.temp_dir_bucket,
                    prefix=config.temp_dir_s3_prefix,
                )
            )

        return job, job_config.temp_dir

    def compile_connections(self, config: GlueConfig) -> ConnectionSectionResult:
        """Build every connection in declaration order.

        Raises:
            ConfigurationMissingError: If connections are declared without
                an account id.
        """
        if config.connections and not self.account_id:
            raise ConfigurationMissingError(
                "Glue connections need the account id owning the catalog",
                field_path="custom.accountId",
            )

        connections = tuple(
            self.compile_connection(entry.connection) for entry in config.connections
        )
        return ConnectionSectionResult(connections=connections)

    def compile_connection(self, connection_config: ConnectionConfig) -> GlueConnection:
        """Build one connection."""
        connection = GlueConnection(connection_config.name, self.account_id)
        connection.set_type(connection_config.connection_type)
        connection.set_db_uri(connection_config.db_uri)
        connection.set_db_username(connection_config.db_username)
        connection.set_db_password(connection_config.db_password)

        if connection_config.description:
            connection.set_description(connection_config.description)
        if connection_config.match_criteria:
            connection.set_match_criteria(split_list(connection_config.match_criteria))
        if connection_config.security_group_id_list:
            connection.set_security_group(split_list(connection_config.security_group_id_list))
        if connection_config.subnet_id:
            connection.set_subnet(connection_config.subnet_id)

        return connection

    def compile_triggers(self, raw_triggers: Any) -> TriggerSectionResult:
        """Build triggers from the raw triggers section.

        Triggers are optional: an absent or malformed section yields an
        absent result carrying the reason, and the compile carries on.
        """
        if raw_triggers is None:
            return TriggerSectionResult.absent("No trigger configuration")

        try:
            entries = _TRIGGER_SECTION.validate_python(raw_triggers)
        except PydanticValidationError as e:
            errors = e.errors(include_input=False, include_url=False)
            first = errors[0]
            location = ".".join(str(part) for part in first["loc"]) or "triggers"
            return TriggerSectionResult.absent(
                f"Malformed trigger configuration at '{location}': {first['msg']}"
            )

        triggers = tuple(self.compile_trigger(entry.trigger) for entry in entries)
        return TriggerSectionResult(triggers=triggers)

    def compile_trigger(self, trigger_config: TriggerConfig) -> GlueTrigger:
        """Build one trigger and its actions."""
        trigger = GlueTrigger(trigger_config.name, trigger_config.schedule)

        actions: list[GlueTriggerAction] = []
        for entry in trigger_config.jobs:
            action = GlueTriggerAction(entry.job.name)
            if entry.job.args:
                action.set_arguments(entry.job.args)
            if entry.job.timeout is not None:
                action.set_timeout(entry.job.timeout)
            actions.append(action)

        trigger.set_actions(actions)
        return trigger
