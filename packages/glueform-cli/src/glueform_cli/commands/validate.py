"""glueform validate command - Validate the Glue section of serverless.yml."""

from __future__ import annotations

import click

from glueform_cli.errors import handle_glueform_error
from glueform_cli.loader import load_service
from glueform_cli.output import info, success, warning


@click.command()
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=False),
    default="./serverless.yml",
    help="Path to serverless.yml [default: ./serverless.yml]",
)
def validate(file_path: str) -> None:
    """Validate the Glue configuration in serverless.yml.

    Runs a full compile without uploading scripts or writing a template:
    schema errors, missing scripts and logical id collisions are reported.

    Examples:

        glueform validate

        glueform validate --file path/to/serverless.yml
    """
    # Import here to avoid heavy imports at CLI startup
    from glueform_core import (
        CloudFormationTemplate,
        DryRunPublisher,
        GlueCompiler,
        GlueformError,
    )
    from glueform_core.resources import GlueConnection, GlueJob, GlueTrigger

    service, config = load_service(file_path)

    try:
        compiler = GlueCompiler.for_service(service, DryRunPublisher(base_dir=service.base_dir))
        result = compiler.compile(config, CloudFormationTemplate())
    except GlueformError as e:
        handle_glueform_error(e)

    success("Configuration valid")
    info(f"  Jobs: {len(result.resources_of_type(GlueJob.resource_type))}")
    info(f"  Connections: {len(result.resources_of_type(GlueConnection.resource_type))}")
    info(f"  Triggers: {len(result.resources_of_type(GlueTrigger.resource_type))}")
    if result.temp_bucket_created:
        info("  Temp bucket: created")
    if result.trigger_diagnostic:
        warning(f"No triggers compiled: {result.trigger_diagnostic}")
