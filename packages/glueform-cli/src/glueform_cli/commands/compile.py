"""glueform compile command - Generate the Glue CloudFormation template."""

from __future__ import annotations

from pathlib import Path

import click
from botocore.exceptions import BotoCoreError

from glueform_cli.errors import (
    EXIT_SYSTEM_ERROR,
    CLIError,
    handle_glueform_error,
    handle_permission_error,
)
from glueform_cli.loader import load_service
from glueform_cli.output import success, warning

TEMPLATE_FILE_NAME = "glue-template.json"


@click.command("compile")
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=False),
    default="./serverless.yml",
    help="Path to serverless.yml [default: ./serverless.yml]",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default=".glueform/",
    help="Output directory [default: .glueform/]",
)
@click.option(
    "--stage",
    envvar="GLUEFORM_STAGE",
    default=None,
    help="Stage override [env: GLUEFORM_STAGE; default: provider.stage]",
)
@click.option(
    "--account-id",
    envvar="GLUEFORM_ACCOUNT_ID",
    default=None,
    help="Account id owning the Glue catalog [env: GLUEFORM_ACCOUNT_ID]",
)
@click.option("--profile", envvar="AWS_PROFILE", default=None, help="AWS credentials profile")
@click.option("--region", envvar="AWS_REGION", default=None, help="AWS region")
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Resolve script locations without uploading them.",
)
def compile_cmd(
    file_path: str,
    output_path: str,
    stage: str | None,
    account_id: str | None,
    profile: str | None,
    region: str | None,
    dry_run: bool,
) -> None:
    """Generate the Glue CloudFormation template from serverless.yml.

    Uploads each job script to the deployment bucket, then writes the Glue
    jobs, connections, triggers and temp bucket to a template file.

    Examples:

        glueform compile

        glueform compile --stage prod --output build/

        glueform compile --dry-run
    """
    # Import here to avoid heavy imports at CLI startup
    from glueform_core import (
        CloudFormationTemplate,
        DryRunPublisher,
        GlueCompiler,
        GlueformError,
        S3ArtifactPublisher,
    )

    service, config = load_service(file_path)

    try:
        if dry_run:
            publisher = DryRunPublisher(base_dir=service.base_dir)
        else:
            publisher = S3ArtifactPublisher(
                profile=profile or service.provider.profile,
                region=region or service.provider.region,
                base_dir=service.base_dir,
            )
        compiler = GlueCompiler.for_service(
            service, publisher, stage=stage, account_id=account_id
        )
        template = CloudFormationTemplate()
        result = compiler.compile(config, template)
    except GlueformError as e:
        handle_glueform_error(e)
    except BotoCoreError as e:
        raise CLIError(f"AWS configuration error: {e}", exit_code=EXIT_SYSTEM_ERROR) from None

    if result.trigger_diagnostic:
        warning(f"No triggers compiled: {result.trigger_diagnostic}")

    try:
        written = template.write(Path(output_path) / TEMPLATE_FILE_NAME)
    except PermissionError:
        handle_permission_error(output_path, "write to")

    success(f"Compiled {len(result.resources)} resources to {written}")
