"""Shared temp bucket for Glue job working directories.

Jobs with ``tempDir: true`` need an S3 location for intermediate data. When
no ``tempDirBucket`` is configured, one bucket is created for the whole
service under a fixed logical id, and every job gets its own key prefix
inside it.
"""

from __future__ import annotations

from typing import Any

from glueform_core.resources.base import OutputDefinition, ResourceBuilder

TEMP_BUCKET_LOGICAL_ID = "GlueJobTempBucket"
TEMP_BUCKET_OUTPUT_ID = "GlueJobTempBucketName"
TEMP_BUCKET_SUFFIX = "gluejobstemp"


def temp_bucket_name(service: str, stage: str) -> str:
    """Return the physical name of the synthesized temp bucket.

    Example:
        >>> temp_bucket_name("orders", "prod")
        'orders-prod-gluejobstemp'
    """
    return f"{service}-{stage}-{TEMP_BUCKET_SUFFIX}"


def temp_bucket_ref() -> dict[str, str]:
    """Return a ``Ref`` to the synthesized temp bucket."""
    return {"Ref": TEMP_BUCKET_LOGICAL_ID}


def temp_dir_location(
    job_name: str,
    bucket: str | None = None,
    prefix: str | None = None,
) -> dict[str, Any]:
    """Build the ``--TempDir`` value for a job.

    Args:
        job_name: Job name, used as the last path segment so jobs sharing
            a bucket never share a directory.
        bucket: Externally configured bucket name. When None, the
            synthesized temp bucket is referenced instead.
        prefix: Optional key prefix placed before the job name.

    Returns:
        ``Fn::Join`` expression resolving to ``s3://<bucket>[/<prefix>]/<job_name>``.

    Example:
        >>> temp_dir_location("etl-job")
        {'Fn::Join': ['', ['s3://', {'Ref': 'GlueJobTempBucket'}, '/etl-job']]}
    """
    path = ""
    if prefix:
        path += f"/{prefix}"
    path += f"/{job_name}"

    target: Any = bucket if bucket else temp_bucket_ref()
    return {"Fn::Join": ["", ["s3://", target, path]]}


class TempBucket(ResourceBuilder):
    """Builder for the synthesized temp bucket (AWS::S3::Bucket)."""

    resource_type = "AWS::S3::Bucket"
    kind = "temp bucket"

    def __init__(self, service: str, stage: str) -> None:
        self.name = temp_bucket_name(service, stage)

    @property
    def logical_id(self) -> str:
        return TEMP_BUCKET_LOGICAL_ID

    def properties(self) -> dict[str, Any]:
        return {"BucketName": self.name}

    def output(self) -> OutputDefinition:
        """Output exposing the provisioned bucket name."""
        return OutputDefinition(
            output_id=TEMP_BUCKET_OUTPUT_ID,
            value=temp_bucket_ref(),
            description="Bucket holding Glue job temp directories",
        )
