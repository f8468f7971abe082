"""Job script publishing for glueform.

Glue jobs run scripts from S3, so each job's local script is uploaded to
the deployment bucket before the job resource is rendered. The compiler
only depends on the ArtifactPublisher protocol:
- S3ArtifactPublisher: uploads with boto3
- DryRunPublisher: computes the destination without uploading
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Any, Protocol

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from glueform_core.errors import ArtifactUploadError

logger = structlog.get_logger(__name__)


class ArtifactPublisher(Protocol):
    """Interface for publishing a local file to object storage."""

    def publish(self, local_path: str, bucket: str, prefix: str = "") -> str:
        """Publish local_path to bucket under prefix and return its S3 URI."""
        ...


def artifact_key(local_path: str, prefix: str = "") -> str:
    """Return the object key for a script: prefix + file name.

    Example:
        >>> artifact_key("scripts/etl.py", "glueJobs/")
        'glueJobs/etl.py'
    """
    return f"{prefix}{PurePosixPath(local_path).name}"


def artifact_uri(bucket: str, key: str) -> str:
    """Return the ``s3://`` URI for an object."""
    return f"s3://{bucket}/{key}"


class S3ArtifactPublisher:
    """Upload job scripts to S3 with boto3.

    Uploads are not retried: any failure raises ArtifactUploadError and the
    compile is aborted.

    Attributes:
        client: boto3 S3 client.
        base_dir: Directory local script paths are resolved against.

    Example:
        >>> publisher = S3ArtifactPublisher(profile="deploy", region="eu-west-1")
        >>> publisher.publish("scripts/etl.py", "my-bucket", "glueJobs/")
        's3://my-bucket/glueJobs/etl.py'
    """

    def __init__(
        self,
        client: Any | None = None,
        *,
        profile: str | None = None,
        region: str | None = None,
        base_dir: Path | str = ".",
    ) -> None:
        if client is None:
            session = boto3.Session(profile_name=profile, region_name=region)
            client = session.client("s3")
        self.client = client
        self.base_dir = Path(base_dir)

    def publish(self, local_path: str, bucket: str, prefix: str = "") -> str:
        key = artifact_key(local_path, prefix)
        destination = artifact_uri(bucket, key)
        path = self.base_dir / local_path

        logger.info("glue_script_upload_started", script=local_path, destination=destination)
        try:
            with path.open("rb") as body:
                self.client.put_object(Bucket=bucket, Key=key, Body=body)
        except (OSError, BotoCoreError, ClientError) as e:
            raise ArtifactUploadError(
                local_path,
                destination,
                internal_details=f"{type(e).__name__}: {e}",
            ) from e

        logger.info("glue_script_uploaded", script=local_path, destination=destination)
        return destination


class DryRunPublisher:
    """Resolve script destinations without uploading anything.

    The local script must still exist, so a dry run catches the same
    missing-file errors a real deployment would.
    """

    def __init__(self, base_dir: Path | str = ".") -> None:
        self.base_dir = Path(base_dir)

    def publish(self, local_path: str, bucket: str, prefix: str = "") -> str:
        destination = artifact_uri(bucket, artifact_key(local_path, prefix))
        path = self.base_dir / local_path

        if not path.is_file():
            raise ArtifactUploadError(
                local_path,
                destination,
                internal_details=f"Script not found: {path}",
            )

        logger.info("glue_script_upload_skipped", script=local_path, destination=destination)
        return destination
