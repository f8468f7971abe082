"""CloudFormation resource records for glueform.

This module exports the mutable resource builders and the immutable
definitions they freeze into:
- GlueJob, GlueConnection, GlueTrigger, GlueTriggerAction: builders
- TempBucket: the synthesized temp bucket
- ResourceDefinition, OutputDefinition: frozen values written to templates
"""

from __future__ import annotations

from glueform_core.resources.base import (
    OutputDefinition,
    ResourceBuilder,
    ResourceDefinition,
    compact,
)
from glueform_core.resources.bucket import (
    TEMP_BUCKET_LOGICAL_ID,
    TEMP_BUCKET_OUTPUT_ID,
    TempBucket,
    temp_bucket_name,
    temp_bucket_ref,
    temp_dir_location,
)
from glueform_core.resources.connection import JDBC_ENFORCE_SSL, GlueConnection
from glueform_core.resources.job import (
    COMMAND_NAMES,
    GlueJob,
    command_name_for,
    parse_glue_version,
)
from glueform_core.resources.trigger import (
    SCHEDULED_TRIGGER_TYPE,
    GlueTrigger,
    GlueTriggerAction,
)

__all__: list[str] = [
    # Frozen values
    "ResourceDefinition",
    "OutputDefinition",
    "ResourceBuilder",
    "compact",
    # Jobs
    "GlueJob",
    "COMMAND_NAMES",
    "command_name_for",
    "parse_glue_version",
    # Connections
    "GlueConnection",
    "JDBC_ENFORCE_SSL",
    # Triggers
    "GlueTrigger",
    "GlueTriggerAction",
    "SCHEDULED_TRIGGER_TYPE",
    # Temp bucket
    "TempBucket",
    "TEMP_BUCKET_LOGICAL_ID",
    "TEMP_BUCKET_OUTPUT_ID",
    "temp_bucket_name",
    "temp_bucket_ref",
    "temp_dir_location",
]
