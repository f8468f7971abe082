"""Configuration schemas for glueform.

This module exports the models describing the ``custom.Glue`` block and the
surrounding serverless.yml service definition.
"""

from __future__ import annotations

from glueform_core.schemas.glue_config import (
    DEFAULT_S3_PREFIX,
    ConnectionConfig,
    ConnectionEntry,
    GlueConfig,
    JobConfig,
    JobEntry,
    TriggerConfig,
    TriggerEntry,
    TriggerJobConfig,
    TriggerJobEntry,
    split_list,
)
from glueform_core.schemas.serverless import DEFAULT_STAGE, ProviderConfig, ServerlessService

__all__: list[str] = [
    # Glue configuration
    "GlueConfig",
    "JobConfig",
    "JobEntry",
    "ConnectionConfig",
    "ConnectionEntry",
    "TriggerConfig",
    "TriggerEntry",
    "TriggerJobConfig",
    "TriggerJobEntry",
    "DEFAULT_S3_PREFIX",
    "split_list",
    # Service definition
    "ServerlessService",
    "ProviderConfig",
    "DEFAULT_STAGE",
]
