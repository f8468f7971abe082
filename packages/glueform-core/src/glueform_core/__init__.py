"""glueform-core: compile Glue configuration into CloudFormation resources.

This package provides:
- GlueConfig / ServerlessService: Pydantic schemas for serverless.yml
- GlueCompiler: Transform ``custom.Glue`` into CloudFormation resources
- Resource builders for Glue jobs, connections and triggers
- Script publishers and the CloudFormation template sink
"""

from __future__ import annotations

__version__ = "0.1.0"

from glueform_core.compiler import (
    CompileResult,
    GlueCompiler,
    JobSectionResult,
    TriggerSectionResult,
)
from glueform_core.errors import (
    ArtifactUploadError,
    ConfigurationError,
    ConfigurationInvalidError,
    ConfigurationMissingError,
    GlueformError,
    IdentifierCollisionError,
    ValidationError,
)
from glueform_core.naming import to_logical_id
from glueform_core.publisher import ArtifactPublisher, DryRunPublisher, S3ArtifactPublisher
from glueform_core.resources import (
    GlueConnection,
    GlueJob,
    GlueTrigger,
    GlueTriggerAction,
    OutputDefinition,
    ResourceDefinition,
    TempBucket,
)
from glueform_core.schemas import GlueConfig, ServerlessService
from glueform_core.template import CloudFormationTemplate, TemplateSink

__all__ = [
    "__version__",
    # Compiler
    "GlueCompiler",
    "CompileResult",
    "JobSectionResult",
    "TriggerSectionResult",
    # Errors
    "GlueformError",
    "ValidationError",
    "ConfigurationError",
    "ConfigurationMissingError",
    "ConfigurationInvalidError",
    "ArtifactUploadError",
    "IdentifierCollisionError",
    # Naming
    "to_logical_id",
    # Publishing
    "ArtifactPublisher",
    "S3ArtifactPublisher",
    "DryRunPublisher",
    # Resources
    "GlueJob",
    "GlueConnection",
    "GlueTrigger",
    "GlueTriggerAction",
    "TempBucket",
    "ResourceDefinition",
    "OutputDefinition",
    # Schemas
    "GlueConfig",
    "ServerlessService",
    # Template
    "CloudFormationTemplate",
    "TemplateSink",
]
