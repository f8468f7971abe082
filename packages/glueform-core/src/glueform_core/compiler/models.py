"""Compiler section results and output model for glueform.

Each configuration section is compiled into an explicit result value:
- JobSectionResult: built jobs plus whether any of them needs a temp dir
- TriggerSectionResult: built triggers, or an absent section with the
  reason it was skipped
- CompileResult: everything written to the template sink
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from glueform_core.resources import (
    GlueConnection,
    GlueJob,
    GlueTrigger,
    OutputDefinition,
    ResourceDefinition,
)


@dataclass(frozen=True)
class JobSectionResult:
    """Result of compiling the jobs section.

    Attributes:
        jobs: Job builders in declaration order.
        temp_dir_requested: True if at least one job asked for a temp dir.
    """

    jobs: tuple[GlueJob, ...] = ()
    temp_dir_requested: bool = False


@dataclass(frozen=True)
class ConnectionSectionResult:
    """Result of compiling the connections section."""

    connections: tuple[GlueConnection, ...] = ()


@dataclass(frozen=True)
class TriggerSectionResult:
    """Result of compiling the optional triggers section.

    A section is either present (possibly with zero triggers) or absent,
    in which case ``diagnostic`` says why it was skipped.

    Example:
        >>> TriggerSectionResult.absent("No trigger configuration").triggers
        ()
    """

    triggers: tuple[GlueTrigger, ...] = ()
    present: bool = True
    diagnostic: str | None = field(default=None)

    @classmethod
    def absent(cls, diagnostic: str) -> TriggerSectionResult:
        return cls(triggers=(), present=False, diagnostic=diagnostic)


class CompileResult(BaseModel):
    """Everything a compile wrote to the template sink.

    Attributes:
        resources: Resource definitions in emission order
            (connections, jobs, triggers, temp bucket).
        outputs: Output definitions in emission order.
        temp_bucket_created: True if the shared temp bucket was synthesized.
        trigger_diagnostic: Why the trigger section was skipped, if it was.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    resources: tuple[ResourceDefinition, ...] = Field(default_factory=tuple)
    outputs: tuple[OutputDefinition, ...] = Field(default_factory=tuple)
    temp_bucket_created: bool = False
    trigger_diagnostic: str | None = None

    @property
    def logical_ids(self) -> list[str]:
        """Logical ids of all emitted resources, in emission order."""
        return [resource.logical_id for resource in self.resources]

    def resources_of_type(self, resource_type: str) -> list[ResourceDefinition]:
        """Return emitted resources of one CloudFormation type."""
        return [resource for resource in self.resources if resource.type == resource_type]
