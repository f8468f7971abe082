"""Base types for CloudFormation resource records.

Resource records are built in two phases:

1. A mutable builder (GlueJob, GlueConnection, ...) accumulates attributes
   through ``set_*`` methods while the configuration is compiled.
2. ``freeze()`` turns the builder into an immutable ResourceDefinition,
   which is the only thing handed to a template sink.

Builders never perform I/O. Anything that needs I/O (script upload) happens
before the builder is populated, and the result is passed in as plain data.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from glueform_core.naming import LOGICAL_ID_PATTERN, to_logical_id


def compact(mapping: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None.

    Unset optional attributes must not reach the template: CloudFormation
    rejects null properties.
    """
    return {key: value for key, value in mapping.items() if value is not None}


class ResourceDefinition(BaseModel):
    """Immutable, rendered CloudFormation resource.

    Attributes:
        logical_id: Template key of the resource.
        type: CloudFormation resource type (e.g. "AWS::Glue::Job").
        properties: Rendered ``Properties`` document.
        source: Human-readable origin, used in collision diagnostics.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    logical_id: str = Field(..., pattern=LOGICAL_ID_PATTERN)
    type: str = Field(..., min_length=1)
    # May hold connection passwords
    properties: dict[str, Any] = Field(default_factory=dict, repr=False)
    source: str = Field(..., min_length=1)

    def to_template(self) -> dict[str, Any]:
        """Return the ``{"Type", "Properties"}`` document for the template.

        A deep copy is returned so sinks cannot mutate the definition.
        """
        return {"Type": self.type, "Properties": copy.deepcopy(self.properties)}


class OutputDefinition(BaseModel):
    """Immutable CloudFormation template output."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    output_id: str = Field(..., pattern=LOGICAL_ID_PATTERN)
    value: Any
    description: str | None = None

    def to_template(self) -> dict[str, Any]:
        """Return the output document for the template."""
        return compact({"Value": copy.deepcopy(self.value), "Description": self.description})


class ResourceBuilder(ABC):
    """Mutable builder for one named CloudFormation resource.

    Subclasses define ``resource_type``, ``kind`` and ``properties()``.
    """

    resource_type: ClassVar[str]
    kind: ClassVar[str]

    name: str

    @property
    def logical_id(self) -> str:
        """Template key derived from the resource name."""
        return to_logical_id(self.name)

    @property
    def source(self) -> str:
        """Human-readable origin, e.g. "job 'etl-job'"."""
        return f"{self.kind} '{self.name}'"

    @abstractmethod
    def properties(self) -> dict[str, Any]:
        """Render the ``Properties`` document from the current state."""

    def render(self) -> dict[str, Any]:
        """Render the resource document.

        Pure with respect to the builder state: two renders without an
        intervening setter call return equal documents, and each call
        returns a fresh object.
        """
        return {"Type": self.resource_type, "Properties": self.properties()}

    def freeze(self) -> ResourceDefinition:
        """Convert the builder into an immutable ResourceDefinition."""
        return ResourceDefinition(
            logical_id=self.logical_id,
            type=self.resource_type,
            properties=self.properties(),
            source=self.source,
        )
