"""CloudFormation template sink for glueform.

The compiler writes rendered resources and outputs into a TemplateSink.
CloudFormationTemplate is the dict-backed implementation; it can wrap a
template owned by a host tool and write into it in place.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Protocol

TEMPLATE_FORMAT_VERSION = "2010-09-09"


class TemplateSink(Protocol):
    """Interface for the resource and output maps the compiler writes into.

    Both operations are last-write-wins on key collision.
    """

    def set_resource(self, logical_id: str, definition: dict[str, Any]) -> None: ...

    def set_output(self, output_id: str, definition: dict[str, Any]) -> None: ...


class CloudFormationTemplate:
    """Dict-backed CloudFormation template.

    Args:
        template: Existing template to write into. A new, empty template is
            created when omitted.

    Example:
        >>> template = CloudFormationTemplate()
        >>> template.set_resource("EtlJob", {"Type": "AWS::Glue::Job", "Properties": {}})
        >>> list(template.resources)
        ['EtlJob']
    """

    def __init__(self, template: dict[str, Any] | None = None) -> None:
        if template is None:
            template = {"AWSTemplateFormatVersion": TEMPLATE_FORMAT_VERSION}
        template.setdefault("Resources", {})
        template.setdefault("Outputs", {})
        self._template = template

    @property
    def resources(self) -> dict[str, Any]:
        return self._template["Resources"]

    @property
    def outputs(self) -> dict[str, Any]:
        return self._template["Outputs"]

    def set_resource(self, logical_id: str, definition: dict[str, Any]) -> None:
        self.resources[logical_id] = definition

    def set_output(self, output_id: str, definition: dict[str, Any]) -> None:
        self.outputs[output_id] = definition

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the template."""
        return copy.deepcopy(self._template)

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self._template, indent=indent)

    def write(self, path: Path | str) -> Path:
        """Write the template as JSON, creating parent directories.

        Returns:
            The path written to.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json())
        return path
