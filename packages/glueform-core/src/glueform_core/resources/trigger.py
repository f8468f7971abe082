"""Glue trigger resource (AWS::Glue::Trigger) and its actions."""

from __future__ import annotations

from typing import Any

from glueform_core.resources.base import ResourceBuilder, compact

SCHEDULED_TRIGGER_TYPE = "SCHEDULED"


class GlueTriggerAction:
    """One job started by a trigger.

    The job is referenced by name only. Whether that job exists is checked
    by CloudFormation at deploy time, not here.
    """

    def __init__(self, job_name: str) -> None:
        self.job_name = job_name
        self.arguments: dict[str, str] | None = None
        self.timeout: int | None = None

    def set_arguments(self, arguments: dict[str, str]) -> None:
        self.arguments = arguments

    def set_timeout(self, timeout: int) -> None:
        self.timeout = timeout

    def render(self) -> dict[str, Any]:
        return compact(
            {
                "JobName": self.job_name,
                "Arguments": dict(self.arguments) if self.arguments is not None else None,
                "Timeout": self.timeout,
            }
        )


class GlueTrigger(ResourceBuilder):
    """Builder for a scheduled Glue trigger.

    Example:
        >>> trigger = GlueTrigger("nightly", "cron(0 2 * * ? *)")
        >>> trigger.set_actions([GlueTriggerAction("etl-job")])
        >>> trigger.render()["Properties"]["Actions"]
        [{'JobName': 'etl-job'}]
    """

    resource_type = "AWS::Glue::Trigger"
    kind = "trigger"

    def __init__(self, name: str, schedule: str | None) -> None:
        self.name = name
        self.schedule = schedule
        self.actions: list[GlueTriggerAction] = []

    def set_actions(self, actions: list[GlueTriggerAction]) -> None:
        self.actions = actions

    def properties(self) -> dict[str, Any]:
        return compact(
            {
                "Name": self.name,
                "Type": SCHEDULED_TRIGGER_TYPE,
                "Schedule": self.schedule,
                "Actions": [action.render() for action in self.actions],
            }
        )
