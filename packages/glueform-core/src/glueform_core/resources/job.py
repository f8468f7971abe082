"""Glue job resource (AWS::Glue::Job)."""

from __future__ import annotations

import copy
import re
from typing import Any

from glueform_core.resources.base import ResourceBuilder, compact

COMMAND_NAMES: dict[str, str] = {
    "spark": "glueetl",
    "pythonshell": "pythonshell",
    "streaming": "gluestreaming",
}
"""Job type from serverless.yml -> Glue command name."""

# "python3-2.0" -> runtime "python3", version "2.0"
_GLUE_VERSION_PATTERN = re.compile(r"^python(?P<python>\d+(?:\.\d+)?)-(?P<glue>.+)$")


def command_name_for(job_type: str) -> str:
    """Map a job type to its Glue command name.

    Unknown types are passed through unchanged so new Glue command names
    work without a release.

    Example:
        >>> command_name_for("spark")
        'glueetl'
    """
    return COMMAND_NAMES.get(job_type, job_type)


def parse_glue_version(glue_version: str) -> tuple[str | None, str]:
    """Split a glueVersion value into (python_version, glue_version).

    Example:
        >>> parse_glue_version("python3-2.0")
        ('3', '2.0')
        >>> parse_glue_version("3.0")
        (None, '3.0')
    """
    match = _GLUE_VERSION_PATTERN.match(glue_version)
    if match is None:
        return None, glue_version
    return match.group("python"), match.group("glue")


class GlueJob(ResourceBuilder):
    """Builder for a Glue job.

    Example:
        >>> job = GlueJob("etl-job", "scripts/etl.py")
        >>> job.set_script_location("s3://my-bucket/glueJobs/etl.py")
        >>> job.set_command_name("glueetl")
        >>> job.render()["Properties"]["Command"]
        {'Name': 'glueetl', 'ScriptLocation': 's3://my-bucket/glueJobs/etl.py'}
    """

    resource_type = "AWS::Glue::Job"
    kind = "job"

    def __init__(self, name: str, script: str) -> None:
        self.name = name
        self.script = script
        self.script_location: str | None = None
        self.glue_version: str | None = None
        self.role: str | None = None
        self.command_name: str | None = None
        self.max_concurrent_runs: int | None = None
        self.worker_type: str | None = None
        self.number_of_workers: int | None = None
        self.connections: list[str] | None = None
        self.temp_dir: Any = None

    def set_script_location(self, script_location: str) -> None:
        self.script_location = script_location

    def set_glue_version(self, glue_version: str) -> None:
        self.glue_version = glue_version

    def set_role(self, role: str) -> None:
        self.role = role

    def set_command_name(self, command_name: str) -> None:
        self.command_name = command_name

    def set_max_concurrent_runs(self, max_concurrent_runs: int) -> None:
        self.max_concurrent_runs = max_concurrent_runs

    def set_worker_type(self, worker_type: str) -> None:
        self.worker_type = worker_type

    def set_number_of_workers(self, number_of_workers: int) -> None:
        self.number_of_workers = number_of_workers

    def set_connections(self, connections: list[str]) -> None:
        self.connections = connections

    def set_temp_dir(self, temp_dir: Any) -> None:
        """Set the temp dir location, usually an ``Fn::Join`` expression."""
        self.temp_dir = temp_dir

    def properties(self) -> dict[str, Any]:
        python_version: str | None = None
        glue_version: str | None = None
        if self.glue_version is not None:
            python_version, glue_version = parse_glue_version(self.glue_version)

        command = compact(
            {
                "Name": self.command_name,
                "ScriptLocation": self.script_location,
                "PythonVersion": python_version,
            }
        )

        execution_property = None
        if self.max_concurrent_runs is not None:
            execution_property = {"MaxConcurrentRuns": self.max_concurrent_runs}

        connections = None
        if self.connections is not None:
            connections = {"Connections": list(self.connections)}

        default_arguments = None
        if self.temp_dir is not None:
            default_arguments = {"--TempDir": copy.deepcopy(self.temp_dir)}

        return compact(
            {
                "Name": self.name,
                "Role": self.role,
                "GlueVersion": glue_version,
                "Command": command or None,
                "ExecutionProperty": execution_property,
                "WorkerType": self.worker_type,
                "NumberOfWorkers": self.number_of_workers,
                "Connections": connections,
                "DefaultArguments": default_arguments,
            }
        )
