"""Unit tests for the Glue job builder."""

from __future__ import annotations

import pytest

from glueform_core.resources import (
    GlueJob,
    ResourceDefinition,
    command_name_for,
    parse_glue_version,
    temp_dir_location,
)


class TestCommandNameFor:
    @pytest.mark.parametrize(
        ("job_type", "expected"),
        [
            ("spark", "glueetl"),
            ("pythonshell", "pythonshell"),
            ("streaming", "gluestreaming"),
            ("glueray", "glueray"),
        ],
    )
    def test_mapping(self, job_type: str, expected: str) -> None:
        assert command_name_for(job_type) == expected


class TestParseGlueVersion:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("python3-2.0", ("3", "2.0")),
            ("python3.9-3.0", ("3.9", "3.0")),
            ("3.0", (None, "3.0")),
            ("4.0", (None, "4.0")),
        ],
    )
    def test_parse(self, value: str, expected: tuple[str | None, str]) -> None:
        assert parse_glue_version(value) == expected


class TestGlueJob:
    """Tests for GlueJob rendering."""

    def test_minimal_render_omits_unset_attributes(self) -> None:
        job = GlueJob("etl-job", "scripts/etl.py")
        job.set_script_location("s3://my-bucket/glueJobs/etl.py")

        assert job.render() == {
            "Type": "AWS::Glue::Job",
            "Properties": {
                "Name": "etl-job",
                "Command": {"ScriptLocation": "s3://my-bucket/glueJobs/etl.py"},
            },
        }

    def test_full_render(self) -> None:
        job = GlueJob("etl-job", "scripts/etl.py")
        job.set_script_location("s3://my-bucket/glueJobs/etl.py")
        job.set_glue_version("python3-2.0")
        job.set_role("glue-role")
        job.set_command_name("glueetl")
        job.set_max_concurrent_runs(3)
        job.set_worker_type("G.1X")
        job.set_number_of_workers(10)
        job.set_connections(["orders-db", "warehouse-db"])
        job.set_temp_dir(temp_dir_location("etl-job", bucket="tmp-bucket"))

        properties = job.render()["Properties"]

        assert properties == {
            "Name": "etl-job",
            "Role": "glue-role",
            "GlueVersion": "2.0",
            "Command": {
                "Name": "glueetl",
                "ScriptLocation": "s3://my-bucket/glueJobs/etl.py",
                "PythonVersion": "3",
            },
            "ExecutionProperty": {"MaxConcurrentRuns": 3},
            "WorkerType": "G.1X",
            "NumberOfWorkers": 10,
            "Connections": {"Connections": ["orders-db", "warehouse-db"]},
            "DefaultArguments": {
                "--TempDir": {"Fn::Join": ["", ["s3://", "tmp-bucket", "/etl-job"]]}
            },
        }

    def test_bare_glue_version_has_no_python_version(self) -> None:
        job = GlueJob("etl-job", "scripts/etl.py")
        job.set_script_location("s3://my-bucket/glueJobs/etl.py")
        job.set_glue_version("3.0")
        properties = job.render()["Properties"]
        assert properties["GlueVersion"] == "3.0"
        assert properties["Command"] == {"ScriptLocation": "s3://my-bucket/glueJobs/etl.py"}

    def test_unset_command_is_omitted(self) -> None:
        """A job without script location or command name renders no Command block."""
        job = GlueJob("etl-job", "scripts/etl.py")
        job.set_glue_version("3.0")

        assert job.render()["Properties"] == {"Name": "etl-job", "GlueVersion": "3.0"}

    def test_render_is_repeatable(self) -> None:
        job = GlueJob("etl-job", "scripts/etl.py")
        job.set_connections(["a", "b"])
        first = job.render()
        second = job.render()
        assert first == second
        assert first is not second

        first["Properties"]["Connections"]["Connections"].append("c")
        assert job.render() == second

    def test_setter_changes_next_render(self) -> None:
        job = GlueJob("etl-job", "scripts/etl.py")
        job.set_role("first")
        job.set_role("second")
        assert job.render()["Properties"]["Role"] == "second"

    def test_logical_id_and_source(self) -> None:
        job = GlueJob("etl-job", "scripts/etl.py")
        assert job.logical_id == "EtlJob"
        assert job.source == "job 'etl-job'"

    def test_freeze(self) -> None:
        job = GlueJob("etl-job", "scripts/etl.py")
        job.set_role("glue-role")
        frozen = job.freeze()

        assert isinstance(frozen, ResourceDefinition)
        assert frozen.logical_id == "EtlJob"
        assert frozen.type == "AWS::Glue::Job"
        assert frozen.to_template() == job.render()

        # Later setter calls do not leak into the frozen definition
        job.set_role("other-role")
        assert frozen.properties["Role"] == "glue-role"
