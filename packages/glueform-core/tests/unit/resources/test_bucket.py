"""Unit tests for the temp bucket and temp dir locations."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from glueform_core.resources import (
    TEMP_BUCKET_LOGICAL_ID,
    TEMP_BUCKET_OUTPUT_ID,
    OutputDefinition,
    ResourceDefinition,
    TempBucket,
    temp_bucket_name,
    temp_dir_location,
)


class TestTempDirLocation:
    def test_synthesized_bucket(self) -> None:
        assert temp_dir_location("etl-job") == {
            "Fn::Join": ["", ["s3://", {"Ref": "GlueJobTempBucket"}, "/etl-job"]]
        }

    def test_external_bucket_with_prefix(self) -> None:
        assert temp_dir_location("etl-job", bucket="tmp-bucket", prefix="tmp") == {
            "Fn::Join": ["", ["s3://", "tmp-bucket", "/tmp/etl-job"]]
        }

    def test_jobs_get_distinct_paths(self) -> None:
        assert temp_dir_location("a") != temp_dir_location("b")


class TestTempBucket:
    def test_name(self) -> None:
        assert temp_bucket_name("orders", "prod") == "orders-prod-gluejobstemp"

    def test_render(self) -> None:
        bucket = TempBucket("orders", "prod")
        assert bucket.logical_id == TEMP_BUCKET_LOGICAL_ID
        assert bucket.render() == {
            "Type": "AWS::S3::Bucket",
            "Properties": {"BucketName": "orders-prod-gluejobstemp"},
        }

    def test_output_references_bucket(self) -> None:
        output = TempBucket("orders", "prod").output()
        assert output.output_id == TEMP_BUCKET_OUTPUT_ID
        assert output.to_template() == {
            "Value": {"Ref": "GlueJobTempBucket"},
            "Description": "Bucket holding Glue job temp directories",
        }


class TestFrozenDefinitions:
    def test_resource_definition_is_immutable(self) -> None:
        definition = TempBucket("orders", "prod").freeze()
        with pytest.raises(PydanticValidationError):
            definition.logical_id = "Other"  # type: ignore[misc]

    def test_resource_definition_rejects_bad_logical_id(self) -> None:
        with pytest.raises(PydanticValidationError):
            ResourceDefinition(logical_id="etl-job", type="AWS::Glue::Job", source="job 'x'")

    def test_to_template_returns_copy(self) -> None:
        definition = TempBucket("orders", "prod").freeze()
        document = definition.to_template()
        document["Properties"]["BucketName"] = "changed"
        assert definition.properties["BucketName"] == "orders-prod-gluejobstemp"

    def test_output_without_description(self) -> None:
        output = OutputDefinition(output_id="Name", value="x")
        assert output.to_template() == {"Value": "x"}
