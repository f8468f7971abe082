"""Shared pytest fixtures for glueform-core tests.

This module provides sample ``custom.Glue`` blocks, a recording publisher
and structlog configuration shared by unit and integration tests.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import structlog

from glueform_core.publisher import artifact_key, artifact_uri


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    capsys can only see structlog events when they are printed to stdout.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def publisher() -> MagicMock:
    """Return a publisher mock that resolves destinations without I/O.

    Calls are recorded, so tests can assert upload order and arguments.
    """
    mock = MagicMock()
    mock.publish.side_effect = lambda local_path, bucket, prefix="": artifact_uri(
        bucket, artifact_key(local_path, prefix)
    )
    return mock


@pytest.fixture
def sample_glue_config() -> dict[str, Any]:
    """Return a minimal ``custom.Glue`` block with a single job."""
    return {
        "bucketDeploy": "my-bucket",
        "jobs": [
            {
                "job": {
                    "name": "etl-job",
                    "script": "scripts/etl.py",
                    "type": "spark",
                    "glueVersion": "python3-2.0",
                    "role": "arn:aws:iam::123456789012:role/glue",
                }
            }
        ],
    }


@pytest.fixture
def sample_glue_config_full() -> dict[str, Any]:
    """Return a ``custom.Glue`` block using every section and option."""
    return {
        "bucketDeploy": "my-bucket",
        "s3Prefix": "scripts/glue/",
        "tempDirS3Prefix": "tmp",
        "jobs": [
            {
                "job": {
                    "name": "etl-job",
                    "script": "scripts/etl.py",
                    "type": "spark",
                    "glueVersion": "python3-2.0",
                    "role": "glue-role",
                    "MaxConcurrentRuns": 3,
                    "WorkerType": "G.1X",
                    "NumberOfWorkers": 10,
                    "Connections": "orders-db,warehouse-db",
                    "tempDir": True,
                }
            },
            {
                "job": {
                    "name": "report_job",
                    "script": "scripts/report.py",
                    "type": "pythonshell",
                    "tempDir": True,
                }
            },
        ],
        "connections": [
            {
                "connection": {
                    "name": "orders-db",
                    "connectionType": "JDBC",
                    "description": "Orders database",
                    "dbUri": "jdbc:postgresql://orders.internal:5432/orders",
                    "dbUsername": "glue",
                    "dbPassword": "s3cr3t-pa55",
                    "MatchCriteria": "orders,postgres",
                    "securityGroupIdList": "sg-a,sg-b",
                    "subnetId": "subnet-123",
                }
            }
        ],
        "triggers": [
            {
                "trigger": {
                    "name": "nightly",
                    "schedule": "cron(0 2 * * ? *)",
                    "jobs": [
                        {"job": {"name": "etl-job", "args": {"--mode": "full"}, "timeout": 60}},
                        {"job": {"name": "report_job"}},
                    ],
                }
            }
        ],
    }
