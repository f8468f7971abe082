"""Unit tests for the Glue connection builder."""

from __future__ import annotations

from pydantic import SecretStr

from glueform_core.resources import JDBC_ENFORCE_SSL, GlueConnection


def _connection() -> GlueConnection:
    connection = GlueConnection("orders-db", "123456789012")
    connection.set_type("JDBC")
    connection.set_db_uri("jdbc:postgresql://orders.internal:5432/orders")
    connection.set_db_username("glue")
    connection.set_db_password("s3cr3t-pa55")
    return connection


class TestGlueConnection:
    """Tests for GlueConnection rendering."""

    def test_minimal_render(self) -> None:
        assert _connection().render() == {
            "Type": "AWS::Glue::Connection",
            "Properties": {
                "CatalogId": "123456789012",
                "ConnectionInput": {
                    "Name": "orders-db",
                    "ConnectionType": "JDBC",
                    "ConnectionProperties": {
                        "JDBC_CONNECTION_URL": "jdbc:postgresql://orders.internal:5432/orders",
                        "USER_NAME": "glue",
                        "PASSWORD": "s3cr3t-pa55",
                        "JDBC_ENFORCE_SSL": "false",
                    },
                },
            },
        }

    def test_optional_attributes(self) -> None:
        connection = _connection()
        connection.set_description("Orders database")
        connection.set_match_criteria(["orders", "postgres"])
        connection.set_security_group(["sg-a", "sg-b"])
        connection.set_subnet("subnet-123")

        connection_input = connection.render()["Properties"]["ConnectionInput"]

        assert connection_input["Description"] == "Orders database"
        assert connection_input["MatchCriteria"] == ["orders", "postgres"]
        assert connection_input["PhysicalConnectionRequirements"] == {
            "SecurityGroupIdList": ["sg-a", "sg-b"],
            "SubnetId": "subnet-123",
        }

    def test_subnet_without_security_groups(self) -> None:
        connection = _connection()
        connection.set_subnet("subnet-123")
        requirements = connection.render()["Properties"]["ConnectionInput"][
            "PhysicalConnectionRequirements"
        ]
        assert requirements == {"SubnetId": "subnet-123"}

    def test_security_group_order_preserved(self) -> None:
        connection = _connection()
        connection.set_security_group(["sg-b", "sg-a", "sg-c"])
        requirements = connection.render()["Properties"]["ConnectionInput"][
            "PhysicalConnectionRequirements"
        ]
        assert requirements["SecurityGroupIdList"] == ["sg-b", "sg-a", "sg-c"]

    def test_no_physical_requirements_when_unset(self) -> None:
        connection_input = _connection().render()["Properties"]["ConnectionInput"]
        assert "PhysicalConnectionRequirements" not in connection_input

    def test_ssl_enforcement_is_constant(self) -> None:
        properties = _connection().render()["Properties"]["ConnectionInput"]["ConnectionProperties"]
        assert properties["JDBC_ENFORCE_SSL"] == JDBC_ENFORCE_SSL == "false"

    def test_password_accepts_secret_str(self) -> None:
        connection = _connection()
        connection.set_db_password(SecretStr("other"))
        properties = connection.render()["Properties"]["ConnectionInput"]["ConnectionProperties"]
        assert properties["PASSWORD"] == "other"

    def test_password_hidden_from_repr(self) -> None:
        connection = _connection()
        frozen = connection.freeze()
        assert "s3cr3t-pa55" not in repr(connection.db_password)
        assert "s3cr3t-pa55" not in repr(frozen)

    def test_logical_id(self) -> None:
        assert _connection().logical_id == "OrdersDb"
        assert _connection().source == "connection 'orders-db'"
