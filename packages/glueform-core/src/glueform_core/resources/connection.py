"""Glue connection resource (AWS::Glue::Connection)."""

from __future__ import annotations

from typing import Any

from pydantic import SecretStr

from glueform_core.resources.base import ResourceBuilder, compact

JDBC_ENFORCE_SSL = "false"
"""SSL enforcement is always rendered off; it is not configurable."""


class GlueConnection(ResourceBuilder):
    """Builder for a Glue catalog connection.

    A connection is identified by its name within the catalog of the
    owning account (``account_id``).
    """

    resource_type = "AWS::Glue::Connection"
    kind = "connection"

    def __init__(self, name: str, account_id: str | None) -> None:
        self.name = name
        self.account_id = account_id
        self.connection_type: str | None = None
        self.description: str | None = None
        self.match_criteria: list[str] | None = None
        self.db_uri: str | None = None
        self.db_username: str | None = None
        self.db_password: SecretStr | None = None
        self.security_groups: list[str] | None = None
        self.subnet: str | None = None

    def set_type(self, connection_type: str) -> None:
        self.connection_type = connection_type

    def set_description(self, description: str) -> None:
        self.description = description

    def set_match_criteria(self, match_criteria: list[str]) -> None:
        self.match_criteria = match_criteria

    def set_db_uri(self, db_uri: str) -> None:
        self.db_uri = db_uri

    def set_db_username(self, db_username: str) -> None:
        self.db_username = db_username

    def set_db_password(self, db_password: SecretStr | str) -> None:
        if isinstance(db_password, str):
            db_password = SecretStr(db_password)
        self.db_password = db_password

    def set_security_group(self, security_groups: list[str]) -> None:
        self.security_groups = security_groups

    def set_subnet(self, subnet: str) -> None:
        self.subnet = subnet

    def properties(self) -> dict[str, Any]:
        password = None
        if self.db_password is not None:
            password = self.db_password.get_secret_value()

        connection_properties = compact(
            {
                "JDBC_CONNECTION_URL": self.db_uri,
                "USER_NAME": self.db_username,
                "PASSWORD": password,
                "JDBC_ENFORCE_SSL": JDBC_ENFORCE_SSL,
            }
        )

        physical_requirements = compact(
            {
                "SecurityGroupIdList": (
                    list(self.security_groups) if self.security_groups is not None else None
                ),
                "SubnetId": self.subnet,
            }
        )

        connection_input = compact(
            {
                "Name": self.name,
                "ConnectionType": self.connection_type,
                "Description": self.description,
                "MatchCriteria": (
                    list(self.match_criteria) if self.match_criteria is not None else None
                ),
                "ConnectionProperties": connection_properties,
                "PhysicalConnectionRequirements": physical_requirements or None,
            }
        )

        return compact({"CatalogId": self.account_id, "ConnectionInput": connection_input})
