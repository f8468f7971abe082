"""Serverless service model for glueform.

Reads the parts of serverless.yml the Glue compiler needs: the service
name, the provider stage/region/profile, and the ``custom`` block holding
``Glue`` and ``accountId``. Everything else in the file is ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from glueform_core.errors import ConfigurationInvalidError, ConfigurationMissingError
from glueform_core.schemas.glue_config import GlueConfig

DEFAULT_STAGE = "dev"


class ProviderConfig(BaseModel):
    """The ``provider`` block of serverless.yml."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = "aws"
    stage: str = DEFAULT_STAGE
    region: str | None = None
    profile: str | None = None


class ServerlessService(BaseModel):
    """A serverless.yml service definition.

    Attributes:
        service: Service name, used in the temp bucket name.
        provider: Provider settings (stage, region, credentials profile).
        custom: The ``custom`` block, holding ``Glue`` and ``accountId``.
        source_path: File the service was loaded from, if any.

    Example:
        >>> service = ServerlessService.from_yaml("serverless.yml")
        >>> config = service.glue_config()
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    service: str = Field(..., min_length=1)
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    custom: dict[str, Any] = Field(default_factory=dict)
    source_path: Path | None = Field(default=None, exclude=True)

    @property
    def account_id(self) -> str | None:
        """Account id owning the Glue catalog (``custom.accountId``)."""
        account_id = self.custom.get("accountId")
        return str(account_id) if account_id is not None else None

    @property
    def base_dir(self) -> Path:
        """Directory job script paths are relative to."""
        if self.source_path is None:
            return Path.cwd()
        return self.source_path.parent

    def glue_config(self) -> GlueConfig:
        """Return the validated ``custom.Glue`` block.

        Raises:
            ConfigurationMissingError: If ``custom.Glue`` is absent.
            ConfigurationInvalidError: If the block fails validation.
        """
        file_path = str(self.source_path) if self.source_path else None
        raw = self.custom.get("Glue")
        if raw is None:
            raise ConfigurationMissingError(
                "No Glue configuration found",
                file_path=file_path,
                field_path="custom.Glue",
            )
        if not isinstance(raw, dict):
            raise ConfigurationInvalidError(
                "Glue configuration must be a mapping",
                file_path=file_path,
                field_path="custom.Glue",
            )
        return GlueConfig.from_dict(raw, file_path=file_path)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ServerlessService:
        """Load a service definition from serverless.yml.

        Args:
            path: Path to serverless.yml.

        Returns:
            Validated ServerlessService.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            yaml.YAMLError: If the YAML syntax is invalid.
            ConfigurationInvalidError: If the root is not a mapping.
            pydantic.ValidationError: If the service block fails validation.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        with path.open("r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ConfigurationInvalidError(
                "Service definition must be a mapping",
                file_path=str(path),
            )

        return cls.model_validate({**data, "source_path": path.resolve()})
