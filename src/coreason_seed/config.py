# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

from typing import Any, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from coreason_seed.integrations.vault import VaultIntegrator

# Images attached per record when not overridden, keyed by seed target.
DEFAULT_ATTACHMENTS_PER_RECORD: dict[str, int] = {
    "user": 1,
    "post": 3,
}


class VaultSettingsSource(PydanticBaseSettingsSource):
    """
    Custom Pydantic Settings Source that reads storage secrets from Vault.
    """

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        # Unused because __call__ returns the full dict.
        return None, field_name, False  # pragma: no cover

    def __call__(self) -> dict[str, Any]:
        vault = VaultIntegrator()
        secrets: dict[str, Any] = {}

        mapping = {
            "s3_access_key": "S3_ACCESS_KEY",
            "s3_secret_key": "S3_SECRET_KEY",
        }

        for field, key in mapping.items():
            val = vault.get_secret(key)
            if val:
                secrets[field] = val

        return secrets


class SeedConfig(BaseSettings):
    """
    Configuration for a seeding run.
    """

    database_url: str = "sqlite:///seed.db"

    target: Literal["user", "post"] = "user"
    record_count: int = Field(default=10, ge=0)
    attachments_per_record: int | None = Field(default=None, ge=0)

    # Placeholder image source. "{token}" is replaced by a random hex token.
    image_url_template: str = "https://robohash.org/{token}.png"
    content_type: str = "image/png"
    file_extension: str = ".png"
    request_timeout: float = 30.0
    follow_redirects: bool = True

    # Attachment storage
    storage_service: Literal["disk", "s3"] = "disk"
    storage_root: str = "storage"

    # S3 / Object Storage
    s3_bucket: str | None = None
    s3_region: str | None = None
    s3_access_key: str | None = None
    s3_secret_key: str | None = None
    s3_endpoint_url: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="COREASON_SEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _check_consistency(self) -> "SeedConfig":
        if self.target == "user" and (self.attachments_per_record or 0) > 1:
            raise ValueError("target 'user' has a single avatar; attachments_per_record must be 0 or 1")
        try:
            with_zero = self.image_url_template.format(token="0")
            with_one = self.image_url_template.format(token="1")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"image_url_template may only use the '{{token}}' placeholder (use '{{{{' for a literal brace): {e!r}"
            ) from e
        if with_zero == with_one:
            raise ValueError("image_url_template must contain a '{token}' placeholder")
        return self

    @property
    def per_record(self) -> int:
        """Number of images attached to each seeded record."""
        if self.attachments_per_record is not None:
            return self.attachments_per_record
        return DEFAULT_ATTACHMENTS_PER_RECORD[self.target]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            VaultSettingsSource(settings_cls),
            file_secret_settings,
        )
