from typing import Any
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from coreason_seed.config import SeedConfig


def test_defaults() -> None:
    with patch.dict("os.environ", {}, clear=True):
        config = SeedConfig()
    assert config.target == "user"
    assert config.record_count == 10
    assert config.image_url_template == "https://robohash.org/{token}.png"
    assert config.content_type == "image/png"
    assert config.file_extension == ".png"
    assert config.storage_service == "disk"
    assert config.per_record == 1


def test_per_record_defaults_by_target() -> None:
    assert SeedConfig(target="user").per_record == 1
    assert SeedConfig(target="post").per_record == 3
    assert SeedConfig(target="post", attachments_per_record=1).per_record == 1
    assert SeedConfig(target="user", attachments_per_record=0).per_record == 0


def test_env_prefix_overrides() -> None:
    env = {"COREASON_SEED_TARGET": "post", "COREASON_SEED_RECORD_COUNT": "4"}
    with patch.dict("os.environ", env, clear=True):
        config = SeedConfig()
    assert config.target == "post"
    assert config.record_count == 4


def test_init_overrides_env() -> None:
    with patch.dict("os.environ", {"COREASON_SEED_RECORD_COUNT": "4"}, clear=True):
        config = SeedConfig(record_count=2)
    assert config.record_count == 2


def test_user_rejects_multiple_attachments() -> None:
    with pytest.raises(ValidationError) as excinfo:
        SeedConfig(target="user", attachments_per_record=3)
    assert "single avatar" in str(excinfo.value)


def test_negative_counts_rejected() -> None:
    with pytest.raises(ValidationError):
        SeedConfig(record_count=-1)
    with pytest.raises(ValidationError):
        SeedConfig(target="post", attachments_per_record=-2)


def test_url_template_requires_token() -> None:
    with pytest.raises(ValidationError) as excinfo:
        SeedConfig(image_url_template="https://example.com/static.png")
    assert "{token}" in str(excinfo.value)


def test_unknown_target_rejected() -> None:
    with pytest.raises(ValidationError):
        SeedConfig(target="comment")  # type: ignore[arg-type]


def test_vault_settings_source_injects_secrets() -> None:
    """Storage secrets are hydrated from the vault source (environment backed)."""
    with patch.dict("os.environ", {"S3_ACCESS_KEY": "access", "S3_SECRET_KEY": "secret"}, clear=True):
        config = SeedConfig()
    assert config.s3_access_key == "access"
    assert config.s3_secret_key == "secret"


def test_vault_settings_source_ignores_missing() -> None:
    with patch.dict("os.environ", {}, clear=True):
        config = SeedConfig()
    assert config.s3_access_key is None
    assert config.s3_secret_key is None


def test_env_settings_take_precedence_over_vault(mock_vault_integrator: Any) -> None:
    mock_vault_integrator.return_value.get_secret.return_value = "from-vault"
    with patch.dict("os.environ", {"COREASON_SEED_S3_ACCESS_KEY": "from-env"}, clear=True):
        config = SeedConfig()
    assert config.s3_access_key == "from-env"
    assert config.s3_secret_key == "from-vault"


@pytest.mark.parametrize(
    "template",
    [
        "https://example.com/{token}.png?size={size}",
        "https://example.com/{token}/{0}.png",
        "https://example.com/{token}/{.png",
    ],
)
def test_url_template_rejects_other_placeholders(template: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        SeedConfig(image_url_template=template)
    assert "may only use" in str(excinfo.value)


def test_url_template_escaped_token_rejected() -> None:
    with pytest.raises(ValidationError):
        SeedConfig(image_url_template="https://example.com/{{token}}.png")


def test_url_template_allows_escaped_braces() -> None:
    config = SeedConfig(image_url_template="https://example.com/{token}.png?q={{x}}")
    assert config.image_url_template.format(token="ab") == "https://example.com/ab.png?q={x}"
