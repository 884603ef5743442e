from typing import Any
from unittest.mock import MagicMock, patch

from coreason_seed.integrations.vault import VaultClientProtocol, VaultIntegrator


def test_reads_secret_from_environment() -> None:
    with patch.dict("os.environ", {"S3_ACCESS_KEY": "abc"}, clear=True):
        assert VaultIntegrator().get_secret("S3_ACCESS_KEY") == "abc"


def test_falls_back_to_prefixed_environment() -> None:
    with patch.dict("os.environ", {"COREASON_SEED_S3_SECRET_KEY": "xyz"}, clear=True):
        assert VaultIntegrator().get_secret("S3_SECRET_KEY") == "xyz"


def test_missing_secret_returns_none() -> None:
    with patch.dict("os.environ", {}, clear=True):
        assert VaultIntegrator().get_secret("S3_ACCESS_KEY") is None


def test_injected_client_is_used() -> None:
    client = MagicMock()
    client.get_secret.return_value = "vaulted"
    integrator = VaultIntegrator(client=client)

    with patch.dict("os.environ", {"S3_ACCESS_KEY": "env"}, clear=True):
        assert integrator.get_secret("S3_ACCESS_KEY") == "vaulted"
    client.get_secret.assert_called_once_with("S3_ACCESS_KEY")


def test_client_failure_returns_none() -> None:
    client: Any = MagicMock()
    client.get_secret.side_effect = RuntimeError("vault sealed")
    assert VaultIntegrator(client=client).get_secret("S3_ACCESS_KEY") is None


def test_protocol_is_runtime_checkable() -> None:
    class Client:
        def get_secret(self, key: str) -> str | None:
            return None

    assert isinstance(Client(), VaultClientProtocol)
