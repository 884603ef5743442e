# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

import os
from typing import Protocol, runtime_checkable

from coreason_seed.utils.logger import logger


@runtime_checkable
class VaultClientProtocol(Protocol):
    """
    Protocol for Vault Client to allow dependency injection and testing.
    """

    def get_secret(self, key: str) -> str | None:
        """
        Retrieve a secret by key.
        """
        ...


class VaultIntegrator:
    """
    Resolves storage credentials.

    Uses an injected vault client when one is given, otherwise reads the
    secret directly from environment variables.
    """

    def __init__(self, client: VaultClientProtocol | None = None):
        self.client = client

    def get_secret(self, key: str) -> str | None:
        """
        Fetch a secret from the vault client or the environment.
        Returns None if the secret cannot be found.
        """
        if self.client:
            try:
                return self.client.get_secret(key)
            except Exception as e:
                logger.warning(f"Failed to fetch secret {key} from Vault: {e}")
                return None

        val = os.getenv(key)
        if not val:
            # Try with prefix if standard naming convention is used
            val = os.getenv(f"COREASON_SEED_{key}")

        if not val:
            logger.debug(f"Secret {key} not found in environment.")

        return val
