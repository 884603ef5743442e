# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

import httpx

from coreason_seed.models import RemoteFile
from coreason_seed.utils.logger import logger


class ImageFetcher:
    """Fetches placeholder images over HTTP, one blocking request at a time."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
        follow_redirects: bool = True,
    ):
        """Initializes the ImageFetcher.

        Args:
            client: Optional httpx.Client to reuse. Its own timeout and redirect
                settings apply; the remaining arguments are ignored.
            timeout: Request timeout in seconds for an internally created client.
            follow_redirects: Whether an internally created client follows redirects.
        """
        self._internal_client = client is None
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=follow_redirects)

    def __enter__(self) -> "ImageFetcher":
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()

    def close(self) -> None:
        """Closes the HTTP client if this fetcher created it."""
        if self._internal_client:
            self._client.close()

    def fetch(self, url: str, filename: str, content_type: str) -> RemoteFile:
        """Downloads ``url`` and wraps the body as an attachable file.

        The declared content type is recorded as given; the response's own
        Content-Type header is not consulted.

        Args:
            url: The image URL to GET.
            filename: The filename to store with the attachment.
            content_type: The MIME type to declare for the attachment.

        Returns:
            RemoteFile: The response body with its filename and content type.

        Raises:
            httpx.HTTPStatusError: If the response status is not 2xx.
            httpx.HTTPError: If the request fails at the transport level.
        """
        logger.debug(f"GET {url}")
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise

        return RemoteFile(
            filename=filename,
            content_type=content_type,
            data=response.content,
            source_url=url,
        )
