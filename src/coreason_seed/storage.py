# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

from pathlib import Path
from typing import Protocol

import boto3
from botocore.exceptions import ClientError

from coreason_seed.utils.logger import logger

_MISSING_CODES = {"404", "NoSuchKey", "NotFound"}


class ObjectStorage(Protocol):
    """Protocol for attachment storage backends (local disk, S3)."""

    service_name: str

    def upload(self, key: str, data: bytes, content_type: str) -> None:
        """Stores ``data`` under ``key``.

        Args:
            key: The destination object key.
            data: The raw bytes to store.
            content_type: The MIME type recorded with the object.
        """
        ...

    def download(self, key: str) -> bytes:
        """Returns the bytes stored under ``key``.

        Raises:
            FileNotFoundError: If no object exists for the key.
        """
        ...

    def delete(self, key: str) -> None:
        """Removes the object stored under ``key``. Missing keys are ignored."""
        ...

    def exists(self, key: str) -> bool: ...


class DiskStorage:
    """Local filesystem implementation of the ObjectStorage protocol.

    Objects are sharded into two levels of directories taken from the first
    four characters of the key, e.g. ``root/ab/cd/abcd...``.
    """

    service_name = "disk"

    def __init__(self, root: Path | str):
        """Initializes the DiskStorage backend.

        Args:
            root: Directory under which objects are stored. Created on first upload.
        """
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        if len(key) < 4 or not key.isalnum():
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.root / key[0:2] / key[2:4] / key

    def upload(self, key: str, data: bytes, content_type: str) -> None:
        path = self.path_for(key)
        logger.debug(f"Writing {len(data)} bytes ({content_type}) to {path}")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def download(self, key: str) -> bytes:
        path = self.path_for(key)
        if not path.is_file():
            raise FileNotFoundError(f"Object not found: {key}")
        return path.read_bytes()

    def delete(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)

    def exists(self, key: str) -> bool:
        return self.path_for(key).is_file()


class S3Storage:
    """S3 implementation of the ObjectStorage protocol."""

    service_name = "s3"

    def __init__(
        self,
        bucket: str,
        region: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        endpoint_url: str | None = None,
    ):
        """Initializes the S3Storage backend.

        Args:
            bucket: The S3 bucket name.
            region: Optional AWS region name.
            access_key: Optional AWS access key ID.
            secret_key: Optional AWS secret access key.
            endpoint_url: Optional endpoint URL for S3-compatible services (e.g., MinIO).
        """
        self.bucket = bucket
        self.client = boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            endpoint_url=endpoint_url,
        )

    def upload(self, key: str, data: bytes, content_type: str) -> None:
        """Uploads bytes to S3.

        Raises:
            ClientError: If the upload to S3 fails.
        """
        logger.info(f"Uploading {len(data)} bytes to s3://{self.bucket}/{key}")
        try:
            self.client.put_object(Bucket=self.bucket, Key=key, Body=data, ContentType=content_type)
        except ClientError as e:
            logger.error(f"Failed to upload object to S3: {e}")
            raise

    def download(self, key: str) -> bytes:
        """Downloads an object's bytes from S3.

        Raises:
            FileNotFoundError: If the object does not exist.
            ClientError: If the request fails for any other reason.
        """
        try:
            response = self.client.get_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _MISSING_CODES:
                raise FileNotFoundError(f"Object not found: s3://{self.bucket}/{key}") from e
            logger.error(f"Failed to download object from S3: {e}")
            raise
        data: bytes = response["Body"].read()
        return data

    def delete(self, key: str) -> None:
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            logger.error(f"Failed to delete object from S3: {e}")
            raise

    def exists(self, key: str) -> bool:
        try:
            self.client.head_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return False
            raise
        return True
