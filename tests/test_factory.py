from pathlib import Path
from unittest.mock import patch

import pytest
from sqlalchemy import inspect

from coreason_seed.config import SeedConfig
from coreason_seed.factory import SeedFactory
from coreason_seed.storage import DiskStorage


def test_factory_returns_disk_storage(tmp_path: Path) -> None:
    config = SeedConfig(storage_service="disk", storage_root=str(tmp_path / "files"))
    storage = SeedFactory.get_storage(config)
    assert isinstance(storage, DiskStorage)
    assert storage.root == tmp_path / "files"


def test_factory_wires_s3_storage() -> None:
    config = SeedConfig(
        storage_service="s3",
        s3_bucket="my-bucket",
        s3_region="us-east-1",
    )
    with patch("coreason_seed.factory.S3Storage") as MockS3:
        storage = SeedFactory.get_storage(config)

    MockS3.assert_called_with(
        bucket="my-bucket",
        region="us-east-1",
        access_key=config.s3_access_key,
        secret_key=config.s3_secret_key,
        endpoint_url=None,
    )
    assert storage == MockS3.return_value


def test_factory_s3_requires_bucket() -> None:
    config = SeedConfig(storage_service="s3")
    with pytest.raises(ValueError, match="s3_bucket"):
        SeedFactory.get_storage(config)


def test_factory_session_factory_creates_schema(tmp_path: Path) -> None:
    config = SeedConfig(database_url=f"sqlite:///{tmp_path / 'factory.db'}")
    session_factory = SeedFactory.get_session_factory(config)

    with session_factory() as session:
        tables = set(inspect(session.get_bind()).get_table_names())
    assert {"users", "posts", "storage_blobs", "storage_attachments"} <= tables
