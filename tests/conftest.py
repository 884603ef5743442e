from pathlib import Path
from typing import Any, Callable, Generator
from unittest.mock import patch

import httpx
import pytest
from sqlalchemy.orm import Session, sessionmaker

from coreason_seed.config import SeedConfig
from coreason_seed.db import create_engine_from_config, init_db, make_session_factory
from coreason_seed.storage import DiskStorage

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture
def requested_urls() -> list[str]:
    return []


@pytest.fixture
def image_handler(requested_urls: list[str]) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        requested_urls.append(str(request.url))
        return httpx.Response(200, content=PNG_BYTES, headers={"Content-Type": "image/png"})

    return handler


@pytest.fixture
def http_client(image_handler: Callable[[httpx.Request], httpx.Response]) -> Generator[httpx.Client, None, None]:
    client = httpx.Client(transport=httpx.MockTransport(image_handler))
    yield client
    client.close()


@pytest.fixture
def seed_config(tmp_path: Path) -> SeedConfig:
    return SeedConfig(
        database_url=f"sqlite:///{tmp_path / 'seed.db'}",
        storage_root=str(tmp_path / "storage"),
        record_count=3,
    )


@pytest.fixture
def session_factory(seed_config: SeedConfig) -> sessionmaker[Session]:
    engine = create_engine_from_config(seed_config)
    init_db(engine)
    return make_session_factory(engine)


@pytest.fixture
def disk_storage(tmp_path: Path) -> DiskStorage:
    return DiskStorage(root=tmp_path / "storage")


@pytest.fixture
def mock_vault_integrator() -> Generator[Any, None, None]:
    with patch("coreason_seed.config.VaultIntegrator") as mock:
        yield mock
