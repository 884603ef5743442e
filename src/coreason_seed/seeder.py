# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

import secrets
import time

import httpx
from sqlalchemy.orm import Session, sessionmaker

from coreason_seed.attachments import AttachmentManager
from coreason_seed.config import SeedConfig
from coreason_seed.db import get_model
from coreason_seed.factory import SeedFactory
from coreason_seed.fetcher import ImageFetcher
from coreason_seed.models import RemoteFile, SeedResult
from coreason_seed.storage import ObjectStorage
from coreason_seed.utils.logger import logger


class Seeder:
    """Populates the database with records carrying placeholder images.

    Runs strictly sequentially: for each record, fetch its images one by one,
    then save the record and its attachments in a single transaction. The
    first failure propagates; records committed before it are kept.
    """

    def __init__(
        self,
        config: SeedConfig | None = None,
        client: httpx.Client | None = None,
        session_factory: sessionmaker[Session] | None = None,
        storage: ObjectStorage | None = None,
    ):
        """Initializes the Seeder.

        Args:
            config: Configuration for the run. Defaults are read from the environment.
            client: Optional httpx.Client used for image fetches.
            session_factory: Optional session factory. Built from ``config.database_url`` if omitted.
            storage: Optional attachment storage. Built from ``config`` if omitted.
        """
        self.config = config or SeedConfig()
        self.model = get_model(self.config.target)
        self.association = next(iter(self.model.attachment_definitions))
        self.fetcher = ImageFetcher(
            client=client,
            timeout=self.config.request_timeout,
            follow_redirects=self.config.follow_redirects,
        )
        self.session_factory = session_factory or SeedFactory.get_session_factory(self.config)
        self.attachment_manager = AttachmentManager(storage or SeedFactory.get_storage(self.config))

    def __enter__(self) -> "Seeder":
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.fetcher.close()

    def image_url(self) -> str:
        """Returns the image URL with a fresh random token."""
        return self.config.image_url_template.format(token=secrets.token_hex(16))

    def generate_filename(self) -> str:
        return f"{secrets.token_hex(16)}{self.config.file_extension}"

    def fetch_images(self, count: int) -> list[RemoteFile]:
        return [
            self.fetcher.fetch(self.image_url(), self.generate_filename(), self.config.content_type)
            for _ in range(count)
        ]

    def seed_record(self) -> int:
        """Create one record with its images attached.

        Returns:
            int: The identity assigned to the saved record.
        """
        record = self.model()
        files = self.fetch_images(self.config.per_record)

        with self.session_factory() as session:
            try:
                with session.begin():
                    self.attachment_manager.save(session, record, {self.association: files})
            except Exception as e:
                logger.error(f"Failed to save {self.model.__name__}: {e}")
                raise

        return record.id

    def run(self, count: int | None = None) -> SeedResult:
        """Seed ``count`` records (defaults to ``config.record_count``).

        Returns:
            SeedResult: Summary of the records and attachments created.

        Raises:
            ValueError: If count is negative.
        """
        if count is None:
            count = self.config.record_count
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        per_record = self.config.per_record
        logger.info(
            f"Seeding {count} {self.config.target} record(s)",
            target=self.config.target,
            per_record=per_record,
        )

        start_time = time.time()
        record_ids: list[int] = []
        for index in range(count):
            record_id = self.seed_record()
            record_ids.append(record_id)
            logger.debug(f"Seeded {self.model.__name__} {record_id} ({index + 1}/{count})")
        duration = time.time() - start_time

        result = SeedResult(
            target=self.config.target,
            records_created=len(record_ids),
            attachments_created=len(record_ids) * per_record,
            record_ids=record_ids,
            duration=duration,
        )
        logger.info(
            f"Seeded {result.records_created} record(s) with {result.attachments_created} attachment(s) "
            f"in {duration:.2f}s"
        )
        return result
