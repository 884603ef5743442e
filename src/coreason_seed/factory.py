# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

from sqlalchemy.orm import Session, sessionmaker

from coreason_seed.config import SeedConfig
from coreason_seed.db import create_engine_from_config, init_db, make_session_factory
from coreason_seed.storage import DiskStorage, ObjectStorage, S3Storage


class SeedFactory:
    """
    Factory to create the storage and database wiring for a Seeder based on configuration.
    """

    @staticmethod
    def get_storage(config: SeedConfig) -> ObjectStorage:
        """
        Returns an instance of the configured ObjectStorage.
        """
        if config.storage_service == "disk":
            return DiskStorage(root=config.storage_root)
        elif config.storage_service == "s3":
            if not config.s3_bucket:
                raise ValueError("storage_service 's3' requires s3_bucket to be set")
            return S3Storage(
                bucket=config.s3_bucket,
                region=config.s3_region,
                access_key=config.s3_access_key,
                secret_key=config.s3_secret_key,
                endpoint_url=config.s3_endpoint_url,
            )
        else:
            # Unreachable due to Pydantic validation
            raise ValueError(f"Unknown storage service: {config.storage_service}")  # pragma: no cover

    @staticmethod
    def get_session_factory(config: SeedConfig) -> sessionmaker[Session]:
        """
        Returns a session factory bound to the configured database, creating missing tables.
        """
        engine = create_engine_from_config(config)
        init_db(engine)
        return make_session_factory(engine)
