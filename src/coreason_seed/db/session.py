# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from coreason_seed.config import SeedConfig
from coreason_seed.db.models import Base
from coreason_seed.utils.logger import logger


def create_engine_from_config(config: SeedConfig) -> Engine:
    return create_engine(config.database_url)


def init_db(engine: Engine) -> None:
    """Creates any missing tables. Existing tables are left untouched."""
    logger.debug(f"Ensuring schema on {engine.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(engine)


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    # Records are read back (ids, blob keys) after their transaction commits.
    return sessionmaker(bind=engine, expire_on_commit=False)
