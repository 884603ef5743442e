# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

"""
Persistence for seeded records and their attachments (SQLAlchemy).
"""

from .models import Attachment, Base, Blob, Post, Record, User, get_model
from .session import create_engine_from_config, init_db, make_session_factory

__all__ = [
    "Attachment",
    "Base",
    "Blob",
    "Post",
    "Record",
    "User",
    "get_model",
    "create_engine_from_config",
    "init_db",
    "make_session_factory",
]
