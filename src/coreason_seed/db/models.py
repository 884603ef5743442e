# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

from datetime import datetime
from typing import Union

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class User(Base):
    """Primary record for the ``user`` target. Owns a single avatar."""

    __tablename__ = "users"

    # Association name -> "one" (singular) or "many" (collection)
    attachment_definitions = {"avatar": "one"}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Post(Base):
    """Primary record for the ``post`` target. Owns a collection of images."""

    __tablename__ = "posts"

    attachment_definitions = {"images": "many"}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Blob(Base):
    """Metadata for a stored file. The bytes live in object storage under ``key``."""

    __tablename__ = "storage_blobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    content_type: Mapped[str] = mapped_column(String(100), nullable=False)
    byte_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    checksum: Mapped[str] = mapped_column(String(32), nullable=False)  # base64 MD5
    service_name: Mapped[str] = mapped_column(String(32), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Attachment(Base):
    """Joins a record (by type name and id) to a blob under an association name."""

    __tablename__ = "storage_attachments"
    __table_args__ = (Index("ix_storage_attachments_record", "record_type", "record_id", "name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    record_type: Mapped[str] = mapped_column(String(255), nullable=False)
    record_id: Mapped[int] = mapped_column(Integer, nullable=False)
    blob_id: Mapped[int] = mapped_column(ForeignKey("storage_blobs.id"), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    blob: Mapped[Blob] = relationship(lazy="joined")


Record = Union[User, Post]

MODELS: dict[str, type[Record]] = {
    "user": User,
    "post": Post,
}


def get_model(target: str) -> type[Record]:
    """Returns the ORM class seeded for ``target``.

    Raises:
        ValueError: If the target is unknown.
    """
    try:
        return MODELS[target]
    except KeyError:
        raise ValueError(f"Unknown seed target: {target}") from None
