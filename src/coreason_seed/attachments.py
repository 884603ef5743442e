# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

import base64
import hashlib
import secrets
import string
from collections.abc import Mapping, Sequence

from sqlalchemy import event, select
from sqlalchemy.orm import Session

from coreason_seed.db.models import Attachment, Blob, Record
from coreason_seed.models import RemoteFile
from coreason_seed.storage import ObjectStorage
from coreason_seed.utils.logger import logger

_KEY_ALPHABET = string.digits + string.ascii_lowercase

# Session.info slot holding (storage, key) pairs to delete once the transaction commits.
_PENDING_PURGE = "coreason_seed.pending_purge"


def generate_key(length: int = 28) -> str:
    """Returns a random lowercase base36 storage key."""
    return "".join(secrets.choice(_KEY_ALPHABET) for _ in range(length))


def compute_checksum(data: bytes) -> str:
    """Returns the base64-encoded MD5 digest of ``data``."""
    return base64.b64encode(hashlib.md5(data).digest()).decode("ascii")


def _delete_quietly(storage: ObjectStorage, key: str) -> None:
    try:
        storage.delete(key)
    except Exception as e:
        logger.error(f"Failed to delete stored object {key}: {e}")


def _purge_committed(session: Session) -> None:
    for storage, key in session.info.pop(_PENDING_PURGE, []):
        _delete_quietly(storage, key)


def _discard_pending(session: Session) -> None:
    session.info.pop(_PENDING_PURGE, None)


class AttachmentManager:
    """Persists records together with their attached files.

    Each attached file becomes a Blob row (metadata), an Attachment row
    (linking the blob to the record under an association name) and an
    object in storage (the bytes).
    """

    def __init__(self, storage: ObjectStorage):
        """Initializes the AttachmentManager.

        Args:
            storage: Backend that receives the attachment bytes.
        """
        self.storage = storage

    def save(
        self,
        session: Session,
        record: Record,
        attachments: Mapping[str, Sequence[RemoteFile]] | None = None,
    ) -> list[Attachment]:
        """Save a record and attach files to it.

        The record is flushed first so it has an identity, then each file is
        recorded and uploaded. Committing is left to the caller's transaction.
        For a singular association, any attachment the record already holds
        under that name is replaced.

        Args:
            session: The active SQLAlchemy session.
            record: The record to persist.
            attachments: Files to attach, keyed by association name.

        Returns:
            list[Attachment]: The attachments created, in attach order.

        Raises:
            ValueError: If an association name is unknown for the record type,
                or a singular association is given more than one file.
        """
        attachments = attachments or {}
        definitions: dict[str, str] = type(record).attachment_definitions
        record_type = type(record).__name__

        for name, files in attachments.items():
            kind = definitions.get(name)
            if kind is None:
                raise ValueError(f"{record_type} has no attachment named '{name}'")
            if kind == "one" and len(files) > 1:
                raise ValueError(f"{record_type}.{name} holds a single attachment, got {len(files)}")

        session.add(record)
        session.flush()

        created: list[Attachment] = []
        try:
            for name, files in attachments.items():
                if definitions[name] == "one" and files:
                    self.purge(session, record, name)
                for remote_file in files:
                    created.append(self._attach(session, record, name, remote_file))
        except BaseException:
            # The caller's transaction rolls back; drop the bytes already uploaded for it.
            for attachment in created:
                _delete_quietly(self.storage, attachment.blob.key)
            raise

        logger.debug(f"Saved {record_type} {record.id} with {len(created)} attachment(s)")
        return created

    def _attach(self, session: Session, record: Record, name: str, remote_file: RemoteFile) -> Attachment:
        blob = Blob(
            key=generate_key(),
            filename=remote_file.filename,
            content_type=remote_file.content_type,
            byte_size=remote_file.byte_size,
            checksum=compute_checksum(remote_file.data),
            service_name=self.storage.service_name,
        )
        attachment = Attachment(
            name=name,
            record_type=type(record).__name__,
            record_id=record.id,
            blob=blob,
        )
        session.add(attachment)
        session.flush()

        try:
            self.storage.upload(blob.key, remote_file.data, blob.content_type)
        except BaseException:
            # A failed upload may leave a partial object behind.
            _delete_quietly(self.storage, blob.key)
            raise
        return attachment

    def attachments_for(self, session: Session, record: Record, name: str) -> list[Attachment]:
        """Returns the record's attachments under ``name``, oldest first."""
        stmt = (
            select(Attachment)
            .where(
                Attachment.record_type == type(record).__name__,
                Attachment.record_id == record.id,
                Attachment.name == name,
            )
            .order_by(Attachment.id)
        )
        return list(session.scalars(stmt))

    def purge(self, session: Session, record: Record, name: str) -> int:
        """Deletes the record's attachments under ``name`` with their blobs.

        The stored bytes are removed only after the session's transaction
        commits; a rollback keeps them, along with the restored rows.

        Returns:
            int: The number of attachments removed.
        """
        existing = self.attachments_for(session, record, name)
        for attachment in existing:
            self._schedule_delete(session, attachment.blob.key)
            session.delete(attachment)
            session.delete(attachment.blob)
        if existing:
            session.flush()
        return len(existing)

    def _schedule_delete(self, session: Session, key: str) -> None:
        if not event.contains(session, "after_commit", _purge_committed):
            event.listen(session, "after_commit", _purge_committed)
            event.listen(session, "after_rollback", _discard_pending)
        session.info.setdefault(_PENDING_PURGE, []).append((self.storage, key))

    def read(self, blob: Blob) -> bytes:
        """Returns the stored bytes for ``blob``."""
        return self.storage.download(blob.key)
