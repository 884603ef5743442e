# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

from pydantic import BaseModel


class RemoteFile(BaseModel):
    """A fetched file ready to be attached to a record.

    Attributes:
        filename: The generated filename stored with the attachment.
        content_type: The declared MIME type of the content.
        data: The raw bytes of the file.
        source_url: The URL the bytes were fetched from.
    """

    filename: str
    content_type: str
    data: bytes
    source_url: str | None = None

    @property
    def byte_size(self) -> int:
        return len(self.data)
