# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

from typing import Literal

from pydantic import BaseModel, Field


class SeedResult(BaseModel):
    """
    Summary of a completed seeding run.
    """

    target: Literal["user", "post"] = Field(..., description="The record type that was seeded.")
    records_created: int = Field(..., description="Number of records persisted.")
    attachments_created: int = Field(..., description="Number of attachments persisted across all records.")
    record_ids: list[int] = Field(default_factory=list, description="Identities assigned at save time.")
    duration: float = Field(..., description="Total time in seconds taken by the run.")
