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
coreason-seed
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .attachments import AttachmentManager
from .config import SeedConfig
from .factory import SeedFactory
from .fetcher import ImageFetcher
from .models import RemoteFile, SeedResult
from .seeder import Seeder
from .storage import DiskStorage, ObjectStorage, S3Storage

__all__ = [
    "AttachmentManager",
    "DiskStorage",
    "ImageFetcher",
    "ObjectStorage",
    "RemoteFile",
    "S3Storage",
    "SeedConfig",
    "SeedFactory",
    "SeedResult",
    "Seeder",
]
