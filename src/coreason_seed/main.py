# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_seed

import argparse
from typing import Any

from coreason_seed.config import SeedConfig
from coreason_seed.seeder import Seeder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coreason-seed",
        description="Populate the database with records carrying placeholder images.",
    )
    parser.add_argument("--target", choices=["user", "post"], help="Record type to seed")
    parser.add_argument("--count", type=int, dest="record_count", help="Number of records to create")
    parser.add_argument(
        "--per-record", type=int, dest="attachments_per_record", help="Images attached to each record"
    )
    parser.add_argument("--database-url", dest="database_url", help="SQLAlchemy database URL")
    parser.add_argument(
        "--image-url", dest="image_url_template", help="Image URL template containing a {token} placeholder"
    )
    parser.add_argument("--storage", choices=["disk", "s3"], dest="storage_service", help="Attachment storage")
    parser.add_argument("--storage-root", dest="storage_root", help="Directory for disk storage")
    return parser


def build_config(argv: list[str] | None = None) -> SeedConfig:
    """Builds the run configuration. Flags override environment settings."""
    args = build_parser().parse_args(argv)
    overrides: dict[str, Any] = {key: value for key, value in vars(args).items() if value is not None}
    return SeedConfig(**overrides)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the seed command."""
    config = build_config(argv)
    with Seeder(config) as seeder:
        result = seeder.run()
    print(result.model_dump_json())


if __name__ == "__main__":  # pragma: no cover
    main()
