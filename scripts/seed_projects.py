#!/usr/bin/env python3
"""
Seed the projects document with the sample records.

Usage:
  python scripts/seed_projects.py [--data-file data/projects.json] [--reset]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from transport_api.core.config import get_settings
from transport_api.core.logging import configure_logging
from transport_api.repositories.json_storage import ProjectStorage
from transport_api.services.project_service import ProjectService


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Seed sample transport projects")
    ap.add_argument("--data-file", help=f"JSON document (default: {settings.data_file})")
    ap.add_argument("--reset", action="store_true", help="Clear existing projects before seeding")
    args = ap.parse_args()

    configure_logging(settings.log_level)
    path = Path(args.data_file) if args.data_file else settings.data_file
    service = ProjectService(ProjectStorage(path))
    service.storage.ensure_directory()
    if args.reset:
        service.reset()
    seeded = service.seed_sample_data()
    if seeded:
        print(f"OK: {seeded} projects written to {path}")
    else:
        total = len(service.list_projects())
        print(f"Nothing to do: {path} already holds {total} projects")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
