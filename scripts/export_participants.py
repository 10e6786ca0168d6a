"""Export every participant record as one JSON document.

Uses the same configuration as the web app (STORAGE_BACKEND, DATABASE_URL,
MONGODB_URI, STORAGE_KEY).

Usage:
  python scripts/export_participants.py                 # default dated filename
  python scripts/export_participants.py --output -      # stdout
  python scripts/export_participants.py --output backup.json
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from party_draw import create_app
from party_draw.extensions import get_participant_service


logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export participant data to JSON")
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Target file, '-' for stdout (default: <storage-key>-<date>.json)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    app = create_app()
    with app.app_context():
        service = get_participant_service()
        document = service.export_document()
        target = args.output or service.export_filename()
        total = service.store.count()

    if target == "-":
        sys.stdout.write(document + "\n")
        return 0

    pathlib.Path(target).write_text(document, encoding="utf-8")
    logger.info("Exported %d participants to %s", total, target)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
