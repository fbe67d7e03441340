#!/usr/bin/env python3
"""
Rewrite stored image URLs that still point at an old host.

Uploads return absolute URLs, so documents created against a local server
keep ``http://localhost:4000/uploads/...`` after the API moves. This script
swaps the host prefix on the ``image`` field of meals and users.

Usage:
    python scripts/migrate_image_host.py --old http://localhost:4000 --new https://api.example.edu
    python scripts/migrate_image_host.py --dry-run
"""

import os
import re
import sys
import logging
import argparse
from pathlib import Path
from typing import Dict, Iterable

sys.path.insert(0, str(Path(__file__).parent.parent))

from adapters import mongo_adapter  # noqa: E402
from app.config import settings  # noqa: E402

logger = logging.getLogger("dormdash.migrate_images")

COLLECTIONS = (mongo_adapter.MEALS_COLLECTION, mongo_adapter.USERS_COLLECTION)


def replace_image_host(
    db,
    old_host: str,
    new_host: str,
    collections: Iterable[str] = COLLECTIONS,
    dry_run: bool = False,
) -> Dict[str, int]:
    """
    Replace the ``old_host`` prefix of ``image`` URLs with ``new_host``.

    Returns:
        Mapping of collection name to number of documents updated (or that
        would be updated in dry-run mode)
    """
    query = {"image": {"$regex": f"^{re.escape(old_host)}"}}
    counts: Dict[str, int] = {}

    for name in collections:
        collection = db[name]
        docs = list(collection.find(query))
        logger.info(f"Found {len(docs)} docs in {name} with {old_host}")

        for doc in docs:
            old = doc["image"]
            updated = new_host + old[len(old_host):]
            if not dry_run:
                collection.update_one({"_id": doc["_id"]}, {"$set": {"image": updated}})
            logger.info(f"{'Would update' if dry_run else 'Updated'} {name} {doc['_id']}: {old} -> {updated}")
        counts[name] = len(docs)

    return counts


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Rewrite image URLs to a new host")
    parser.add_argument(
        "--old", default=os.getenv("OLD_IMAGE_HOST", "http://localhost:4000"),
        help="Host prefix to replace",
    )
    parser.add_argument(
        "--new", default=os.getenv("NEW_IMAGE_HOST", settings.public_base_url),
        help="Replacement host prefix (defaults to PUBLIC_BASE_URL)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Only report changes")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    if not args.new:
        logger.error("No new host given: pass --new or set NEW_IMAGE_HOST / PUBLIC_BASE_URL")
        sys.exit(1)

    db = mongo_adapter.connect(
        settings.mongo_uri,
        settings.mongo_db_name,
        settings.mongo_server_selection_timeout_ms,
    )
    try:
        counts = replace_image_host(db, args.old.rstrip("/"), args.new.rstrip("/"), dry_run=args.dry_run)
        logger.info(f"Migration complete: {counts}")
    finally:
        mongo_adapter.close()
