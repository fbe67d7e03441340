#!/usr/bin/env python3
"""
Load the sample meals from data/sample_meals.json into MongoDB.
These are the listings the web client shows when the API is unreachable.

Usage:
    python scripts/seed_meals.py          # Interactive mode
    python scripts/seed_meals.py --auto   # Auto mode (skip if meals exist)
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from adapters import mongo_adapter  # noqa: E402
from app.config import settings  # noqa: E402
from domain.schemas.meal_schemas import MealCreate  # noqa: E402
from repositories.base import utcnow  # noqa: E402
from services.meal_service import MealService  # noqa: E402

logger = logging.getLogger("dormdash.seed")

SAMPLE_FILE = Path(__file__).parent.parent / "data" / "sample_meals.json"


def load_sample_meals(path: Path = SAMPLE_FILE) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def seed_meals(db, meals: List[Dict[str, Any]], replace: bool = False) -> int:
    """
    Insert meal payloads through the same normalisation as POST /api/meals.

    Args:
        db: MongoDB database
        meals: Raw meal payloads (camelCase, as the client posts them)
        replace: Drop existing meals first

    Returns:
        Number of inserted meals
    """
    collection = db[mongo_adapter.MEALS_COLLECTION]
    if replace:
        deleted = collection.delete_many({}).deleted_count
        logger.info(f"Removed {deleted} existing meals")

    now = utcnow()
    docs = [
        MealService.build_meal_document(MealCreate.model_validate(raw), now)
        for raw in meals
    ]
    if not docs:
        return 0
    result = collection.insert_many(docs)
    return len(result.inserted_ids)


def main(auto_mode: bool = False) -> bool:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    try:
        logger.info("Connecting to MongoDB...")
        db = mongo_adapter.connect(
            settings.mongo_uri,
            settings.mongo_db_name,
            settings.mongo_server_selection_timeout_ms,
        )
        mongo_adapter.ensure_indexes(db)

        meals = load_sample_meals()
        logger.info(f"Loaded {len(meals)} sample meals from {SAMPLE_FILE}")

        replace = False
        existing_count = db[mongo_adapter.MEALS_COLLECTION].count_documents({})
        if existing_count > 0:
            if auto_mode:
                logger.info(
                    f"MongoDB already contains {existing_count} meals (auto mode: skipping)"
                )
                return True
            response = input(
                f"{existing_count} meals already exist. (1) skip, (2) replace all, or (3) add? [1/2/3]: "
            )
            if response == "1":
                logger.info("Skipping meal import")
                return True
            replace = response == "2"

        inserted = seed_meals(db, meals, replace=replace)
        logger.info(f"Inserted {inserted} meals")
        return True

    except Exception:
        logger.exception("Failed to seed meals")
        return False
    finally:
        mongo_adapter.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed MongoDB with the sample meals")
    parser.add_argument(
        "--auto",
        action="store_true",
        help="Auto mode: skip if meals already exist (for container initialization)",
    )
    args = parser.parse_args()

    sys.exit(0 if main(auto_mode=args.auto) else 1)
