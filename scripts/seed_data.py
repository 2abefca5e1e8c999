#!/usr/bin/env python3
"""
Database Seed Script

Populates the Locations table with sample data for development.

USAGE:
    # From the project root with venv activated
    python scripts/seed_data.py

    # Keep existing rows
    python scripts/seed_data.py --no-clear

This script:
1. Connects to the database using app settings
2. Creates the tables if they don't exist
3. Clears existing locations (unless --no-clear)
4. Inserts sample locations
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.database import SessionLocal, create_tables
from app.models import Location

SAMPLE_LOCATIONS = [
    {"name": "Denver", "code": "DEN", "active": True},
    {"name": "Boston", "code": "BOS", "active": True},
    {"name": "Austin", "code": "AUS", "active": False},
    {"name": "Seattle", "code": "SEA", "active": True},
    {"name": "Chicago", "code": "CHI", "active": True},
    {"name": "Chicago Midway", "code": "CHI", "active": False},
]


def clear_data(db: Session) -> None:
    """Delete all existing locations."""
    print("Clearing existing locations...")
    db.execute(delete(Location))
    db.commit()
    print("Data cleared.")


def create_locations(db: Session) -> list[Location]:
    """Insert the sample locations."""
    print("Creating locations...")
    locations = [Location(**data) for data in SAMPLE_LOCATIONS]
    db.add_all(locations)
    db.commit()
    print(f"Created {len(locations)} locations.")
    return locations


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the Locations table")
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Keep existing rows instead of clearing the table first",
    )
    args = parser.parse_args()

    create_tables()

    db = SessionLocal()
    try:
        if not args.no_clear:
            clear_data(db)
        create_locations(db)
    finally:
        db.close()

    print("Seeding complete.")


if __name__ == "__main__":
    main()
