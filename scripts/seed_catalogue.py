#!/usr/bin/env python3
"""Seed a catalogue database from the movie list.

Usage:
    python scripts/seed_catalogue.py [CSV_PATH] [DB_PATH]

This script:
1. Parses the CSV movie list
2. Initializes the SQLite database and replaces the movies table
3. Prints the producer interval report for the seeded catalogue

Exit codes:
    0: Seeded successfully
    1: The movie list could not be loaded
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from razzies.aggregation.intervals import producer_intervals  # noqa: E402
from razzies.catalogue.bootstrap import load_catalogue_records  # noqa: E402
from razzies.catalogue.loader import CatalogueLoadError  # noqa: E402
from razzies.catalogue.store import CatalogueStore  # noqa: E402

# Constants
DEFAULT_CSV_PATH = PROJECT_ROOT / "data" / "movielist.csv"
DEFAULT_DB_PATH = PROJECT_ROOT / "data" / "razzies.db"


def main() -> int:
    csv_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_CSV_PATH
    db_path = Path(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_DB_PATH

    try:
        records = load_catalogue_records(csv_path, db_path)
    except CatalogueLoadError as e:
        print(f"FAIL: {e}")
        return 1

    catalogue = CatalogueStore(records)
    winners = catalogue.find_winner_movies()
    print(f"OK: Seeded {len(catalogue)} movies ({len(winners)} winners) into {db_path}")

    report = producer_intervals(catalogue)
    print(json.dumps(report.model_dump(by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
