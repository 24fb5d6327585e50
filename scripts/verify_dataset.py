#!/usr/bin/env python
"""
Load the configured datasets and report what the API would serve.

Checks:
1. Movie and credit counts
2. Credit index coverage (movies without credits, duplicate credit ids)
3. Release dates that do not parse
4. Crew role statistics over the whole catalog

Usage:
    python scripts/verify_dataset.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api.dependencies import create_catalog_service
from app.core.query import parse_release_date
from app.utils.logging_config import configure_script_logging


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def main():
    configure_script_logging()
    service = create_catalog_service()
    service.warm_up()
    movies, credits, index = service.movies, service.credits, service.index

    print_section("1. Dataset Statistics")
    print(f"  Movies:  {len(movies):,}")
    print(f"  Credits: {len(credits):,}")

    print_section("2. Credit Index Coverage")
    without = sum(1 for m in movies if m.id not in index)
    print(f"  Indexed movie ids:       {len(index):,}")
    print(f"  Movies without credits:  {without:,}")
    duplicates = index.duplicate_ids()
    print(f"  Ids with several credits: {len(duplicates):,}")
    if duplicates:
        print(f"    e.g. {', '.join(duplicates[:5])}")

    print_section("3. Release Dates")
    bad = [m for m in movies if parse_release_date(m.release_date) is None]
    print(f"  Unparseable release dates: {len(bad):,}")
    for movie in bad[:5]:
        print(f"    {movie.id}: {movie.title!r} -> {movie.release_date!r}")

    print_section("4. Crew Role Statistics")
    stats = service.aggregate_stats()
    for role, count in stats.counts.items():
        print(f"  {role.value:<11} {count:>8,}")
    print(f"  {'Total':<11} {stats.total_crew:>8,}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
