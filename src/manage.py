"""Review service management CLI.

Creates and drops the review document store, and seeds it from a JSON data
file in the API's review format.

Usage:
    python src/manage.py setup-db                    # Create indices
    python src/manage.py drop-db                     # Drop indices
    python src/manage.py load-data reviews.json      # Seed reviews
"""

import argparse
import sys


def setup_database():
    """Create the document store for the reviews domain."""
    from reviews.domain import reviews
    from reviews.utils.db import setup_db

    print("Initializing reviews domain...")
    reviews.init()
    print("Creating reviews document store...")
    setup_db(reviews)
    print("Done.")


def drop_database():
    """Drop the document store for the reviews domain."""
    from reviews.domain import reviews
    from reviews.utils.db import drop_db

    print("Initializing reviews domain...")
    reviews.init()
    print("Dropping reviews document store...")
    drop_db(reviews)
    print("Done.")


def load_data(path):
    """Seed reviews from a JSON file, keeping ids, versions and dates."""
    from reviews.domain import reviews
    from reviews.review.seed import load_reviews

    print("Initializing reviews domain...")
    reviews.init()
    with reviews.domain_context():
        loaded = load_reviews(path)
    print(f"Loaded {len(loaded)} review(s) from {path}.")
    return loaded


def main(argv=None):
    parser = argparse.ArgumentParser(description="Review service management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create the review document store")
    subparsers.add_parser("drop-db", help="Drop the review document store")

    load_parser = subparsers.add_parser("load-data", help="Seed reviews from a JSON file")
    load_parser.add_argument("path", help="Path to a JSON array of reviews")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "load-data":
        load_data(args.path)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
