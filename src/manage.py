"""LoveCakes storefront management CLI.

Creates and drops the database schema, and loads a demo catalogue.

Usage:
    python src/manage.py setup-db              # Create all tables
    python src/manage.py drop-db               # Drop all tables
    python src/manage.py seed --account-id 1   # Load the demo catalogue
"""

import argparse
import sys


def setup_database():
    """Create the storefront database schema."""
    from storefront.domain import storefront
    from storefront.utils.db import setup_db

    print("Initializing storefront domain...")
    storefront.init()
    print("Creating storefront database schema...")
    setup_db(storefront)
    print("Done.")


def drop_database():
    """Drop the storefront database schema."""
    from storefront.domain import storefront
    from storefront.utils.db import drop_db

    print("Initializing storefront domain...")
    storefront.init()
    print("Dropping storefront database schema...")
    drop_db(storefront)
    print("Done.")


def seed(account_id):
    """Load the demo catalogue into ``account_id``."""
    from storefront.domain import storefront
    from storefront.utils.seed import seed_catalogue

    storefront.init()
    with storefront.domain_context():
        product_ids = seed_catalogue(account_id)
    print(f"Seeded {len(product_ids)} products for account {account_id}.")


def main():
    parser = argparse.ArgumentParser(description="LoveCakes storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed", help="Load the demo catalogue")
    seed_parser.add_argument("--account-id", type=int, default=1, help="Account to seed (default: 1)")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed(args.account_id)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
