"""Seed the drug catalog database from a JSON file.

Usage: python -m drugcatalog.seed.run_seed [--file PATH] [--batch-size N]
"""
import argparse
import sys

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from drugcatalog.config import get_settings
from drugcatalog.database import create_db_engine, create_session_factory, verify_connection
from drugcatalog.exceptions import CatalogError
from drugcatalog.logging_config import setup_logging
from drugcatalog.models import Drug
from drugcatalog.seed.data import SEED_FILE, load_seed_file
from drugcatalog.services.drug_data import (
    DEFAULT_BATCH_SIZE, count_drugs, ensure_indexes, replace_all, sample_drug,
)


def seed_all(seed_file=None, batch_size: int = DEFAULT_BATCH_SIZE, settings=None) -> int:
    settings = settings or get_settings()
    engine = create_db_engine(settings)
    try:
        print("Connecting to database...")
        verify_connection(engine)
        print(f"Connected to {engine.dialect.name} database")

        records = load_seed_file(seed_file or settings.seed_file or SEED_FILE)
        print(f"Loaded {len(records)} drug records")

        ensure_indexes(engine)
        db = create_session_factory(engine)()
        try:
            def report(number, total):
                print(f"  Inserted batch {number}/{total}")

            count = replace_all(db, records, batch_size=batch_size, on_batch=report)
            print(f"Seeded {count} drug records")

            print("Database statistics:")
            print(f"  - Backend: {engine.dialect.name}")
            print(f"  - Table: {Drug.__tablename__}")
            print(f"  - Indexes: {len(inspect(engine).get_indexes(Drug.__tablename__))}")
            print(f"  - Total rows: {count_drugs(db)}")
            sample = sample_drug(db)
            if sample:
                print(f"  - Sample record: {sample.generic_name} ({sample.brand_name})")
        finally:
            db.close()

        print("Seeding complete!")
        return count
    finally:
        engine.dispose()


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed the drug catalog database")
    parser.add_argument("--file", help="Seed JSON file (defaults to the bundled data)")
    parser.add_argument("--batch-size", type=positive_int, default=DEFAULT_BATCH_SIZE)
    args = parser.parse_args(argv)

    setup_logging(get_settings().log_level)
    try:
        seed_all(seed_file=args.file, batch_size=args.batch_size)
    except (CatalogError, SQLAlchemyError, OSError, ValueError) as e:
        print(f"Error seeding database: {e}")
        cause = str(e.__cause__ or "")
        if "authentication" in cause.lower() or "password" in cause.lower():
            print("\nAuthentication error, check:")
            print("1. The username and password in DATABASE_URL")
            print("2. That this host is allowed to reach the database server")
            print("3. That the database user has read/write permissions")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
