"""Drug catalog data access.

Query and transform functions shared by the API routers and the seed
script. Every function takes its session or engine from the caller.
"""
import logging
from datetime import date, datetime, timezone
from typing import Iterable, Optional

from sqlalchemy import delete, distinct, func, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from drugcatalog.database import Base
from drugcatalog.exceptions import QueryError
from drugcatalog.models import Drug
from drugcatalog.schemas.filters import CompanyFilter
from drugcatalog.schemas.responses import DrugDisplayResponse, DrugSeedRecord

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 100


def list_drugs(db: Session, company_filter: Optional[CompanyFilter] = None) -> list[Drug]:
    """Fetch drugs, newest launch first, optionally restricted to one company."""
    company_filter = company_filter or CompanyFilter.all()
    stmt = select(Drug).order_by(Drug.launch_date.desc(), Drug.id)
    if not company_filter.is_all:
        stmt = stmt.where(Drug.company == company_filter.company)

    try:
        return list(db.scalars(stmt).all())
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Database query error: %s", e)
        raise QueryError("Failed to fetch drugs from database") from e


def list_companies(db: Session) -> list[str]:
    """Distinct, non-null company names in ascending order."""
    stmt = select(distinct(Drug.company)).where(Drug.company.is_not(None))
    try:
        companies = db.scalars(stmt).all()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Database query error: %s", e)
        raise QueryError("Failed to fetch companies from database") from e
    # Sorted here so the order does not depend on the server collation
    return sorted(companies)


def format_launch_date(value: date) -> str:
    return f"{value.day:02d}.{value.month:02d}.{value.year:04d}"


def parse_launch_date(value: str) -> date:
    """Keep the date part of an ISO-8601 date or datetime string."""
    return date.fromisoformat(value.strip()[:10])


def to_display(drug: Drug) -> DrugDisplayResponse:
    return DrugDisplayResponse(
        id=drug.id,
        code=drug.code,
        name=f"{drug.generic_name} ({drug.brand_name})",
        company=drug.company,
        launchDate=format_launch_date(drug.launch_date),
    )


def ensure_indexes(engine: Engine) -> None:
    """Create the drugs table and its indexes when they are missing."""
    try:
        Base.metadata.create_all(bind=engine, tables=[Drug.__table__])
        for index in Drug.__table__.indexes:
            index.create(bind=engine, checkfirst=True)
    except SQLAlchemyError as e:
        logger.error("Error creating indexes: %s", e)
        raise QueryError("Failed to create database indexes") from e
    logger.info("Database indexes ensured")


def replace_all(
    db: Session,
    records: Iterable[DrugSeedRecord],
    batch_size: int = DEFAULT_BATCH_SIZE,
    on_batch=None,
) -> int:
    """Replace every stored drug with ``records``.

    The delete is committed before the inserts start, so a failure while
    inserting leaves the table empty. ``on_batch(number, total)`` is called
    after each inserted batch.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be a positive integer, got {batch_size}")

    now = datetime.now(timezone.utc)
    rows = [
        {
            "id": index + 1,
            "code": record.code,
            "generic_name": record.genericName,
            "brand_name": record.brandName,
            "company": record.company,
            "launch_date": parse_launch_date(record.launchDate),
            "created_at": now,
        }
        for index, record in enumerate(records)
    ]

    try:
        deleted = db.execute(delete(Drug)).rowcount
        db.commit()
        logger.info("Deleted %s existing drug records", deleted)

        total_batches = (len(rows) + batch_size - 1) // batch_size
        for number, start in enumerate(range(0, len(rows), batch_size), start=1):
            db.execute(insert(Drug), rows[start:start + batch_size])
            if on_batch:
                on_batch(number, total_batches)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error seeding database: %s", e)
        raise QueryError("Failed to seed database") from e

    logger.info("Seeded database with %s drug records", len(rows))
    return len(rows)


def count_drugs(db: Session) -> int:
    try:
        return db.scalar(select(func.count()).select_from(Drug)) or 0
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Database query error: %s", e)
        raise QueryError("Failed to count drugs") from e


def sample_drug(db: Session) -> Optional[Drug]:
    try:
        return db.scalars(select(Drug).order_by(Drug.id).limit(1)).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Database query error: %s", e)
        raise QueryError("Failed to fetch a sample drug") from e
