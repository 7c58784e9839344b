"""Seed API endpoint.

Replaces the whole drug table with the bundled seed file. Refused when the
service runs with ENVIRONMENT=production.
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from drugcatalog.database import get_db
from drugcatalog.schemas.responses import ErrorResponse, SeedResponse
from drugcatalog.seed.data import load_seed_file
from drugcatalog.services.drug_data import ensure_indexes, replace_all

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["seed"])


@router.post(
    "/seed",
    response_model=SeedResponse,
    responses={403: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def seed_database(request: Request, db: Session = Depends(get_db)):
    settings = request.app.state.settings
    if settings.is_production:
        logger.warning("Seed request refused in production")
        return JSONResponse(
            status_code=403,
            content=ErrorResponse(error="Seeding not allowed in production").model_dump(exclude_none=True),
        )

    try:
        ensure_indexes(db.get_bind())
        records = load_seed_file(settings.seed_file or None)
        count = replace_all(db, records)
    except Exception as e:
        logger.exception("Seed API error")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Failed to seed database", message=str(e)).model_dump(),
        )

    return SeedResponse(message=f"Database seeded with {count} drug records", count=count)
