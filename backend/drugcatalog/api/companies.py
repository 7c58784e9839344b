"""Company list API endpoint, feeds the UI filter dropdown."""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from drugcatalog.database import get_db
from drugcatalog.schemas.responses import CompanyListResponse, ErrorResponse
from drugcatalog.services.drug_data import list_companies

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["companies"])


@router.get(
    "/companies",
    response_model=CompanyListResponse,
    responses={500: {"model": ErrorResponse}},
)
def get_companies(db: Session = Depends(get_db)):
    try:
        companies = list_companies(db)
    except Exception as e:
        logger.exception("API error while fetching companies")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Failed to fetch companies", message=str(e)).model_dump(),
        )

    return CompanyListResponse(data=companies, count=len(companies))
