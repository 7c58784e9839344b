"""Drug list API endpoint."""
import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from drugcatalog.database import get_db
from drugcatalog.schemas.filters import CompanyFilter
from drugcatalog.schemas.responses import DrugListResponse, ErrorResponse
from drugcatalog.services.drug_data import list_drugs, to_display

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["drugs"])


@router.get(
    "/drugs",
    response_model=DrugListResponse,
    responses={500: {"model": ErrorResponse}},
)
def get_drugs(
    company: str | None = Query(None),
    db: Session = Depends(get_db),
):
    """
    Drugs ordered by launch date, newest first.
    ``company`` restricts the list to one manufacturer; omit it or pass
    "all" for every drug.
    """
    company_filter = CompanyFilter.parse(company)
    try:
        items = [to_display(drug) for drug in list_drugs(db, company_filter)]
    except Exception as e:
        logger.exception("API error while fetching drugs")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Failed to fetch drug data", message=str(e)).model_dump(),
        )

    return DrugListResponse(data=items, count=len(items))
