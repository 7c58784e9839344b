"""Pydantic schemas for the API envelopes and the seed file."""
from pydantic import BaseModel
from typing import Optional


class DrugDisplayResponse(BaseModel):
    id: int
    code: str
    name: str
    company: Optional[str] = None
    launchDate: str


class DrugListResponse(BaseModel):
    success: bool = True
    data: list[DrugDisplayResponse]
    count: int


class CompanyListResponse(BaseModel):
    success: bool = True
    data: list[str]
    count: int


class SeedResponse(BaseModel):
    success: bool = True
    message: str
    count: int


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: Optional[str] = None


# One entry of the bundled seed file
class DrugSeedRecord(BaseModel):
    code: str
    genericName: str
    brandName: str
    company: Optional[str] = None
    launchDate: str
