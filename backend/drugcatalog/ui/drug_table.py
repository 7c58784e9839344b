"""
Drug table controller.

Holds the state behind the filterable drug table and talks to the catalog
API. Rendering lives in ``streamlit_app``; this module has no UI imports so
the state transitions can be driven directly.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from urllib.parse import quote

import httpx

from drugcatalog.exceptions import CatalogClientError
from drugcatalog.schemas.filters import ALL_COMPANIES

logger = logging.getLogger(__name__)

COMPANIES_ERROR = "Failed to load companies"
DRUGS_ERROR = "Failed to load drug data"

# Characters encodeURIComponent leaves alone on top of quote()'s defaults
URI_COMPONENT_SAFE = "!*'()"


class TableState(str, Enum):
    INITIAL_LOADING = "initial-loading"
    LOADED = "loaded"
    ERROR = "error"
    FILTER_LOADING = "filter-loading"


def drugs_path(company: str = ALL_COMPANIES) -> str:
    """API path for the drug list; the company is encoded like encodeURIComponent."""
    if company == ALL_COMPANIES:
        return "/api/drugs"
    return f"/api/drugs?company={quote(company, safe=URI_COMPONENT_SAFE)}"


class CatalogClient:
    """Async client for the two read endpoints of the catalog API."""

    def __init__(self, base_url: str, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def _get_data(self, path: str):
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(path)
            result = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise CatalogClientError(f"Request to {path} failed: {e}") from e

        if not isinstance(result, dict) or not result.get("success"):
            error = result.get("error") if isinstance(result, dict) else None
            raise CatalogClientError(error or f"Request to {path} failed")
        return result.get("data", [])

    async def get_companies(self) -> list[str]:
        return await self._get_data("/api/companies")

    async def get_drugs(self, company: str = ALL_COMPANIES) -> list[dict]:
        return await self._get_data(drugs_path(company))


@dataclass
class DrugTable:
    """State of the drug table plus the transitions that change it.

    Every drug fetch gets a sequence number and only the newest one may
    update the rows, so a slow response for an old filter is dropped.
    """

    client: CatalogClient
    drugs: list[dict] = field(default_factory=list)
    companies: list[str] = field(default_factory=list)
    selected_company: str = ALL_COMPANIES
    loading: bool = True
    companies_error: Optional[str] = None
    drugs_error: Optional[str] = None
    loaded_once: bool = False
    _latest_request: int = field(default=0, init=False, repr=False)

    @property
    def error(self) -> Optional[str]:
        # A failed drug load clears on the next filter change, a failed company load does not
        return self.drugs_error or self.companies_error

    @property
    def state(self) -> TableState:
        if self.error:
            return TableState.ERROR
        if self.loading:
            return TableState.FILTER_LOADING if self.loaded_once else TableState.INITIAL_LOADING
        return TableState.LOADED

    async def mount(self) -> None:
        await asyncio.gather(self.fetch_companies(), self.fetch_drugs())

    async def select_company(self, company: str) -> None:
        self.selected_company = company
        await self.fetch_drugs()

    async def fetch_companies(self) -> None:
        try:
            self.companies = await self.client.get_companies()
        except CatalogClientError as e:
            logger.error("Error fetching companies: %s", e)
            self.companies_error = COMPANIES_ERROR

    async def fetch_drugs(self) -> None:
        self._latest_request += 1
        request_id = self._latest_request
        company = self.selected_company
        self.loading = True
        self.drugs_error = None

        try:
            drugs = await self.client.get_drugs(company)
        except CatalogClientError as e:
            if request_id != self._latest_request:
                return
            logger.error("Error fetching drugs: %s", e)
            self.drugs_error = DRUGS_ERROR
        else:
            if request_id != self._latest_request:
                logger.debug("Discarding stale drug response for %r", company)
                return
            self.drugs = drugs
            self.loaded_once = True
        self.loading = False

    def status_line(self) -> str:
        count = len(self.drugs)
        line = f"Showing {count} drug{'' if count == 1 else 's'}"
        if self.selected_company != ALL_COMPANIES:
            line += f" from {self.selected_company}"
        return line
