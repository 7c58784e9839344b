from dataclasses import dataclass
from typing import Optional

ALL_COMPANIES = "all"


@dataclass(frozen=True)
class CompanyFilter:
    """Either every company (``company is None``) or one exact company name."""

    company: Optional[str] = None

    @classmethod
    def all(cls) -> "CompanyFilter":
        return cls()

    @classmethod
    def by_company(cls, name: str) -> "CompanyFilter":
        return cls(company=name)

    @classmethod
    def parse(cls, raw: Optional[str]) -> "CompanyFilter":
        if not raw or raw == ALL_COMPANIES:
            return cls.all()
        return cls.by_company(raw)

    @property
    def is_all(self) -> bool:
        return self.company is None
