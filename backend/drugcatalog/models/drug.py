from sqlalchemy import Column, Integer, String, Date, DateTime, Index
from sqlalchemy.sql import func
from drugcatalog.database import Base


class Drug(Base):
    __tablename__ = "drugs"

    id = Column(Integer, primary_key=True, autoincrement=False)
    code = Column(String(50), nullable=False)
    generic_name = Column(String(500), nullable=False)
    brand_name = Column(String(300), nullable=False)
    company = Column(String(300))
    launch_date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("ix_drugs_company", "company"),
        Index("ix_drugs_launch_date", launch_date.desc()),
        Index("ix_drugs_code", "code", unique=True),
    )
