"""SQLAlchemy model for imported leads."""

from sqlalchemy import Column, DateTime, Integer, String, func

from orisai.infrastructure.database import Base

from ._types import json_type


class LeadModel(Base):
    """Database representation of a contact imported by a user."""

    __tablename__ = "leads"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    title = Column(String(255), nullable=True)
    seniority = Column(String(100), nullable=True)
    departments = Column(json_type, nullable=True)
    company_name = Column(String(255), nullable=True)
    company_industry = Column(String(255), nullable=True)
    company_size = Column(String(100), nullable=True)
    fit_score = Column(Integer, nullable=True)
    status = Column(String(50), nullable=False, default="new", server_default="new")
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )


__all__ = ["LeadModel"]
