"""SQLAlchemy model for outreach emails."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.sql import expression

from orisai.infrastructure.database import Base


class EmailModel(Base):
    """Database representation of an outreach email and its review state."""

    __tablename__ = "emails"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    lead_id = Column(Integer, ForeignKey("leads.id"), nullable=False, index=True)
    subject = Column(String(500), nullable=False)
    body = Column(Text, nullable=False)
    html_body = Column(Text, nullable=True)
    tone = Column(String(32), nullable=True)
    status = Column(String(32), nullable=False, default="draft", server_default="draft")
    auto_approved = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    review_notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )


__all__ = ["EmailModel"]
