"""SQLAlchemy model for lead automation rules."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func
from sqlalchemy.sql import expression

from orisai.infrastructure.database import Base

from ._types import json_type


class AutomationRuleModel(Base):
    """Database representation of a user's automation rule."""

    __tablename__ = "automation_rules"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    conditions = Column(json_type, nullable=True)
    action = Column(String(32), nullable=False)
    priority = Column(Integer, nullable=False, default=0, server_default="0")
    is_active = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    times_triggered = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )


__all__ = ["AutomationRuleModel"]
