"""Column types shared by the ORM models."""

from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

json_type = JSON().with_variant(JSONB(), "postgresql")

__all__ = ["json_type"]
