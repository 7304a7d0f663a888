"""Domain entity representing an imported contact."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Lead:
    """Contact record; only the targeting attributes are visible to rules."""

    id: int | None
    user_id: int
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    title: str | None = None
    seniority: str | None = None
    departments: list[str | None] | None = field(default=None)
    company_name: str | None = None
    company_industry: str | None = None
    company_size: str | None = None
    fit_score: int | None = None
    status: str = "new"
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


__all__ = ["Lead"]
