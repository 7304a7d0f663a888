"""Domain entity representing a generated outreach email."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class EmailStatus(str, Enum):
    """Workflow states an outreach email moves through."""

    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    APPROVED = "approved"
    SCHEDULED = "scheduled"
    SENT = "sent"
    FAILED = "failed"
    BOUNCED = "bounced"


@dataclass
class Email:
    """Outreach email addressed to a single lead."""

    id: int | None
    user_id: int
    lead_id: int
    subject: str
    body: str
    html_body: str | None
    tone: str | None
    status: str
    auto_approved: bool
    review_notes: str | None
    created_at: datetime | None
    updated_at: datetime | None


__all__ = ["Email", "EmailStatus"]
