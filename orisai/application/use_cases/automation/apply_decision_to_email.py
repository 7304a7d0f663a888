"""Use case applying the automation decision to a freshly generated email."""

import logging

from sqlalchemy.orm import Session

from orisai.domain.automation import AutomationDecision
from orisai.domain.entities import EmailStatus
from orisai.infrastructure.repositories import EmailRepository, LeadRepository
from .evaluate_lead_for_user import evaluate_lead_for_user

logger = logging.getLogger(__name__)


def apply_decision_to_email(
    session: Session,
    email_id: int,
    user_id: int,
    lead_id: int,
) -> AutomationDecision | None:
    """Evaluate the lead behind ``email_id`` and store the outcome on the email.

    Returns ``None`` without touching the email when the lead does not exist.
    Storage errors are propagated to the caller.
    """

    lead = LeadRepository(session).get(lead_id)
    if lead is None:
        logger.warning(
            "Lead %s not found; leaving email %s without an automation decision",
            lead_id,
            email_id,
        )
        return None

    decision = evaluate_lead_for_user(session, user_id, lead)
    status = (
        EmailStatus.APPROVED if decision.should_auto_approve else EmailStatus.PENDING_REVIEW
    )
    EmailRepository(session).update_review_state(
        email_id,
        status=status.value,
        auto_approved=decision.should_auto_approve,
        review_notes=decision.reason,
    )
    return decision


__all__ = ["apply_decision_to_email"]
