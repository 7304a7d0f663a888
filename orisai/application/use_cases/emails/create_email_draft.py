"""Use case storing a generated email and running the automation on it."""

import html
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from orisai.application.use_cases.automation import apply_decision_to_email
from orisai.domain.entities import Email, EmailStatus
from orisai.infrastructure.repositories import EmailRepository

logger = logging.getLogger(__name__)

AUTOMATION_FAILED_NOTE = "Automation evaluation failed"


def body_to_html(body: str) -> str:
    """Render a plain-text body as minimal HTML, one ``<br>`` per newline."""

    return html.escape(body).replace("\n", "<br>")


def create_email_draft(
    session: Session,
    *,
    user_id: int,
    lead_id: int,
    subject: str,
    body: str,
    html_body: str | None = None,
    tone: str | None = None,
    apply_automation: bool = True,
) -> Email:
    """Store a draft email for ``lead_id`` and decide whether it auto-sends.

    The automation step is advisory: if it fails on a storage error the
    email is parked in ``pending_review`` instead of failing the request.
    """

    repository = EmailRepository(session)
    draft = repository.create(
        Email(
            id=None,
            user_id=user_id,
            lead_id=lead_id,
            subject=subject,
            body=body,
            html_body=html_body if html_body is not None else body_to_html(body),
            tone=tone,
            status=EmailStatus.DRAFT.value,
            auto_approved=False,
            review_notes=None,
            created_at=None,
            updated_at=None,
        )
    )
    if not apply_automation:
        return draft

    try:
        apply_decision_to_email(session, draft.id, user_id, lead_id)
    except SQLAlchemyError:
        logger.warning(
            "Automation evaluation failed for email %s; defaulting to manual review",
            draft.id,
            exc_info=True,
        )
        session.rollback()
        repository.update_review_state(
            draft.id,
            status=EmailStatus.PENDING_REVIEW.value,
            auto_approved=False,
            review_notes=AUTOMATION_FAILED_NOTE,
        )

    return repository.get(draft.id) or draft


__all__ = ["AUTOMATION_FAILED_NOTE", "body_to_html", "create_email_draft"]
