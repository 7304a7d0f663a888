"""Persistence layer for outreach emails."""

from __future__ import annotations

from sqlalchemy.orm import Session

from orisai.domain.entities import Email
from orisai.infrastructure.models import EmailModel


class EmailRepository:
    """Provide storage operations for outreach emails."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, email_id: int) -> Email | None:
        model = self.session.get(EmailModel, email_id)
        return self._to_entity(model) if model else None

    def create(self, email: Email) -> Email:
        model = EmailModel(
            user_id=email.user_id,
            lead_id=email.lead_id,
            subject=email.subject,
            body=email.body,
            html_body=email.html_body,
            tone=email.tone,
            status=email.status,
            auto_approved=email.auto_approved,
            review_notes=email.review_notes,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_review_state(
        self,
        email_id: int,
        *,
        status: str,
        auto_approved: bool,
        review_notes: str | None,
    ) -> Email:
        """Persist the review outcome of an email."""

        model = self.session.get(EmailModel, email_id)
        if not model:
            msg = f"Email with id {email_id} not found"
            raise ValueError(msg)
        model.status = status
        model.auto_approved = auto_approved
        model.review_notes = review_notes
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: EmailModel) -> Email:
        return Email(
            id=model.id,
            user_id=model.user_id,
            lead_id=model.lead_id,
            subject=model.subject,
            body=model.body,
            html_body=model.html_body,
            tone=model.tone,
            status=model.status,
            auto_approved=bool(model.auto_approved),
            review_notes=model.review_notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["EmailRepository"]
