"""Persistence layer for leads."""

from __future__ import annotations

from sqlalchemy.orm import Session

from orisai.domain.entities import Lead
from orisai.infrastructure.models import LeadModel


class LeadRepository:
    """Read and store leads imported by users."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, lead_id: int) -> Lead | None:
        model = self.session.get(LeadModel, lead_id)
        return self._to_entity(model) if model else None

    def create(self, lead: Lead) -> Lead:
        model = LeadModel(
            user_id=lead.user_id,
            first_name=lead.first_name,
            last_name=lead.last_name,
            email=lead.email,
            title=lead.title,
            seniority=lead.seniority,
            departments=list(lead.departments) if lead.departments is not None else None,
            company_name=lead.company_name,
            company_industry=lead.company_industry,
            company_size=lead.company_size,
            fit_score=lead.fit_score,
            status=lead.status,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: LeadModel) -> Lead:
        departments = model.departments if isinstance(model.departments, list) else None
        return Lead(
            id=model.id,
            user_id=model.user_id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            title=model.title,
            seniority=model.seniority,
            departments=departments,
            company_name=model.company_name,
            company_industry=model.company_industry,
            company_size=model.company_size,
            fit_score=model.fit_score,
            status=model.status,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["LeadRepository"]
