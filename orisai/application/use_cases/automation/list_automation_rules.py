"""Use case for listing a user's automation rules."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from orisai.domain.entities import AutomationRule
from orisai.infrastructure.repositories import AutomationRuleRepository


def list_automation_rules(session: Session, *, user_id: int) -> Sequence[AutomationRule]:
    """Return every rule owned by ``user_id``, highest priority first."""

    return AutomationRuleRepository(session).list_by_user(user_id)


__all__ = ["list_automation_rules"]
