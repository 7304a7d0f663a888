"""Use case for deleting automation rules."""

import logging

from sqlalchemy.orm import Session

from orisai.infrastructure.repositories import AutomationRuleRepository
from .get_automation_rule import get_automation_rule

logger = logging.getLogger(__name__)


def delete_automation_rule(session: Session, rule_id: int, *, user_id: int) -> None:
    """Delete the specified rule if it belongs to ``user_id``."""

    get_automation_rule(session, rule_id, user_id=user_id)
    AutomationRuleRepository(session).delete(rule_id)
    logger.info("Deleted automation rule %s for user %s", rule_id, user_id)


__all__ = ["delete_automation_rule"]
