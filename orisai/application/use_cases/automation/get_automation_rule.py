"""Use case for retrieving a single automation rule."""

from sqlalchemy.orm import Session

from orisai.domain.entities import AutomationRule
from orisai.infrastructure.repositories import AutomationRuleRepository

RULE_NOT_FOUND = "Automation rule not found"


def get_automation_rule(session: Session, rule_id: int, *, user_id: int) -> AutomationRule:
    """Return the rule identified by ``rule_id`` if it belongs to ``user_id``."""

    rule = AutomationRuleRepository(session).get(rule_id)
    if rule is None or rule.user_id != user_id:
        raise ValueError(RULE_NOT_FOUND)
    return rule


__all__ = ["RULE_NOT_FOUND", "get_automation_rule"]
