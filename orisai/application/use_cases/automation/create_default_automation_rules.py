"""Use case seeding the starter automation rules for a new user."""

import logging

from sqlalchemy.orm import Session

from orisai.domain.entities import AutomationAction, AutomationRule, ConditionOperator
from orisai.infrastructure.repositories import AutomationRuleRepository
from .create_automation_rule import create_automation_rule

logger = logging.getLogger(__name__)

EXECUTIVE_SENIORITIES = ["C-Level", "Owner", "Founder", "Partner"]


def create_default_automation_rules(session: Session, user_id: int) -> list[AutomationRule]:
    """Create the starter rules unless ``user_id`` already has any rule.

    The auto-send rule is created disabled; the executive review rule is
    active and outranks it.
    """

    if AutomationRuleRepository(session).count_by_user(user_id):
        logger.info("User %s already has automation rules; skipping defaults", user_id)
        return []

    auto_send = create_automation_rule(
        session,
        user_id=user_id,
        name="Auto-send to non-executives",
        description="Automatically send emails to leads who are not C-level executives",
        conditions=[
            {
                "field": "seniority",
                "operator": ConditionOperator.NOT_IN.value,
                "value": list(EXECUTIVE_SENIORITIES),
            }
        ],
        action=AutomationAction.AUTO_SEND.value,
        priority=1,
        is_active=False,
    )
    manual_review = create_automation_rule(
        session,
        user_id=user_id,
        name="Manual review for executives",
        description="Require manual review for C-level executives",
        conditions=[
            {
                "field": "seniority",
                "operator": ConditionOperator.IN.value,
                "value": list(EXECUTIVE_SENIORITIES),
            }
        ],
        action=AutomationAction.MANUAL_REVIEW.value,
        priority=10,
        is_active=True,
    )
    return [auto_send, manual_review]


__all__ = ["EXECUTIVE_SENIORITIES", "create_default_automation_rules"]
