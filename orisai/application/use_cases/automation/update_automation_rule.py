"""Use case for updating automation rules."""

import logging
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from orisai.domain.entities import AutomationRule, RuleCondition
from orisai.infrastructure.repositories import AutomationRuleRepository
from orisai.schemas import AutomationRuleUpdate
from .get_automation_rule import get_automation_rule
from .validators import validate_payload

logger = logging.getLogger(__name__)


def update_automation_rule(
    session: Session,
    *,
    rule_id: int,
    user_id: int,
    **changes: Any,
) -> AutomationRule:
    """Apply the provided ``changes`` to the rule identified by ``rule_id``.

    Accepted keys are ``name``, ``description``, ``action``, ``conditions``,
    ``priority`` and ``is_active``; anything omitted keeps its current value.
    """

    current = get_automation_rule(session, rule_id, user_id=user_id)
    payload = validate_payload(AutomationRuleUpdate, changes)
    update_data = payload.model_dump(exclude_unset=True)

    if "action" in update_data and update_data["action"] is not None:
        update_data["action"] = payload.action.value
    if "conditions" in update_data:
        update_data["conditions"] = [
            RuleCondition.from_dict(condition.to_storage())
            for condition in payload.conditions or []
        ]
    for key in ("name", "action", "priority", "is_active"):
        if key in update_data and update_data[key] is None:
            raise ValueError(f"Invalid automation rule: {key} cannot be null")

    updated = AutomationRuleRepository(session).update(replace(current, **update_data))
    logger.info("Updated automation rule %s for user %s", rule_id, user_id)
    return updated


__all__ = ["update_automation_rule"]
