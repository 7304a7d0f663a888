"""Use case for creating automation rules."""

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy.orm import Session

from orisai.domain.entities import AutomationRule, RuleCondition
from orisai.infrastructure.repositories import AutomationRuleRepository
from orisai.schemas import AutomationRuleCreate
from .validators import validate_payload

logger = logging.getLogger(__name__)


def create_automation_rule(
    session: Session,
    *,
    user_id: int,
    name: str,
    action: str,
    conditions: Sequence[dict[str, Any]] | None = (),
    description: str | None = None,
    priority: int = 0,
    is_active: bool = True,
) -> AutomationRule:
    """Validate and store a new automation rule for ``user_id``."""

    payload = validate_payload(
        AutomationRuleCreate,
        {
            "name": name,
            "action": action,
            "conditions": list(conditions or ()),
            "description": description,
            "priority": priority,
            "is_active": is_active,
        },
    )

    entity = AutomationRule(
        id=None,
        user_id=user_id,
        name=payload.name,
        description=payload.description,
        action=payload.action.value,
        conditions=[
            RuleCondition.from_dict(condition.to_storage())
            for condition in payload.conditions
        ],
        priority=payload.priority,
        is_active=payload.is_active,
    )
    rule = AutomationRuleRepository(session).create(entity)
    logger.info("Created automation rule %s for user %s", rule.id, user_id)
    return rule


__all__ = ["create_automation_rule"]
