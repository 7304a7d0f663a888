"""Use case evaluating a lead against the owner's stored automation rules."""

import logging

from sqlalchemy.orm import Session

from orisai.domain.automation import AutomationDecision, evaluate_lead
from orisai.domain.entities import Lead
from orisai.infrastructure.repositories import AutomationRuleRepository

logger = logging.getLogger(__name__)


def evaluate_lead_for_user(session: Session, user_id: int, lead: Lead) -> AutomationDecision:
    """Evaluate ``lead`` with the active rules of ``user_id``.

    When a rule matches its ``times_triggered`` counter is incremented.
    """

    repository = AutomationRuleRepository(session)
    rules = repository.list_active_by_user(user_id)
    decision = evaluate_lead(lead, rules)

    if decision.matched_rule is not None and decision.matched_rule.id is not None:
        repository.increment_times_triggered(decision.matched_rule.id)

    logger.info(
        "Automation decision for lead %s (user %s): auto_approve=%s, reason=%s",
        lead.id,
        user_id,
        decision.should_auto_approve,
        decision.reason,
    )
    return decision


__all__ = ["evaluate_lead_for_user"]
