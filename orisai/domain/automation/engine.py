"""Priority-ordered matching of a lead against a user's automation rules."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from orisai.domain.entities import AutomationRule, Lead

from .conditions import condition_matches

logger = logging.getLogger(__name__)

REASON_NO_RULES = "No automation rules defined"
REASON_NO_MATCH = "No matching automation rules"


@dataclass(frozen=True)
class AutomationDecision:
    """Outcome of evaluating a lead.

    ``should_auto_approve`` is only ``True`` for ``auto_send`` rules; ``skip``
    and ``manual_review`` are told apart through ``matched_rule.action``.
    """

    should_auto_approve: bool
    matched_rule: AutomationRule | None
    reason: str


def rule_matches(lead: Lead, rule: AutomationRule) -> bool:
    """Return ``True`` when every condition of ``rule`` holds for ``lead``.

    A rule without conditions matches every lead.
    """

    return all(condition_matches(lead, condition) for condition in rule.conditions or ())


def _describe_match(rule: AutomationRule) -> str:
    if rule.auto_sends:
        return f"Matched rule: {rule.name}"
    return f"Rule requires manual review: {rule.name}"


def evaluate_lead(lead: Lead, rules: Iterable[AutomationRule]) -> AutomationDecision:
    """Return the decision of the highest-priority rule matching ``lead``.

    Inactive rules are ignored. Rules sharing a priority are tried in the
    order they were given. Neither ``lead`` nor ``rules`` is modified.
    """

    active_rules = [rule for rule in rules if rule.is_active]
    if not active_rules:
        return AutomationDecision(
            should_auto_approve=False, matched_rule=None, reason=REASON_NO_RULES
        )

    ordered = sorted(active_rules, key=lambda rule: rule.priority or 0, reverse=True)
    for rule in ordered:
        if rule_matches(lead, rule):
            logger.debug(
                "Lead %s matched automation rule %s (%s)", lead.id, rule.id, rule.action
            )
            return AutomationDecision(
                should_auto_approve=rule.auto_sends,
                matched_rule=rule,
                reason=_describe_match(rule),
            )

    return AutomationDecision(
        should_auto_approve=False, matched_rule=None, reason=REASON_NO_MATCH
    )


__all__ = [
    "AutomationDecision",
    "REASON_NO_MATCH",
    "REASON_NO_RULES",
    "evaluate_lead",
    "rule_matches",
]
