"""Automation rule engine."""

from .conditions import (
    LEAD_FIELDS,
    condition_matches,
    evaluate_condition,
    resolve_lead_field,
)
from .engine import (
    REASON_NO_MATCH,
    REASON_NO_RULES,
    AutomationDecision,
    evaluate_lead,
    rule_matches,
)

__all__ = [
    "AutomationDecision",
    "LEAD_FIELDS",
    "REASON_NO_MATCH",
    "REASON_NO_RULES",
    "condition_matches",
    "evaluate_condition",
    "evaluate_lead",
    "resolve_lead_field",
    "rule_matches",
]
