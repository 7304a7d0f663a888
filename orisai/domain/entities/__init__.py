"""Domain entities exposed by the application."""

from .automation_rule import (
    AutomationAction,
    AutomationRule,
    ConditionOperator,
    RuleCondition,
)
from .email import Email, EmailStatus
from .lead import Lead

__all__ = [
    "AutomationAction",
    "AutomationRule",
    "ConditionOperator",
    "Email",
    "EmailStatus",
    "Lead",
    "RuleCondition",
]
