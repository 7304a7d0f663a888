"""Validation schemas for data entering the application."""

from .automation_rule import (
    AutomationRuleCreate,
    AutomationRuleUpdate,
    RuleConditionPayload,
)

__all__ = ["AutomationRuleCreate", "AutomationRuleUpdate", "RuleConditionPayload"]
