"""Use cases for managing and applying lead automation rules."""

from .apply_decision_to_email import apply_decision_to_email
from .create_automation_rule import create_automation_rule
from .create_default_automation_rules import create_default_automation_rules
from .delete_automation_rule import delete_automation_rule
from .evaluate_lead_for_user import evaluate_lead_for_user
from .get_automation_rule import RULE_NOT_FOUND, get_automation_rule
from .list_automation_rules import list_automation_rules
from .update_automation_rule import update_automation_rule

__all__ = [
    "RULE_NOT_FOUND",
    "apply_decision_to_email",
    "create_automation_rule",
    "create_default_automation_rules",
    "delete_automation_rule",
    "evaluate_lead_for_user",
    "get_automation_rule",
    "list_automation_rules",
    "update_automation_rule",
]
