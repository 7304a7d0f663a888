"""ORM models used by the application infrastructure."""

from .automation_rule import AutomationRuleModel
from .email import EmailModel
from .lead import LeadModel

__all__ = ["AutomationRuleModel", "EmailModel", "LeadModel"]
