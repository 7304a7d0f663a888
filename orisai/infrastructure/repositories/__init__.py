"""Repository implementations for infrastructure layer."""

from .automation_rule_repository import AutomationRuleRepository
from .email_repository import EmailRepository
from .lead_repository import LeadRepository

__all__ = ["AutomationRuleRepository", "EmailRepository", "LeadRepository"]
