"""Aggregate application use cases."""

from .automation import apply_decision_to_email, evaluate_lead_for_user
from .emails import create_email_draft

__all__ = [
    "apply_decision_to_email",
    "create_email_draft",
    "evaluate_lead_for_user",
]
