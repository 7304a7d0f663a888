"""Use cases for outreach emails."""

from .create_email_draft import AUTOMATION_FAILED_NOTE, body_to_html, create_email_draft

__all__ = ["AUTOMATION_FAILED_NOTE", "body_to_html", "create_email_draft"]
