"""Tests for applying automation decisions to stored emails."""

from __future__ import annotations

import importlib

import pytest
from sqlalchemy.exc import OperationalError

from orisai.application.use_cases.automation import (
    apply_decision_to_email,
    create_automation_rule,
    create_default_automation_rules,
    evaluate_lead_for_user,
    get_automation_rule,
    update_automation_rule,
)
from orisai.application.use_cases.emails import AUTOMATION_FAILED_NOTE, create_email_draft
from orisai.domain.entities import Email, Lead
from orisai.infrastructure.repositories import EmailRepository, LeadRepository

USER_ID = 1


def _store_lead(session, **attributes) -> Lead:
    return LeadRepository(session).create(
        Lead(id=None, user_id=USER_ID, first_name="Ada", last_name="Lovelace", **attributes)
    )


def _store_email(session, lead: Lead) -> Email:
    return EmailRepository(session).create(
        Email(
            id=None,
            user_id=USER_ID,
            lead_id=lead.id,
            subject="Quick question",
            body="Hi Ada",
            html_body=None,
            tone="professional",
            status="draft",
            auto_approved=False,
            review_notes=None,
            created_at=None,
            updated_at=None,
        )
    )


def test_lead_round_trip_keeps_targeting_attributes(db_session) -> None:
    lead = _store_lead(
        db_session,
        seniority="Owner",
        departments=["executive", None],
        fit_score=88,
        company_size="11-50",
        company_industry="Software",
    )

    stored = LeadRepository(db_session).get(lead.id)

    assert stored.departments == ["executive", None]
    assert stored.fit_score == 88
    assert stored.full_name == "Ada Lovelace"


def test_executive_lead_requires_manual_review(db_session) -> None:
    manual_rule = create_default_automation_rules(db_session, USER_ID)[1]
    lead = _store_lead(db_session, seniority="Owner")
    email = _store_email(db_session, lead)

    decision = apply_decision_to_email(db_session, email.id, USER_ID, lead.id)

    assert decision.matched_rule.id == manual_rule.id
    stored = EmailRepository(db_session).get(email.id)
    assert stored.status == "pending_review"
    assert stored.auto_approved is False
    assert stored.review_notes == "Rule requires manual review: Manual review for executives"
    assert get_automation_rule(db_session, manual_rule.id, user_id=USER_ID).times_triggered == 1


def test_matching_auto_send_rule_approves_email(db_session) -> None:
    auto_rule, manual_rule = create_default_automation_rules(db_session, USER_ID)
    update_automation_rule(db_session, rule_id=auto_rule.id, user_id=USER_ID, is_active=True)
    lead = _store_lead(db_session, seniority="Manager")
    email = _store_email(db_session, lead)

    decision = apply_decision_to_email(db_session, email.id, USER_ID, lead.id)

    assert decision.should_auto_approve is True
    stored = EmailRepository(db_session).get(email.id)
    assert stored.status == "approved"
    assert stored.auto_approved is True
    assert stored.review_notes == "Matched rule: Auto-send to non-executives"
    assert get_automation_rule(db_session, auto_rule.id, user_id=USER_ID).times_triggered == 1
    assert get_automation_rule(db_session, manual_rule.id, user_id=USER_ID).times_triggered == 0


def test_no_match_leaves_counters_untouched(db_session) -> None:
    auto_rule, manual_rule = create_default_automation_rules(db_session, USER_ID)
    lead = _store_lead(db_session, seniority="Manager")
    email = _store_email(db_session, lead)

    decision = apply_decision_to_email(db_session, email.id, USER_ID, lead.id)

    assert decision.matched_rule is None
    stored = EmailRepository(db_session).get(email.id)
    assert stored.status == "pending_review"
    assert stored.review_notes == "No matching automation rules"
    for rule in (auto_rule, manual_rule):
        assert get_automation_rule(db_session, rule.id, user_id=USER_ID).times_triggered == 0


def test_user_without_rules_requires_review(db_session) -> None:
    create_automation_rule(db_session, user_id=USER_ID + 1, name="Other", action="auto_send")
    lead = _store_lead(db_session, seniority="Manager")
    email = _store_email(db_session, lead)

    apply_decision_to_email(db_session, email.id, USER_ID, lead.id)

    stored = EmailRepository(db_session).get(email.id)
    assert stored.status == "pending_review"
    assert stored.review_notes == "No automation rules defined"


def test_missing_lead_is_a_no_op(db_session) -> None:
    lead = _store_lead(db_session, seniority="Owner")
    email = _store_email(db_session, lead)

    assert apply_decision_to_email(db_session, email.id, USER_ID, lead.id + 100) is None

    stored = EmailRepository(db_session).get(email.id)
    assert stored.status == "draft"
    assert stored.review_notes is None


def test_trigger_counter_accumulates(db_session) -> None:
    rule = create_automation_rule(db_session, user_id=USER_ID, name="All", action="skip")
    lead = _store_lead(db_session)

    for _ in range(3):
        decision = evaluate_lead_for_user(db_session, USER_ID, lead)
        assert decision.matched_rule.action == "skip"

    assert get_automation_rule(db_session, rule.id, user_id=USER_ID).times_triggered == 3


def test_create_email_draft_runs_automation(db_session) -> None:
    create_automation_rule(db_session, user_id=USER_ID, name="Everyone", action="auto_send")
    lead = _store_lead(db_session, seniority="Manager")

    email = create_email_draft(
        db_session,
        user_id=USER_ID,
        lead_id=lead.id,
        subject="Hello",
        body="Hi Ada,\nAre you free <today>?",
    )

    assert email.status == "approved"
    assert email.auto_approved is True
    assert email.html_body == "Hi Ada,<br>Are you free &lt;today&gt;?"


def test_create_email_draft_without_automation_stays_draft(db_session) -> None:
    create_automation_rule(db_session, user_id=USER_ID, name="Everyone", action="auto_send")
    lead = _store_lead(db_session)

    email = create_email_draft(
        db_session,
        user_id=USER_ID,
        lead_id=lead.id,
        subject="Hello",
        body="Hi",
        html_body="<p>Hi</p>",
        apply_automation=False,
    )

    assert email.status == "draft"
    assert email.html_body == "<p>Hi</p>"


def test_create_email_draft_falls_back_to_review_on_storage_error(
    db_session, monkeypatch: pytest.MonkeyPatch
) -> None:
    create_automation_rule(db_session, user_id=USER_ID, name="Everyone", action="auto_send")
    lead = _store_lead(db_session)
    module = importlib.import_module(
        "orisai.application.use_cases.emails.create_email_draft"
    )

    def failing_apply(*_args, **_kwargs):
        raise OperationalError("UPDATE automation_rules", {}, Exception("database is locked"))

    monkeypatch.setattr(module, "apply_decision_to_email", failing_apply)

    email = create_email_draft(
        db_session, user_id=USER_ID, lead_id=lead.id, subject="Hello", body="Hi"
    )

    assert email.status == "pending_review"
    assert email.auto_approved is False
    assert email.review_notes == AUTOMATION_FAILED_NOTE


def test_create_email_draft_for_unknown_lead_stays_draft(db_session) -> None:
    create_automation_rule(db_session, user_id=USER_ID, name="Everyone", action="auto_send")

    email = create_email_draft(
        db_session, user_id=USER_ID, lead_id=999, subject="Hello", body="Hi"
    )

    assert email.id is not None
    assert email.status == "draft"
    assert email.auto_approved is False
    assert email.review_notes is None
