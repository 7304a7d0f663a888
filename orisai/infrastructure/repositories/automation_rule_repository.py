"""Persistence layer for lead automation rules."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import asc, desc, func, true
from sqlalchemy.orm import Session

from orisai.domain.entities import AutomationRule, RuleCondition
from orisai.infrastructure.models import AutomationRuleModel


class AutomationRuleRepository:
    """Provide CRUD operations for automation rules scoped to their owner."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_by_user(self, user_id: int) -> Sequence[AutomationRule]:
        query = self._ordered(
            self.session.query(AutomationRuleModel).filter(
                AutomationRuleModel.user_id == user_id
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def list_active_by_user(self, user_id: int) -> Sequence[AutomationRule]:
        """Return the user's active rules, highest priority first.

        Rules sharing a priority keep their creation order.
        """

        query = self._ordered(
            self.session.query(AutomationRuleModel)
            .filter(AutomationRuleModel.user_id == user_id)
            .filter(AutomationRuleModel.is_active == true())
        )
        return [self._to_entity(model) for model in query.all()]

    def count_by_user(self, user_id: int) -> int:
        return (
            self.session.query(func.count(AutomationRuleModel.id))
            .filter(AutomationRuleModel.user_id == user_id)
            .scalar()
            or 0
        )

    def get(self, rule_id: int) -> AutomationRule | None:
        model = self.session.get(AutomationRuleModel, rule_id)
        return self._to_entity(model) if model else None

    def create(self, rule: AutomationRule) -> AutomationRule:
        model = AutomationRuleModel()
        self._apply_entity_to_model(model, rule)
        model.times_triggered = rule.times_triggered or 0
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, rule: AutomationRule) -> AutomationRule:
        model = self.session.get(AutomationRuleModel, rule.id)
        if not model:
            msg = f"Automation rule with id {rule.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, rule)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, rule_id: int) -> None:
        model = self.session.get(AutomationRuleModel, rule_id)
        if not model:
            msg = f"Automation rule with id {rule_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def increment_times_triggered(self, rule_id: int) -> None:
        """Add one to the rule's trigger counter in a single UPDATE."""

        (
            self.session.query(AutomationRuleModel)
            .filter(AutomationRuleModel.id == rule_id)
            .update(
                {
                    AutomationRuleModel.times_triggered: func.coalesce(
                        AutomationRuleModel.times_triggered, 0
                    )
                    + 1
                },
                synchronize_session=False,
            )
        )
        self.session.commit()

    @staticmethod
    def _ordered(query):
        return query.order_by(
            desc(AutomationRuleModel.priority), asc(AutomationRuleModel.id)
        )

    @staticmethod
    def _to_entity(model: AutomationRuleModel) -> AutomationRule:
        return AutomationRule(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            description=model.description,
            action=model.action,
            conditions=AutomationRuleRepository._load_conditions(model.conditions),
            priority=model.priority or 0,
            is_active=bool(model.is_active),
            times_triggered=model.times_triggered or 0,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _load_conditions(raw: Any) -> list[RuleCondition]:
        if not isinstance(raw, list):
            return []
        return [RuleCondition.from_dict(entry) for entry in raw if isinstance(entry, dict)]

    @staticmethod
    def _apply_entity_to_model(model: AutomationRuleModel, rule: AutomationRule) -> None:
        model.user_id = rule.user_id
        model.name = rule.name
        model.description = rule.description
        model.action = rule.action
        model.conditions = [condition.to_dict() for condition in rule.conditions]
        model.priority = rule.priority
        model.is_active = rule.is_active


__all__ = ["AutomationRuleRepository"]
