"""Schemas validating automation rule definitions before they are stored."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from orisai.domain.entities import AutomationAction, ConditionOperator

_LIST_OPERATORS = {ConditionOperator.IN, ConditionOperator.NOT_IN}
_NUMERIC_OPERATORS = {
    ConditionOperator.GREATER_THAN,
    ConditionOperator.LESS_THAN,
    ConditionOperator.GREATER_THAN_OR_EQUAL,
    ConditionOperator.LESS_THAN_OR_EQUAL,
}


class RuleConditionPayload(BaseModel):
    field: str = Field(..., min_length=1, max_length=100)
    operator: ConditionOperator
    value: Any = None

    @model_validator(mode="after")
    def _check_value_shape(self) -> "RuleConditionPayload":
        if self.operator in _LIST_OPERATORS and not isinstance(self.value, list):
            raise ValueError(f"Operator '{self.operator.value}' requires a list value")
        if self.operator in _NUMERIC_OPERATORS and (
            isinstance(self.value, bool) or not isinstance(self.value, (int, float))
        ):
            raise ValueError(f"Operator '{self.operator.value}' requires a numeric value")
        return self

    def to_storage(self) -> dict[str, Any]:
        return {"field": self.field, "operator": self.operator.value, "value": self.value}


class AutomationRuleBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    action: AutomationAction
    conditions: list[RuleConditionPayload] = Field(default_factory=list)
    priority: int = 0
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Rule name cannot be blank")
        return stripped


class AutomationRuleCreate(AutomationRuleBase):
    """Payload required to create an automation rule."""


class AutomationRuleUpdate(BaseModel):
    """Partial update; only fields that are set are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    action: AutomationAction | None = None
    conditions: list[RuleConditionPayload] | None = None
    priority: int | None = None
    is_active: bool | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped = value.strip()
        if not stripped:
            raise ValueError("Rule name cannot be blank")
        return stripped


__all__ = [
    "AutomationRuleCreate",
    "AutomationRuleUpdate",
    "RuleConditionPayload",
]
