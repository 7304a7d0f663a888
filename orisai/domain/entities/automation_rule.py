"""Domain entities describing lead automation rules."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class AutomationAction(str, Enum):
    """What happens to an email whose lead matches a rule."""

    AUTO_SEND = "auto_send"
    MANUAL_REVIEW = "manual_review"
    SKIP = "skip"


class ConditionOperator(str, Enum):
    """Comparison applied between a lead attribute and a condition value."""

    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    IN = "in"
    NOT_IN = "not_in"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"


@dataclass(frozen=True)
class RuleCondition:
    """A single comparison against one lead attribute.

    ``operator`` is kept as the raw stored string so that rules holding an
    unknown operator can still be loaded; they simply never match.
    """

    field: str
    operator: str
    value: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuleCondition":
        operator = data.get("operator")
        if isinstance(operator, Enum):
            operator = operator.value
        return cls(
            field=str(data.get("field", "")),
            operator=str(operator or ""),
            value=data.get("value"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "operator": self.operator, "value": self.value}


@dataclass
class AutomationRule:
    """A user-owned rule; all conditions must match for the action to apply."""

    id: int | None
    user_id: int
    name: str
    action: str
    conditions: list[RuleCondition] = field(default_factory=list)
    description: str | None = None
    priority: int = 0
    is_active: bool = True
    times_triggered: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def auto_sends(self) -> bool:
        return self.action == AutomationAction.AUTO_SEND.value


__all__ = ["AutomationAction", "AutomationRule", "ConditionOperator", "RuleCondition"]
