"""Evaluation of individual automation rule conditions against a lead.

Conditions reference lead attributes by the camelCase names used in stored
rule definitions. Any name outside :data:`LEAD_FIELDS` resolves to ``None``
and is still handed to the operator, which decides how ``None`` compares.
Evaluation never raises: malformed conditions are simply non-matches.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import Any

from orisai.domain.entities import ConditionOperator, Lead, RuleCondition

LEAD_FIELDS: dict[str, str] = {
    "seniority": "seniority",
    "title": "title",
    "companySize": "company_size",
    "companyIndustry": "company_industry",
    "departments": "departments",
    "fitScore": "fit_score",
}

_LIST_TYPES = (list, tuple)
_COMPOUND_TYPES = (list, tuple, dict)

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity")
_PREFIXED_PATTERN = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def resolve_lead_field(lead: Lead, field: str) -> Any:
    """Return the lead attribute referenced by ``field`` or ``None``."""

    attribute = LEAD_FIELDS.get(field)
    if attribute is None:
        return None
    return getattr(lead, attribute, None)


def _strict_equals(left: Any, right: Any) -> bool:
    # Lists and mappings never equal anything, not even an equal-looking copy.
    if isinstance(left, _COMPOUND_TYPES) or isinstance(right, _COMPOUND_TYPES):
        return False
    # bool is an int subclass; True must not equal 1.
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    return bool(left == right)


def _to_number(value: Any) -> float:
    """Coerce ``value`` to a float, using NaN for anything non-numeric.

    ``None``, empty strings and non-numeric strings become NaN, so every
    ordering comparison involving them is false. Strings are accepted only in
    plain decimal or exponent form, ``Infinity``, or ``0x``/``0o``/``0b``
    prefixed integers; forms like ``"1_000"`` or ``"inf"`` are NaN.
    """

    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return math.nan
        if _PREFIXED_PATTERN.fullmatch(stripped):
            return float(int(stripped, 0))
        if _DECIMAL_PATTERN.fullmatch(stripped):
            return float(stripped.replace("Infinity", "inf"))
        return math.nan
    return math.nan


def _contains(lead_value: str | list | tuple, needle: Any) -> bool:
    if not isinstance(needle, str):
        return False
    needle = needle.lower()
    if isinstance(lead_value, str):
        return needle in lead_value.lower()
    return any(isinstance(item, str) and needle in item.lower() for item in lead_value)


def _op_equals(lead_value: Any, rule_value: Any) -> bool:
    return _strict_equals(lead_value, rule_value)


def _op_not_equals(lead_value: Any, rule_value: Any) -> bool:
    return not _strict_equals(lead_value, rule_value)


def _op_contains(lead_value: Any, rule_value: Any) -> bool:
    if isinstance(lead_value, (str, *_LIST_TYPES)):
        return _contains(lead_value, rule_value)
    return False


def _op_not_contains(lead_value: Any, rule_value: Any) -> bool:
    if isinstance(lead_value, (str, *_LIST_TYPES)):
        return not _contains(lead_value, rule_value)
    return True


def _op_in(lead_value: Any, rule_value: Any) -> bool:
    if isinstance(rule_value, _LIST_TYPES):
        return any(_strict_equals(lead_value, item) for item in rule_value)
    return False


def _op_not_in(lead_value: Any, rule_value: Any) -> bool:
    if isinstance(rule_value, _LIST_TYPES):
        return not any(_strict_equals(lead_value, item) for item in rule_value)
    return True


def _op_greater_than(lead_value: Any, rule_value: Any) -> bool:
    return _to_number(lead_value) > _to_number(rule_value)


def _op_less_than(lead_value: Any, rule_value: Any) -> bool:
    return _to_number(lead_value) < _to_number(rule_value)


def _op_greater_than_or_equal(lead_value: Any, rule_value: Any) -> bool:
    return _to_number(lead_value) >= _to_number(rule_value)


def _op_less_than_or_equal(lead_value: Any, rule_value: Any) -> bool:
    return _to_number(lead_value) <= _to_number(rule_value)


_OPERATORS: dict[ConditionOperator, Callable[[Any, Any], bool]] = {
    ConditionOperator.EQUALS: _op_equals,
    ConditionOperator.NOT_EQUALS: _op_not_equals,
    ConditionOperator.CONTAINS: _op_contains,
    ConditionOperator.NOT_CONTAINS: _op_not_contains,
    ConditionOperator.IN: _op_in,
    ConditionOperator.NOT_IN: _op_not_in,
    ConditionOperator.GREATER_THAN: _op_greater_than,
    ConditionOperator.LESS_THAN: _op_less_than,
    ConditionOperator.GREATER_THAN_OR_EQUAL: _op_greater_than_or_equal,
    ConditionOperator.LESS_THAN_OR_EQUAL: _op_less_than_or_equal,
}


def evaluate_condition(lead_value: Any, operator: str, rule_value: Any) -> bool:
    """Apply ``operator`` to ``lead_value`` and ``rule_value``.

    Unknown operators evaluate to ``False``.
    """

    try:
        kind = ConditionOperator(operator)
    except ValueError:
        return False
    return _OPERATORS[kind](lead_value, rule_value)


def condition_matches(lead: Lead, condition: RuleCondition) -> bool:
    """Return ``True`` when ``lead`` satisfies ``condition``."""

    lead_value = resolve_lead_field(lead, condition.field)
    return evaluate_condition(lead_value, condition.operator, condition.value)


__all__ = [
    "LEAD_FIELDS",
    "condition_matches",
    "evaluate_condition",
    "resolve_lead_field",
]
