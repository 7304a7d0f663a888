"""Validation helpers for automation rule use cases."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _format_error(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = str(error.get("msg", "invalid value"))
    return f"{location}: {message}" if location else message


def validate_payload(schema: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate ``data`` against ``schema`` raising a readable ``ValueError``."""

    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        details = "; ".join(_format_error(error) for error in exc.errors())
        raise ValueError(f"Invalid automation rule: {details}") from exc


__all__ = ["validate_payload"]
