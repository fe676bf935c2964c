"""Explicit request validation — turns raw payloads into typed request models."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, cast

import pydantic
from pydantic import BaseModel

from core.errors import FieldError, ValidationError

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class ValidationResult(Generic[M]):
    value: M | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors

    def unwrap(self) -> M:
        """Return the validated model or raise ValidationError with every field error."""
        if not self.ok:
            raise ValidationError(errors=self.errors)
        return cast(M, self.value)


def _to_field_error(error: Any) -> FieldError:
    location = ".".join(str(part) for part in error["loc"])
    # Custom validators raise ValueError; pydantic keeps the original in ctx.
    ctx_error = error.get("ctx", {}).get("error")
    message = str(ctx_error) if ctx_error is not None else f"{location}: {error['msg']}"
    return FieldError(field=location, message=message)


def validate_payload(model: type[M], data: Any) -> ValidationResult[M]:
    if not isinstance(data, dict):
        return ValidationResult(errors=[FieldError(field="", message="Request payload must be an object")])
    try:
        return ValidationResult(value=model.model_validate(data))
    except pydantic.ValidationError as e:
        return ValidationResult(errors=[_to_field_error(error) for error in e.errors(include_url=False)])
