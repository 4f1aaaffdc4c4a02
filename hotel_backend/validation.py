"""Input checks applied before every property write.

``validate`` never raises on bad input: it returns a ``ValidationResult``
carrying either the cleaned fields or every field-level violation found.
Rules are checked independently so callers can show all problems at once.
There are no cross-field rules; in particular revpar is not compared against
adr * occupancy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

import pydantic

from .exceptions import ValidationError
from .models.property import FieldError, PropertyInput
from .utils.logging import get_logger

LOGGER = get_logger("validation")


@dataclass(frozen=True)
class ValidationResult:
    value: Optional[PropertyInput] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors

    def unwrap(self) -> PropertyInput:
        if not self.ok:
            raise ValidationError(self.errors)
        return self.value  # type: ignore[return-value]


def _field_name(loc: tuple) -> str:
    if not loc:
        return "body"
    return str(loc[0])


def _collect(exc: pydantic.ValidationError) -> List[FieldError]:
    errors: List[FieldError] = []
    seen = set()
    for detail in exc.errors():
        name = _field_name(tuple(detail.get("loc", ())))
        # one message per field; nested list items report against their parent
        if name in seen:
            continue
        seen.add(name)
        errors.append(FieldError(field=name, message=detail.get("msg", "Invalid value")))
    return errors


def validate(candidate: Any) -> ValidationResult:
    if not isinstance(candidate, Mapping):
        return ValidationResult(errors=[FieldError(field="body", message="Expected a JSON object")])
    try:
        value = PropertyInput.model_validate(dict(candidate))
    except pydantic.ValidationError as exc:
        errors = _collect(exc)
        LOGGER.debug("validation_failed fields=%s", ",".join(err.field for err in errors))
        return ValidationResult(errors=errors)
    return ValidationResult(value=value)


__all__ = ["ValidationResult", "validate"]
