"""Validation rule set: ``validate(entity, candidate) -> ValidationResult``.

Pure functions over plain draft data.  Errors are keyed by structured
:class:`FieldPath`; each field reports only its first violation, and all
failing fields are reported together.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from garagenet.domain.entities import EntityModel, Location, get_entity_model
from garagenet.domain.paths import FieldPath
from garagenet.domain.types import EntityName

# pydantic's own wording for absent keys is replaced with the original form wording.
_MISSING_MESSAGE = "Required"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one candidate record.

    ``value`` holds the parsed model when ``ok`` is True.
    """

    ok: bool
    errors: dict[FieldPath, str] = field(default_factory=dict)
    value: Any = None

    def messages(self) -> dict[str, str]:
        """Errors keyed by dotted path, in path order."""
        return {str(path): msg for path, msg in sorted(self.errors.items())}

    def error_for(self, path: FieldPath | str) -> str | None:
        key = path if isinstance(path, FieldPath) else FieldPath.parse(path)
        return self.errors.get(key)


def collect_errors(exc: ValidationError) -> dict[FieldPath, str]:
    """Flatten a pydantic ``ValidationError`` into first-message-per-path."""
    errors: dict[FieldPath, str] = {}
    for err in exc.errors(include_url=False):
        path = FieldPath.from_loc(err["loc"])
        message = _MISSING_MESSAGE if err["type"] == "missing" else err["msg"]
        errors.setdefault(path, message)
    return errors


def validate_model(model_cls: type[Any], candidate: Mapping[str, Any]) -> ValidationResult:
    try:
        value = model_cls.model_validate(candidate)
    except ValidationError as exc:
        return ValidationResult(ok=False, errors=collect_errors(exc))
    return ValidationResult(ok=True, value=value)


def validate(entity: str | EntityName, candidate: Mapping[str, Any]) -> ValidationResult:
    """Validate *candidate* against the rule set of *entity*.

    Raises:
        KeyError: If *entity* is not a known entity name.
    """
    model_cls: type[EntityModel] = get_entity_model(entity)
    return validate_model(model_cls, candidate)


def validate_location(candidate: Mapping[str, Any]) -> ValidationResult:
    return validate_model(Location, candidate)
