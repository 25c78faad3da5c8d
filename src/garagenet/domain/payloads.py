"""Create-payload mapping: validated entity to managed-service input.

The payload is the model dumped to JSON-ready data with server-managed
fields removed and absent optionals omitted.  List fields are always
present (empty list, never missing).  A few forms override what they
send regardless of the draft; those overrides live in
:data:`PAYLOAD_OVERRIDES`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from garagenet.domain.entities import EntityModel, resolve_entity
from garagenet.domain.types import EntityName
from garagenet.domain.validation import ValidationResult, validate

SERVER_MANAGED_FIELDS: frozenset[str] = frozenset({"id", "createdAt", "updatedAt", "owner"})

PayloadOverride = Callable[[dict[str, Any]], dict[str, Any]]


def _no_images(payload: dict[str, Any]) -> dict[str, Any]:
    # Image upload is not wired up; these forms always create with no images.
    return {**payload, "images": []}


PAYLOAD_OVERRIDES: dict[EntityName, PayloadOverride] = {
    EntityName.PART: _no_images,
    EntityName.PROJECT: _no_images,
}


def to_create_payload(model: EntityModel) -> dict[str, Any]:
    """Map a validated entity to its create-request input."""
    payload = model.model_dump(mode="json", exclude_none=True)
    for key in SERVER_MANAGED_FIELDS:
        payload.pop(key, None)
    override = PAYLOAD_OVERRIDES.get(model._entity)
    if override is not None:
        payload = override(payload)
    return payload


def from_create_payload(
    entity: str | EntityName,
    payload: Mapping[str, Any],
) -> ValidationResult:
    """Re-validate a create payload into its entity model."""
    return validate(resolve_entity(entity), payload)
