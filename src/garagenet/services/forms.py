"""Entity form controllers: one stateful form per entity type.

Submission pipeline: VALIDATE → MAP PAYLOAD → CREATE → RESET → RESPOND

- Validation failure: field errors are recorded on the form and returned;
  no network call is made.
- Create failure: the draft is left intact so the user can resubmit; the
  error is a single generic notice.  No retry.
- Success: the draft returns to its initial defaults.
"""

from __future__ import annotations

import copy
import logging
import re
from collections.abc import Mapping
from typing import Any, ClassVar

from garagenet.domain.entities import Location, resolve_entity
from garagenet.domain.paths import FieldPath, as_path
from garagenet.domain.payloads import to_create_payload
from garagenet.domain.types import (
    ContactPreference,
    DifficultyLevel,
    EntityName,
    EventType,
    PartCategory,
    PartCondition,
    PartPriority,
    ProjectStatus,
    RegistrationStatus,
)
from garagenet.domain.validation import ValidationResult, validate
from garagenet.infrastructure.api import DataServiceError
from garagenet.infrastructure.client import ClientSelector
from garagenet.services.base import DraftService
from garagenet.services.location import LOCATION_DEFAULTS
from garagenet.services.result import (
    CREATE_FAILED,
    SUBMIT_IN_PROGRESS,
    ServiceError,
    ServiceResult,
    validation_failure,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Shared blanks and option catalogues
# ---------------------------------------------------------------------------

BLANK_ADDRESS: dict[str, Any] = {
    "street": "",
    "city": "",
    "state": "",
    "zip": "",
    "country": "USA",
}

BLANK_CONTACT: dict[str, Any] = {
    "name": "",
    "title": "",
    "email": "",
    "phone": "",
    "website": "",
    "preference": ContactPreference.ANY.value,
}

SPECIALTY_OPTIONS: tuple[str, ...] = (
    "American V-Twins",
    "Metric Cruisers",
    "Sport Bikes",
    "Touring Bikes",
    "Choppers",
    "Bobbers",
    "Cafe Racers",
    "Adventure Bikes",
    "Dirt Bikes",
    "Vintage Restoration",
)

AMENITY_OPTIONS: tuple[str, ...] = (
    "Welding",
    "Machine Shop",
    "Paint Booth",
    "Tire Mounting",
    "Dyno Tuning",
    "Parts Washing",
    "Compressed Air",
    "Lift/Hoist",
    "Tool Library",
    "Meeting Space",
)


def _words(entity: EntityName) -> list[str]:
    return [w.lower() for w in re.findall(r"[A-Z][a-z]*", entity.value)]


# ---------------------------------------------------------------------------
# Base controller
# ---------------------------------------------------------------------------


class FormController(DraftService):
    """Draft state, repeatable items, and submission for one entity.

    Class attributes configure a concrete form:

    - ``entity``: the entity the form creates.
    - ``item_templates``: blank item appended by :meth:`add_item` per list field.
    - ``min_counts``: minimum number of items a list field must keep.
    - ``set_options``: allowed values for :meth:`toggle` per list field
      (fields not listed accept any string).
    """

    entity: ClassVar[EntityName]
    item_templates: ClassVar[Mapping[str, Any]] = {}
    min_counts: ClassVar[Mapping[str, int]] = {}
    set_options: ClassVar[Mapping[str, tuple[str, ...]]] = {}

    def __init__(self, defaults: Mapping[str, Any] | None = None) -> None:
        super().__init__(defaults)
        self._submitting = False

    @property
    def op(self) -> str:
        return "create_" + "_".join(_words(self.entity))

    @property
    def label(self) -> str:
        return " ".join(_words(self.entity))

    # ── Repeatable items ──────────────────────────────────────────

    def _list_at(self, list_field: FieldPath | str) -> tuple[FieldPath, list[Any]]:
        path = as_path(list_field)
        items = self.get_value(path)
        if not isinstance(items, list):
            msg = f"{path} is not a list field"
            raise TypeError(msg)
        return path, items

    def add_item(self, list_field: FieldPath | str, template: Any = None) -> int:
        """Append a copy of *template* (or the field's blank item); return its index."""
        path, items = self._list_at(list_field)
        if template is None:
            name = str(path.segments[-1])
            if name not in self.item_templates:
                msg = f"No item template for {path}"
                raise ValueError(msg)
            template = self.item_templates[name]
        items.append(copy.deepcopy(template))
        self.errors.pop(path, None)
        return len(items) - 1

    def remove_item(self, list_field: FieldPath | str, index: int) -> bool:
        """Remove item *index*; refuse (return False) below the field's minimum.

        Raises:
            IndexError: If *index* is out of range.
        """
        path, items = self._list_at(list_field)
        if not 0 <= index < len(items):
            msg = f"{path} has no item {index}"
            raise IndexError(msg)
        minimum = self.min_counts.get(str(path.segments[-1]), 0)
        if len(items) - 1 < minimum:
            return False
        del items[index]
        # Indices after the removed item shift, so errors under this list are stale.
        depth = len(path.segments)
        self.errors = {
            p: m for p, m in self.errors.items() if p.segments[:depth] != path.segments
        }
        return True

    def toggle(self, list_field: FieldPath | str, value: str) -> bool:
        """Flip membership of *value* in a string-set field; return new membership.

        Raises:
            ValueError: If the field has an option catalogue and *value* is not in it.
        """
        path, items = self._list_at(list_field)
        options = self.set_options.get(str(path.segments[-1]))
        if options is not None and value not in options:
            msg = f"{value!r} is not an option for {path}"
            raise ValueError(msg)
        if value in items:
            items[:] = [item for item in items if item != value]
            return False
        items.append(value)
        return True

    # ── Validation and submission ─────────────────────────────────

    def validate(self) -> ValidationResult:
        result = validate(self.entity, self.draft)
        self._record_validation(result)
        return result

    def submit(self, clients: ClientSelector) -> ServiceResult:
        """Validate, create through the current client, and reset on success.

        *clients* is asked for the credential mode at call time.
        """
        op = self.op
        if self._submitting:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=SUBMIT_IN_PROGRESS,
                    message=f"A {self.label} submission is already in progress",
                ),
            )

        # ── VALIDATE ──────────────────────────────────────────────
        result = self.validate()
        if not result.ok:
            return validation_failure(op, result.messages())

        # ── MAP PAYLOAD ───────────────────────────────────────────
        payload = to_create_payload(result.value)

        # ── CREATE ────────────────────────────────────────────────
        self._submitting = True
        try:
            mode, service = clients.client()
            try:
                record = service.create(self.entity.value, payload)
            except DataServiceError as exc:
                logger.warning(
                    "Create %s failed (auth_mode=%s): %s", self.entity.value, mode.value, exc
                )
                return ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code=CREATE_FAILED,
                        message=f"Error creating {self.label}. Please try again.",
                        detail={"reason": str(exc)},
                    ),
                )
        finally:
            self._submitting = False

        # ── RESET ─────────────────────────────────────────────────
        self.reset()
        logger.info("Created %s %s (auth_mode=%s)", self.entity.value, record.get("id"), mode.value)

        # ── RESPOND ───────────────────────────────────────────────
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "entity": self.entity.value,
                "id": record.get("id"),
                "record": record,
                "payload": payload,
                "auth_mode": mode.value,
            },
        )


# ---------------------------------------------------------------------------
# Concrete forms
# ---------------------------------------------------------------------------


class GarageForm(FormController):
    entity: ClassVar[EntityName] = EntityName.GARAGE
    defaults: ClassVar[Mapping[str, Any]] = {
        "name": "",
        "description": "",
        "hoursOfOperation": "",
        "specialties": [],
        "amenities": [],
        "isActive": True,
        "website": "",
        "images": [],
        "address": BLANK_ADDRESS,
        "contacts": [BLANK_CONTACT],
    }
    item_templates: ClassVar[Mapping[str, Any]] = {"contacts": BLANK_CONTACT}
    min_counts: ClassVar[Mapping[str, int]] = {"contacts": 1}
    set_options: ClassVar[Mapping[str, tuple[str, ...]]] = {
        "specialties": SPECIALTY_OPTIONS,
        "amenities": AMENITY_OPTIONS,
    }


class ClubForm(FormController):
    entity: ClassVar[EntityName] = EntityName.CLUB
    defaults: ClassVar[Mapping[str, Any]] = {
        "name": "",
        "website": "",
        "description": "",
        "isActive": True,
        "images": [],
        "address": BLANK_ADDRESS,
        "contacts": [BLANK_CONTACT],
    }
    item_templates: ClassVar[Mapping[str, Any]] = {"contacts": BLANK_CONTACT}
    min_counts: ClassVar[Mapping[str, int]] = {"contacts": 1}


class ProjectForm(FormController):
    entity: ClassVar[EntityName] = EntityName.PROJECT
    defaults: ClassVar[Mapping[str, Any]] = {
        "title": "",
        "description": "",
        "veteranId": "",
        "veteranName": "",
        "status": ProjectStatus.PLANNING.value,
        "progressPercentage": 0,
        "startDate": "",
        "targetCompletionDate": "",
        "actualCompletionDate": "",
        "garageId": "",
        "images": [],
    }


class PartForm(FormController):
    """Inventory part.  Always submits an empty image list."""

    entity: ClassVar[EntityName] = EntityName.PART
    defaults: ClassVar[Mapping[str, Any]] = {
        "name": "",
        "partNumber": "",
        "category": PartCategory.OTHER.value,
        "condition": PartCondition.USED_GOOD.value,
        "fitsModels": [],
        "description": "",
        "cost": "",
        "isAvailable": True,
        "garageId": "",
        "images": [],
    }
    item_templates: ClassVar[Mapping[str, Any]] = {"fitsModels": ""}


class ProjectPartForm(FormController):
    entity: ClassVar[EntityName] = EntityName.PROJECT_PART
    defaults: ClassVar[Mapping[str, Any]] = {
        "projectId": "",
        "partId": "",
        "partName": "",
        "isObtained": False,
        "notes": "",
        "priority": PartPriority.MEDIUM.value,
    }


class EventForm(FormController):
    entity: ClassVar[EntityName] = EntityName.EVENT
    defaults: ClassVar[Mapping[str, Any]] = {
        "title": "",
        "description": "",
        "website": "",
        "eventType": EventType.SOCIAL.value,
        "startDateTime": "",
        "endDateTime": "",
        "registrationTime": "",
        "ksuTime": "",
        "maxParticipants": None,
        "currentParticipants": 0,
        "registrationRequired": False,
        "hostClubId": "",
        "address": BLANK_ADDRESS,
    }

    def set_location(self, location: Location) -> None:
        """Pin the event address to a location captured by the dialog."""
        self.set_value(FieldPath.of("address", "location"), location.model_dump(mode="json"))


class RideForm(FormController):
    entity: ClassVar[EntityName] = EntityName.RIDE
    defaults: ClassVar[Mapping[str, Any]] = {
        "name": "",
        "description": "",
        "start": BLANK_ADDRESS,
        "end": BLANK_ADDRESS,
        "points": [],
        "distance": None,
        "estimatedDuration": None,
        "difficultyLevel": DifficultyLevel.BEGINNER.value,
        "routeData": None,
        "createdBy": "",
        "isPublic": True,
        "eventId": "",
    }
    item_templates: ClassVar[Mapping[str, Any]] = {"points": LOCATION_DEFAULTS}

    def add_point(self, location: Location) -> int:
        """Append a location captured by the dialog to the route."""
        return self.add_item("points", location.model_dump(mode="json"))


class EventRegistrationForm(FormController):
    entity: ClassVar[EntityName] = EntityName.EVENT_REGISTRATION
    defaults: ClassVar[Mapping[str, Any]] = {
        "eventId": "",
        "userId": "",
        "userName": "",
        "registrationDate": "",
        "status": RegistrationStatus.REGISTERED.value,
        "notes": "",
    }


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

FORM_REGISTRY: dict[EntityName, type[FormController]] = {
    form.entity: form
    for form in (
        GarageForm,
        ClubForm,
        ProjectForm,
        PartForm,
        ProjectPartForm,
        EventForm,
        RideForm,
        EventRegistrationForm,
    )
}


def get_form(entity: str | EntityName, defaults: Mapping[str, Any] | None = None) -> FormController:
    """Return a fresh form controller for *entity*.

    Raises:
        KeyError: If *entity* is not a known entity name.
    """
    return FORM_REGISTRY[resolve_entity(entity)](defaults)
