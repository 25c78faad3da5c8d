"""Entity models: the single source of truth for a valid record.

Model attributes map 1:1 to the managed data service's field names
(camelCase, as the service exposes them).  Server-managed fields (``id``,
timestamps) are not modelled: records are only ever created from here.

Every model validates its defaults, so a required text field that was
never filled in reports its own message ("Garage name is required")
instead of a generic missing-field error.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from garagenet.domain.rules import (
    BLANK_MAPPING_AS_NONE,
    NUMERIC,
    OPTIONAL_NUMERIC,
    OptionalEmail,
    OptionalText,
    OptionalUrl,
    in_range,
    min_items,
    non_negative,
    positive,
    text_rule,
)
from garagenet.domain.types import (
    ContactPreference,
    DifficultyLevel,
    EntityName,
    EventType,
    LocationType,
    PartCategory,
    PartCondition,
    PartPriority,
    ProjectStatus,
    RegistrationStatus,
)

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class SchemaModel(BaseModel):
    """Shared config for entities and the value types embedded in them."""

    model_config = ConfigDict(frozen=True, validate_default=True, extra="ignore")


class EntityModel(SchemaModel):
    """Base for persisted entities.

    ``_entity`` names the managed service model the entity is created in.
    """

    _entity: ClassVar[EntityName]


# ---------------------------------------------------------------------------
# Embedded value types
# ---------------------------------------------------------------------------


class Location(SchemaModel):
    """A GPS point for a map or a ride route."""

    name: Annotated[str, text_rule("Location name is required")] = ""
    title: OptionalText = None
    description: OptionalText = None
    type: LocationType
    stop: bool = False
    lat: Annotated[float, NUMERIC, in_range(-90, 90, "Latitude must be between -90 and 90")]
    long: Annotated[
        float, NUMERIC, in_range(-180, 180, "Longitude must be between -180 and 180")
    ]


class Address(SchemaModel):
    street: Annotated[str, text_rule("Street address is required")] = ""
    city: Annotated[str, text_rule("City is required")] = ""
    state: Annotated[
        str,
        text_rule(
            "State is required",
            min_length=2,
            max_length=2,
            too_long="State must be 2 characters",
        ),
    ] = ""
    zip: Annotated[
        str,
        text_rule(
            "ZIP code is required",
            min_length=5,
            too_short="ZIP code must be at least 5 characters",
        ),
    ] = ""
    country: str = "USA"
    location: Location | None = None


OptionalAddress = Annotated[Address | None, BLANK_MAPPING_AS_NONE]


class Contact(SchemaModel):
    """How to reach a garage or club.  Phone is always required."""

    name: Annotated[str, text_rule("Contact name is required")] = ""
    title: OptionalText = None
    email: OptionalEmail = None
    phone: Annotated[
        str,
        text_rule(
            "Phone number is required",
            min_length=10,
            too_short="Phone number must be at least 10 digits",
        ),
    ] = ""
    website: OptionalUrl = None
    preference: ContactPreference = ContactPreference.ANY


Contacts = Annotated[list[Contact], min_items("At least one contact is required")]


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


class Garage(EntityModel):
    """Provides space, tools, and resources to veterans."""

    _entity: ClassVar[EntityName] = EntityName.GARAGE

    name: Annotated[str, text_rule("Garage name is required")] = ""
    address: Address
    contacts: Contacts = Field(default_factory=list)
    description: OptionalText = None
    hoursOfOperation: OptionalText = None
    specialties: list[str] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)
    isActive: bool = True
    website: OptionalUrl = None
    images: list[str] = Field(default_factory=list)


class Club(EntityModel):
    """A group of riders that support each other.  May have no fixed address."""

    _entity: ClassVar[EntityName] = EntityName.CLUB

    name: Annotated[str, text_rule("Club name is required")] = ""
    website: OptionalUrl = None
    address: OptionalAddress = None
    contacts: Contacts = Field(default_factory=list)
    description: Annotated[str, text_rule("Description is required")] = ""
    isActive: bool = True
    images: list[str] = Field(default_factory=list)


class Project(EntityModel):
    """A bike being built or repaired for or by a veteran."""

    _entity: ClassVar[EntityName] = EntityName.PROJECT

    title: Annotated[str, text_rule("Project title is required")] = ""
    description: OptionalText = None
    veteranId: Annotated[str, text_rule("Veteran ID is required")] = ""
    veteranName: Annotated[str, text_rule("Veteran name is required")] = ""
    status: ProjectStatus = ProjectStatus.PLANNING
    progressPercentage: Annotated[
        float, NUMERIC, in_range(0, 100, "Progress must be between 0 and 100")
    ] = 0
    startDate: OptionalText = None
    targetCompletionDate: OptionalText = None
    actualCompletionDate: OptionalText = None
    garageId: OptionalText = None
    images: list[str] = Field(default_factory=list)


class Part(EntityModel):
    """An inventory part.  Inventory always belongs to a garage."""

    _entity: ClassVar[EntityName] = EntityName.PART

    name: Annotated[str, text_rule("Part name is required")] = ""
    partNumber: OptionalText = None
    category: PartCategory
    condition: PartCondition
    fitsModels: list[str] = Field(default_factory=list)
    description: OptionalText = None
    images: list[str] = Field(default_factory=list)
    cost: Annotated[str, text_rule("Cost information is required")] = ""
    isAvailable: bool = True
    garageId: Annotated[str, text_rule("Garage selection is required")] = ""


class ProjectPart(EntityModel):
    """Junction between a project and a part it needs.

    ``partName`` is the fallback label while the part is not yet in inventory.
    """

    _entity: ClassVar[EntityName] = EntityName.PROJECT_PART

    projectId: Annotated[str, text_rule("Project selection is required")] = ""
    partId: OptionalText = None
    partName: Annotated[str, text_rule("Part name is required")] = ""
    isObtained: bool = False
    notes: OptionalText = None
    priority: PartPriority = PartPriority.MEDIUM


class Event(EntityModel):
    """An event hosted by a club.  No ``maxParticipants`` means unlimited."""

    _entity: ClassVar[EntityName] = EntityName.EVENT

    title: Annotated[str, text_rule("Event title is required")] = ""
    description: OptionalText = None
    address: OptionalAddress = None
    website: OptionalUrl = None
    eventType: EventType
    startDateTime: Annotated[str, text_rule("Start date and time is required")] = ""
    endDateTime: OptionalText = None
    registrationTime: OptionalText = None
    ksuTime: OptionalText = None
    maxParticipants: Annotated[
        float | None,
        OPTIONAL_NUMERIC,
        positive("Maximum participants must be a positive number"),
    ] = None
    currentParticipants: Annotated[
        float, NUMERIC, non_negative("Current participants cannot be negative")
    ] = 0
    registrationRequired: bool = False
    hostClubId: OptionalText = None


class Ride(EntityModel):
    """The plan for which roads to take during a ride."""

    _entity: ClassVar[EntityName] = EntityName.RIDE

    name: OptionalText = None
    description: OptionalText = None
    start: OptionalAddress = None
    end: OptionalAddress = None
    points: list[Location] = Field(default_factory=list)
    distance: Annotated[
        float | None, OPTIONAL_NUMERIC, positive("Distance must be a positive number")
    ] = None
    estimatedDuration: Annotated[
        float | None,
        OPTIONAL_NUMERIC,
        positive("Estimated duration must be a positive number of minutes"),
    ] = None
    difficultyLevel: DifficultyLevel = DifficultyLevel.BEGINNER
    routeData: Any = None
    createdBy: Annotated[str, text_rule("Creator ID is required")] = ""
    isPublic: bool = True
    eventId: OptionalText = None


class EventRegistration(EntityModel):
    _entity: ClassVar[EntityName] = EntityName.EVENT_REGISTRATION

    eventId: Annotated[str, text_rule("Event selection is required")] = ""
    userId: Annotated[str, text_rule("User ID is required")] = ""
    userName: Annotated[str, text_rule("User name is required")] = ""
    registrationDate: OptionalText = None
    status: RegistrationStatus = RegistrationStatus.REGISTERED
    notes: OptionalText = None


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

ENTITY_REGISTRY: dict[EntityName, type[EntityModel]] = {
    EntityName.GARAGE: Garage,
    EntityName.CLUB: Club,
    EntityName.PROJECT: Project,
    EntityName.PART: Part,
    EntityName.PROJECT_PART: ProjectPart,
    EntityName.EVENT: Event,
    EntityName.RIDE: Ride,
    EntityName.EVENT_REGISTRATION: EventRegistration,
}


def _normalize(name: str) -> str:
    return name.replace("-", "").replace("_", "").lower()


def resolve_entity(name: str | EntityName) -> EntityName:
    """Resolve ``"event-registration"``, ``"Part"``, ``"project_part"`` etc.

    Raises:
        KeyError: If *name* is not a known entity.
    """
    if isinstance(name, EntityName):
        return name
    wanted = _normalize(name)
    for entity in EntityName:
        if _normalize(entity.value) == wanted:
            return entity
    msg = f"Unknown entity: {name!r}"
    raise KeyError(msg)


def get_entity_model(name: str | EntityName) -> type[EntityModel]:
    return ENTITY_REGISTRY[resolve_entity(name)]


def json_schema(name: str | EntityName) -> dict[str, Any]:
    """JSON schema of an entity's create shape."""
    return get_entity_model(name).model_json_schema()
