"""Entity names and classification enums.

Every enumerated field of the directory schema is a closed StrEnum.
Unknown values are rejected at the validation boundary, before any
payload reaches the managed data service.
"""

from __future__ import annotations

from enum import StrEnum


class EntityName(StrEnum):
    """Persisted entity types of the managed data service."""

    GARAGE = "Garage"
    CLUB = "Club"
    PROJECT = "Project"
    PART = "Part"
    PROJECT_PART = "ProjectPart"
    EVENT = "Event"
    RIDE = "Ride"
    EVENT_REGISTRATION = "EventRegistration"


class LocationType(StrEnum):
    """Kind of point a Location marks on a route or map."""

    GARAGE = "GARAGE"
    MEETUP = "MEETUP"
    WAYPOINT = "WAYPOINT"
    LANDMARK = "LANDMARK"
    OTHER = "OTHER"


class ContactPreference(StrEnum):
    """Preferred way of reaching a contact."""

    CALL = "CALL"
    TEXT = "TEXT"
    EMAIL = "EMAIL"
    ANY = "ANY"


class ProjectStatus(StrEnum):
    PLANNING = "PLANNING"
    IN_PROGRESS = "IN_PROGRESS"
    STALLED = "STALLED"
    COMPLETED = "COMPLETED"


class PartCategory(StrEnum):
    ENGINE = "ENGINE"
    FRAME = "FRAME"
    ELECTRICAL = "ELECTRICAL"
    WHEELS = "WHEELS"
    SUSPENSION = "SUSPENSION"
    BRAKES = "BRAKES"
    EXHAUST = "EXHAUST"
    OTHER = "OTHER"


class PartCondition(StrEnum):
    NEW = "NEW"
    USED_EXCELLENT = "USED_EXCELLENT"
    USED_GOOD = "USED_GOOD"
    USED_FAIR = "USED_FAIR"
    REBUILD_REQUIRED = "REBUILD_REQUIRED"


class PartPriority(StrEnum):
    """How urgently a project needs a part."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class EventType(StrEnum):
    RIDE = "RIDE"
    WORKSHOP = "WORKSHOP"
    SOCIAL = "SOCIAL"
    FUNDRAISER = "FUNDRAISER"
    MEETING = "MEETING"


class DifficultyLevel(StrEnum):
    """Rider experience a route is suited to."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class RegistrationStatus(StrEnum):
    """Attendance state of an event registration."""

    REGISTERED = "REGISTERED"
    ATTENDED = "ATTENDED"
    NO_SHOW = "NO_SHOW"
    CANCELLED = "CANCELLED"
