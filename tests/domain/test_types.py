"""Tests for domain type enums: parametrized."""

import pytest

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

ENUM_CASES = [
    (
        EntityName,
        {
            "Garage",
            "Club",
            "Project",
            "Part",
            "ProjectPart",
            "Event",
            "Ride",
            "EventRegistration",
        },
    ),
    (LocationType, {"GARAGE", "MEETUP", "WAYPOINT", "LANDMARK", "OTHER"}),
    (ContactPreference, {"CALL", "TEXT", "EMAIL", "ANY"}),
    (ProjectStatus, {"PLANNING", "IN_PROGRESS", "STALLED", "COMPLETED"}),
    (
        PartCategory,
        {"ENGINE", "FRAME", "ELECTRICAL", "WHEELS", "SUSPENSION", "BRAKES", "EXHAUST", "OTHER"},
    ),
    (
        PartCondition,
        {"NEW", "USED_EXCELLENT", "USED_GOOD", "USED_FAIR", "REBUILD_REQUIRED"},
    ),
    (PartPriority, {"HIGH", "MEDIUM", "LOW"}),
    (EventType, {"RIDE", "WORKSHOP", "SOCIAL", "FUNDRAISER", "MEETING"}),
    (DifficultyLevel, {"BEGINNER", "INTERMEDIATE", "ADVANCED"}),
    (RegistrationStatus, {"REGISTERED", "ATTENDED", "NO_SHOW", "CANCELLED"}),
]


@pytest.mark.parametrize(
    "enum_cls,expected_values",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_members_and_values(enum_cls: type, expected_values: set[str]) -> None:
    """Each StrEnum has the expected members with matching string values."""
    actual_values = {e.value for e in enum_cls}
    assert actual_values == expected_values
    # StrEnum members compare equal to their string value
    for member in enum_cls:
        assert member == member.value
        assert isinstance(member, str)


def test_unknown_value_rejected() -> None:
    with pytest.raises(ValueError):
        PartCategory("SEAT")
