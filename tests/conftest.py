"""Shared pytest fixtures and test helpers for garagenet tests."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from garagenet.infrastructure.api import DataServiceError
from garagenet.infrastructure.client import AuthMode, ClientSelector
from garagenet.infrastructure.identity import Identity, StaticIdentityProvider

# ---------------------------------------------------------------------------
# Fake data service
# ---------------------------------------------------------------------------


class RecordingDataService:
    """In-memory stand-in for the managed data service.

    Records every create call; returns the payload with a generated id.
    """

    def __init__(self, *, fail_with: str | None = None) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.modes: list[AuthMode] = []
        self.fail_with = fail_with

    def create(self, entity_name: str, payload: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((entity_name, copy.deepcopy(payload)))
        if self.fail_with is not None:
            raise DataServiceError(self.fail_with, status_code=500)
        return {"id": f"{entity_name.lower()}-{len(self.calls)}", **payload}

    def factory(self, mode: AuthMode, identity: Identity | None) -> RecordingDataService:
        self.modes.append(mode)
        return self


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo the handler swap configure_logging() does during CLI runs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def data_service() -> RecordingDataService:
    return RecordingDataService()


@pytest.fixture
def failing_service() -> RecordingDataService:
    return RecordingDataService(fail_with="Network unreachable")


@pytest.fixture
def identity_provider() -> StaticIdentityProvider:
    """Signed-out identity provider; tests sign in as needed."""
    return StaticIdentityProvider()


@pytest.fixture
def clients(
    identity_provider: StaticIdentityProvider, data_service: RecordingDataService
) -> ClientSelector:
    return ClientSelector(identity_provider, data_service.factory)


@pytest.fixture
def failing_clients(
    identity_provider: StaticIdentityProvider, failing_service: RecordingDataService
) -> ClientSelector:
    return ClientSelector(identity_provider, failing_service.factory)


@pytest.fixture
def veteran() -> Identity:
    return Identity(user_id="user-42", username="jsmith", token="id-token-abc")


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no GARAGENET_* environment.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command
    test classes so a developer's own garagenet.toml (project or per-user)
    is never picked up.
    """
    import os

    for key in list(os.environ):
        if key.startswith("GARAGENET_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_api(monkeypatch: pytest.MonkeyPatch) -> RecordingDataService:
    """Route the CLI's GraphQL client factory to a recording service."""
    service = RecordingDataService()

    def _factory(endpoint: str, api_key: str | None, *, timeout: float = 10.0) -> Any:
        return service.factory

    monkeypatch.setattr("garagenet.infrastructure.client.graphql_client_factory", _factory)
    return service


# ---------------------------------------------------------------------------
# Shared test helpers (valid drafts per entity)
# ---------------------------------------------------------------------------


def valid_address(**overrides: Any) -> dict[str, Any]:
    return {
        "street": "100 Harley Way",
        "city": "Kingston",
        "state": "NY",
        "zip": "12401",
        "country": "USA",
        **overrides,
    }


def valid_contact(**overrides: Any) -> dict[str, Any]:
    return {
        "name": "Jim Smith",
        "title": "Shop Foreman",
        "email": "jim@example.com",
        "phone": "5551234567",
        "website": "",
        "preference": "CALL",
        **overrides,
    }


def valid_location(**overrides: Any) -> dict[str, Any]:
    return {
        "name": "Bear Mountain overlook",
        "type": "LANDMARK",
        "stop": True,
        "lat": 41.3126,
        "long": -74.0068,
        **overrides,
    }


def valid_draft(entity: str) -> dict[str, Any]:
    """A draft for *entity* that passes validation."""
    drafts: dict[str, dict[str, Any]] = {
        "Garage": {
            "name": "Combat Customs",
            "address": valid_address(),
            "contacts": [valid_contact()],
            "specialties": ["Choppers"],
            "amenities": ["Welding"],
            "website": "https://combatcustoms.example.com",
        },
        "Club": {
            "name": "Iron Brotherhood MC",
            "description": "Veteran riders supporting veteran riders.",
            "contacts": [valid_contact()],
        },
        "Project": {
            "title": "1978 Shovelhead rebuild",
            "veteranId": "vet-1",
            "veteranName": "Sam Ortiz",
            "status": "IN_PROGRESS",
            "progressPercentage": 40,
            "garageId": "garage-1",
        },
        "Part": {
            "name": "Carburetor",
            "category": "ENGINE",
            "condition": "NEW",
            "cost": "$150",
            "garageId": "garage-1",
            "fitsModels": ["FXR", "Dyna"],
        },
        "ProjectPart": {
            "projectId": "project-1",
            "partName": "Clutch cable",
            "priority": "HIGH",
        },
        "Event": {
            "title": "Spring kickoff ride",
            "eventType": "RIDE",
            "startDateTime": "2026-04-18T09:00:00Z",
            "maxParticipants": 40,
            "hostClubId": "club-1",
        },
        "Ride": {
            "name": "Catskills loop",
            "createdBy": "user-42",
            "points": [valid_location()],
            "distance": 182.5,
            "estimatedDuration": 240,
        },
        "EventRegistration": {
            "eventId": "event-1",
            "userId": "user-42",
            "userName": "jsmith",
        },
    }
    return copy.deepcopy(drafts[entity])
