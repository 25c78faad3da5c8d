"""LocationDialog: modal capture of a single Location value.

The dialog is a reusable value-capture primitive: it validates the
coordinates, hands the captured :class:`Location` to its caller, and
resets.  It never talks to the data service; Ride and Event flows
compose its output into their own drafts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from garagenet.domain.entities import Location
from garagenet.domain.paths import FieldPath
from garagenet.domain.types import LocationType
from garagenet.domain.validation import validate_location
from garagenet.services.base import DraftService
from garagenet.services.result import (
    DIALOG_CLOSED,
    ServiceError,
    ServiceResult,
    validation_failure,
)

logger = logging.getLogger(__name__)

LOCATION_DEFAULTS: dict[str, Any] = {
    "name": "",
    "title": "",
    "description": "",
    "type": LocationType.WAYPOINT.value,
    "stop": False,
    "lat": 0,
    "long": 0,
}

_OP = "capture_location"


class LocationDialog(DraftService):
    """Open/confirm/cancel lifecycle around a Location draft.

    Args:
        on_confirm: Called with the validated :class:`Location` on confirm.
    """

    defaults: ClassVar[Mapping[str, Any]] = LOCATION_DEFAULTS

    def __init__(self, on_confirm: Callable[[Location], None] | None = None) -> None:
        super().__init__()
        self._on_confirm = on_confirm
        self.is_open = False

    def open(self, initial: Mapping[str, Any] | None = None) -> None:
        """Show the dialog, pre-filled from *initial* where given."""
        self.initialize(initial)
        self.is_open = True

    def cancel(self) -> None:
        """Close without capturing; the draft is discarded."""
        self.initialize()
        self.is_open = False

    def set_value(self, path: FieldPath | str, value: Any) -> None:
        # Nothing can be typed into a closed dialog.
        if not self.is_open:
            msg = "Location dialog is not open"
            raise RuntimeError(msg)
        super().set_value(path, value)

    def confirm(self) -> ServiceResult:
        """Validate and yield the captured location.

        Invalid input keeps the dialog open with field errors.
        """
        if not self.is_open:
            return ServiceResult(
                ok=False,
                op=_OP,
                error=ServiceError(code=DIALOG_CLOSED, message="Location dialog is not open"),
            )

        result = validate_location(self.draft)
        self._record_validation(result)
        if not result.ok:
            return validation_failure(_OP, result.messages())

        location: Location = result.value
        logger.debug("Captured location %r", location.name)
        if self._on_confirm is not None:
            self._on_confirm(location)
        self.initialize()
        self.is_open = False
        return ServiceResult(
            ok=True,
            op=_OP,
            data={"location": location.model_dump(mode="json", exclude_none=True)},
        )
