"""DraftService: shared foundation for forms and dialogs.

A draft service owns the unsaved data for exactly one record.  Drafts
are plain nested dicts/lists so they mirror what a user typed, including
invalid values; validation happens only on submit/confirm.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from garagenet.domain.paths import FieldPath, as_path, get_path, set_path
from garagenet.domain.validation import ValidationResult

logger = logging.getLogger(__name__)


class DraftService:
    """Base for services holding one in-memory draft.

    Subclasses set :attr:`defaults` to the blank draft shown to a user.
    No two instances share draft state: every (re)initialisation deep-copies.

    Usage::

        class GarageForm(FormController):
            defaults = {"name": "", "contacts": [{...}], ...}
    """

    defaults: ClassVar[Mapping[str, Any]] = {}

    def __init__(self, defaults: Mapping[str, Any] | None = None) -> None:
        self.draft: dict[str, Any] = {}
        self.errors: dict[FieldPath, str] = {}
        self._baseline: dict[str, Any] = {}
        self.initialize(defaults)

    def initialize(self, defaults: Mapping[str, Any] | None = None) -> None:
        """Reset the draft to the class defaults, overlaid with *defaults*.

        The overlay becomes the baseline that :meth:`reset` returns to.
        """
        self._baseline = copy.deepcopy(dict(defaults)) if defaults else {}
        self.reset()

    def reset(self) -> None:
        """Discard edits and return to the initial draft."""
        draft = copy.deepcopy(dict(self.defaults))
        draft.update(copy.deepcopy(self._baseline))
        self.draft = draft
        self.errors = {}

    def get_value(self, path: FieldPath | str) -> Any:
        return get_path(self.draft, path)

    def set_value(self, path: FieldPath | str, value: Any) -> None:
        fp = as_path(path)
        set_path(self.draft, fp, value)
        self.errors.pop(fp, None)

    def update(self, values: Mapping[str, Any]) -> None:
        """Merge top-level *values* into the draft (e.g. from a JSON file)."""
        for key, value in values.items():
            self.set_value(FieldPath.of(key), copy.deepcopy(value))

    def error_messages(self) -> dict[str, str]:
        return {str(path): msg for path, msg in sorted(self.errors.items())}

    def _record_validation(self, result: ValidationResult) -> None:
        self.errors = dict(result.errors)
        if not result.ok:
            logger.debug(
                "%s draft failed validation on %d field(s)",
                type(self).__name__,
                len(result.errors),
            )
