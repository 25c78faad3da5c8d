"""Tests for DraftService draft handling."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

import pytest

from garagenet.domain.paths import FieldPath
from garagenet.domain.validation import ValidationResult
from garagenet.services.base import DraftService


class _NoteDraft(DraftService):
    defaults: ClassVar[Mapping[str, Any]] = {"title": "", "tags": [], "meta": {"pinned": False}}


class TestDraftService:
    def test_starts_from_defaults(self) -> None:
        assert _NoteDraft().draft == {"title": "", "tags": [], "meta": {"pinned": False}}

    def test_instances_do_not_share_state(self) -> None:
        first, second = _NoteDraft(), _NoteDraft()
        first.draft["tags"].append("x")
        first.set_value("meta.pinned", True)
        assert second.draft["tags"] == []
        assert second.get_value("meta.pinned") is False
        assert _NoteDraft.defaults["tags"] == []

    def test_initial_overlay_is_reset_baseline(self) -> None:
        service = _NoteDraft({"title": "Preset"})
        service.set_value("title", "Edited")
        service.reset()
        assert service.get_value("title") == "Preset"

    def test_initialize_replaces_baseline(self) -> None:
        service = _NoteDraft({"title": "Preset"})
        service.initialize()
        assert service.get_value("title") == ""

    def test_set_value_clears_field_error(self) -> None:
        service = _NoteDraft()
        service._record_validation(
            ValidationResult(
                ok=False,
                errors={FieldPath.of("title"): "Title is required", FieldPath.of("tags"): "x"},
            )
        )
        service.set_value("title", "Fixed")
        assert service.error_messages() == {"tags": "x"}

    def test_update_merges_top_level(self) -> None:
        service = _NoteDraft()
        values = {"title": "T", "tags": ["a"]}
        service.update(values)
        values["tags"].append("b")
        assert service.draft == {"title": "T", "tags": ["a"], "meta": {"pinned": False}}

    def test_get_missing_raises(self) -> None:
        with pytest.raises(KeyError):
            _NoteDraft().get_value("missing")
