"""Tests for the validate CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from garagenet.cli import cli
from tests.conftest import RecordingDataService, valid_draft


@pytest.mark.usefixtures("_isolated_config")
class TestValidateCommand:
    def test_valid_draft_prints_payload(
        self, cli_runner: CliRunner, fake_api: RecordingDataService, tmp_path: Path
    ) -> None:
        draft_file = tmp_path / "ride.json"
        draft_file.write_text(json.dumps(valid_draft("Ride")))
        result = cli_runner.invoke(cli, ["--json", "validate", "ride", "--file", str(draft_file)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["op"] == "validate_ride"
        assert data["data"]["entity"] == "Ride"
        assert data["data"]["payload"]["points"][0]["name"] == "Bear Mountain overlook"
        assert fake_api.calls == []

    def test_invalid_draft(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["validate", "project", "--set", "progressPercentage=150"]
        )
        assert result.exit_code == 1
        assert "progressPercentage: Progress must be between 0 and 100" in result.output
        assert "title: Project title is required" in result.output

    def test_validate_json_errors(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "validate", "event", "--set", "maxParticipants=0"]
        )
        assert result.exit_code == 1
        errors = json.loads(result.output)["error"]["detail"]["errors"]
        assert errors["maxParticipants"] == "Maximum participants must be a positive number"
        assert errors["startDateTime"] == "Start date and time is required"
