"""GarageNetSettings: CLI flags, environment and garagenet.toml merged.

Highest priority first:

1. keyword arguments (the CLI flags click hands to :meth:`from_cli`)
2. ``GARAGENET_*`` environment variables; ``__`` reaches into a section,
   e.g. ``GARAGENET_AUTH__ID_TOKEN``
3. the garagenet.toml picked by :func:`~garagenet.config.discovery.find_config`
4. defaults from :mod:`garagenet.config.models`
"""

from __future__ import annotations

import logging
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from garagenet.config.discovery import find_config
from garagenet.config.models import ApiConfig, AuthConfig

logger = logging.getLogger(__name__)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one garagenet.toml file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
        unknown = sorted(set(data) - set(settings_cls.model_fields))
        if unknown:
            logger.warning("Ignoring unknown keys in %s: %s", toml_path, ", ".join(unknown))
        self._data = {k: v for k, v in data.items() if k not in unknown}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# settings_customise_sources is a classmethod, so the chosen file is
# handed over per thread for the duration of one construction.
_pending = threading.local()


class GarageNetSettings(BaseSettings):
    """Everything a garagenet run needs to know about its environment.

    Attributes:
        config_path: The garagenet.toml that was read, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GARAGENET_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # output and interaction flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    api: ApiConfig = Field(default_factory=ApiConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        endpoint: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> GarageNetSettings:
        """Build settings for one invocation.

        An explicit *config_path* that does not exist means "no file";
        otherwise the file is discovered from *start* (default: cwd).
        *endpoint* replaces only ``api.endpoint``; the rest of ``[api]``
        still comes from the environment or the file.

        Raises:
            click.ClickException: If the file is not valid TOML or a
                value fails validation.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)
        if endpoint:
            cli_flags["api"] = {"endpoint": endpoint}

        _pending.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            msg = f"Invalid configuration ({source}): {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _pending.toml_path = None
