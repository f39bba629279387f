"""FinsetSettings: one frozen object for flags, environment and finset.toml.

Sources, strongest first:

1. keyword arguments (the CLI's global flags)
2. ``FINSET_*`` environment variables, ``__`` separating section and key
   (``FINSET_ENGINE__MAX_MATERIALIZE=64``)
3. the discovered or explicit ``finset.toml``
4. defaults from :mod:`finset.config.models`
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from finset.config.discovery import find_config, read_toml
from finset.config.models import EngineConfig, OutputConfig, SumTypeConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a parsed ``finset.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._sections: dict[str, Any] = {}
        if path is not None and path.is_file():
            try:
                self._sections = read_toml(path)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._sections.get(field_name), field_name, field_name in self._sections

    def __call__(self) -> dict[str, Any]:
        return dict(self._sections)


# pydantic-settings builds sources inside the constructor, so the TOML path
# chosen by from_cli() is handed over per thread.
_pending = threading.local()


class FinsetSettings(BaseSettings):
    """Resolved settings, stored on the CLI's :class:`AppContext`.

    Attributes:
        config_path: The TOML file that was read, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FINSET_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    engine: EngineConfig = Field(default_factory=EngineConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    sumtype: SumTypeConfig = Field(default_factory=SumTypeConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_pending, "path", None))
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **flags: Any,
    ) -> FinsetSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that is not a file means "no config
        file"; without one, ``finset.toml`` is discovered from *start*.
        """
        path = _explicit_path(config_path) if config_path else find_config(start)
        _pending.path = path
        try:
            return cls(config_path=path, **flags)
        finally:
            _pending.path = None


def _explicit_path(raw: str) -> Path | None:
    path = Path(raw)
    return path if path.is_file() else None
