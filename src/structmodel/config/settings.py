"""Unified settings: init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags or explicit arguments
  2. Env vars: ``STRUCTMODEL_*`` prefix
  3. TOML file: ``structmodel.toml`` discovered via walk-up
  4. Code defaults

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` fed by
:func:`find_config`. Without explicit settings, :class:`ModelIO` loads them
the same way, so a project's ``structmodel.toml`` applies to library calls
and to the CLI alike.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

CONFIG_FILENAME = "structmodel.toml"
CONFIG_ENV_VAR = "STRUCTMODEL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Locate the ``structmodel.toml`` that governs *start* (default: cwd).

    ``STRUCTMODEL_CONFIG`` names the file directly and disables the search;
    if it points at nothing, no config applies. Otherwise the nearest
    ``structmodel.toml`` in *start* or one of its parents wins.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        candidate = Path(explicit)
        return candidate if candidate.is_file() else None

    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )



class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``structmodel.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class StructSettings(BaseSettings):
    """Settings shared by ModelIO and the CLI.

    Attributes:
        json_suffix: Expected filename suffix; others only trigger a warning.
        encoding: Text encoding for reading and writing model files.
        default_indent: Indent width used when a call passes ``None``.
        validate_on_read: Whether ``read_from_file`` validates by default.
        verbose: Enable DEBUG-level logging.
        log_json: Emit JSON log lines instead of console output.
        config_path: The TOML file the settings were loaded from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "STRUCTMODEL_",
    }

    json_suffix: str = ".json"
    encoding: str = "utf-8"
    default_indent: int = 0
    validate_on_read: bool = True

    verbose: bool = False
    log_json: bool = False

    config_path: Path | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> StructSettings:
        """Construct settings, discovering ``structmodel.toml`` if needed.

        An explicit *config_path* wins over walk-up discovery from *start*
        (default: cwd). *overrides* take priority over every other source.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
