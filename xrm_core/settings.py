"""Layered settings: CLI overrides, environment, user config.toml, defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import tomllib

from .npm import DEFAULT_NPM_COMMAND
from .paths import UserDirs
from .ping import DEFAULT_PING_TIMEOUT
from .store import DEFAULT_REGISTRIES_FILE_NAME

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = "config.toml"

_DEFAULTS: dict[str, str] = {
    "home_dir": "",
    "registries_file": DEFAULT_REGISTRIES_FILE_NAME,
    "npm_command": DEFAULT_NPM_COMMAND,
    "ping_timeout": str(DEFAULT_PING_TIMEOUT),
    "log_level": "WARNING",
}
_ENV_KEY_MAP: dict[str, str] = {
    "home_dir": "XRM_HOME",
    "registries_file": "XRM_REGISTRIES_FILE",
    "npm_command": "XRM_NPM",
    "ping_timeout": "XRM_PING_TIMEOUT",
    "log_level": "XRM_LOG_LEVEL",
}


def _load_config_from_file(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.debug("ignoring unreadable settings file %s: %s", path, exc)
        return {}
    return {key: str(value) for key, value in data.items() if not isinstance(value, dict)}


@dataclass(frozen=True)
class XrmSettings:
    """Resolved, typed view over the settings layers."""

    home_dir: Path
    registries_file: str
    npm_command: str
    ping_timeout: float
    log_level: str

    @property
    def registries_path(self) -> Path:
        return self.home_dir / self.registries_file


@dataclass
class SettingsResolver:
    """Resolve settings honoring CLI, env, user config, defaults order."""

    user_dirs: UserDirs | None = None
    cli_overrides: Mapping[str, str] | None = None
    env: Mapping[str, str] | None = None
    defaults: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        self.user_dirs = self.user_dirs or UserDirs()
        self.cli_overrides = dict(self.cli_overrides or {})
        self.env = self.env if self.env is not None else os.environ
        base_defaults = dict(_DEFAULTS)
        if self.defaults:
            base_defaults.update(self.defaults)
        self.defaults = base_defaults

    def resolve_setting(self, key: str) -> str | None:
        """Return the value for `key` using CLI, env, user config, defaults order."""
        if value := self.cli_overrides.get(key):
            return value
        if value := self._env_value(key):
            return value
        if value := self._user_config_layer().get(key):
            return value
        return self.defaults.get(key)

    def settings(self) -> XrmSettings:
        home = self.resolve_setting("home_dir")
        return XrmSettings(
            home_dir=Path(home).expanduser() if home else self.user_dirs.home_dir(),
            registries_file=self.resolve_setting("registries_file") or DEFAULT_REGISTRIES_FILE_NAME,
            npm_command=self.resolve_setting("npm_command") or DEFAULT_NPM_COMMAND,
            ping_timeout=self._float_setting("ping_timeout", DEFAULT_PING_TIMEOUT),
            log_level=(self.resolve_setting("log_level") or "WARNING").upper(),
        )

    @property
    def settings_path(self) -> Path:
        return self.user_dirs.config_dir() / SETTINGS_FILE_NAME

    # ---------- Internal helpers ----------

    def _env_value(self, key: str) -> str | None:
        alias = _ENV_KEY_MAP.get(key)
        if alias:
            return self.env.get(alias)
        return None

    def _user_config_layer(self) -> dict[str, str]:
        return _load_config_from_file(self.settings_path)

    def _float_setting(self, key: str, fallback: float) -> float:
        raw = self.resolve_setting(key)
        try:
            return float(raw) if raw else fallback
        except ValueError:
            logger.warning("invalid %s value %r, using %s", key, raw, fallback)
            return fallback
