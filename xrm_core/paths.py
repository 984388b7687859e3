"""Platform-independent helpers for xrm paths."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

_DEFAULT_APP_NAME = "xrm"


@dataclass(frozen=True)
class UserDirs:
    """Expose the user's home and the platform-configured settings directory."""

    app_name: str = _DEFAULT_APP_NAME
    home_dir_override: Path | None = None
    config_dir_override: Path | None = None

    def home_dir(self) -> Path:
        return self.home_dir_override if self.home_dir_override else Path.home()

    def config_dir(self) -> Path:
        return (
            self.config_dir_override
            if self.config_dir_override
            else Path(user_config_dir(self.app_name, appauthor=False))
        )
