"""Application object that wires together the xrm core services."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from xrm_core.builtins import register_builtin_commands
from xrm_core.commands import CommandRegistry
from xrm_core.npm import NpmConfigBridge
from xrm_core.npmrc import NpmrcPatcher
from xrm_core.settings import SettingsResolver, XrmSettings
from xrm_core.store import RegistryStore


@dataclass(frozen=True)
class XrmAppStatus:
    registries_path: Path
    created: bool
    commands: tuple[str, ...]


class XrmApp:
    """Entry point that glues settings, storage, npm bridges and commands."""

    def __init__(
        self,
        *,
        start_dir: Path | str | None = None,
        resolver: SettingsResolver | None = None,
        bridge: NpmConfigBridge | None = None,
        patcher: NpmrcPatcher | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger("xrm_core.app")
        self.resolver = resolver or SettingsResolver()
        self.settings: XrmSettings = self.resolver.settings()
        self.cwd = Path(start_dir) if start_dir else Path.cwd()
        self.store = RegistryStore(self.settings.registries_path)
        self.bridge = bridge or NpmConfigBridge(self.settings.npm_command)
        self.patcher = patcher or NpmrcPatcher()
        self.commands = CommandRegistry()
        self._builtins_registered = False

    def _register_builtins(self) -> None:
        if self._builtins_registered:
            return
        register_builtin_commands(self.commands)
        self._builtins_registered = True

    def bootstrap(self) -> XrmAppStatus:
        self._register_builtins()
        created = self.store.initialize()
        if created:
            self.logger.info("initialized registries file %s", self.store.path)
        return XrmAppStatus(
            registries_path=self.store.path,
            created=created,
            commands=self.commands.names(),
        )
