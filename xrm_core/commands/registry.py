"""In-memory registry for xrm commands."""

from __future__ import annotations

from .entry import CommandEntry
from .errors import CommandCollisionError, CommandNotFoundError


class CommandRegistry:
    """Track command classes by name, keeping registration order."""

    def __init__(self) -> None:
        self._by_name: dict[str, CommandEntry] = {}

    def register(self, entry: CommandEntry) -> None:
        """Register an entry, raising on name collisions."""

        if entry.name in self._by_name:
            raise CommandCollisionError(f"{entry.name} is already registered.")
        self._by_name[entry.name] = entry

    def resolve(self, name: str) -> CommandEntry:
        entry = self._by_name.get(name)
        if entry is None:
            raise CommandNotFoundError(f"unknown command '{name}'.")
        return entry

    def names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def entries(self) -> tuple[CommandEntry, ...]:
        """Return all registered entries in registration order."""

        return tuple(self._by_name.values())
