"""JSON-backed storage for the list of known registries."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Sequence

from .errors import (
    ConfigCorruptError,
    ConfigMissingError,
    DuplicateNameError,
    RegistryNotFoundError,
    WriteFailureError,
)
from .models import RegistryEntry

logger = logging.getLogger(__name__)

DEFAULT_REGISTRIES_FILE_NAME = "xxg-registries.json"

DEFAULT_REGISTRIES: tuple[RegistryEntry, ...] = (
    RegistryEntry(name="npm", url="https://registry.npmjs.org/"),
    RegistryEntry(name="yarn", url="https://registry.yarnpkg.com/"),
    RegistryEntry(name="cnpm", url="http://r.cnpmjs.org/"),
    RegistryEntry(name="taobao", url="https://registry.npmmirror.com/"),
    RegistryEntry(name="npmMirror", url="https://skimdb.npmjs.com/registry/"),
)


def _serialize(entries: Iterable[RegistryEntry], *, trailing_newline: bool = False) -> str:
    text = json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False)
    return text + "\n" if trailing_newline else text


class RegistryStore:
    """Load and persist the ordered registry list.

    The whole file is rewritten on every mutation; a crash in the middle of a
    write can leave it truncated.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def initialize(self) -> bool:
        """Seed the file with the default registries unless it already exists."""

        if self.path.exists():
            logger.debug("registries file %s already present", self.path)
            return False
        self.save(DEFAULT_REGISTRIES)
        logger.debug("registries file %s created with defaults", self.path)
        return True

    def load(self) -> list[RegistryEntry]:
        if not self.path.exists():
            raise ConfigMissingError(f"registries file {self.path} does not exist")
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigCorruptError(f"registries file {self.path} is not valid JSON: {exc}") from exc
        except OSError as exc:
            raise ConfigCorruptError(f"unable to read {self.path}: {exc}") from exc
        if not isinstance(raw, list):
            raise ConfigCorruptError(f"registries file {self.path} must contain a list")

        entries: list[RegistryEntry] = []
        for item in raw:
            if not _is_stored_entry(item):
                raise ConfigCorruptError(
                    f"registries file {self.path} holds an invalid entry: {item!r}"
                )
            entries.append(RegistryEntry.from_dict(item))
        return entries

    def save(self, entries: Sequence[RegistryEntry]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            text = _serialize(entries, trailing_newline=self._ends_with_newline())
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise WriteFailureError(f"failed to save registries file {self.path}: {exc}") from exc
        logger.debug("saved %d registries to %s", len(entries), self.path)

    def add(self, entry: RegistryEntry) -> list[RegistryEntry]:
        entries = self.load()
        if any(existing.name == entry.name for existing in entries):
            raise DuplicateNameError(f"registry '{entry.name}' already exists")
        entries.append(entry)
        self.save(entries)
        return entries

    def remove(self, name: str) -> list[RegistryEntry]:
        entries = self.load()
        for index, entry in enumerate(entries):
            if entry.name == name:
                del entries[index]
                self.save(entries)
                return entries
        raise RegistryNotFoundError(f"registry '{name}' not found")

    def _ends_with_newline(self) -> bool:
        try:
            return self.path.read_bytes().endswith(b"\n")
        except OSError:
            return False


def _is_stored_entry(item: object) -> bool:
    if not isinstance(item, dict):
        return False
    name = item.get("name")
    return isinstance(name, str) and bool(name.strip()) and isinstance(item.get("url"), str)
