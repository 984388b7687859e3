"""Registry entry descriptor shared by the store and the resolver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlparse

from .errors import InvalidEntryError

_ALLOWED_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class RegistryEntry:
    """Immutable ``name -> url`` pair for a package registry."""

    name: str
    url: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self._validate_name(self.name))
        object.__setattr__(self, "url", self._validate_url(self.url))

    @staticmethod
    def _validate_name(value: str) -> str:
        name = str(value or "").strip()
        if not name:
            raise InvalidEntryError("registry name cannot be empty.")
        return name

    @staticmethod
    def _validate_url(value: str) -> str:
        url = str(value or "").strip()
        parsed = urlparse(url)
        if parsed.scheme not in _ALLOWED_SCHEMES or not parsed.netloc:
            raise InvalidEntryError(f"registry url must be an absolute http(s) URL: {url!r}")
        return url

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RegistryEntry":
        """Build an entry from persisted data without checking the url scheme."""

        return _unchecked_entry(str(data["name"]), str(data["url"]))

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "url": self.url}

    @property
    def is_unknown(self) -> bool:
        return not self.name and not self.url


def _unchecked_entry(name: str, url: str) -> RegistryEntry:
    entry = object.__new__(RegistryEntry)
    object.__setattr__(entry, "name", name)
    object.__setattr__(entry, "url", url)
    return entry


UNKNOWN_REGISTRY = _unchecked_entry("", "")
