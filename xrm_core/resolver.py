"""Lookups that map names and active URLs back to known registries."""

from __future__ import annotations

from typing import Iterable

from .errors import RegistryNotFoundError
from .models import UNKNOWN_REGISTRY, RegistryEntry


def resolve_by_url(entries: Iterable[RegistryEntry], url: str | None) -> RegistryEntry:
    """Return the first entry whose url equals ``url``, or ``UNKNOWN_REGISTRY``."""

    if not url:
        return UNKNOWN_REGISTRY
    for entry in entries:
        if entry.url == url:
            return entry
    return UNKNOWN_REGISTRY


def resolve_by_name(entries: Iterable[RegistryEntry], name: str) -> RegistryEntry:
    for entry in entries:
        if entry.name == name:
            return entry
    raise RegistryNotFoundError(f"registry '{name}' not found")
