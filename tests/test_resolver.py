"""Unit tests for registry lookups and the entry model."""

from __future__ import annotations

import pytest

from xrm_core.errors import InvalidEntryError, RegistryNotFoundError
from xrm_core.models import UNKNOWN_REGISTRY, RegistryEntry
from xrm_core.resolver import resolve_by_name, resolve_by_url

NPM = RegistryEntry(name="npm", url="https://registry.npmjs.org/")


def test_resolve_by_url_matches_exactly() -> None:
    assert resolve_by_url([NPM], "https://registry.npmjs.org/") is NPM


def test_resolve_by_url_returns_sentinel_when_unknown() -> None:
    found = resolve_by_url([NPM], "https://example.com/")

    assert found is UNKNOWN_REGISTRY
    assert found.is_unknown
    assert (found.name, found.url) == ("", "")


def test_resolve_by_url_is_not_fooled_by_missing_slash() -> None:
    assert resolve_by_url([NPM], "https://registry.npmjs.org").is_unknown
    assert resolve_by_url([NPM], None).is_unknown
    assert resolve_by_url([], "https://registry.npmjs.org/").is_unknown


def test_resolve_by_url_returns_first_match() -> None:
    mirror = RegistryEntry(name="mirror", url=NPM.url)
    assert resolve_by_url([NPM, mirror], NPM.url) is NPM


def test_resolve_by_name() -> None:
    yarn = RegistryEntry(name="yarn", url="https://registry.yarnpkg.com/")

    assert resolve_by_name([NPM, yarn], "yarn") is yarn
    with pytest.raises(RegistryNotFoundError):
        resolve_by_name([NPM, yarn], "Yarn")


@pytest.mark.parametrize(
    ("name", "url"),
    [
        ("", "https://registry.npmjs.org/"),
        ("   ", "https://registry.npmjs.org/"),
        ("npm", "registry.npmjs.org"),
        ("npm", "ftp://registry.npmjs.org/"),
        ("npm", ""),
    ],
)
def test_entry_rejects_invalid_values(name: str, url: str) -> None:
    with pytest.raises(InvalidEntryError):
        RegistryEntry(name=name, url=url)


def test_entry_strips_whitespace() -> None:
    entry = RegistryEntry(name=" npm ", url=" https://registry.npmjs.org/ ")
    assert entry.to_dict() == {"name": "npm", "url": "https://registry.npmjs.org/"}
