"""Tests for the local .npmrc patcher."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from xrm_core.errors import WriteFailureError
from xrm_core.npmrc import NpmrcPatcher, patch_registry


def test_creates_file_with_single_directive(tmp_path: Path) -> None:
    path = NpmrcPatcher().set_active(tmp_path, "https://new/")

    assert path == tmp_path / ".npmrc"
    assert path.read_text(encoding="utf-8") == "registry=https://new/\n"


def test_replaces_only_registry_line(tmp_path: Path) -> None:
    npmrc = tmp_path / ".npmrc"
    npmrc.write_text("registry=https://old/\ncache=/tmp\n", encoding="utf-8")

    NpmrcPatcher().set_active(tmp_path, "https://new/")

    assert npmrc.read_text(encoding="utf-8") == "registry=https://new/\ncache=/tmp\n"


def test_keeps_order_around_registry_line(tmp_path: Path) -> None:
    npmrc = tmp_path / ".npmrc"
    npmrc.write_text("save-exact=true\nregistry = https://old/\ncache=/tmp", encoding="utf-8")

    NpmrcPatcher().set_active(tmp_path, "https://new/")

    assert npmrc.read_text(encoding="utf-8") == "save-exact=true\nregistry=https://new/\ncache=/tmp"


def test_appends_directive_when_missing(tmp_path: Path) -> None:
    npmrc = tmp_path / ".npmrc"
    npmrc.write_text("cache=/tmp\n", encoding="utf-8")

    NpmrcPatcher().set_active(tmp_path, "https://new/")

    assert npmrc.read_text(encoding="utf-8") == "cache=/tmp\nregistry=https://new/\n"


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("", "registry=https://new/\n"),
        ("cache=/tmp", "cache=/tmp\nregistry=https://new/"),
        ("registry=https://old/\r\ncache=/tmp\r\n", "registry=https://new/\r\ncache=/tmp\r\n"),
    ],
)
def test_patch_registry_edge_cases(content: str, expected: str) -> None:
    assert patch_registry(content, "https://new/") == expected


def test_get_active_reads_directive(tmp_path: Path) -> None:
    patcher = NpmrcPatcher()
    assert patcher.get_active(tmp_path) is None

    (tmp_path / ".npmrc").write_text("cache=/tmp\nregistry=https://old/\n", encoding="utf-8")
    assert patcher.get_active(tmp_path) == "https://old/"


def test_write_failure_is_reported(tmp_path: Path) -> None:
    missing_dir = tmp_path / "does-not-exist"

    with pytest.raises(WriteFailureError):
        NpmrcPatcher().set_active(missing_dir, "https://new/")


@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="needs POSIX permissions")
def test_read_only_file_raises_write_failure(tmp_path: Path) -> None:
    npmrc = tmp_path / ".npmrc"
    npmrc.write_text("registry=https://old/\n", encoding="utf-8")
    npmrc.chmod(0o400)
    try:
        with pytest.raises(WriteFailureError):
            NpmrcPatcher().set_active(tmp_path, "https://new/")
    finally:
        npmrc.chmod(0o600)
