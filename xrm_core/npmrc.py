"""Line-oriented patching of a project-local ``.npmrc`` file."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import WriteFailureError

logger = logging.getLogger(__name__)

NPMRC_FILE_NAME = ".npmrc"
REGISTRY_KEY = "registry"


def _directive(url: str) -> str:
    return f"{REGISTRY_KEY}={url}"


class NpmrcPatcher:
    """Rewrite the registry directive of ``<directory>/.npmrc`` in place."""

    def __init__(self, file_name: str = NPMRC_FILE_NAME) -> None:
        self.file_name = file_name

    def path_for(self, directory: Path | str) -> Path:
        return Path(directory) / self.file_name

    def set_active(self, directory: Path | str, url: str) -> Path:
        path = self.path_for(directory)
        try:
            if not path.exists():
                path.write_text(_directive(url) + "\n", encoding="utf-8")
                logger.debug("created %s", path)
                return path
            content = path.read_text(encoding="utf-8")
            path.write_text(patch_registry(content, url), encoding="utf-8")
        except OSError as exc:
            raise WriteFailureError(f"failed to update {path}: {exc}") from exc
        logger.debug("patched registry directive in %s", path)
        return path

    def get_active(self, directory: Path | str) -> str | None:
        path = self.path_for(directory)
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise WriteFailureError(f"failed to read {path}: {exc}") from exc
        for raw in lines:
            line = raw.strip()
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            if key.strip() == REGISTRY_KEY:
                return value.strip() or None
        return None


def patch_registry(content: str, url: str) -> str:
    """Replace the first line mentioning ``registry``; append one when none does."""

    lines = content.split("\n")
    for index, line in enumerate(lines):
        if REGISTRY_KEY in line:
            ending = "\r" if line.endswith("\r") else ""
            lines[index] = _directive(url) + ending
            return "\n".join(lines)

    if not content:
        return _directive(url) + "\n"
    if content.endswith("\n"):
        return content + _directive(url) + "\n"
    return content + "\n" + _directive(url)
