"""Bridge to the global registry setting owned by the npm executable."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Sequence

from .errors import ExternalToolError

logger = logging.getLogger(__name__)

DEFAULT_NPM_COMMAND = "npm"


class NpmConfigBridge:
    """Read and write ``registry`` through ``npm config``.

    The active global registry is never cached: every call runs npm once.
    """

    def __init__(self, command: str = DEFAULT_NPM_COMMAND, *, timeout: float | None = None) -> None:
        self.command = command
        self.timeout = timeout

    def get_active(self) -> str:
        result = self._run(["config", "get", "registry"])
        return (result.stdout or "").strip()

    def set_active(self, url: str) -> None:
        self._run(["config", "set", "registry", url])

    def _executable(self) -> str:
        # resolves npm.cmd on Windows
        return shutil.which(self.command) or self.command

    def _run(self, args: Sequence[str]) -> subprocess.CompletedProcess[str]:
        command = [self._executable(), *args]
        logger.debug("npm command cmd=%s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                check=False,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise ExternalToolError(
                f"{self.command} not found. Install it and ensure it is available in PATH.",
                command=command,
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise ExternalToolError(
                f"{self.command} timed out after {self.timeout:.1f}s", command=command
            ) from exc
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise ExternalToolError(
                _format_failure(command, result.returncode, stderr),
                command=command,
                returncode=result.returncode,
                stderr=stderr,
            )
        return result


def _format_failure(command: Sequence[str], returncode: int, stderr: str) -> str:
    joined = " ".join(command)
    if stderr:
        return f"`{joined}` exited with {returncode}: {stderr}"
    return f"`{joined}` exited with {returncode}"
