"""
Data models for spotless-hook.

These models describe the outcome of a hook installation and the
logging capability the installer is handed by its caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Protocol


class HookLogger(Protocol):
    """Logging capability injected into the installer.

    Messages use ``%``-style positional formatting, so a plain
    ``logging.Logger`` satisfies this protocol.
    """

    def info(self, msg: str, *args: Any) -> None: ...

    def error(self, msg: str, *args: Any) -> None: ...


class Executor(str, Enum):
    """Supported build tools that can run the spotless check."""

    GRADLE = "gradle"
    MAVEN = "maven"


class InstallStatus(str, Enum):
    """Outcome of a single install attempt."""

    INSTALLED = "installed"
    ALREADY_INSTALLED = "already_installed"
    GIT_NOT_FOUND = "git_not_found"
    EXECUTOR_UNAVAILABLE = "executor_unavailable"
    FAILED = "failed"


@dataclass
class InstallResult:
    """Result of a hook installation."""

    status: InstallStatus
    hook_path: Optional[Path] = None
    message: str = ""

    @property
    def success(self) -> bool:
        return self.status in (InstallStatus.INSTALLED, InstallStatus.ALREADY_INSTALLED)
