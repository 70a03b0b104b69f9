"""
Git pre-push hook installation.

The hook file may already exist with content we do not own, so it is
only ever appended to, never rewritten.
"""

from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import Optional, Protocol

from spotless_hook.hooks.template import SHEBANG, contains_hook_block, render_hook_block
from spotless_hook.models import HookLogger, InstallResult, InstallStatus

HOOK_NAME = "pre-push"


class HookExecutor(Protocol):
    """What the installer needs from a build tool."""

    def is_available(self) -> bool: ...

    def executor_name(self) -> str: ...

    def check_command(self) -> str: ...

    def apply_command(self) -> str: ...


def hook_path(root: Path) -> Path:
    """Location of the pre-push hook inside a working copy."""
    return Path(root) / ".git" / "hooks" / HOOK_NAME


def is_git_repo(root: Path) -> bool:
    """Check that ``.git/config`` exists as a regular file under root."""
    return (Path(root) / ".git" / "config").is_file()


def is_hook_installed(root: Path) -> bool:
    """Check whether the pre-push hook already carries the spotless block."""
    path = hook_path(root)
    if not path.is_file():
        return False
    return contains_hook_block(path.read_text(encoding="utf-8"))


class GitPrePushHookInstaller:
    """
    Installs the spotless block into ``.git/hooks/pre-push``.

    Usage:
        executor = get_executor(Executor.GRADLE, root, logger)
        installer = GitPrePushHookInstaller(logger, root, executor)
        result = installer.install()

    Failures never raise; they are reported through the logger and the
    returned InstallResult.
    """

    def __init__(self, logger: Optional[HookLogger], root: Path, executor: HookExecutor):
        self.logger = logger or logging.getLogger("spotless_hook")
        self.root = Path(root)
        self.executor = executor

    @property
    def hook_file(self) -> Path:
        return hook_path(self.root)

    def install(self) -> InstallResult:
        """
        Install the pre-push hook.

        Skips installation when the root is not a git repository, when the
        executor is unavailable, or when the block is already present.
        An existing block is never replaced, even if it was written for a
        different executor or different commands.

        Returns:
            InstallResult describing what happened
        """
        self.logger.info("Installing git pre-push hook")

        if not is_git_repo(self.root):
            self.logger.error("Git not found in root directory")
            return InstallResult(InstallStatus.GIT_NOT_FOUND, message="Git not found in root directory")

        if not self.executor.is_available():
            return InstallResult(InstallStatus.EXECUTOR_UNAVAILABLE, message="Executor not available")

        hook_file = self.hook_file
        hook_content = ""
        if not hook_file.exists():
            self.logger.info("Git pre-push hook not found, creating it")
            failure = self._create_hook_file(hook_file)
            if failure:
                return failure
            hook_content += SHEBANG

        try:
            existing = hook_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return self._fail(hook_file, "Failed to read pre-push hook file %s: %s", e)

        if contains_hook_block(existing):
            self.logger.info("Skipping, git pre-push hook already installed %s", hook_file.absolute())
            return InstallResult(
                InstallStatus.ALREADY_INSTALLED,
                hook_path=hook_file,
                message="Git pre-push hook already installed",
            )

        hook_content += render_hook_block(
            self.executor.executor_name(),
            self.executor.check_command(),
            self.executor.apply_command(),
        )

        try:
            with open(hook_file, "a", encoding="utf-8") as f:
                f.write(hook_content)
        except OSError as e:
            return self._fail(hook_file, "Failed to write pre-push hook file %s: %s", e)

        self.logger.info("Git pre-push hook installed successfully to the file %s", hook_file.absolute())
        return InstallResult(
            InstallStatus.INSTALLED,
            hook_path=hook_file,
            message="Git pre-push hook installed",
        )

    def _create_hook_file(self, hook_file: Path) -> Optional[InstallResult]:
        """Create an empty, owner-executable hook file."""
        # No lock: two concurrent installs may both see the file as missing.
        try:
            hook_file.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return self._fail(hook_file.parent, "Failed to create hooks directory %s: %s", e)

        try:
            hook_file.touch(exist_ok=False)
        except OSError as e:
            return self._fail(hook_file, "Failed to create pre-push hook file %s: %s", e)

        try:
            hook_file.chmod(hook_file.stat().st_mode | stat.S_IXUSR)
        except OSError as e:
            return self._fail(hook_file, "Can not make file executable %s: %s", e)

        return None

    def _fail(self, path: Path, msg: str, error: Exception) -> InstallResult:
        self.logger.error(msg, path.absolute(), error)
        return InstallResult(InstallStatus.FAILED, hook_path=self.hook_file, message=str(error))
