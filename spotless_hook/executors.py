"""
Build tool executors for the pre-push hook.

Each supported build tool is described by an ExecutorSpec:
- gradle (gradlew wrapper or gradle on PATH)
- maven (mvnw wrapper or mvn on PATH)
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from spotless_hook.models import Executor, HookLogger


@dataclass(frozen=True)
class ExecutorSpec:
    """Static description of a build tool."""

    tool: str
    wrapper: str
    binary: str
    check: str
    apply: str


DEFAULT_EXECUTORS: dict[Executor, ExecutorSpec] = {
    Executor.GRADLE: ExecutorSpec(
        tool="gradle",
        wrapper="gradlew",
        binary="gradle",
        check="spotlessCheck",
        apply="spotlessApply",
    ),
    Executor.MAVEN: ExecutorSpec(
        tool="maven",
        wrapper="mvnw",
        binary="mvn",
        check="spotless:check",
        apply="spotless:apply",
    ),
}


class BuildExecutor:
    """An ExecutorSpec bound to a repository root."""

    def __init__(
        self,
        spec: ExecutorSpec,
        root: Path,
        logger: HookLogger,
        check: Optional[str] = None,
        apply: Optional[str] = None,
    ):
        self.spec = spec
        self.root = Path(root)
        self.logger = logger
        self._check = check
        self._apply = apply

    @property
    def wrapper_path(self) -> Path:
        return self.root / self.spec.wrapper

    def is_available(self) -> bool:
        """Check that the wrapper script or the system tool can be found."""
        if self.wrapper_path.is_file():
            return True
        if shutil.which(self.spec.binary):
            return True

        self.logger.error(
            "Failed to find %s in root directory %s and %s is not on PATH",
            self.spec.wrapper,
            self.root.absolute(),
            self.spec.binary,
        )
        return False

    def executor_name(self) -> str:
        """Command the hook uses to invoke the build tool."""
        if self.wrapper_path.is_file():
            return str(self.wrapper_path.absolute())
        return self.spec.binary

    def check_command(self) -> str:
        return self.spec.check if self._check is None else self._check

    def apply_command(self) -> str:
        return self.spec.apply if self._apply is None else self._apply


def get_executor(
    executor: Executor | str,
    root: Path,
    logger: HookLogger,
    check: Optional[str] = None,
    apply: Optional[str] = None,
) -> BuildExecutor:
    """
    Build the executor for a build tool.

    Args:
        executor: Executor member or its name (gradle, maven)
        root: Repository root the hook is installed into
        logger: Logger used for availability diagnostics
        check: Override for the check command
        apply: Override for the apply command

    Raises:
        ValueError: If the executor name is not supported
    """
    try:
        kind = Executor(executor)
    except ValueError:
        supported = ", ".join(e.value for e in Executor)
        raise ValueError(f"Unsupported executor: {executor} (expected one of: {supported})") from None

    return BuildExecutor(DEFAULT_EXECUTORS[kind], root, logger, check=check, apply=apply)
