"""
spotless-hook: Git pre-push hook installer for spotless.

This package installs a managed block into ``.git/hooks/pre-push`` that
runs the spotless check of a build tool before every push, applies the
fixes and aborts the push when violations are found.
"""

__version__ = "0.1.0"

from spotless_hook.models import (
    Executor,
    HookLogger,
    InstallResult,
    InstallStatus,
)
from spotless_hook.executors import BuildExecutor, ExecutorSpec, get_executor
from spotless_hook.hooks.install import GitPrePushHookInstaller
from spotless_hook.hooks.template import render_hook_block
from spotless_hook.config import HookConfig

__all__ = [
    # Version
    "__version__",
    # Models
    "Executor",
    "HookLogger",
    "InstallResult",
    "InstallStatus",
    # Core
    "BuildExecutor",
    "ExecutorSpec",
    "get_executor",
    "GitPrePushHookInstaller",
    "render_hook_block",
    "HookConfig",
]
