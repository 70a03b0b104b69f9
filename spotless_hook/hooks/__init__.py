"""
Git hooks for spotless-hook.

Provides utilities for:
- Rendering the managed pre-push block
- Installing it into a working copy
"""

from spotless_hook.hooks.git import find_repo_root, get_repo_root
from spotless_hook.hooks.install import (
    GitPrePushHookInstaller,
    hook_path,
    is_git_repo,
    is_hook_installed,
)
from spotless_hook.hooks.template import (
    HOOK_END_MARKER,
    HOOK_START_MARKER,
    contains_hook_block,
    render_hook_block,
)

__all__ = [
    "GitPrePushHookInstaller",
    "hook_path",
    "is_git_repo",
    "is_hook_installed",
    "find_repo_root",
    "get_repo_root",
    "render_hook_block",
    "contains_hook_block",
    "HOOK_START_MARKER",
    "HOOK_END_MARKER",
]
