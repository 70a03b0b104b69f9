"""
Configuration management for spotless-hook.

Supports:
- Environment variables
- Config file (.spotless-hook.toml)
- CLI arguments (highest priority)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import sys

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from spotless_hook.models import Executor


CONFIG_FILE_NAME = ".spotless-hook.toml"
ENV_PREFIX = "SPOTLESS_HOOK_"


@dataclass
class HookConfig:
    """Configuration for spotless-hook."""

    # Build tool running the check
    executor: str = Executor.GRADLE.value

    # Command overrides, None means the executor's own commands
    check_command: Optional[str] = None  # e.g., "spotlessCheck"
    apply_command: Optional[str] = None  # e.g., "spotlessApply"

    # Working copy to install into, None means discover from cwd
    root: Optional[str] = None

    def __post_init__(self) -> None:
        supported = [e.value for e in Executor]
        if self.executor not in supported:
            raise ValueError(
                f"Unsupported executor: {self.executor} (expected one of: {', '.join(supported)})"
            )

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "HookConfig":
        """
        Load configuration from multiple sources.

        Priority (highest to lowest):
        1. Environment variables
        2. Config file
        3. Defaults
        """
        config_dict: dict[str, Any] = {}

        if config_path is None:
            config_path = cls._find_config_file()

        if config_path and config_path.exists():
            with open(config_path, "rb") as f:
                file_config = tomllib.load(f)
                config_dict.update(cls._flatten_config(file_config))

        config_dict.update(cls._load_from_env())

        return cls(**config_dict)

    @classmethod
    def _find_config_file(cls) -> Optional[Path]:
        """Find config file by walking up from current directory."""
        current = Path.cwd()

        while current != current.parent:
            config_file = current / CONFIG_FILE_NAME
            if config_file.exists():
                return config_file
            current = current.parent

        home_config = Path.home() / CONFIG_FILE_NAME
        if home_config.exists():
            return home_config

        return None

    @classmethod
    def _flatten_config(cls, config: dict[str, Any]) -> dict[str, Any]:
        """Flatten nested config to match dataclass fields."""
        result: dict[str, Any] = {}

        for section in ("executor", "repository"):
            if section in config and not isinstance(config[section], dict):
                raise ValueError(f"[{section}] must be a table")

        if "executor" in config:
            executor = config["executor"]
            if "name" in executor:
                result["executor"] = executor["name"]
            if "check" in executor:
                result["check_command"] = executor["check"]
            if "apply" in executor:
                result["apply_command"] = executor["apply"]

        if "repository" in config and "root" in config["repository"]:
            result["root"] = config["repository"]["root"]

        return result

    @classmethod
    def _load_from_env(cls) -> dict[str, Any]:
        """Load configuration from environment variables."""
        result: dict[str, Any] = {}

        mappings = {
            "EXECUTOR": "executor",
            "CHECK_COMMAND": "check_command",
            "APPLY_COMMAND": "apply_command",
            "ROOT": "root",
        }

        for env_suffix, field_name in mappings.items():
            value = os.environ.get(f"{ENV_PREFIX}{env_suffix}")
            if value is not None:
                result[field_name] = value

        return result

    def to_toml(self) -> str:
        """Generate TOML configuration string."""
        lines = [
            "# spotless-hook configuration",
            "# Generated by: spotless-hook init",
            "",
            "[executor]",
            f'name = "{self.executor}"  # or "maven"',
            '# check = "spotlessCheck"  # Or set SPOTLESS_HOOK_CHECK_COMMAND env var',
            '# apply = "spotlessApply"  # Or set SPOTLESS_HOOK_APPLY_COMMAND env var',
            "",
            "[repository]",
            '# root = "/path/to/working/copy"  # Defaults to the enclosing git repository',
        ]
        return "\n".join(lines) + "\n"
