"""
CLI for spotless-hook.

Commands:
    spotless-hook install    Install the spotless pre-push hook
    spotless-hook status     Show repository and hook state
    spotless-hook init       Initialize configuration
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from spotless_hook import __version__
from spotless_hook.config import CONFIG_FILE_NAME, HookConfig
from spotless_hook.executors import get_executor
from spotless_hook.hooks.git import find_repo_root
from spotless_hook.hooks.install import (
    GitPrePushHookInstaller,
    hook_path,
    is_git_repo,
    is_hook_installed,
)
from spotless_hook.models import Executor, InstallStatus

console = Console()


class ConsoleLogger:
    """HookLogger that prints to the rich console."""

    def __init__(self, console: Console):
        self.console = console

    def info(self, msg: str, *args: Any) -> None:
        self.console.print(f"[dim]{escape(msg % args if args else msg)}[/dim]")

    def error(self, msg: str, *args: Any) -> None:
        self.console.print(f"[red]{escape(msg % args if args else msg)}[/red]")


def _resolve_root(root: str | None, cfg: HookConfig) -> Path:
    if root:
        return Path(root)
    if cfg.root:
        return Path(cfg.root)
    return find_repo_root()


@click.group()
@click.version_option(version=__version__, prog_name="spotless-hook")
def main() -> None:
    """Spotless Hook - Check formatting before every git push."""
    pass


@main.command()
@click.option(
    "--root",
    "-r",
    type=click.Path(file_okay=False),
    help="Repository root (defaults to the enclosing git repository)",
)
@click.option(
    "--executor",
    "-e",
    type=click.Choice([e.value for e in Executor]),
    help="Build tool that runs the spotless check",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to config file",
)
def install(root: str | None, executor: str | None, config: str | None) -> None:
    """Install the spotless pre-push hook."""
    try:
        cfg = HookConfig.load(Path(config) if config else None)
        if executor:
            cfg.executor = executor

        repo_root = _resolve_root(root, cfg)
        logger = ConsoleLogger(console)
        build_executor = get_executor(
            cfg.executor,
            repo_root,
            logger,
            check=cfg.check_command,
            apply=cfg.apply_command,
        )
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        sys.exit(1)

    result = GitPrePushHookInstaller(logger, repo_root, build_executor).install()

    if result.status == InstallStatus.INSTALLED:
        console.print(
            Panel(
                f"[green]✓[/green] Installed pre-push hook\n\n"
                f"File: [bold]{escape(str(result.hook_path))}[/bold]\n"
                f"Check: [dim]{escape(build_executor.check_command())}[/dim]\n"
                f"Apply: [dim]{escape(build_executor.apply_command())}[/dim]",
                title="Spotless Hook",
                border_style="green",
            )
        )
    elif result.status == InstallStatus.ALREADY_INSTALLED:
        console.print(
            Panel(
                "[yellow]○[/yellow] Pre-push hook already installed\n\n"
                "Remove the existing spotless block to install different commands.",
                title="Spotless Hook",
                border_style="yellow",
            )
        )
    else:
        console.print(
            Panel(
                f"[red]✗[/red] Hook not installed ({result.status.value})\n\n{escape(result.message)}",
                title="Spotless Hook",
                border_style="red",
            )
        )
        sys.exit(1)


@main.command()
@click.option(
    "--root",
    "-r",
    type=click.Path(file_okay=False),
    help="Repository root (defaults to the enclosing git repository)",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to config file",
)
def status(root: str | None, config: str | None) -> None:
    """Show repository and hook state."""
    try:
        cfg = HookConfig.load(Path(config) if config else None)
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        sys.exit(1)

    repo_root = _resolve_root(root, cfg)
    git_ok = is_git_repo(repo_root)
    hook_file = hook_path(repo_root)
    try:
        installed = is_hook_installed(repo_root)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Cannot read {escape(str(hook_file))}:[/red] {e}")
        installed = False

    build_executor = get_executor(cfg.executor, repo_root, ConsoleLogger(Console(quiet=True)))
    available = build_executor.is_available()

    table = Table(title="Spotless Hook Status")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")
    table.add_column("Status", style="green")

    table.add_row("Root", escape(str(repo_root)), "✓" if git_ok else "[red]✗[/red]")
    table.add_row(
        "Hook File",
        escape(str(hook_file)),
        "✓" if hook_file.exists() else "[yellow]○[/yellow]",
    )
    table.add_row(
        "Spotless Block",
        "Installed" if installed else "Not installed",
        "✓" if installed else "[yellow]○[/yellow]",
    )
    table.add_row(
        "Executor",
        escape(build_executor.executor_name() if available else cfg.executor),
        "✓" if available else "[red]✗[/red]",
    )

    console.print(table)


@main.command()
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing configuration",
)
def init(force: bool) -> None:
    """Initialize spotless-hook configuration."""
    config_path = Path(CONFIG_FILE_NAME)

    if config_path.exists() and not force:
        console.print(
            f"[yellow]Configuration file already exists:[/yellow] {config_path}\n"
            "Use --force to overwrite."
        )
        sys.exit(1)

    config_path.write_text(HookConfig().to_toml())

    console.print(
        Panel(
            f"[green]✓[/green] Created configuration file: [bold]{config_path}[/bold]\n\n"
            "Next steps:\n"
            f"1. Choose your build tool in [dim]{CONFIG_FILE_NAME}[/dim]\n"
            "2. Run [bold]spotless-hook install[/bold] to add the pre-push hook",
            title="Spotless Hook Initialized",
            border_style="green",
        )
    )


if __name__ == "__main__":
    main()
