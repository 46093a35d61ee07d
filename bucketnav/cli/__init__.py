"""
Command-Line Interface

CLI commands for bucketnav.

Commands:
    bucketnav shell        - Interactive navigation shell
    bucketnav exec         - Run one or more shell command lines and exit
    bucketnav config-init  - Write a default configuration file

Usage:
    # Browse AWS S3 with the default credential chain
    bucketnav shell

    # Browse a local MinIO
    bucketnav shell --endpoint-url http://localhost:9000

    # Scripted navigation
    bucketnav exec "cd photos/2024" "ls -l"
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from bucketnav.config import NavConfig
from bucketnav.shell.context import Context
from bucketnav.shell.dispatcher import Dispatcher, ProgressFactory
from bucketnav.shell.output import ConsoleOutputter
from bucketnav.shell.path_resolver import format_location
from bucketnav.storage.base import StorageClient

__all__ = ["main", "app"]

app = typer.Typer(
    name="bucketnav",
    help="Navigate object storage like a filesystem",
    no_args_is_help=True,
)
console = Console()

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def _load_config(
    config_path: Optional[Path],
    endpoint_url: Optional[str],
    region: Optional[str],
    profile: Optional[str],
    verbose: bool,
) -> NavConfig:
    config = NavConfig.load(config_path)
    config = config.with_overrides(
        endpoint_url=endpoint_url,
        region_name=region,
        profile_name=profile,
        log_level="DEBUG" if verbose else None,
    )
    _setup_logging(config.log_level)
    logger.debug(f"Endpoint: {config.endpoint_url or 'AWS default'}, region: {config.region_name}")
    return config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    # boto's own debug output drowns everything else
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _create_storage(config: NavConfig) -> StorageClient:
    """Build the storage client for a session."""
    from bucketnav.storage.s3 import S3Storage

    return S3Storage.from_config(config)


def spinner(text: str) -> ProgressFactory:
    """Progress factory showing a transient spinner around long-running commands."""

    @contextlib.contextmanager
    def _progress(description: str) -> Iterator[Progress]:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(f"{escape(text)} {escape(description)}", total=None)
            yield progress

    return _progress


def _make_dispatcher(config: NavConfig, outputter: ConsoleOutputter) -> Dispatcher:
    return Dispatcher(
        _create_storage(config),
        Context(),
        outputter,
        progress=spinner(config.spinner_text),
    )


# Shared options
CONFIG_OPTION = typer.Option(None, "--config", "-c", help="TOML configuration file")
ENDPOINT_OPTION = typer.Option(None, "--endpoint-url", help="S3-compatible endpoint URL")
REGION_OPTION = typer.Option(None, "--region", "-r", help="Region name")
PROFILE_OPTION = typer.Option(None, "--profile", "-p", help="AWS profile name")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


# =============================================================================
# Commands
# =============================================================================

@app.command()
def shell(
    config_path: Optional[Path] = CONFIG_OPTION,
    endpoint_url: Optional[str] = ENDPOINT_OPTION,
    region: Optional[str] = REGION_OPTION,
    profile: Optional[str] = PROFILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Interactive navigation shell."""
    config = _load_config(config_path, endpoint_url, region, profile, verbose)
    outputter = ConsoleOutputter(console)
    dispatcher = _make_dispatcher(config, outputter)

    console.print("[dim]Type 'help' for commands, 'exit' to leave.[/]")
    while True:
        prompt = config.prompt.format(path=format_location(dispatcher.context.current))
        try:
            line = console.input(escape(prompt))
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not dispatcher.dispatch(line):
            break


@app.command("exec")
def exec_(
    lines: list[str] = typer.Argument(
        ...,
        help="Command lines to run in order (e.g. \"cd photos\" \"ls -l\")",
    ),
    config_path: Optional[Path] = CONFIG_OPTION,
    endpoint_url: Optional[str] = ENDPOINT_OPTION,
    region: Optional[str] = REGION_OPTION,
    profile: Optional[str] = PROFILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Run command lines in one session; stops at the first failure."""
    config = _load_config(config_path, endpoint_url, region, profile, verbose)
    outputter = ConsoleOutputter(console)
    dispatcher = _make_dispatcher(config, outputter)

    for line in lines:
        if not dispatcher.dispatch(line):
            break
        if outputter.error_count:
            raise typer.Exit(code=1)


@app.command("config-init")
def config_init(
    path: Path = typer.Argument(
        Path("~/.bucketnav/config.toml"),
        help="Where to write the configuration file",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a default configuration file."""
    target = path.expanduser()
    if target.exists() and not force:
        console.print(f"[yellow]{escape(str(target))} already exists (use --force to overwrite)[/]")
        raise typer.Exit(code=1)
    NavConfig.from_env().to_file(target)
    console.print(f"[green]Wrote {escape(str(target))}[/]")


def main() -> None:
    """Entry point for the CLI."""
    load_dotenv()
    app()
