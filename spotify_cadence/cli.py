"""Command-line interface for Spotify Cadence Demo."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .config.settings import CadenceConfig, SearchConfig, Settings
from .core.cadence import estimate_cadence, format_cadence
from .errors import CadenceDemoError, ConfigError, InvalidInputError
from .service import CadenceDemoService
from .utils.logger import setup_logger
from .utils.platform import get_config_dir

app = typer.Typer(help="Spotify track search and running cadence demo")
console = Console()

ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to configuration file"
)


def load_settings(
    config_path: Optional[Path] = None,
    term: Optional[str] = None,
    limit: Optional[int] = None,
    height: Optional[float] = None,
    speed: Optional[float] = None
) -> Settings:
    """Load settings and apply command-line overrides.

    Raises:
        typer.Exit: If the config file or an override is invalid
    """
    try:
        settings = Settings.from_file_or_default(config_path)

        if term is not None or limit is not None:
            settings.search = SearchConfig(
                term=term if term is not None else settings.search.term,
                limit=limit if limit is not None else settings.search.limit
            )
        if height is not None or speed is not None:
            settings.cadence = CadenceConfig(
                height_m=height if height is not None else settings.cadence.height_m,
                speed_mps=speed if speed is not None else settings.cadence.speed_mps
            )
    except (OSError, ValueError) as e:
        console.print(f"Configuration error: {e}", markup=False, style="red")
        raise typer.Exit(1)

    return settings


def get_logger(settings: Settings, verbose: bool = False) -> logging.Logger:
    """Set up the package logger from settings."""
    return setup_logger(
        log_file=settings.logging.path,
        level="DEBUG" if verbose else settings.logging.level,
        max_size_mb=settings.logging.max_size_mb,
        backup_count=settings.logging.backup_count,
        console=True
    )


def run_demo(settings: Settings, verbose: bool, include_cadence: bool) -> None:
    logger = get_logger(settings, verbose)
    service = CadenceDemoService(settings, logger, console=console)

    try:
        service.run(include_cadence=include_cadence)
    except ConfigError:
        # Missing credentials is a clean stop, not a failure
        raise typer.Exit(0)
    except CadenceDemoError:
        raise typer.Exit(1)


@app.command()
def run(
    config: Optional[Path] = ConfigOption,
    term: Optional[str] = typer.Option(None, "--term", "-t", help="Search text"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Number of tracks to show"),
    height: Optional[float] = typer.Option(None, "--height", help="Height in metres"),
    speed: Optional[float] = typer.Option(None, "--speed", help="Speed in metres per second"),
    no_cadence: bool = typer.Option(False, "--no-cadence", help="Skip the cadence estimate"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
):
    """Fetch a token, search tracks and print the cadence estimate."""
    settings = load_settings(config, term, limit, height, speed)
    run_demo(settings, verbose, include_cadence=not no_cadence)


@app.command()
def search(
    config: Optional[Path] = ConfigOption,
    term: Optional[str] = typer.Option(None, "--term", "-t", help="Search text"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Number of tracks to show"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
):
    """Fetch a token and search tracks, without the cadence estimate."""
    settings = load_settings(config, term, limit)
    run_demo(settings, verbose, include_cadence=False)


@app.command()
def cadence(
    config: Optional[Path] = ConfigOption,
    height: Optional[float] = typer.Option(None, "--height", help="Height in metres"),
    speed: Optional[float] = typer.Option(None, "--speed", help="Speed in metres per second")
):
    """Estimate running cadence from height and speed."""
    settings = load_settings(config, height=height, speed=speed)

    try:
        estimate = estimate_cadence(settings.cadence.height_m, settings.cadence.speed_mps)
    except InvalidInputError as e:
        console.print(f"Error: {e}", markup=False, style="red")
        raise typer.Exit(1)

    console.print(format_cadence(estimate), markup=False, highlight=False)


@app.command(name="init-config")
def init_config(
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path for config file"
    )
):
    """Initialize a configuration file with defaults."""
    if output is None:
        output = get_config_dir() / 'config.yaml'

    if output.exists():
        overwrite = typer.confirm(
            f"Config file already exists at {output}. Overwrite?",
            default=False
        )
        if not overwrite:
            console.print("[yellow]Cancelled[/yellow]")
            return

    Settings().save(output)

    console.print(f"Configuration file created: {output}", markup=False, style="green", soft_wrap=True)
    console.print("\nCredentials are read from SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET")


if __name__ == "__main__":
    app()
