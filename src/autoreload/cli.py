"""CLI entry point for Autoreload."""

import time
from pathlib import Path
from typing import Optional

import click
import yaml

from autoreload import __version__
from autoreload.config.loader import load_config
from autoreload.host.background import BackgroundService
from autoreload.host.events import DataChanged, EventBus
from autoreload.host.provider import FileBufferProvider
from autoreload.host.registry import ContentRegistry
from autoreload.models.config import Config
from autoreload.plugin import SERVICE_NAME, setup_plugin
from autoreload.services.reload_service import ReloadService, ReloadServiceState
from autoreload.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)


def _load_config_or_exit(config_path: Optional[Path]) -> Config:
    """
    Load configuration, turning failures into click errors.

    Runs before logging is configured, so failures are only reported to the user.

    Raises:
        click.ClickException: If the config file is missing or invalid
    """
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="autoreload")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file (default: ~/.config/autoreload/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path]):
    """Autoreload: keep an in-memory copy of a file in sync with disk."""
    config = _load_config_or_exit(config_path)
    log_file = Path(config.logging.log_file) if config.logging.log_file else None
    configure_logging(level=config.logging.level, log_file=log_file)
    logger.info("config_loaded", path=str(config_path) if config_path else "default")

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--interval", type=click.IntRange(min=1), help="Reload interval in milliseconds")
@click.option("--enabled/--disabled", default=None, help="Start with auto reload on or off")
@click.option("--read-only", is_flag=True, help="Open the file without write access")
@click.option(
    "--duration",
    type=click.FloatRange(min=0, min_open=True),
    help="Stop after this many seconds (default: run until Ctrl+C)",
)
@click.pass_context
def watch(
    ctx: click.Context,
    file: Path,
    interval: Optional[int],
    enabled: Optional[bool],
    read_only: bool,
    duration: Optional[float],
):
    """Open FILE and resync it from disk on every tick."""
    config: Config = ctx.obj["config"]
    reload_config = config.reload.model_copy()
    if interval is not None:
        reload_config.interval_ms = interval
    if enabled is not None:
        reload_config.enabled = enabled

    provider = FileBufferProvider(file, writable=not read_only)
    try:
        provider.open()
    except OSError as e:
        logger.error("provider_open_failed", path=str(file), error=str(e))
        raise click.ClickException(f"Failed to open {file}: {e}")

    event_bus = EventBus()
    event_bus.subscribe(
        DataChanged,
        lambda event: click.echo(f"Reloaded {file} ({event.handle.get_actual_size()} bytes)"),
    )

    service = ReloadService(ReloadServiceState(config=reload_config), lambda: provider, event_bus)
    registry = ContentRegistry()
    setup_plugin(registry, service)

    runner = BackgroundService(
        SERVICE_NAME,
        registry.get_service(SERVICE_NAME),
        interval_ms=lambda: reload_config.interval_ms,
    )

    state = "enabled" if reload_config.enabled else "disabled"
    click.echo(f"Watching {file} every {reload_config.interval_ms} ms (auto reload {state})")
    runner.start()
    try:
        if duration is None:
            while True:
                time.sleep(1)
        else:
            time.sleep(duration)
    except KeyboardInterrupt:
        click.echo("\nStopping...")
    finally:
        runner.stop()
        provider.close()


@cli.command("show-config")
@click.pass_context
def show_config(ctx: click.Context):
    """Print the effective configuration as YAML."""
    config: Config = ctx.obj["config"]
    click.echo(yaml.safe_dump(config.model_dump(), sort_keys=False), nl=False)


def main():
    """Main entry point for setuptools console script."""
    cli()


if __name__ == "__main__":
    main()
