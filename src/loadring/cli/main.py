"""Main CLI entry point."""

import json
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from loadring import __version__
from loadring.models import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the daemon.

    Logs always go to stderr (picked up by the journal under systemd); a
    rotating log file is added when ``log_file`` is given.

    Args:
        debug: If True, force DEBUG level
        log_file: Optional log file path
        log_level: Log level name (DEBUG/INFO/WARNING/ERROR)
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper())

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Keeps last 5 files, max 10MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logger.debug(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


def load_config(config_path: Optional[Path]):
    """Load the config, exiting with a readable message if it is broken."""
    from loadring.exceptions import ConfigurationError
    from loadring.models import AppConfig

    try:
        return AppConfig.load_or_default(config_path)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e.technical_message}")
        click.echo(f"ERROR: {e.get_full_message()}", err=True)
        sys.exit(1)


config_option = click.option(
    '--config',
    '-c',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Config file (default: {DEFAULT_CONFIG_PATH})'
)


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="loadring")
@config_option
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also log to this file (rotated at 10MB)'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    loadring - show the system load average on an LED ring.

    Without a subcommand, runs the daemon: every few seconds the 1-minute
    load average is mapped to a ring color and written to the LED driver.
    SIGINT or SIGTERM switches the ring off and exits.

    \b
    Examples:
      # Run the daemon with defaults (/proc/loadavg -> /proc/acpi/nuc_led)
      loadring

      # Run with a custom config and a log file
      loadring --config /etc/loadring.json --log-file /var/log/loadring.log

      # Show the color table for this machine
      loadring table
    """
    if ctx.invoked_subcommand is not None:
        return

    from loadring.app import LoadRingApp

    setup_logging(debug, log_file, log_level)
    config = load_config(config_path)

    try:
        app = LoadRingApp(config)
        app.run()
    except Exception as e:
        from loadring.exceptions import format_error_for_display

        logger.exception("Error running loadring")
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        sys.exit(1)


@cli.command()
@config_option
@click.option(
    '--cores',
    type=click.IntRange(min=1),
    default=None,
    help='Scale for this many cores instead of the configured/detected count'
)
def table(config_path: Optional[Path], cores: Optional[int]):
    """Print the color table scaled for this machine."""
    from loadring.policy import build_policy

    config = load_config(config_path)
    cores = cores or config.resolve_cores()
    policy = build_policy(cores)

    click.echo(f"Color table for {cores} cores (load < threshold):")
    click.echo(policy.describe())


@cli.group()
def config():
    """Inspect or create the config file."""


@config.command()
@config_option
def show(config_path: Optional[Path]):
    """Print the effective configuration as JSON."""
    cfg = load_config(config_path)
    click.echo(json.dumps(cfg.model_dump(mode="json"), indent=2))


@config.command()
@config_option
@click.option('--force', is_flag=True, help='Overwrite an existing config file')
def init(config_path: Optional[Path], force: bool):
    """Write a config file with the default settings."""
    from loadring.models import AppConfig

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists() and not force:
        click.echo(f"Config file already exists: {path} (use --force to overwrite)", err=True)
        sys.exit(1)

    AppConfig().save(path)
    click.echo(f"Wrote default config to {path}")


if __name__ == "__main__":
    cli()
