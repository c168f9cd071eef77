"""CLI entry point for the OUI textfile collector."""

import logging
import platform
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .core.config import (
    BIN_NAME,
    DEFAULT_METRIC_NAME,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_REFRESH_INTERVAL,
    CollectorConfig,
)
from .core.exceptions import ConfigError
from .scheduler import RefreshScheduler

console = Console()
logger = logging.getLogger(__name__)

ENV_PREFIX = BIN_NAME.upper()

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def setup_logging(level: str) -> None:
    """Route all log records through a rich handler at the given level."""
    logging.basicConfig(
        level=LOG_LEVELS[level],
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.command(context_settings={"auto_envvar_prefix": ENV_PREFIX})
@click.version_option(version=__version__, prog_name=BIN_NAME, message="%(prog)s v%(version)s")
@click.option(
    "--log-level",
    type=click.Choice(list(LOG_LEVELS)),
    default="info",
    show_default=True,
    show_envvar=True,
    help="Log level",
)
@click.option(
    "--refresh-interval",
    default=DEFAULT_REFRESH_INTERVAL,
    show_default=True,
    show_envvar=True,
    help='Interval at which to refresh the OUI database. Valid time units are "ns", "us", "ms", "s", "m", "h"',
)
@click.option(
    "--output-file",
    type=click.Path(dir_okay=False),
    default=DEFAULT_OUTPUT_FILE,
    show_default=True,
    show_envvar=True,
    help="Path to the file where metrics should be written",
)
@click.option(
    "--metric-name",
    default=DEFAULT_METRIC_NAME,
    show_default=True,
    show_envvar=True,
    help="Prometheus metric name",
)
def main(log_level: str, refresh_interval: str, output_file: str, metric_name: str) -> None:
    """Publish the IEEE OUI registry as a node_exporter textfile metric."""
    setup_logging(log_level)

    logger.info(
        "Starting %s version=%s build_context=python=%s, platform=%s",
        BIN_NAME,
        __version__,
        platform.python_version(),
        f"{sys.platform}/{platform.machine()}",
    )

    try:
        config = CollectorConfig.from_options(
            output_file=output_file,
            metric_name=metric_name,
            refresh_interval=refresh_interval,
        )
    except ConfigError as e:
        logger.error("Error parsing refresh interval %r: %s", refresh_interval, e)
        sys.exit(1)

    scheduler = RefreshScheduler(config)
    try:
        scheduler.run_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down %s", BIN_NAME)


def run() -> None:
    """Console script wrapper: usage errors exit with status 1."""
    try:
        rv = main.main(prog_name=BIN_NAME, standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except click.Abort:
        console.print("[red]Aborted![/red]")
        sys.exit(1)
    sys.exit(rv or 0)


if __name__ == "__main__":
    run()
