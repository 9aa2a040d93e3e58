"""
CLI entry point for git_puller.

Provides the `gitpull` command: pull every repository under a directory and
print a summary table.
"""

from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import LOG_LEVELS, PullerConfig, parse_log_level
from .logger import setup_logging
from .puller import PullContext, run
from .report import print_summary


def load_config(config_path: Path | None, console: Console) -> PullerConfig:
    """Load the YAML config if one was given, exiting on errors."""
    if config_path is None:
        return PullerConfig()
    try:
        return PullerConfig.from_yaml(config_path)
    except FileNotFoundError:
        console.print(f"[red]Config file not found: {escape(str(config_path))}[/red]")
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Error loading config: {escape(str(e))}[/red]")
        raise SystemExit(1)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="gitpull")
@click.argument(
    "directory",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (overrides --log-level)",
)
@click.option(
    "--log-level",
    envvar="GITPULL_LOG_LEVEL",
    default=None,
    help=f"Logging level (options: {', '.join(LOG_LEVELS)}) [default: error]",
)
@click.option(
    "--workers",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of repositories to pull at once",
)
@click.option(
    "--show-detail",
    is_flag=True,
    help="Add a Detail column with the git error of failed repositories",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with default settings",
)
def cli(
    directory: Path,
    debug: bool,
    log_level: str | None,
    workers: int | None,
    show_detail: bool,
    config_path: Path | None,
):
    """Traverse DIRECTORY and perform git pull in every repository found."""
    console = Console()

    if log_level is not None:
        try:
            parse_log_level(log_level)
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise SystemExit(1)

    config = load_config(config_path, console)
    try:
        config = config.with_overrides(
            log_level=log_level,
            debug=True if debug else None,
            max_workers=workers,
            show_detail=True if show_detail else None,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise SystemExit(1)

    logger = setup_logging(config.effective_log_level, console)
    ctx = PullContext(config=config, logger=logger)

    records = run(ctx, directory)
    print_summary(records, console=console, show_detail=config.show_detail)


if __name__ == "__main__":
    cli()
