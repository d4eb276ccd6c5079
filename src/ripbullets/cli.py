"""CLI entry point for ripbullets."""

import asyncio
import click
from pathlib import Path
from datetime import date
from typing import Optional

from ripbullets import __version__
from ripbullets.logseq.api import LogseqAPIClient
from ripbullets.logseq.graph import GraphPaths
from ripbullets.models.config import Config
from ripbullets.services.clipboard import SystemClipboard
from ripbullets.services.copy_action import CopyOutcome, copy_clean_markdown, render_source
from ripbullets.services.exceptions import (
    BoundaryError,
    EmptyResultError,
    EmptySourceError,
)
from ripbullets.services.notifications import (
    WARNING,
    ConsoleNotifier,
    LogseqNotifier,
    MultiNotifier,
)
from ripbullets.services.sources import BlockSource, FileSource, LogseqAPISource
from ripbullets.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)


def parse_journal_date(value: str) -> date:
    """
    Parse a journal date given as YYYY-MM-DD.

    Args:
        value: Date string

    Returns:
        Parsed date

    Raises:
        ValueError: If the date format is invalid
    """
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"Invalid date format: {value}. Expected: YYYY-MM-DD") from e


def load_config(path: Optional[Path]) -> Config:
    """
    Load configuration from PATH or ~/.config/ripbullets/config.yaml.

    Args:
        path: Explicit config path from --config, if any

    Returns:
        Validated Config instance (defaults when no file exists)

    Raises:
        click.ClickException: If config is missing, has invalid permissions, or validation fails
    """
    try:
        config = Config.load_or_default(path)
        logger.info("config_loaded", path=str(path) if path else "default")
        return config
    except FileNotFoundError as e:
        logger.error("config_not_found", path=str(path))
        raise click.ClickException(str(e))
    except PermissionError as e:
        logger.error("config_permission_error", path=str(path))
        raise click.ClickException(str(e))
    except Exception as e:
        logger.error("config_validation_error", error=str(e))
        raise click.ClickException(f"Configuration validation failed:\n{e}")


def resolve_file_source(
    config: Config,
    path: Optional[Path],
    page: Optional[str],
    journal: Optional[str],
) -> FileSource:
    """
    Pick the page file to read for ``convert``.

    Exactly one of PATH, --page or --journal must be given. Pages and
    journals are looked up in the configured graph.

    Raises:
        click.UsageError: If zero or several inputs are given, or no graph is configured
        click.ClickException: If the page or journal doesn't exist
    """
    given = [option for option in (path, page, journal) if option is not None]
    if len(given) != 1:
        raise click.UsageError("Give exactly one of PATH, --page or --journal")

    if path is not None:
        return FileSource(path)

    if config.logseq.graph_path is None:
        raise click.UsageError("--page and --journal need logseq.graph_path in config.yaml")

    graph = GraphPaths(Path(config.logseq.graph_path))
    try:
        if page is not None:
            return FileSource(graph.find_page(page))
        return FileSource(graph.find_journal(parse_journal_date(journal)))
    except ValueError as e:
        raise click.UsageError(str(e))
    except BoundaryError as e:
        logger.error("page_lookup_failed", error=str(e))
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="ripbullets")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file (default: ~/.config/ripbullets/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path]):
    """ripbullets: Copy Logseq pages as clean markdown, without the bullet points."""
    configure_logging()

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.command()
@click.option("--page", type=str, default=None, help="Page name (default: page currently open in Logseq)")
@click.option(
    "--logseq-notify/--no-logseq-notify",
    default=True,
    help="Also show the result in Logseq's message bar",
)
@click.pass_context
def copy(ctx: click.Context, page: Optional[str], logseq_notify: bool):
    """
    Copy a page from a running Logseq as clean markdown.

    Requires Logseq's HTTP API server to be enabled and api_token set in
    config.yaml.

    Examples:
        ripbullets copy                    # Page currently open in Logseq
        ripbullets copy --page "Project X"
    """
    logger.info("copy_command_started", page=page)
    config = load_config(ctx.obj.get("config_path"))

    client = LogseqAPIClient(config.logseq)
    notifiers = [ConsoleNotifier()]
    if logseq_notify:
        notifiers.append(LogseqNotifier(client))

    outcome = asyncio.run(copy_clean_markdown(
        source=LogseqAPISource(client, page=page),
        clipboard=SystemClipboard(),
        notifier=MultiNotifier(notifiers),
        options=config.transform,
    ))

    if outcome is CopyOutcome.FAILED:
        ctx.exit(1)


@cli.command()
@click.argument("path", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--page", type=str, default=None, help="Page name in the configured graph")
@click.option("--journal", type=str, default=None, help="Journal date (YYYY-MM-DD) in the configured graph")
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write markdown to this file instead of stdout",
)
@click.option("--copy", "to_clipboard", is_flag=True, help="Copy markdown to the clipboard instead of printing it")
@click.pass_context
def convert(
    ctx: click.Context,
    path: Optional[Path],
    page: Optional[str],
    journal: Optional[str],
    output: Optional[Path],
    to_clipboard: bool,
):
    """
    Convert a Logseq page file to clean markdown.

    Examples:
        ripbullets convert pages/Project.md          # Print to stdout
        ripbullets convert --page "Project X" -o x.md
        ripbullets convert --journal 2025-01-15 --copy
    """
    logger.info("convert_command_started", path=str(path) if path else None, page=page, journal=journal)
    if to_clipboard and output is not None:
        raise click.UsageError("--copy and --output can't be used together")

    config = load_config(ctx.obj.get("config_path"))
    source = resolve_file_source(config, path, page, journal)

    if to_clipboard:
        outcome = asyncio.run(copy_clean_markdown(
            source=source,
            clipboard=SystemClipboard(),
            notifier=ConsoleNotifier(),
            options=config.transform,
        ))
        if outcome is CopyOutcome.FAILED:
            ctx.exit(1)
        return

    markdown = _render_or_exit(source, config)
    if markdown is None:
        return

    if output is not None:
        output.write_text(markdown + "\n", encoding="utf-8")
        logger.info("markdown_written", path=str(output), chars=len(markdown))
        click.echo(f"✓ Wrote {output}", err=True)
    else:
        click.echo(markdown)


def _render_or_exit(source: BlockSource, config: Config) -> Optional[str]:
    """Render a source, reporting empty pages as warnings and failures as errors."""
    try:
        return asyncio.run(render_source(source, config.transform))
    except (EmptySourceError, EmptyResultError) as e:
        logger.warning("convert_empty", reason=type(e).__name__)
        asyncio.run(ConsoleNotifier().show_msg(str(e), WARNING))
        return None
    except BoundaryError as e:
        logger.error("convert_failed", error=str(e))
        raise click.ClickException(str(e))


def main():
    """Main entry point for setuptools console script."""
    cli()


if __name__ == "__main__":
    main()
