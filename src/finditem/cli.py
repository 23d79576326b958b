"""Command line interface for finditem."""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from finditem.config import DEFAULT_EXCLUDED_DIRS, SearchRequest
from finditem.errors import ConfigurationError
from finditem.models import ItemType
from finditem.search.engine import TraversalEngine
from finditem.search.formatter import ResultFormatter

LOGGER = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="finditem - recursive file and directory search")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def find(
    roots: Optional[List[str]] = typer.Argument(
        None, help="Paths to search (wildcards allowed). Defaults to the current directory."
    ),
    name: Optional[str] = typer.Option(
        None, "--name", help="Exact name, or wildcard pattern using * and ?"
    ),
    pattern: Optional[str] = typer.Option(
        None, "--pattern", help="Regular expression matched against the name"
    ),
    item_type: ItemType = typer.Option(
        ItemType.ALL, "--type", case_sensitive=False, help="Kind of entries to return"
    ),
    min_depth: Optional[int] = typer.Option(None, "--min-depth", min=0, max=100),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", min=0, max=100, help="0 searches the immediate children only"
    ),
    min_size: Optional[str] = typer.Option(None, "--min-size", help="e.g. 500KB, 1.5MB"),
    max_size: Optional[str] = typer.Option(None, "--max-size", help="e.g. 500KB, 1.5MB"),
    newer_than: Optional[str] = typer.Option(
        None, "--newer-than", help="Timestamp or relative age such as 7d, 12h, 30m"
    ),
    older_than: Optional[str] = typer.Option(
        None, "--older-than", help="Timestamp or relative age such as 7d, 12h, 30m"
    ),
    empty: bool = typer.Option(False, "--empty", help="Only empty files and directories"),
    hidden: bool = typer.Option(False, "--hidden", help="Include hidden entries"),
    read_only: bool = typer.Option(False, "--read-only", help="Only read-only entries"),
    system: bool = typer.Option(False, "--system", help="Include system entries"),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", help="Wildcard of names to skip (repeatable)"
    ),
    exclude_dir: Optional[List[str]] = typer.Option(
        None,
        "--exclude-dir",
        help=f"Directory name to skip with its contents (repeatable, default: {', '.join(DEFAULT_EXCLUDED_DIRS)})",
    ),
    case_sensitive: bool = typer.Option(False, "--case-sensitive"),
    simple: bool = typer.Option(False, "--simple", help="Print bare paths only"),
    no_recurse: bool = typer.Option(False, "--no-recurse", help="Do not descend into subdirectories"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Find files and directories matching all of the given filters."""
    _setup_logging(verbose)
    try:
        request = SearchRequest.from_options(
            roots,
            name=name,
            pattern=pattern,
            item_type=item_type,
            min_depth=min_depth,
            max_depth=max_depth,
            min_size=min_size,
            max_size=max_size,
            newer_than=newer_than,
            older_than=older_than,
            empty=empty,
            include_hidden=hidden,
            include_system=system,
            read_only=read_only,
            exclude=exclude,
            exclude_dirs=exclude_dir or None,
            case_sensitive=case_sensitive,
            no_recurse=no_recurse,
            simple=simple,
        )
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    LOGGER.debug("Search request: %s", request)

    outcome = TraversalEngine().run(request)
    for warning in outcome.warnings:
        err_console.print(f"[yellow]Warning: {escape(warning.message)}[/yellow]", soft_wrap=True)
    if outcome.status == "fatal":
        err_console.print("[red]No search path could be resolved.[/red]")
        raise typer.Exit(code=1)

    formatter = ResultFormatter()
    if request.simple:
        for line in formatter.render(outcome.results, simple=True):
            typer.echo(line)
        return

    if outcome.results and console.is_terminal:
        console.print(formatter.render_table(outcome.results))
    else:
        for line in formatter.render(outcome.results, simple=False):
            typer.echo(line)
    typer.echo(formatter.summary(outcome.results))
