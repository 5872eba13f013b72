"""Command line interface for novel catalog."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .domain import Catalog, ShopView
from .exceptions import NovelCatalogError
from .models.config import ReportConfig, load_config
from .report import ConsoleReportSink, ReportSection, build_report, shop_sections, write_report

console = Console(soft_wrap=True)


def _configure_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(error: Exception) -> None:
    console.print(f"\n[red]Error: {escape(str(error))}[/red]")
    sys.exit(1)


def _open_catalog(ctx: click.Context, default_name: str = ReportConfig.store_name) -> Catalog:
    name = ctx.obj.get('name')
    return Catalog(name if name is not None else default_name)


def _print_section(heading: str, values) -> None:
    write_report([ReportSection(heading, list(values))], ConsoleReportSink(console))


@click.group()
@click.version_option(package_name="novel-catalog")
@click.option(
    '--name',
    default=None,
    help=f'Bookstore name for the catalog (default: {ReportConfig.store_name})'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Verbose output'
)
@click.pass_context
def cli(ctx: click.Context, name: Optional[str], verbose: bool):
    """Query and report on a catalog of classic novels."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['name'] = name


@cli.command()
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Report configuration file (JSON)'
)
@click.pass_context
def report(ctx: click.Context, config: Optional[Path]):
    """Print the full catalog report."""
    try:
        cfg = load_config(config) if config else ReportConfig.default()
        catalog = _open_catalog(ctx, cfg.store_name)
        write_report(build_report(catalog, cfg), ConsoleReportSink(console))
    except NovelCatalogError as e:
        _fail(e)


@cli.command()
@click.argument('substring')
@click.option(
    '--count',
    is_flag=True,
    help='Only print how many titles match'
)
@click.pass_context
def search(ctx: click.Context, substring: str, count: bool):
    """List titles containing SUBSTRING, ignoring case."""
    try:
        catalog = _open_catalog(ctx)
        if count:
            _print_section(
                f"How many books contain '{substring}'?",
                [catalog.count_titles_containing(substring)],
            )
        else:
            _print_section(
                f"Book Titles Containing '{substring}':",
                catalog.titles_containing(substring),
            )
    except NovelCatalogError as e:
        _fail(e)


@cli.command()
@click.argument('start', type=int)
@click.pass_context
def decade(ctx: click.Context, start: int):
    """List titles published from START through START + 9."""
    try:
        catalog = _open_catalog(ctx)
        _print_section(f"Books from the {start}s:", catalog.titles_in_decade(start))
    except NovelCatalogError as e:
        _fail(e)


@cli.command()
@click.argument('first', type=int)
@click.argument('last', type=int)
@click.pass_context
def percent(ctx: click.Context, first: int, last: int):
    """Show the percentage of novels published between FIRST and LAST."""
    try:
        catalog = _open_catalog(ctx)
        _print_section(
            f"Percentage of books written between {first} and {last}:",
            [f"{catalog.percent_published_between(first, last)}%"],
        )
    except NovelCatalogError as e:
        _fail(e)


@cli.command()
@click.argument('year', type=int)
@click.pass_context
def published(ctx: click.Context, year: int):
    """Check whether any novel was published in YEAR."""
    try:
        catalog = _open_catalog(ctx)
        _print_section(f"Is there a book written in {year}?", [catalog.has_book_published_in(year)])
    except NovelCatalogError as e:
        _fail(e)


@cli.command()
@click.argument('title_length', type=int)
@click.pass_context
def length(ctx: click.Context, title_length: int):
    """List titles that are exactly TITLE_LENGTH characters long."""
    try:
        catalog = _open_catalog(ctx)
        _print_section(
            f"Books with titles {title_length} characters long:",
            [novel.title for novel in catalog.novels_with_title_length(title_length)],
        )
    except NovelCatalogError as e:
        _fail(e)


@cli.command()
@click.option(
    '--exclude',
    default="the",
    show_default=True,
    help='Leave titles containing this text out of the sorted listing'
)
@click.pass_context
def shop(ctx: click.Context, exclude: str):
    """Print the deduplicated shop listing."""
    try:
        catalog = _open_catalog(ctx)
        shop_view = ShopView(catalog.all_novels(), exclude=exclude)
        write_report(shop_sections(shop_view), ConsoleReportSink(console))

        if shop_view.collisions:
            console.print(
                f"\n[yellow]{len(shop_view.collisions)} duplicate titles collapsed[/yellow]"
            )
    except NovelCatalogError as e:
        _fail(e)


@cli.command()
@click.pass_context
def stats(ctx: click.Context):
    """Show catalog statistics."""
    try:
        catalog = _open_catalog(ctx)
        statistics = catalog.get_statistics()

        console.print(f"\n[bold]{escape(statistics['name'])}[/bold]")
        console.print(f"Novels: {statistics['total_novels']}")
        console.print(f"Published: {statistics['earliest_year']} - {statistics['latest_year']}")
        console.print(f"Longest title: {escape(statistics['longest_title'])}")

        decade_table = Table(title="Novels by Decade")
        decade_table.add_column("Decade", style="cyan")
        decade_table.add_column("Novels", justify="right", style="green")
        decade_table.add_column("Share", justify="right")

        total = statistics['total_novels']
        for start, count in statistics['decade_distribution'].items():
            decade_table.add_row(f"{start}s", str(count), f"{count * 100.0 / total:.1f}%")

        console.print(decade_table)
    except NovelCatalogError as e:
        _fail(e)


def main():
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == '__main__':
    main()
