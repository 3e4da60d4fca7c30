"""
Command-line interface for pdfstitch.
"""

import logging
import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdfstitch.backends import PypdfBackend
from pdfstitch.config import configure, resolve_path
from pdfstitch.disk import merge_files, save_pdf
from pdfstitch.merger import append_pdfs
from pdfstitch.types import MergeMode
from pdfstitch.utils import format_file_size, get_logger

console = Console()


def _setup_logging(verbose):
    logger = get_logger("pdfstitch")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _config_from_options(base_dir, allow_outside_base_dir):
    return configure(
        base_dir=base_dir,
        allow_outside_base_dir=True if allow_outside_base_dir else None,
    )


@click.group()
@click.version_option(version="1.0.0")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    pdfstitch - Merge and append PDF files.
    """
    _setup_logging(verbose)


@cli.command(name="merge")
@click.argument('inputs', nargs=-1, type=click.Path())
@click.option(
    '--output', '-o',
    required=True,
    help='Path of the merged PDF',
    type=click.Path()
)
@click.option(
    '--best-effort',
    is_flag=True,
    help='Skip inputs that cannot be read instead of failing'
)
@click.option(
    '--base-dir',
    default=None,
    help='Directory that relative paths resolve against',
    type=click.Path(file_okay=False)
)
@click.option(
    '--allow-outside-base-dir',
    is_flag=True,
    help='Allow writing the output outside the base directory'
)
def merge(inputs, output, best_effort, base_dir, allow_outside_base_dir):
    """
    Merge PDF files into one, in the order given.

    Examples:

        pdfstitch merge a.pdf b.pdf -o merged.pdf

        pdfstitch merge scans/*.pdf -o out/all.pdf --best-effort
    """
    config = _config_from_options(base_dir, allow_outside_base_dir)
    mode = MergeMode.BEST_EFFORT if best_effort else MergeMode.STRICT

    console.print(f"\n[bold cyan]Merging {len(inputs)} PDF(s) ({mode.value})...[/bold cyan]")
    summary = merge_files(inputs, output, config, mode=mode)

    for warning in summary.warnings:
        console.print(f"[bold yellow]⚠ {escape(warning)}[/bold yellow]")

    if not summary.success:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(summary.error))}")
        sys.exit(1)

    table = Table(title="Merge Summary", show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Output", escape(str(summary.path)))
    table.add_row("Merged Files", str(len(summary.merged)))
    table.add_row("Skipped Files", str(len(summary.skipped)))
    table.add_row("Pages", str(summary.total_pages))
    table.add_row("Size", format_file_size(os.path.getsize(summary.path)))

    console.print(table)
    console.print(f"\n[bold green]✓ Successfully created:[/bold green] {escape(str(summary.path))}\n")


@cli.command(name="append")
@click.argument('source_pdf', type=click.Path(dir_okay=False))
@click.argument('target_pdf', type=click.Path(dir_okay=False))
@click.option(
    '--output', '-o',
    required=True,
    help='Path of the combined PDF',
    type=click.Path()
)
@click.option(
    '--base-dir',
    default=None,
    help='Directory that relative paths resolve against',
    type=click.Path(file_okay=False)
)
@click.option(
    '--allow-outside-base-dir',
    is_flag=True,
    help='Allow writing the output outside the base directory'
)
def append(source_pdf, target_pdf, output, base_dir, allow_outside_base_dir):
    """
    Append the pages of SOURCE_PDF after the pages of TARGET_PDF.

    Example:

        pdfstitch append appendix.pdf report.pdf -o report-full.pdf
    """
    config = _config_from_options(base_dir, allow_outside_base_dir)

    try:
        source = resolve_path(source_pdf, config).read_bytes()
        target = resolve_path(target_pdf, config).read_bytes()
    except OSError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    result = append_pdfs(source, target)
    if not result.success:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(result.error))}")
        sys.exit(1)

    saved = save_pdf(result.buffer, output, config)
    if not saved.success:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(saved.error))}")
        sys.exit(1)

    console.print(
        f"\n[bold green]✓ Appended {result.pages_added} page(s):[/bold green] {escape(str(saved.path))}\n"
    )


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
def show_info(input_pdf):
    """
    Display the page count and size of a PDF file.

    Example:

        pdfstitch info input.pdf
    """
    try:
        with open(input_pdf, 'rb') as handle:
            data = handle.read()
        document = PypdfBackend().load(data)
    except Exception as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    table = Table(title=f"PDF Information: {escape(os.path.basename(input_pdf))}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_row("File Path", escape(os.path.abspath(input_pdf)))
    table.add_row("File Size", format_file_size(len(data)))
    table.add_row("Number of Pages", str(document.page_count))

    console.print()
    console.print(table)
    console.print()


if __name__ == '__main__':
    cli()
