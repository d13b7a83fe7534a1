"""ctcompare run / organs -- compare Azimuth annotations with ASCT+B tables."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ctcompare.config import config
from ctcompare.exceptions import ConfigError
from ctcompare.models import OrganConfig, SUMMARY_COLUMNS
from ctcompare.organs import DEFAULT_ORGANS, load_organs, select_organs

console = Console()

_COUNT_COLUMNS = {"Present in ASCT+B", "Absent in ASCT+B", "Total Azimuth CTs"}


def _resolve_organs(
    organs_file: Optional[Path], names: Optional[list[str]]
) -> tuple[OrganConfig, ...]:
    try:
        organs = load_organs(organs_file) if organs_file else DEFAULT_ORGANS
        return select_organs(organs, names)
    except ConfigError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)


def run_cmd(
    organ: Optional[list[str]] = typer.Option(
        None, "--organ", "-o", help="Only process this organ (repeatable)",
    ),
    organs_file: Optional[Path] = typer.Option(
        None, "--organs-file", "-f", help="YAML file with organ definitions",
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-d", help=f"Output directory (default: {config.output.output_dir})",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Compare Azimuth annotation files with ASCT+B tables and write CSV reports."""
    from ctcompare.pipeline import run

    logging.basicConfig(
        level=logging.DEBUG if (verbose or config.debug) else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    selected = _resolve_organs(organs_file, organ)
    out = output_dir or Path(config.output.output_dir)
    summaries = run(selected, config, output_dir=out)

    if not summaries:
        console.print("[yellow]No organs were compared.[/yellow]")
        raise typer.Exit(code=1)

    table = Table(title=f"ASCT+B coverage ({len(summaries)} datasets)")
    for column in SUMMARY_COLUMNS:
        table.add_column(column, justify="right" if column in _COUNT_COLUMNS else "left")
    for record in summaries:
        table.add_row(*(str(v) for v in record.as_row().values()))
    console.print(table)

    skipped = len(selected) - len(summaries)
    if skipped:
        console.print(f"[yellow]Skipped {skipped} organ(s), see log above[/yellow]")
    console.print(f"[green]Reports written to {out}[/green]")


def organs_cmd(
    organs_file: Optional[Path] = typer.Option(
        None, "--organs-file", "-f", help="YAML file with organ definitions",
    ),
):
    """List the configured organs."""
    organs = _resolve_organs(organs_file, None)

    table = Table(title=f"Organs ({len(organs)})")
    table.add_column("Name", style="cyan")
    table.add_column("Annotation Files")
    table.add_column("ASCT+B Table")
    table.add_column("Match")
    for o in organs:
        table.add_row(o.name, ", ".join(o.annotations), o.master_table, o.match_type.value)
    console.print(table)
