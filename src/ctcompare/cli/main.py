"""CLI entry point."""

import typer

from ctcompare.cli.compare import organs_cmd, run_cmd

app = typer.Typer(
    name="ctcompare",
    help="ctcompare — Azimuth vs ASCT+B cell type comparison",
    no_args_is_help=True,
)

app.command(name="run")(run_cmd)
app.command(name="organs")(organs_cmd)


if __name__ == "__main__":
    app()
