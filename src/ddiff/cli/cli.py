"""CLI entrypoint: Typer app definition and command registration"""

import typer

from ddiff.cli.commands import compare_cmd


app = typer.Typer(name="ddiff", no_args_is_help=True, help="Unified diffs for files and directory trees")

app.command(name="compare")(compare_cmd)
