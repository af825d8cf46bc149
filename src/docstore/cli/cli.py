"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docstore.cli.commands import search_cmd, show_cmd, title_cmd


app = typer.Typer(name="docstore", no_args_is_help=True, help="In-memory document store")

app.command(name="search")(search_cmd)
app.command(name="show")(show_cmd)
app.command(name="title")(title_cmd)
