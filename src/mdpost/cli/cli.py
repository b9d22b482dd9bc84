"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdpost.cli.commands import check_cmd, init_cmd, main_callback, show_cmd


app = typer.Typer(name="mdpost", no_args_is_help=True, help="Front-matter Markdown post checker")

app.callback()(main_callback)
app.command(name="check")(check_cmd)
app.command(name="show")(show_cmd)
app.command(name="init")(init_cmd)
