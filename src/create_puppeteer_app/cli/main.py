"""create-puppeteer-app CLI entry point."""

import typer

from create_puppeteer_app.cli.create_cmd import create

app = typer.Typer(
    name="create-puppeteer-app",
    help="Scaffold a new Puppeteer automation project",
    add_completion=False,
    pretty_exceptions_show_locals=False,
)

# A single registered command runs without a subcommand name.
app.command()(create)
