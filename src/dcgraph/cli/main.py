"""Main CLI entry point for dcgraph"""

import typer

from dcgraph.__version__ import __version__
from dcgraph.cli.commands import graph as graph_commands
from dcgraph.observability.logging import setup_logging

app = typer.Typer(
    name="dcgraph",
    help="dcgraph - dialogue graphs for messaging bots",
    add_completion=False,
)

app.command("key", help="Print the payload key of a node name")(graph_commands.key)
app.command("validate", help="Load and build a graph file")(graph_commands.validate)
app.command("simulate", help="Dispatch one message through a graph")(graph_commands.simulate)


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"dcgraph version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Log as JSON"),
) -> None:
    """dcgraph - dialogue graphs for messaging bots"""
    setup_logging(level=log_level.upper(), json_format=json_logs)


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
