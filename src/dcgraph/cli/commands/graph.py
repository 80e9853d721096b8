"""Graph commands: key, validate and simulate."""

from pathlib import Path
from typing import Any

import typer
import yaml
from rich.console import Console
from rich.table import Table

from dcgraph.config.loader import ConfigLoader
from dcgraph.core.constants import PAYLOAD_FIELD
from dcgraph.core.errors import DCGraphError
from dcgraph.core.keys import derive_key, is_node_key
from dcgraph.core.recording import RecordingContext
from dcgraph.graph.builder import GraphHandlerBuilder
from dcgraph.graph.dispatcher import Dispatcher
from dcgraph.graph.resolution import CompiledNode

console = Console()


def key(name: str = typer.Argument(..., help="Node name")) -> None:
    """Print the payload key of a node name."""
    typer.echo(derive_key(name))


def validate(
    path: Path = typer.Argument(..., help="Graph YAML file or directory"),
) -> None:
    """Load and build a graph, then list its nodes."""
    dispatcher = _build(_builder(path))

    names = {node.key: node.name for node in dispatcher.nodes.values()}
    table = Table(title=str(path))
    table.add_column("Node")
    table.add_column("Actions", justify="right")
    table.add_column("Links to")
    for node in dispatcher.nodes.values():
        links = sorted({names[k] for k in _outgoing_keys(node) if k in names})
        table.add_row(node.name, str(len(node.actions)), ", ".join(links) or "-")
    console.print(table)

    typer.echo(f"OK: {len(dispatcher.nodes)} node(s)")


def simulate(
    path: Path = typer.Argument(..., help="Graph YAML file or directory"),
    postback: str | None = typer.Option(None, "--postback", "-p", help="Postback payload"),
    quick_reply: str | None = typer.Option(
        None, "--quick-reply", "-q", help="Quick reply payload"
    ),
    node: str | None = typer.Option(
        None, "--node", "-n", help="Send a postback for this node name"
    ),
    get_started: bool = typer.Option(
        False, "--get-started", help="Send the get-started postback"
    ),
) -> None:
    """Dispatch one message and print the send calls it produces."""
    fired: list[str] = []
    builder = _builder(path)
    builder.on_get_started(lambda context, message: fired.append("get_started"))
    builder.on_unhandled(lambda context, message: fired.append("unhandled"))
    dispatcher = _build(builder)

    if node is not None:
        postback = derive_key(node)
    if get_started:
        postback = dispatcher.settings.get_started_payload

    message: dict[str, Any] = {}
    if postback is not None:
        message["postback"] = {"payload": postback}
    if quick_reply is not None:
        message["message"] = {"quick_reply": {"payload": quick_reply}}

    context = RecordingContext()
    dispatcher(context, message)

    route = dispatcher.route(message)
    typer.echo(f"Node: {route.node.name if route.node else '-'}")
    for call in context.calls:
        typer.echo(f"{call.operation}{call.args!r}")
    typer.echo(f"Hooks: {', '.join(fired) or '-'}")


def _outgoing_keys(node: CompiledNode) -> list[str]:
    keys = []
    for action in node.actions:
        for arg in action.args:
            if not isinstance(arg, list):
                continue
            for descriptor in arg:
                payload = descriptor.get(PAYLOAD_FIELD) if isinstance(descriptor, dict) else None
                if isinstance(payload, str) and is_node_key(payload):
                    keys.append(payload)
    return keys


def _builder(path: Path) -> GraphHandlerBuilder:
    try:
        return GraphHandlerBuilder.from_config(ConfigLoader.load(path))
    except (FileNotFoundError, yaml.YAMLError, DCGraphError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


def _build(builder: GraphHandlerBuilder) -> Dispatcher:
    try:
        return builder.build(context_type=RecordingContext())
    except DCGraphError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
