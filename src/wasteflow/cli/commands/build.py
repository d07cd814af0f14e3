"""
Build Command - Build the flow graph for one year.

Prints the graph as tables, as a JSON envelope on stdout (for scripting),
or writes it to a JSON file.
"""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...core.builder import build_flow_graph
from ...core.errors import WasteflowError
from ...core.summary import format_amount
from ...core.types import FlowGraph, NodeOrder, ResidualPolicy
from ..utils import echo_error, echo_info, echo_success, echo_warning, get_settings, load_dataset

console = Console()


def _print_graph(graph: FlowGraph, unit: str) -> None:
    table = Table(title=f"Flows {graph.year}", show_header=True, header_style="bold")
    table.add_column("Source", style="cyan")
    table.add_column("Target", style="magenta")
    table.add_column("Amount", justify="right")

    for edge in graph.links:
        table.add_row(
            graph.nodes[edge.source].name,
            graph.nodes[edge.target].name,
            format_amount(edge.value, unit),
        )

    console.print(table)
    console.print(
        f"[bold]{len(graph.countries)}[/bold] countries, "
        f"[bold]{graph.node_count}[/bold] nodes, "
        f"[bold]{graph.edge_count}[/bold] links"
    )


@click.command()
@click.argument("data_file", type=click.Path())
@click.option("-y", "--year", type=int, help="Year to build (default: selected_year from config)")
@click.option(
    "--order",
    type=click.Choice([o.value for o in NodeOrder]),
    help="Country node ordering",
)
@click.option(
    "--residual",
    type=click.Choice([p.value for p in ResidualPolicy]),
    help="How a negative environmental load is handled",
)
@click.option("-o", "--output", help="Write the graph to a JSON file")
@click.option("--json", "as_json", is_flag=True, help="Output graph data as JSON to stdout")
@click.pass_context
def build(
    ctx: click.Context,
    data_file: str,
    year: int | None,
    order: str | None,
    residual: str | None,
    output: str | None,
    as_json: bool,
):
    """
    Build the Sankey flow graph of DATA_FILE for one year.
    """
    try:
        settings = get_settings(
            ctx,
            selected_year=year,
            node_order=NodeOrder(order) if order else None,
            residual_policy=ResidualPolicy(residual) if residual else None,
        )
        records = load_dataset(data_file)
        graph = build_flow_graph(
            records,
            settings.selected_year,
            order=settings.node_order,
            residual_policy=settings.residual_policy,
        )
    except WasteflowError as e:
        if as_json:
            click.echo(json.dumps({
                "meta": {"status": "error"},
                "error": {"message": str(e), "type": type(e).__name__},
            }))
        else:
            echo_error(str(e))
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({
            "meta": {"status": "success", "year": graph.year},
            "data": graph.to_dict(),
        }))
        return

    if output:
        output_path = Path(output)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(json.dumps(graph.to_dict(), indent=2))
        except OSError as e:
            echo_error(f"Failed to write {output_path}: {e}")
            sys.exit(1)
        echo_success(f"Generated: {output_path}")
        echo_info(f"{graph.node_count} nodes, {graph.edge_count} links")
        return

    if not graph.countries:
        echo_warning(f"No records for {graph.year}")
        return

    _print_graph(graph, settings.unit)
