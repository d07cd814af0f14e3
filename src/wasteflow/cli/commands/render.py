"""
Render Command - Generate the interactive HTML page.

The Sankey page holds one graph per timeline year; clicking a year marker
swaps the diagram in the browser. The bar page shows every country's
history side by side.
"""

import sys

import click

from ...core.builder import build_flow_graphs
from ...core.errors import WasteflowError
from ...core.history import country_histories
from ...core.summary import describe_graph
from ...graph.visualize import generate_bar_html, generate_html, write_visualization
from ..utils import echo_error, echo_info, echo_success, get_settings, load_dataset


@click.command()
@click.argument("data_file", type=click.Path())
@click.option("-o", "--output", default="sankey.html", help="Output HTML file")
@click.option(
    "--chart",
    type=click.Choice(["sankey", "bars"]),
    default="sankey",
    help="Sankey flows per year, or stacked bars per country",
)
@click.option("-y", "--year", type=int, help="Year shown first (default: selected_year from config)")
@click.option("--open", "open_browser", is_flag=True, help="Open the page in the browser")
@click.pass_context
def render(
    ctx: click.Context,
    data_file: str,
    output: str,
    chart: str,
    year: int | None,
    open_browser: bool,
):
    """
    Render DATA_FILE as an interactive HTML page.
    """
    try:
        settings = get_settings(ctx, selected_year=year)
        records = load_dataset(data_file)

        if chart == "bars":
            html = generate_bar_html(country_histories(records), settings)
        else:
            years = list(settings.timeline_years)
            if settings.selected_year not in years:
                years = sorted({*years, settings.selected_year})

            graphs = build_flow_graphs(
                records,
                years,
                order=settings.node_order,
                residual_policy=settings.residual_policy,
            )
            details = {g.year: describe_graph(g, records, settings.unit) for g in graphs}
            html = generate_html(graphs, settings, details, selected_year=settings.selected_year)
    except WasteflowError as e:
        echo_error(str(e))
        sys.exit(1)

    output_path = write_visualization(html, output, open_browser=open_browser)
    echo_success(f"Generated: {output_path}")
    echo_info(f"Open: file://{output_path.absolute()}")
