"""
Years Command - List the years present in a dataset.
"""

import sys

import click
from rich.console import Console
from rich.table import Table

from ...core.dataset import records_per_year
from ...core.errors import WasteflowError
from ..utils import echo_error, load_dataset

console = Console()


@click.command()
@click.argument("data_file", type=click.Path())
def years(data_file: str):
    """
    List the years in DATA_FILE with their record counts.
    """
    try:
        records = load_dataset(data_file)
    except WasteflowError as e:
        echo_error(str(e))
        sys.exit(1)

    counts = records_per_year(records)
    if not counts:
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Year", style="cyan")
    table.add_column("Records", justify="right")
    for year, count in counts.items():
        table.add_row(str(year), str(count))

    console.print(table)
