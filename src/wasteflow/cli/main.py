"""
wasteflow CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

from pathlib import Path

import click

from .commands import build, initialize, render, years
from .utils import configure_logging


@click.group()
@click.version_option(package_name="wasteflow")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "-c", "--config", "config_path",
    type=click.Path(path_type=Path),
    help="Config file (default: .wasteflow/config.yaml)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Path | None):
    """wasteflow: Hazardous-waste flow diagrams.

    Turns per-country, per-year waste statistics into Sankey flows:
    country -> generated -> incinerated / recycled / environmental load.

    \b
    Quick Start:
      wasteflow years data.json
      wasteflow build data.json --year 2016
      wasteflow render data.json --output sankey.html
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


# Register commands
main.add_command(years.years)
main.add_command(build.build)
main.add_command(render.render)
main.add_command(initialize.init)

if __name__ == "__main__":
    main()
