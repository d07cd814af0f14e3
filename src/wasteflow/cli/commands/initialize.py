"""
Init Command - Write a project configuration file.

This module handles the `wasteflow init` command, which writes
`.wasteflow/config.yaml` with the built-in defaults so they can be tuned.
"""

from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from ...config import CONFIG_DIR, CONFIG_FILE, default_config

console = Console()


def _write_config(root_dir: Path) -> Path:
    config_dir = root_dir / CONFIG_DIR
    config_file = config_dir / CONFIG_FILE

    config = default_config()
    config_dir.mkdir(exist_ok=True)
    with open(config_file, "w") as f:
        yaml.dump(config, f, sort_keys=False, default_flow_style=False)

    return config_file


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
def init(force: bool):
    """
    Initialize wasteflow in the current directory.
    """
    console.print(Panel.fit("[bold blue]wasteflow Initialization[/bold blue]", border_style="blue"))

    root_dir = Path.cwd()
    config_file = root_dir / CONFIG_DIR / CONFIG_FILE

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        if not Confirm.ask("Do you want to overwrite it?"):
            console.print("Aborted.")
            return

    written = _write_config(root_dir)

    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{written}[/dim]")
