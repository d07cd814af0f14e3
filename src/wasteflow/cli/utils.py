"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the CLI commands,
including formatted printing, dataset loading and settings resolution.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional

import click

from ..config import Settings, load_settings
from ..core.dataset import load_records
from ..core.types import WasteRecord


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """Print an informational message, dimmed."""
    click.echo(click.style(f"   {message}", dim=True))


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="[%X]",
    )


def get_settings(ctx: click.Context, **overrides: Any) -> Settings:
    """
    Effective settings for a command.

    Command line values win over the project config, which wins over the
    built-in defaults. `None` overrides are ignored.

    Raises:
        ConfigError: The config file exists but cannot be used.
    """
    config_path: Optional[Path] = (ctx.obj or {}).get("config_path")
    settings = load_settings(config_path)
    updates = {k: v for k, v in overrides.items() if v is not None}
    if updates:
        settings = settings.model_copy(update=updates)
    return settings


def load_dataset(data_file: str) -> List[WasteRecord]:
    """
    Load the dataset for a command.

    Raises:
        DatasetError: The file is missing or malformed.
    """
    records = load_records(data_file)
    if not records:
        echo_warning(f"Dataset is empty: {data_file}")
    return records
