"""
Global Configuration and Defaults.

Built-in defaults live here as module constants. A project can override them
with `.wasteflow/config.yaml` (written by `wasteflow init`), or with the file
named by the WASTEFLOW_CONFIG environment variable.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .core.errors import ConfigError
from .core.types import NodeOrder, ResidualPolicy

logger = logging.getLogger(__name__)

CONFIG_DIR = ".wasteflow"
CONFIG_FILE = "config.yaml"
CONFIG_ENV_VAR = "WASTEFLOW_CONFIG"

# --- Data ---
DEFAULT_SELECTED_YEAR = 2016

# Years shown as markers on the timeline
DEFAULT_TIMELINE_YEARS: List[int] = [2004, 2006, 2008, 2010, 2012, 2014, 2016]

DEFAULT_UNIT = "tonnes"

# --- Canvas ---
DEFAULT_WIDTH = 2500
DEFAULT_HEIGHT = 2000
DEFAULT_NODE_WIDTH = 35
DEFAULT_NODE_PADDING = 63

# Minimum vertical space per country; tall datasets grow the canvas
COUNTRY_SPACING = 30

DEFAULT_COLORS: Dict[str, str] = {
    "background": "#212529",
    "generated": "#7570b3",
    "incinerated": "#d95f02",
    "recycled": "#1b9e77",
    "environmental": "#7570b3",
    "countries": "#7570b3",
    "text": "#ffffff",
    "stroke": "#000000",
}


class Settings(BaseModel):
    """
    Effective settings for building and rendering.
    """
    selected_year: int = DEFAULT_SELECTED_YEAR
    timeline_years: List[int] = Field(default_factory=lambda: list(DEFAULT_TIMELINE_YEARS))
    node_order: NodeOrder = NodeOrder.INSERTION
    residual_policy: ResidualPolicy = ResidualPolicy.CLAMP
    unit: str = DEFAULT_UNIT
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    node_width: int = DEFAULT_NODE_WIDTH
    node_padding: int = DEFAULT_NODE_PADDING
    colors: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_COLORS))

    def canvas_height(self, country_count: int) -> int:
        """Canvas height, grown for datasets with many countries."""
        return max(self.height, country_count * COUNTRY_SPACING)


def default_config_path(root_dir: Optional[Path] = None) -> Path:
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return (root_dir or Path.cwd()) / CONFIG_DIR / CONFIG_FILE


def default_config() -> dict:
    """Plain-dict defaults, as written by `wasteflow init`."""
    return Settings().model_dump(mode="json")


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Load settings from YAML, falling back to defaults when no file exists.

    Unknown keys are ignored; missing keys keep their defaults. Partial
    colour maps are merged over the default palette.

    Raises:
        ConfigError: The file exists but is not valid YAML or has bad values.
    """
    path = config_path or default_config_path()
    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return Settings()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}")

    if isinstance(data.get("colors"), dict):
        data["colors"] = {**DEFAULT_COLORS, **data["colors"]}

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
