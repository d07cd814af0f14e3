"""
Visualization Engine.

Builds self-contained HTML pages from flow graphs. Layout, drawing and
interaction run in the browser (d3 + d3-sankey); this module only prepares
the data and embeds it into the templates.

Pages:
- Sankey: one pre-built graph per timeline year, swapped client-side when a
  year marker is clicked.
- Bars: stacked per-country bars across years, draining into a shared pile
  of unprocessed waste.
"""

import json
import logging
import webbrowser
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..config import Settings
from ..core.history import CountryHistory, total_unprocessed
from ..core.summary import format_amount
from ..core.types import FlowGraph
from .templates import BAR_TEMPLATE, SANKEY_TEMPLATE

logger = logging.getLogger(__name__)

DATA_PLACEHOLDER = "__WASTEFLOW_DATA__"
BACKGROUND_PLACEHOLDER = "__BACKGROUND__"

# Unprocessed tonnes per pixel of pile width
PILE_SCALE = 500_000


def _render(template: str, payload: Dict[str, Any], settings: Settings) -> str:
    # Keep "</script>" in country names from closing the inline script
    json_data = json.dumps(payload).replace("</", "<\\/")
    return (
        template
        .replace(BACKGROUND_PLACEHOLDER, settings.colors.get("background", "#212529"))
        .replace(DATA_PLACEHOLDER, json_data)
    )


def sankey_payload(
    graphs: Iterable[FlowGraph],
    settings: Settings,
    details: Dict[int, Dict[str, Dict[str, Any]]],
    selected_year: Optional[int] = None,
) -> Dict[str, Any]:
    """
    The data object embedded into the Sankey page.

    `details` maps a year to the tooltip details of that year's graph.
    """
    graphs = list(graphs)
    years = [g.year for g in graphs]
    if selected_year is None or selected_year not in years:
        selected_year = settings.selected_year if settings.selected_year in years else years[-1]

    return {
        "settings": settings.model_dump(mode="json"),
        "years": years,
        "selected_year": selected_year,
        "graphs": {
            str(g.year): {
                "graph": g.to_dict(),
                "details": details.get(g.year, {}),
                "height": settings.canvas_height(len(g.countries)),
            }
            for g in graphs
        },
    }


def generate_html(
    graphs: Iterable[FlowGraph],
    settings: Settings,
    details: Dict[int, Dict[str, Dict[str, Any]]],
    selected_year: Optional[int] = None,
) -> str:
    """
    Generate the Sankey page for the given per-year graphs.
    """
    graphs = list(graphs)
    if not graphs:
        raise ValueError("At least one graph is required to render a Sankey page")

    payload = sankey_payload(graphs, settings, details, selected_year)
    logger.debug(f"Rendering Sankey page for years {payload['years']}")
    return _render(SANKEY_TEMPLATE, payload, settings)


def generate_bar_html(histories: Iterable[CountryHistory], settings: Settings) -> str:
    """
    Generate the stacked bar-chart page.
    """
    histories: List[CountryHistory] = list(histories)
    unprocessed = total_unprocessed(histories)
    payload = {
        "settings": settings.model_dump(mode="json"),
        "histories": [h.to_dict() for h in histories],
        "total_unprocessed": unprocessed,
        "total_unprocessed_label": format_amount(unprocessed, settings.unit),
        "pile_width": max(unprocessed, 0) / PILE_SCALE,
    }
    return _render(BAR_TEMPLATE, payload, settings)


def write_visualization(
    html_content: str, output_path: str | Path = "sankey.html", open_browser: bool = False
) -> Path:
    """
    Write a generated page to disk and optionally open it in the browser.
    """
    out_file = Path(output_path)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(html_content, encoding="utf-8")

    if open_browser:
        webbrowser.open(out_file.resolve().as_uri())

    return out_file
