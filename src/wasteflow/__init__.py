"""
wasteflow - Hazardous-waste flow diagrams.

wasteflow turns per-country, per-year hazardous-waste statistics into the
node/link structure of a Sankey diagram and renders it as an interactive
d3 page.

Key Components:
- core: Record and graph types, the flow-graph builder, summaries
- graph: HTML rendering
- cli: The `wasteflow` command line

Usage:
    from wasteflow import build_flow_graph, load_records

    records = load_records("data.json")
    graph = build_flow_graph(records, 2016)
"""

__version__ = "0.1.0"

from .core.builder import build_flow_graph
from .core.dataset import load_records
from .core.types import (
    FlowEdge, FlowGraph, FlowNode, NodeKind, NodeOrder,
    ResidualPolicy, WasteRecord,
)

__all__ = [
    "__version__",
    "build_flow_graph",
    "load_records",
    "FlowEdge",
    "FlowGraph",
    "FlowNode",
    "NodeKind",
    "NodeOrder",
    "ResidualPolicy",
    "WasteRecord",
]
