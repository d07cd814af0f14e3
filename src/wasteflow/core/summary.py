"""
Summaries and tooltip details for flow graphs.

Everything here is derived from a built graph and the year's records; the
HTML page only displays what these functions produce.
"""

from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel

from .types import FlowGraph, NodeKind, WasteRecord


class SourceShare(BaseModel):
    """One contributor to a terminal node."""
    name: str
    value: float


class CountryBreakdown(BaseModel):
    """Disposal split of a country's generated waste."""
    country: str
    year: int
    generated: float
    incinerated: float
    recycled: float
    residual: float
    incinerated_pct: float
    recycled_pct: float


def format_amount(value: float, unit: Optional[str] = None) -> str:
    """
    Short human form of an amount: 1.2M, 45.3K, or the value itself.

    >>> format_amount(1_250_000, "tonnes")
    '1.2M tonnes'
    """
    if value >= 1e6:
        text = f"{value / 1e6:.1f}M"
    elif value >= 1e3:
        text = f"{value / 1e3:.1f}K"
    elif float(value).is_integer():
        text = str(int(value))
    else:
        text = str(value)
    return f"{text} {unit}" if unit else text


def node_values(graph: FlowGraph) -> List[float]:
    """Node values as d3-sankey computes them: max of inflow and outflow."""
    inflow = [0.0] * graph.node_count
    outflow = [0.0] * graph.node_count
    for edge in graph.links:
        outflow[edge.source] += edge.value
        inflow[edge.target] += edge.value
    return [max(i, o) for i, o in zip(inflow, outflow)]


def terminal_sources(graph: FlowGraph, index: int) -> List[SourceShare]:
    """
    Incoming flows of a node ordered by amount, largest first.

    Generated nodes are reported under their country name.
    """
    shares = []
    for edge in graph.incoming(index):
        source = graph.nodes[edge.source]
        name = source.country if source.kind == NodeKind.GENERATED else source.name
        shares.append(SourceShare(name=name, value=edge.value))
    shares.sort(key=lambda s: -s.value)
    return shares


def _percent(part: float, whole: float) -> float:
    if not whole:
        return 0.0
    return round(part / whole * 100, 1)


def country_breakdown(record: WasteRecord) -> CountryBreakdown:
    return CountryBreakdown(
        country=record.country,
        year=record.year,
        generated=record.generated,
        incinerated=record.incinerated,
        recycled=record.recycled,
        residual=record.residual,
        incinerated_pct=_percent(record.incinerated, record.generated),
        recycled_pct=_percent(record.recycled, record.generated),
    )


def combine_by_country(records: Iterable[WasteRecord]) -> Dict[str, WasteRecord]:
    """
    One record per country, amounts added up, matching the flows the graph
    draws when a country reports several rows for the same year.
    """
    combined: Dict[str, WasteRecord] = {}
    for record in records:
        if not record.country:
            continue
        current = combined.get(record.country)
        if current is None:
            combined[record.country] = record
            continue
        combined[record.country] = current.model_copy(update={
            "generated": current.generated + record.generated,
            "incinerated": current.incinerated + record.incinerated,
            "recycled": current.recycled + record.recycled,
        })
    return combined


def describe_graph(
    graph: FlowGraph, records: Iterable[WasteRecord], unit: Optional[str] = None
) -> Dict[str, Dict[str, Any]]:
    """
    Tooltip details for every node, keyed by node name.

    Terminal nodes list their sources; country and generated nodes carry the
    country's disposal breakdown for the graph's year.
    """
    by_country = combine_by_country(r for r in records if r.year == graph.year)
    values = node_values(graph)
    details: Dict[str, Dict[str, Any]] = {}

    for i, node in enumerate(graph.nodes):
        entry: Dict[str, Any] = {
            "kind": node.kind.value,
            "value": values[i],
            "label": format_amount(values[i], unit),
        }
        if node.kind == NodeKind.TERMINAL:
            entry["sources"] = [
                {**s.model_dump(), "label": format_amount(s.value, unit)}
                for s in terminal_sources(graph, i)
            ]
        else:
            record = by_country.get(node.country)
            if record is not None:
                entry["breakdown"] = country_breakdown(record).model_dump()
        details[node.name] = entry

    return details
