"""
Flow-Graph Builder.

Reshapes the flat record list into the node/link structure d3-sankey expects:

    country -> country_generated -> {Incinerated, Recycled, Environmental Load}

Node blocks are laid out as [countries..., generated nodes..., terminals...],
so a country at position i has its generated node at len(countries) + i.
"""

import logging
import math
from typing import Iterable, List

from .errors import ResidualError
from .types import (
    ENVIRONMENTAL_LOAD,
    INCINERATED,
    RECYCLED,
    TERMINAL_NAMES,
    FlowCategory,
    FlowEdge,
    FlowGraph,
    FlowNode,
    NodeOrder,
    ResidualPolicy,
    WasteRecord,
)

logger = logging.getLogger(__name__)

# Relative to the generated amount
RESIDUAL_TOLERANCE = 1e-9


def filter_year(records: Iterable[WasteRecord], year: int) -> List[WasteRecord]:
    """Records for a single year, in input order."""
    return [r for r in records if r.year == year]


def collect_countries(
    records: Iterable[WasteRecord], order: NodeOrder = NodeOrder.INSERTION
) -> List[str]:
    """
    Distinct, non-empty country names.

    INSERTION keeps first-seen order, SORTED sorts ascending.
    """
    seen = dict.fromkeys(r.country for r in records if r.country)
    countries = list(seen)
    if order == NodeOrder.SORTED:
        countries.sort()
    return countries


def residual_amount(
    record: WasteRecord, policy: ResidualPolicy = ResidualPolicy.CLAMP
) -> float:
    """
    Environmental load of a record under the given policy.

    Remainders within float rounding of zero count as 0.0; only truly
    negative values are clamped, rejected or propagated.
    """
    value = record.residual
    if math.isclose(value, 0.0, abs_tol=RESIDUAL_TOLERANCE * max(1.0, abs(record.generated))):
        return 0.0
    if value >= 0 or policy == ResidualPolicy.PROPAGATE:
        return value

    if policy == ResidualPolicy.REJECT:
        raise ResidualError(record.country, record.year, value)

    logger.warning(
        f"Clamping negative environmental load for {record.country} "
        f"in {record.year}: {value}"
    )
    return 0.0


def build_flow_graph(
    records: Iterable[WasteRecord],
    year: int,
    order: NodeOrder = NodeOrder.INSERTION,
    residual_policy: ResidualPolicy = ResidualPolicy.CLAMP,
) -> FlowGraph:
    """
    Build the flow graph for one year.

    Args:
        records: The full dataset. Only records for `year` are used.
        year: Target year.
        order: Ordering of the country node block.
        residual_policy: How a negative environmental load is handled.

    Returns:
        FlowGraph: Countries, one generated node per country and the three
        terminal nodes, plus one link per flow. A year without records yields
        the terminals only.
    """
    year_records = filter_year(records, year)
    countries = collect_countries(year_records, order)

    nodes = [FlowNode.for_country(c) for c in countries]
    nodes.extend(FlowNode.for_generated(c) for c in countries)
    nodes.extend(FlowNode.terminal(name) for name in TERMINAL_NAMES)

    position = {country: i for i, country in enumerate(countries)}
    terminal_start = len(countries) * 2
    incinerated_idx = terminal_start + TERMINAL_NAMES.index(INCINERATED)
    recycled_idx = terminal_start + TERMINAL_NAMES.index(RECYCLED)
    environmental_idx = terminal_start + TERMINAL_NAMES.index(ENVIRONMENTAL_LOAD)

    links: List[FlowEdge] = []
    for record in year_records:
        country_idx = position.get(record.country)
        if country_idx is None:
            logger.debug(f"Skipping record without a country node: {record!r}")
            continue

        generated_idx = len(countries) + country_idx

        links.append(FlowEdge(
            source=country_idx,
            target=generated_idx,
            value=record.generated,
            category=FlowCategory.GENERATED,
        ))
        links.append(FlowEdge(
            source=generated_idx,
            target=incinerated_idx,
            value=record.incinerated,
            category=FlowCategory.INCINERATED,
        ))
        if record.recycled > 0:
            links.append(FlowEdge(
                source=generated_idx,
                target=recycled_idx,
                value=record.recycled,
                category=FlowCategory.RECYCLED,
            ))
        links.append(FlowEdge(
            source=generated_idx,
            target=environmental_idx,
            value=residual_amount(record, residual_policy),
            category=FlowCategory.ENVIRONMENTAL,
        ))

    logger.debug(f"Built flow graph for {year}: {len(nodes)} nodes, {len(links)} links")
    return FlowGraph(year=year, nodes=nodes, links=links)


def build_flow_graphs(
    records: Iterable[WasteRecord],
    years: Iterable[int],
    order: NodeOrder = NodeOrder.INSERTION,
    residual_policy: ResidualPolicy = ResidualPolicy.CLAMP,
) -> List[FlowGraph]:
    """One graph per year, each built from scratch."""
    records = list(records)
    return [build_flow_graph(records, y, order, residual_policy) for y in years]
