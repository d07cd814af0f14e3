"""
Core type definitions for wasteflow.

Input records come from the static JSON dataset; the flow graph types are
shaped so that `FlowGraph.to_dict()` can be handed to d3-sankey unchanged.
"""

from enum import StrEnum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

INCINERATED = "Incinerated"
RECYCLED = "Recycled"
ENVIRONMENTAL_LOAD = "Environmental Load"

TERMINAL_NAMES = (INCINERATED, RECYCLED, ENVIRONMENTAL_LOAD)

GENERATED_SUFFIX = "_generated"


class NodeKind(StrEnum):
    """Categories of nodes in the flow graph."""
    COUNTRY = "country"
    GENERATED = "generated"
    TERMINAL = "terminal"


class FlowCategory(StrEnum):
    """What a link carries. Drives link colouring."""
    GENERATED = "generated"
    INCINERATED = "incinerated"
    RECYCLED = "recycled"
    ENVIRONMENTAL = "environmental"


class NodeOrder(StrEnum):
    """How country nodes are ordered in the first node block."""
    INSERTION = "insertion"
    SORTED = "sorted"


class ResidualPolicy(StrEnum):
    """
    What to do when generated - incinerated - recycled goes negative.

    CLAMP turns the remainder into 0, REJECT raises, PROPAGATE passes the
    raw value through to the layout.
    """
    CLAMP = "clamp"
    REJECT = "reject"
    PROPAGATE = "propagate"


class WasteRecord(BaseModel):
    """
    One country/year row of the hazardous-waste dataset.
    """
    country: str
    year: int
    generated: float
    incinerated: float = 0.0
    recycled: float = 0.0

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    @field_validator("incinerated", "recycled", mode="before")
    @classmethod
    def _missing_as_zero(cls, value: Any) -> Any:
        # Recycling figures are absent before reporting became mandatory
        return 0.0 if value is None else value

    @field_validator("country", mode="before")
    @classmethod
    def _country_or_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def residual(self) -> float:
        """Generated waste not accounted for by incineration or recycling."""
        return self.generated - self.incinerated - self.recycled


class FlowNode(BaseModel):
    """A node of the flow graph. Layout position is computed by d3-sankey."""
    name: str
    kind: NodeKind
    country: Optional[str] = None

    @classmethod
    def for_country(cls, country: str) -> "FlowNode":
        return cls(name=country, kind=NodeKind.COUNTRY, country=country)

    @classmethod
    def for_generated(cls, country: str) -> "FlowNode":
        return cls(name=generated_node_name(country), kind=NodeKind.GENERATED, country=country)

    @classmethod
    def terminal(cls, name: str) -> "FlowNode":
        return cls(name=name, kind=NodeKind.TERMINAL)


class FlowEdge(BaseModel):
    """
    Directed, weighted link between two nodes, addressed by node index.
    """
    source: int
    target: int
    value: float
    category: FlowCategory


class FlowGraph(BaseModel):
    """
    Nodes and links for a single year.

    `links` is the key name d3-sankey reads, so the model keeps it.
    """
    year: int
    nodes: List[FlowNode] = Field(default_factory=list)
    links: List[FlowEdge] = Field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.links)

    @property
    def countries(self) -> List[str]:
        return [n.name for n in self.nodes if n.kind == NodeKind.COUNTRY]

    def index_of(self, name: str) -> int:
        """Index of the node called `name`, or -1."""
        for i, node in enumerate(self.nodes):
            if node.name == name:
                return i
        return -1

    def outgoing(self, index: int) -> List[FlowEdge]:
        return [e for e in self.links if e.source == index]

    def incoming(self, index: int) -> List[FlowEdge]:
        return [e for e in self.links if e.target == index]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "nodes": [n.model_dump(mode="json") for n in self.nodes],
            "links": [e.model_dump(mode="json") for e in self.links],
            "stats": {"node_count": self.node_count, "edge_count": self.edge_count},
        }


def generated_node_name(country: str) -> str:
    """Name of the synthetic per-country total node."""
    return f"{country}{GENERATED_SUFFIX}"
