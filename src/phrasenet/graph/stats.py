from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .model import PhraseGraph


@dataclass(frozen=True)
class GraphStats:
    nodes: int
    edges: int
    total_weight: int
    max_weight: int
    mean_degree: float
    density: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def graph_stats(graph: PhraseGraph) -> GraphStats:
    n = len(graph.nodes)
    m = len(graph.edges)
    weights = [e.weight for e in graph.edges]
    possible = n * (n - 1) / 2
    return GraphStats(
        nodes=n,
        edges=m,
        total_weight=sum(weights),
        max_weight=max(weights, default=0),
        mean_degree=(2 * m / n) if n else 0.0,
        density=(m / possible) if possible else 0.0,
    )
