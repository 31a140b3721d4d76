from __future__ import annotations

from typing import Any

from .model import Node, PhraseGraph


def top_nodes(graph: PhraseGraph, *, limit: int = 50) -> list[Node]:
    """Frequency list: nodes by descending count, first-listed wins ties."""
    ranked = sorted(graph.nodes, key=lambda n: n.count, reverse=True)
    return ranked[: max(0, int(limit))]


def find_node(graph: PhraseGraph, node_id: str) -> Node | None:
    for n in graph.nodes:
        if n.id == node_id:
            return n
    return None


def neighborhood(graph: PhraseGraph, node_id: str, *, limit: int = 40) -> dict[str, Any] | None:
    node = find_node(graph, node_id)
    if node is None:
        return None

    # Edges may be directed (relation-phrase mode); look at both ends.
    by_id: dict[str, dict[str, Any]] = {}
    for e in graph.edges:
        if e.source == node_id:
            other, direction = e.target, "out"
        elif e.target == node_id:
            other, direction = e.source, "in"
        else:
            continue
        prev = by_id.get(other)
        if prev is None:
            by_id[other] = {"id": other, "weight": e.weight, "directions": [direction]}
        else:
            prev["weight"] += e.weight
            if direction not in prev["directions"]:
                prev["directions"].append(direction)

    neighbors = sorted(by_id.values(), key=lambda r: int(r["weight"]), reverse=True)
    return {
        "node": {"id": node.id, "count": node.count},
        "degree": sum(1 for e in graph.edges if node_id in (e.source, e.target)),
        "neighbors": neighbors[: max(0, int(limit))],
    }
