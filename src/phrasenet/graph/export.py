from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .model import Edge, Node, PhraseGraph

DEFAULT_EXPORT_NAME = "phrase_net.json"


def to_json(graph: PhraseGraph, *, indent: int | None = 2) -> str:
    return json.dumps(graph.to_dict(), ensure_ascii=False, indent=indent)


def write_json(graph: PhraseGraph, path: str | Path) -> Path:
    p = Path(path)
    if p.is_dir():
        p = p / DEFAULT_EXPORT_NAME
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(to_json(graph) + "\n", encoding="utf-8")
    return p


def from_dict(data: Any) -> PhraseGraph:
    """Inverse of ``PhraseGraph.to_dict``. Raises ValueError on malformed input."""
    if not isinstance(data, dict):
        raise ValueError("graph JSON must be an object with 'nodes' and 'edges'")

    raw_nodes = data.get("nodes")
    raw_edges = data.get("edges")
    if not isinstance(raw_nodes, list):
        raise ValueError("graph JSON: 'nodes' must be a list")
    if not isinstance(raw_edges, list):
        raise ValueError("graph JSON: 'edges' must be a list")

    nodes: list[Node] = []
    for i, n in enumerate(raw_nodes):
        if not isinstance(n, dict) or "id" not in n:
            raise ValueError(f"graph JSON: nodes[{i}] needs an 'id'")
        nodes.append(Node(id=str(n["id"]), count=_int_field(n, "count", f"nodes[{i}]")))

    edges: list[Edge] = []
    for i, e in enumerate(raw_edges):
        if not isinstance(e, dict) or "source" not in e or "target" not in e:
            raise ValueError(f"graph JSON: edges[{i}] needs 'source' and 'target'")
        edges.append(
            Edge(
                source=_endpoint_id(e["source"]),
                target=_endpoint_id(e["target"]),
                weight=_int_field(e, "weight", f"edges[{i}]"),
            )
        )

    return PhraseGraph(nodes=nodes, edges=edges)


def load_json(path: str | Path) -> PhraseGraph:
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{p.name} is not valid JSON: {e}") from e
    return from_dict(data)


def _endpoint_id(v: Any) -> str:
    # Renderers replace endpoint ids with node objects; accept both on import.
    if isinstance(v, dict) and "id" in v:
        return str(v["id"])
    return str(v)


def _int_field(obj: dict[str, Any], key: str, where: str) -> int:
    try:
        return int(obj[key])
    except (KeyError, TypeError, ValueError):
        raise ValueError(f"graph JSON: {where}.{key} must be an integer") from None
