from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping


class RelationType(str, Enum):
    WINDOW = "window"
    SENTENCE = "sentence"
    RELATION_PHRASE = "relation-phrase"


# Accepts the snake_case field names as well as the camelCase keys used by the
# browser front-end payloads.
_OPTION_KEYS = {
    "relation_type": ("relation_type", "relationType"),
    "window_size": ("window_size", "windowSize"),
    "relation_phrase": ("relation_phrase", "relationPhrase"),
    "use_stopwords": ("use_stopwords", "useStopwords"),
    "min_edge_weight": ("min_edge_weight", "minEdgeWeight"),
    "top_n": ("top_n", "topN"),
}

_FALSE_STRINGS = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class GraphOptions:
    relation_type: RelationType = RelationType.WINDOW
    window_size: int = 2
    relation_phrase: str = ""
    use_stopwords: bool = True
    min_edge_weight: int = 1
    # 0 means no cap.
    top_n: int = 0

    def clamped(self) -> GraphOptions:
        """Return a copy with out-of-range numbers pulled back into range."""
        return replace(
            self,
            relation_type=RelationType(self.relation_type),
            window_size=max(1, int(self.window_size or 1)),
            relation_phrase=str(self.relation_phrase or ""),
            use_stopwords=bool(self.use_stopwords),
            min_edge_weight=max(0, int(self.min_edge_weight or 0)),
            top_n=max(0, int(self.top_n or 0)),
        )

    def phrase_words(self) -> list[str]:
        return self.relation_phrase.lower().split()

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any], *, defaults: GraphOptions | None = None) -> GraphOptions:
        """Build options from a loosely-typed mapping (JSON body, form data).

        Missing keys fall back to ``defaults``. Raises ValueError for an
        unknown relation type or a numeric field that is not an integer.
        """
        base = defaults or cls()
        values: dict[str, Any] = {}
        for name, keys in _OPTION_KEYS.items():
            for k in keys:
                if k in payload and payload[k] is not None:
                    values[name] = payload[k]
                    break

        if "relation_type" in values:
            raw = str(values["relation_type"]).strip().lower()
            try:
                values["relation_type"] = RelationType(raw)
            except ValueError:
                allowed = ", ".join(r.value for r in RelationType)
                raise ValueError(f"relation_type must be one of: {allowed} (got {raw!r})") from None

        for name in ("window_size", "min_edge_weight", "top_n"):
            if name in values:
                values[name] = _as_int(name, values[name])

        if "use_stopwords" in values:
            flag = values["use_stopwords"]
            if isinstance(flag, str):
                flag = flag.strip().lower() not in _FALSE_STRINGS
            values["use_stopwords"] = bool(flag)

        if "relation_phrase" in values:
            values["relation_phrase"] = str(values["relation_phrase"])

        return replace(base, **values).clamped()

    def to_dict(self) -> dict[str, Any]:
        return {
            "relation_type": self.relation_type.value,
            "window_size": self.window_size,
            "relation_phrase": self.relation_phrase,
            "use_stopwords": self.use_stopwords,
            "min_edge_weight": self.min_edge_weight,
            "top_n": self.top_n,
        }


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer (got {value!r})") from None


@dataclass(frozen=True)
class Node:
    id: str
    count: int


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    weight: int


@dataclass(frozen=True)
class PhraseGraph:
    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "nodes": [{"id": n.id, "count": n.count} for n in self.nodes],
            "edges": [{"source": e.source, "target": e.target, "weight": e.weight} for e in self.edges],
        }

    def node_ids(self) -> set[str]:
        return {n.id for n in self.nodes}
