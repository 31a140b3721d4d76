from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .graph.model import GraphOptions, RelationType


load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    # Graph construction defaults; CLI flags and API payloads override per run.
    relation_type: str = os.getenv("PHRASENET_RELATION_TYPE", RelationType.WINDOW.value)
    window_size: int = int(os.getenv("PHRASENET_WINDOW_SIZE", "2"))
    relation_phrase: str = os.getenv("PHRASENET_RELATION_PHRASE", "")
    use_stopwords: bool = _env_flag("PHRASENET_USE_STOPWORDS", "1")
    min_edge_weight: int = int(os.getenv("PHRASENET_MIN_EDGE_WEIGHT", "1"))
    top_n: int = int(os.getenv("PHRASENET_TOP_N", "150"))

    # Length of the frequency list shown next to the graph.
    top_list: int = int(os.getenv("PHRASENET_TOP_LIST", "50"))

    def graph_options(self) -> GraphOptions:
        return GraphOptions.from_mapping(
            {
                "relation_type": self.relation_type,
                "window_size": self.window_size,
                "relation_phrase": self.relation_phrase,
                "use_stopwords": self.use_stopwords,
                "min_edge_weight": self.min_edge_weight,
                "top_n": self.top_n,
            }
        )
