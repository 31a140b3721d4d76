"""Text to phrase-net construction.

Two passes over the sentence tokens: pass 1 counts node frequencies and picks
the retained node set, pass 2 extracts weighted edges with the configured
strategy, gated by that node set. The finalizer then applies the edge weight
threshold and drops nodes left without edges.
"""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations
from typing import AbstractSet, Iterable

from .extract import SentenceTokens, document_tokens
from .model import Edge, GraphOptions, Node, PhraseGraph, RelationType
from .stopwords import DEFAULT_STOPWORDS

EdgeKey = tuple[str, str]


def accumulate_nodes(sentences: Iterable[SentenceTokens]) -> dict[str, int]:
    """Pass 1: token -> occurrences, in first-seen order."""
    counts: dict[str, int] = {}
    for s in sentences:
        for t in s.filtered:
            counts[t] = counts.get(t, 0) + 1
    return counts


def select_nodes(counts: dict[str, int], *, top_n: int = 0) -> list[Node]:
    nodes = [Node(id=t, count=c) for t, c in counts.items()]
    if top_n and len(nodes) > top_n:
        # sorted() is stable: ties keep first-seen order.
        nodes = sorted(nodes, key=lambda n: n.count, reverse=True)[:top_n]
    return nodes


def _canonical(a: str, b: str) -> EdgeKey:
    return (a, b) if a < b else (b, a)


def window_pairs(tokens: list[str], window_size: int) -> Iterable[EdgeKey]:
    w = max(1, int(window_size or 1))
    n = len(tokens)
    for i in range(n):
        for j in range(i + 1, min(n, i + w + 1)):
            a, b = tokens[i], tokens[j]
            if not a or not b or a == b:
                continue
            yield _canonical(a, b)


def sentence_pairs(tokens: list[str]) -> Iterable[EdgeKey]:
    # O(n^2) in sentence length.
    for a, b in combinations(tokens, 2):
        if not a or not b or a == b:
            continue
        yield _canonical(a, b)


def phrase_pairs(tokens: list[str], phrase: list[str]) -> Iterable[EdgeKey]:
    """Yield (before, after) around every occurrence of ``phrase``.

    Direction is kept as found: the token preceding the phrase is the source.
    """
    size = len(phrase)
    if not size:
        return
    for i in range(len(tokens) - size - 1):
        if tokens[i + 1 : i + 1 + size] != phrase:
            continue
        a, b = tokens[i], tokens[i + size + 1]
        if not a or not b or a == b:
            continue
        yield (a, b)


def extract_edges(
    sentences: Iterable[SentenceTokens],
    *,
    retained: AbstractSet[str],
    options: GraphOptions,
) -> dict[EdgeKey, int]:
    """Pass 2: accumulate edge weights for the active strategy."""
    opts = options.clamped()
    phrase = opts.phrase_words()
    weights: dict[EdgeKey, int] = defaultdict(int)

    for s in sentences:
        if opts.relation_type == RelationType.WINDOW:
            pairs = window_pairs(s.filtered, opts.window_size)
        elif opts.relation_type == RelationType.SENTENCE:
            pairs = sentence_pairs(s.filtered)
        else:
            # Unfiltered: the phrase itself is often a stopword ("is", "of").
            pairs = phrase_pairs(s.tokens, phrase)

        for a, b in pairs:
            if a not in retained or b not in retained:
                continue
            weights[(a, b)] += 1

    return dict(weights)


def finalize_graph(nodes: list[Node], weights: dict[EdgeKey, int], *, min_edge_weight: int = 1) -> PhraseGraph:
    node_ids = {n.id for n in nodes}
    edges = [
        Edge(source=a, target=b, weight=w)
        for (a, b), w in weights.items()
        if w >= min_edge_weight and a in node_ids and b in node_ids
    ]

    degree = {n.id: 0 for n in nodes}
    for e in edges:
        degree[e.source] += 1
        degree[e.target] += 1

    return PhraseGraph(nodes=[n for n in nodes if degree[n.id] > 0], edges=edges)


def build_graph(
    text: str,
    options: GraphOptions | None = None,
    *,
    stopwords: AbstractSet[str] = DEFAULT_STOPWORDS,
) -> PhraseGraph:
    """Build a phrase net from raw text. Empty text gives an empty graph."""
    opts = (options or GraphOptions()).clamped()
    sentences = document_tokens(text, use_stopwords=opts.use_stopwords, stopwords=stopwords)

    counts = accumulate_nodes(sentences)
    nodes = select_nodes(counts, top_n=opts.top_n)
    retained = {n.id for n in nodes}

    weights = extract_edges(sentences, retained=retained, options=opts)
    return finalize_graph(nodes, weights, min_edge_weight=opts.min_edge_weight)
