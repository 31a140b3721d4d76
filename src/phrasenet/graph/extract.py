from __future__ import annotations

import re
from dataclasses import dataclass
from typing import AbstractSet

from .stopwords import DEFAULT_STOPWORDS, filter_stopwords

# Newlines and sentence-final punctuation, any run of them.
_SENTENCE_BREAK_RE = re.compile(r"[\n.!?]+")

# Quotes, brackets, separators, dashes and guillemets become spaces.
# Apostrophes are kept so contractions survive tokenization.
_PUNCT_RE = re.compile(r"[“”\"()\[\],;:\-—–«»<>]")
_SPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class SentenceTokens:
    # Normalized tokens in document order, stopwords still present.
    tokens: list[str]
    # Same sequence after stopword filtering (adjacency closes over the gaps).
    filtered: list[str]


def split_sentences(text: str) -> list[str]:
    return [s.strip() for s in _SENTENCE_BREAK_RE.split(text or "") if s.strip()]


def tokenize(sentence: str) -> list[str]:
    t = _PUNCT_RE.sub(" ", sentence)
    t = _SPACE_RE.sub(" ", t).strip()
    return [tok for tok in t.split(" ") if tok]


def normalize_token(token: str) -> str:
    # Only boundary apostrophes go; "don't" and "people's" stay intact.
    return token.lower().strip("'")


def sentence_tokens(
    sentence: str,
    *,
    use_stopwords: bool = True,
    stopwords: AbstractSet[str] = DEFAULT_STOPWORDS,
) -> SentenceTokens:
    tokens = [n for n in (normalize_token(t) for t in tokenize(sentence)) if n]
    filtered = filter_stopwords(tokens, stopwords) if use_stopwords else list(tokens)
    return SentenceTokens(tokens=tokens, filtered=filtered)


def document_tokens(
    text: str,
    *,
    use_stopwords: bool = True,
    stopwords: AbstractSet[str] = DEFAULT_STOPWORDS,
) -> list[SentenceTokens]:
    """Split ``text`` into sentences and tokenize each one."""
    return [
        sentence_tokens(s, use_stopwords=use_stopwords, stopwords=stopwords)
        for s in split_sentences(text)
    ]
