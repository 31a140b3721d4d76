"""Phrase-net construction (word co-occurrence graphs).

This package turns free text into a weighted word graph for force-directed
rendering. It's dependency-free and deterministic: every build re-reads the
full text with fresh counters, so results only depend on text and options.
"""
