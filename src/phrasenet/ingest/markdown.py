from __future__ import annotations

import re
from dataclasses import dataclass


_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*?)\s*#*\s*$")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")
_RULE_RE = re.compile(r"^\s*([-*_])(\s*\1){2,}\s*$")
_LIST_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+")
_QUOTE_RE = re.compile(r"^\s*>+\s?")

_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]*\)")
_CODE_RE = re.compile(r"`([^`]+)`")
_STAR_EMPH_RE = re.compile(r"(\*{1,3})(\S(?:.*?\S)?)\1")
# Underscores inside a word (snake_case) are not emphasis.
_UNDERSCORE_EMPH_RE = re.compile(r"(?<!\w)(_{1,3})(\S(?:.*?\S)?)\1(?!\w)")


@dataclass(frozen=True)
class MdSection:
    heading: str
    start_line: int  # 1-based
    text: str


def strip_inline(line: str) -> str:
    line = _IMAGE_RE.sub(r"\1", line)
    line = _LINK_RE.sub(r"\1", line)
    line = _CODE_RE.sub(r"\1", line)
    line = _STAR_EMPH_RE.sub(r"\2", line)
    line = _UNDERSCORE_EMPH_RE.sub(r"\2", line)
    return line


def split_sections(markdown_text: str) -> list[MdSection]:
    """Split into heading-delimited sections of plain text.

    Fenced code blocks and horizontal rules are dropped, list and quote
    markers removed, inline markup reduced to its visible text. Wrapped
    lines of a paragraph are joined with a space; paragraphs and list
    items end up on lines of their own.
    """
    lines = markdown_text.replace("\r\n", "\n").replace("\r", "\n").split("\n")

    out: list[MdSection] = []
    current: list[str] = []
    para: list[str] = []
    heading = ""
    start_line = 1
    in_fence = False

    def end_para() -> None:
        nonlocal para
        if para:
            current.append(" ".join(para))
        para = []

    def flush() -> None:
        end_para()
        text = "\n".join(current).strip()
        if text or heading:
            out.append(MdSection(heading=heading, start_line=start_line, text=text))

    for idx, line in enumerate(lines, start=1):
        if _FENCE_RE.match(line):
            end_para()
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        if _RULE_RE.match(line):
            end_para()
            continue

        m = _HEADING_RE.match(line)
        if m:
            flush()
            current = []
            heading = strip_inline(m.group(2).strip())
            start_line = idx
            continue

        line = _QUOTE_RE.sub("", line)
        if not line.strip():
            end_para()
            continue
        if _LIST_RE.match(line):
            end_para()
            line = _LIST_RE.sub("", line)
        para.append(strip_inline(line.strip()))

    flush()
    return out


def markdown_to_text(markdown_text: str) -> str:
    # Headings get their own line so they never run into the next sentence.
    parts: list[str] = []
    for sec in split_sections(markdown_text):
        if sec.heading:
            parts.append(sec.heading)
        if sec.text:
            parts.append(sec.text)
    return "\n".join(parts)
