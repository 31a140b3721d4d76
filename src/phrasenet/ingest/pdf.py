from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from pypdf import PdfReader


@dataclass(frozen=True)
class PdfPage:
    page: int  # 1-based
    text: str


def extract_pages(path: str | Path) -> list[PdfPage]:
    reader = PdfReader(str(Path(path)))
    out: list[PdfPage] = []
    for i, page in enumerate(reader.pages):
        text = page.extract_text() or ""
        out.append(PdfPage(page=i + 1, text=unwrap_lines(text)))
    return out


def pdf_to_text(path: str | Path) -> str:
    return "\n".join(p.text for p in extract_pages(path) if p.text)


def unwrap_lines(text: str) -> str:
    """Join hard-wrapped lines; only blank lines separate paragraphs."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    paras = re.split(r"\n\s*\n", text)
    out = [" ".join(ln.strip() for ln in p.split("\n") if ln.strip()) for p in paras]
    return "\n".join(p for p in out if p)
