from __future__ import annotations

from pathlib import Path
from typing import Iterable

from . import markdown as md
from . import pdf


TEXT_EXTS = {".txt", ".text"}
MARKDOWN_EXTS = {".md", ".markdown"}
PDF_EXTS = {".pdf"}
SUPPORTED_EXTS = TEXT_EXTS | MARKDOWN_EXTS | PDF_EXTS


def iter_files(root: Path) -> Iterable[Path]:
    for p in sorted(root.rglob("*")):
        if not p.is_file():
            continue
        if any(part.startswith(".") for part in p.relative_to(root).parts):
            continue
        if p.suffix.lower() not in SUPPORTED_EXTS:
            continue
        yield p


def read_file(path: str | Path) -> str:
    p = Path(path)
    ext = p.suffix.lower()
    if ext in PDF_EXTS:
        return pdf.pdf_to_text(p)
    text = p.read_text(encoding="utf-8", errors="replace")
    if ext in MARKDOWN_EXTS:
        return md.markdown_to_text(text)
    if ext in TEXT_EXTS:
        return text
    raise ValueError(f"Unsupported file type: {p.name} (expected one of {', '.join(sorted(SUPPORTED_EXTS))})")


def load_text(path: str | Path) -> str:
    """Read a file, or every supported file under a directory.

    Files are joined with a newline, which also ends any open sentence.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Input not found: {p}")
    if p.is_dir():
        return "\n".join(read_file(f) for f in iter_files(p))
    return read_file(p)
