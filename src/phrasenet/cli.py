from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import Settings
from .graph import export
from .graph.build import build_graph
from .graph.model import GraphOptions, PhraseGraph, RelationType
from .graph.query import neighborhood, top_nodes
from .graph.stats import graph_stats
from .ingest.runner import load_text


app = typer.Typer(add_completion=False, help="Phrase Nets: turn free text into a weighted word co-occurrence graph.")
console = Console()


@app.command()
def build(
    input: Path | None = typer.Option(None, "--input", help="Text, Markdown or PDF file, or a directory of them"),
    text: str | None = typer.Option(None, "--text", help="Inline text (instead of --input)"),
    relation: RelationType | None = typer.Option(None, "--relation", help="Edge strategy"),
    window_size: int | None = typer.Option(None, "--window-size", help="Co-occurrence window (window mode)"),
    phrase: str | None = typer.Option(None, "--phrase", help="Relation phrase, e.g. 'is' or 'part of'"),
    stopwords: bool | None = typer.Option(None, "--stopwords/--no-stopwords", help="Remove common words"),
    min_edge_weight: int | None = typer.Option(None, "--min-edge-weight", help="Drop lighter edges"),
    top_n: int | None = typer.Option(None, "--top-n", help="Keep the N most frequent words (0 = all)"),
    out: Path | None = typer.Option(None, "--out", help="Write the graph as JSON (file or directory)"),
    show: int | None = typer.Option(None, "--show", help="Rows of the frequency table to print"),
):
    """Build a phrase net and print its most frequent words."""
    settings = Settings()
    raw = _read_input(input, text)

    overrides = {
        "relation_type": relation.value if relation is not None else None,
        "window_size": window_size,
        "relation_phrase": phrase,
        "use_stopwords": stopwords,
        "min_edge_weight": min_edge_weight,
        "top_n": top_n,
    }
    try:
        opts = GraphOptions.from_mapping(overrides, defaults=settings.graph_options())
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if opts.relation_type == RelationType.RELATION_PHRASE and not opts.phrase_words():
        console.print("Relation phrase is empty; no edges will be extracted.", style="yellow")

    graph = build_graph(raw, opts)

    _print_stats(graph)
    _print_top(graph, limit=settings.top_list if show is None else show)

    if out is not None:
        path = export.write_json(graph, out)
        console.print(f"Wrote {path}")


@app.command()
def top(
    graph: Path = typer.Option(..., "--graph", exists=True, file_okay=True, dir_okay=False),
    n: int | None = typer.Option(None, "-n", help="Number of words"),
):
    """Show the frequency list of an exported graph."""
    g = _load_graph(graph)
    _print_top(g, limit=Settings().top_list if n is None else n)


@app.command()
def node(
    graph: Path = typer.Option(..., "--graph", exists=True, file_okay=True, dir_okay=False),
    node_id: str = typer.Argument(..., help="Word to inspect"),
    limit: int = typer.Option(40, help="Max neighbours to list"),
):
    """Show a word's frequency and its neighbourhood."""
    g = _load_graph(graph)
    res = neighborhood(g, node_id.lower(), limit=limit)
    if res is None:
        console.print(f"No such node: {node_id}", style="yellow")
        raise typer.Exit(code=2)

    console.print(f"{res['node']['id']} (count={res['node']['count']}, degree={res['degree']})", markup=False, style="bold")
    table = Table(title="Neighbours")
    table.add_column("word")
    table.add_column("weight", justify="right")
    table.add_column("direction")
    for r in res["neighbors"]:
        table.add_row(Text(r["id"]), Text(str(r["weight"])), Text("/".join(r["directions"])))
    console.print(table)


@app.command()
def stats(
    graph: Path = typer.Option(..., "--graph", exists=True, file_okay=True, dir_okay=False),
):
    """Show summary metrics of an exported graph."""
    _print_stats(_load_graph(graph))


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes (dev only)"),
):
    """Run the Phrase Nets JSON API (FastAPI)."""
    try:
        import uvicorn
    except ImportError:
        console.print("Missing web dependencies. Install: `pip install -e '.[web]'`", style="red")
        raise typer.Exit(code=2)

    from .web.server import create_app

    uvicorn.run(create_app(), host=host, port=int(port), reload=bool(reload))


def _read_input(input: Path | None, text: str | None) -> str:
    if input is not None and text is not None:
        raise typer.BadParameter("Provide either --input or --text, not both")

    raw = text
    if input is not None:
        try:
            raw = load_text(input)
        except (FileNotFoundError, ValueError) as e:
            console.print(str(e), style="red")
            raise typer.Exit(code=2)

    if raw is None or not raw.strip():
        raise typer.BadParameter("No input provided: pass --input or --text")
    return raw


def _load_graph(path: Path) -> PhraseGraph:
    try:
        return export.load_json(path)
    except ValueError as e:
        console.print(str(e), style="red")
        raise typer.Exit(code=2)


def _print_stats(graph: PhraseGraph) -> None:
    s = graph_stats(graph)
    table = Table(title="Phrase Net")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Nodes", str(s.nodes))
    table.add_row("Edges", str(s.edges))
    table.add_row("Total weight", str(s.total_weight))
    table.add_row("Max weight", str(s.max_weight))
    table.add_row("Mean degree", f"{s.mean_degree:.2f}")
    table.add_row("Density", f"{s.density:.3f}")
    console.print(table)


def _print_top(graph: PhraseGraph, *, limit: int) -> None:
    rows = top_nodes(graph, limit=limit)
    if not rows:
        console.print("Graph is empty (no edges survived the filters).", style="yellow")
        return

    table = Table(title=f"Top {len(rows)} Words")
    table.add_column("#", justify="right", width=4)
    table.add_column("word")
    table.add_column("count", justify="right")
    for i, n in enumerate(rows, start=1):
        table.add_row(Text(str(i)), Text(n.id), Text(str(n.count)))
    console.print(table)


if __name__ == "__main__":
    app()
