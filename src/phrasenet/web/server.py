from __future__ import annotations

from typing import Any


def create_app(*, settings=None):
    # Lazy import so the core CLI works without web deps.
    from fastapi import FastAPI
    from fastapi.responses import JSONResponse, Response

    from .. import __version__
    from ..config import Settings
    from ..graph import export
    from ..graph.build import build_graph
    from ..graph.model import GraphOptions, PhraseGraph
    from ..graph.query import neighborhood, top_nodes
    from ..graph.stats import graph_stats

    settings = settings or Settings()
    defaults = settings.graph_options()

    app = FastAPI(title="Phrase Nets", version=__version__)

    # The last generated graph, as shown by the front-end. Each build below
    # works on its own accumulators and only swaps this reference at the end.
    state: dict[str, PhraseGraph | None] = {"graph": None}

    def _no_graph() -> JSONResponse:
        return JSONResponse({"ok": False, "error": "No graph generated yet."}, status_code=404)

    @app.get("/api/health")
    def health():
        return {"ok": True, "version": __version__, "defaults": defaults.to_dict(), "top_list": settings.top_list}

    @app.post("/api/graph")
    def graph_build(payload: dict[str, Any]):
        text = str(payload.get("text") or "")
        if not text.strip():
            return JSONResponse({"ok": False, "error": "No input provided: 'text' is required."}, status_code=400)

        options = payload.get("options")
        if not isinstance(options, dict):
            options = payload
        try:
            opts = GraphOptions.from_mapping(options, defaults=defaults)
        except ValueError as e:
            return JSONResponse({"ok": False, "error": str(e)}, status_code=400)

        graph = build_graph(text, opts)
        state["graph"] = graph
        return {
            "ok": True,
            "options": opts.to_dict(),
            "graph": graph.to_dict(),
            "stats": graph_stats(graph).to_dict(),
        }

    @app.get("/api/graph")
    def graph_current():
        graph = state["graph"]
        if graph is None:
            return _no_graph()
        return {"ok": True, "graph": graph.to_dict(), "stats": graph_stats(graph).to_dict()}

    @app.delete("/api/graph")
    def graph_reset():
        state["graph"] = None
        return {"ok": True}

    @app.get("/api/graph/top")
    def graph_top(limit: int | None = None):
        graph = state["graph"]
        if graph is None:
            return _no_graph()
        n = settings.top_list if limit is None else int(limit)
        return {"ok": True, "nodes": [{"id": x.id, "count": x.count} for x in top_nodes(graph, limit=n)]}

    @app.get("/api/graph/node/{node_id}")
    def graph_node(node_id: str, limit: int = 40):
        graph = state["graph"]
        if graph is None:
            return _no_graph()
        res = neighborhood(graph, node_id, limit=int(limit))
        if res is None:
            return JSONResponse({"ok": False, "error": f"Unknown node: {node_id}"}, status_code=404)
        return {"ok": True, **res}

    @app.get("/api/graph/export")
    def graph_export():
        graph = state["graph"]
        if graph is None:
            return _no_graph()
        return Response(
            content=export.to_json(graph),
            media_type="application/json",
            headers={"Content-Disposition": f'attachment; filename="{export.DEFAULT_EXPORT_NAME}"'},
        )

    return app
