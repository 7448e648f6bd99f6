"""lyricgraph transition-graph export.

Converts a built ``LyricGraph`` into a NetworkX directed graph or a
plain nodes/edges dict for further analysis or visualization.
"""

from __future__ import annotations
from typing import Any, Dict

import networkx as nx
import numpy as np

from .graph import LyricGraph


def graph_to_nx(graph: LyricGraph) -> nx.DiGraph:
    """Convert a LyricGraph into a NetworkX DiGraph keyed by word."""
    g = nx.DiGraph()

    for idx, word in enumerate(graph.vertices):
        g.add_node(word, index=idx)

    for src, dst in zip(*np.nonzero(graph.matrix)):
        g.add_edge(graph.value_of(int(src)), graph.value_of(int(dst)))

    return g


def graph_to_dict(graph: LyricGraph) -> Dict[str, Any]:
    """Return a JSON-ready ``{"nodes": [...], "edges": [...]}`` summary."""
    g = graph_to_nx(graph)
    return {
        "nodes": [{"id": n, **data} for n, data in g.nodes(data=True)],
        "edges": [{"source": u, "target": v} for u, v in g.edges()],
    }
