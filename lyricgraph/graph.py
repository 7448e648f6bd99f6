"""lyricgraph adjacency graph.

A directed word graph backed by a square bit matrix. Row ``i`` holds
the out-edges of vertex ``i``: ``matrix[i][j] == 1`` means the word at
position ``i`` was directly followed by the word at position ``j``.
Edges carry no weight; repeated pairs collapse to a single bit.

The graph is built once (vertices, then edges) and only read after
that. Traversal never mutates it, so a finished graph can be shared
between readers without locking.
"""

from __future__ import annotations
import logging
import operator
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .registry import VertexRegistry
from .walk import random_walk

_LOGGER = logging.getLogger(__name__)


class LyricGraph:
    """Word-adjacency graph with an explicit ``uint8`` adjacency matrix."""

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._matrix = np.zeros((capacity, capacity), dtype=np.uint8)
        self._registry = VertexRegistry()

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> "LyricGraph":
        """Build a graph from an ordered token sequence.

        Every token becomes a vertex and every adjacent pair
        ``(tokens[i], tokens[i + 1])`` becomes a directed edge.
        """
        graph = cls(len(tokens))
        graph.add_vertices(tokens)
        for src, dst in zip(tokens, tokens[1:]):
            graph.create_edge(src, dst)
        _LOGGER.info(
            "Built graph: %d tokens, %d vertices, %d edges",
            len(tokens),
            graph.vertex_count,
            graph.edge_count,
        )
        return graph

    # -- building -----------------------------------------------------

    def add_vertex(self, value: str) -> bool:
        """Register *value*; return ``False`` if it was already present."""
        before = len(self._registry)
        vertex_id = self._registry.register(value)
        if len(self._registry) == before:
            return False
        self._ensure_capacity(vertex_id + 1)
        return True

    def add_vertices(self, values: Iterable[str]) -> int:
        """Register every value in order; return how many were new."""
        return sum(1 for value in values if self.add_vertex(value))

    def create_edge(self, from_value: str, to_value: str) -> bool:
        """Set the edge ``from_value -> to_value``.

        Returns ``False`` and leaves the matrix untouched when either
        endpoint is not a registered vertex.
        """
        src = self._registry.find(from_value)
        dst = self._registry.find(to_value)
        if src is None or dst is None:
            _LOGGER.warning(
                "Failed to create edge %r -> %r: unknown endpoint",
                from_value,
                to_value,
            )
            return False
        self._matrix[src, dst] = 1
        return True

    def _ensure_capacity(self, size: int) -> None:
        current = self._matrix.shape[0]
        if size <= current:
            return
        new_size = max(size, current * 2)
        grown = np.zeros((new_size, new_size), dtype=np.uint8)
        grown[:current, :current] = self._matrix
        self._matrix = grown
        _LOGGER.debug("Adjacency matrix grown %d -> %d", current, new_size)

    # -- queries ------------------------------------------------------

    def find_vertex(self, value: str) -> Optional[int]:
        return self._registry.find(value)

    def value_of(self, vertex_id: int) -> str:
        return self._registry.value_of(vertex_id)

    def out_neighbors(self, vertex_id: int) -> np.ndarray:
        """Column positions set in row *vertex_id*, in column order."""
        return np.flatnonzero(self._matrix[vertex_id, : len(self._registry)])

    def has_edge(self, from_value: str, to_value: str) -> bool:
        src = self._registry.find(from_value)
        dst = self._registry.find(to_value)
        if src is None or dst is None:
            return False
        return bool(self._matrix[src, dst])

    def successors(self, value: str) -> List[str]:
        vertex_id = self._registry.find(value)
        if vertex_id is None:
            return []
        return [self._registry.value_of(int(j)) for j in self.out_neighbors(vertex_id)]

    @property
    def vertices(self) -> Tuple[str, ...]:
        return tuple(self._registry)

    @property
    def vertex_count(self) -> int:
        return len(self._registry)

    @property
    def edge_count(self) -> int:
        return int(self._matrix.sum())

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the live ``vertex_count`` square block."""
        n = len(self._registry)
        view = self._matrix[:n, :n]
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, value: object) -> bool:
        return value in self._registry

    # -- traversal ----------------------------------------------------

    def traverse_sentence(
        self,
        start_value: str,
        length: int,
        rng: Union[np.random.Generator, int, None] = None,
    ) -> List[str]:
        """Random walk of at most *length* words starting at *start_value*."""
        return random_walk(self, start_value, length, rng=rng)

    def render_matrix(self) -> str:
        """Render the adjacency matrix, one line per source vertex."""
        return "\n".join("".join(str(int(bit)) for bit in row) for row in self.matrix)
