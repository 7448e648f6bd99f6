"""lyricgraph vertex registry.

Holds the distinct token values of a graph in first-occurrence order.
Every vertex is identified by a stable integer position; values are
looked up through a dict index.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterator, List, Optional

_LOGGER = logging.getLogger(__name__)


class VertexRegistry:
    """Deduplicating store of token vertices."""

    def __init__(self) -> None:
        self._values: List[str] = []
        self._index: Dict[str, int] = {}

    def register(self, value: str) -> int:
        """Return the id of *value*, appending it first if it is new."""
        existing = self._index.get(value)
        if existing is not None:
            _LOGGER.debug("Vertex %r already in graph", value)
            return existing

        vertex_id = len(self._values)
        self._values.append(value)
        self._index[value] = vertex_id
        _LOGGER.debug("Vertex %r added as %d", value, vertex_id)
        return vertex_id

    def find(self, value: str) -> Optional[int]:
        return self._index.get(value)

    def value_of(self, vertex_id: int) -> str:
        return self._values[vertex_id]

    def __contains__(self, value: object) -> bool:
        return value in self._index

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)
