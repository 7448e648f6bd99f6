"""lyricgraph walk generator.

Generates word sequences by walking a ``LyricGraph``: from the current
word, the next one is drawn uniformly from its out-edges. This is a
first-order walk on an unweighted graph; how often a pair occurred in
the source text has no influence on the draw.
"""

from __future__ import annotations
import logging
import operator
from typing import TYPE_CHECKING, List, Union

import numpy as np

if TYPE_CHECKING:
    from .graph import LyricGraph

_LOGGER = logging.getLogger(__name__)


def as_generator(rng: Union[np.random.Generator, int, None]) -> np.random.Generator:
    """Accept a Generator, an int seed or ``None`` and return a Generator."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def random_walk(
    graph: "LyricGraph",
    start_value: str,
    length: int,
    rng: Union[np.random.Generator, int, None] = None,
) -> List[str]:
    """Walk *graph* from *start_value* for up to *length* words.

    Returns ``[]`` when the start word is not in the graph. A word
    without out-edges ends the walk early and the words collected so
    far are returned.
    """
    if isinstance(length, bool):
        raise ValueError(f"length must be a positive integer, got {length!r}")
    try:
        length = operator.index(length)
    except TypeError:
        raise ValueError(f"length must be a positive integer, got {length!r}") from None
    if length < 1:
        raise ValueError(f"length must be a positive integer, got {length!r}")

    current = graph.find_vertex(start_value)
    if current is None:
        _LOGGER.debug("Start vertex %r not in graph", start_value)
        return []

    rng = as_generator(rng)
    sentence = [graph.value_of(current)]

    for _ in range(length - 1):
        candidates = graph.out_neighbors(current)
        if candidates.size == 0:
            _LOGGER.debug(
                "Dead end at %r after %d words", sentence[-1], len(sentence)
            )
            break
        current = int(candidates[rng.integers(candidates.size)])
        sentence.append(graph.value_of(current))

    return sentence
