"""lyricgraph song generation.

Produces a short block of generated lines: each line is a random walk
starting from a word picked out of the source token sequence, with
lengths alternating between ``base_length`` and ``base_length + 1``.
"""

from __future__ import annotations
from typing import List, Sequence, Union

import numpy as np

from .graph import LyricGraph
from .walk import as_generator


def generate_song(
    graph: LyricGraph,
    tokens: Sequence[str],
    num_lines: int = 5,
    base_length: int = 5,
    rng: Union[np.random.Generator, int, None] = None,
) -> List[List[str]]:
    """Return *num_lines* generated lines as lists of words.

    Start words are drawn uniformly from *tokens*, so words that occur
    often in the source open lines more often.
    """
    if not tokens:
        return []
    rng = as_generator(rng)

    lines = []
    for i in range(num_lines):
        start = tokens[int(rng.integers(len(tokens)))]
        lines.append(graph.traverse_sentence(start, base_length + i % 2, rng=rng))
    return lines


def format_line(words: Sequence[str]) -> str:
    return " ".join(words)
