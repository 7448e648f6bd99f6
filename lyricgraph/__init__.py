"""lyricgraph: word-adjacency graphs and random-walk lyric generation."""

from .graph import LyricGraph
from .registry import VertexRegistry
from .walk import random_walk

__all__ = ["LyricGraph", "VertexRegistry", "random_walk"]
