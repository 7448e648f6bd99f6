import numpy as np
import pytest

from lyricgraph.graph import LyricGraph


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def abac_graph():
    """Graph built from the token sequence a b a c."""
    return LyricGraph.from_tokens(["a", "b", "a", "c"])
