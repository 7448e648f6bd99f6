"""lyricgraph configuration.

The default input follows the repository layout (``data/lyrics.txt``).
Environment variables ``LYRICGRAPH_LYRICS`` and ``LYRICGRAPH_SEED``
override the defaults; command-line flags override both.
"""

from __future__ import annotations
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional


REPO_ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = REPO_ROOT / "data"
DEFAULT_LYRICS_PATH = DATA_DIR / "lyrics.txt"

DEFAULT_NUM_LINES = 5
DEFAULT_BASE_LENGTH = 5


@dataclass
class GeneratorConfig:
    lyrics_path: Path = DEFAULT_LYRICS_PATH
    num_lines: int = DEFAULT_NUM_LINES
    base_length: int = DEFAULT_BASE_LENGTH
    seed: Optional[int] = None
    output_path: Optional[Path] = None
    print_matrix: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GeneratorConfig":
        """Build a config from ``LYRICGRAPH_*`` environment variables."""
        if environ is None:
            environ = os.environ
        config = cls()
        if environ.get("LYRICGRAPH_LYRICS"):
            config.lyrics_path = Path(environ["LYRICGRAPH_LYRICS"])
        if environ.get("LYRICGRAPH_SEED"):
            try:
                config.seed = int(environ["LYRICGRAPH_SEED"])
            except ValueError as exc:
                raise ValueError(
                    f"LYRICGRAPH_SEED must be an integer, got {environ['LYRICGRAPH_SEED']!r}"
                ) from exc
        return config

    def validate(self) -> "GeneratorConfig":
        if self.num_lines < 0:
            raise ValueError("num_lines must be non-negative")
        if self.base_length < 1:
            raise ValueError("base_length must be at least 1")
        return self

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key in ("lyrics_path", "output_path"):
            if data[key] is not None:
                data[key] = str(data[key])
        return data
