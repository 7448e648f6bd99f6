"""Command-line runner for lyricgraph.

Reads a lyrics file, builds the word graph and prints generated lines:
    python -m lyricgraph.runner --lyrics lyrics.txt --seed 7
"""

from __future__ import annotations
import argparse
import datetime
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .config import GeneratorConfig
from .graph import LyricGraph
from .song import format_line, generate_song
from .tokenizer import read_tokens
from .transition_graph import graph_to_dict

_LOGGER = logging.getLogger(__name__)


def now_utc_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate lyric lines by random walks over a word graph."
    )
    parser.add_argument("--lyrics", type=Path, help="lyrics text file to read")
    parser.add_argument("--lines", type=int, help="number of lines to generate")
    parser.add_argument("--length", type=int, help="base words per line")
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument(
        "--print-matrix",
        action="store_true",
        help="print the adjacency matrix before the generated lines",
    )
    parser.add_argument("--json", type=Path, dest="output", help="write a JSON report")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    config = GeneratorConfig.from_env()
    if args.lyrics is not None:
        config.lyrics_path = args.lyrics
    if args.lines is not None:
        config.num_lines = args.lines
    if args.length is not None:
        config.base_length = args.length
    if args.seed is not None:
        config.seed = args.seed
    config.output_path = args.output
    config.print_matrix = args.print_matrix
    return config.validate()


def build_report(
    config: GeneratorConfig, graph: LyricGraph, lines: List[List[str]]
) -> Dict[str, Any]:
    return {
        "timestamp_utc": now_utc_iso(),
        "config": config.to_dict(),
        "num_vertices": graph.vertex_count,
        "num_edges": graph.edge_count,
        "lines": [format_line(words) for words in lines],
        "graph": graph_to_dict(graph),
    }


def write_report(path: Path, report: Dict[str, Any]) -> Path:
    """Write *report* to *path* and append a summary to ``<stem>.ledger.jsonl``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(report, f, ensure_ascii=False, indent=2)

    summary = {k: report[k] for k in ("timestamp_utc", "num_vertices", "num_edges", "lines")}
    ledger = path.with_name(path.stem + ".ledger.jsonl")
    with ledger.open("a", encoding="utf-8") as f:
        f.write(json.dumps(summary, ensure_ascii=False) + "\n")
    return path


def run(config: GeneratorConfig) -> List[List[str]]:
    tokens = read_tokens(config.lyrics_path)
    if not tokens:
        print(f"[WARN] No words found in {config.lyrics_path}")
        return []

    graph = LyricGraph.from_tokens(tokens)
    if config.print_matrix:
        print(graph.render_matrix())
        print()

    lines = generate_song(
        graph, tokens, num_lines=config.num_lines, base_length=config.base_length, rng=config.seed
    )
    for words in lines:
        print(format_line(words))

    if config.output_path is not None:
        out = write_report(config.output_path, build_report(config, graph, lines))
        print("Report ->", out)
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except ValueError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2

    try:
        run(config)
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.debug("Run failed", exc_info=True)
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
