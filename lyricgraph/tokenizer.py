"""lyricgraph tokenizer.

Turns raw lyric text into lowercase, punctuation-free word tokens.
Splitting is whitespace-based.
"""

from __future__ import annotations
import re
from pathlib import Path
from typing import List

PUNCTUATION_RE = re.compile(r"[^\w\s]")


def normalize(text: str) -> str:
    """Lowercase *text*, flatten line breaks and strip punctuation."""
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    text = text.lower().replace("\r", " ").replace("\n", " ")
    return PUNCTUATION_RE.sub("", text)


def tokenize(text: str) -> List[str]:
    """Return the list of word tokens found in *text*."""
    text = normalize(text).strip()
    if not text:
        return []
    return text.split()


def read_tokens(path: Path) -> List[str]:
    with Path(path).open("r", encoding="utf-8") as f:
        return tokenize(f.read())
