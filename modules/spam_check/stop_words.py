"""
Stop-words Loader — loads spam keyword lists from text or JSON files.
"""
import json
import logging
import os
import re
from typing import Iterable, List

logger = logging.getLogger(__name__)

_SPLIT = re.compile(r"[,\n]")


def normalize_stop_words(words: Iterable[str]) -> List[str]:
    """Lowercase, trim and deduplicate, keeping first-seen order."""
    seen, out = set(), []
    for w in words:
        s = str(w).lower().strip()
        if s and s not in seen:
            seen.add(s)
            out.append(s)
    return out


def parse_stop_words(raw: str) -> List[str]:
    """Split comma or newline separated user input."""
    return normalize_stop_words(_SPLIT.split(raw or ""))


class StopWordsLoader:
    """Load stop words from a `.txt` (one per line) or `.json` file."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> List[str]:
        if not os.path.isfile(self.path):
            logger.warning("Stop words file not found: %s", self.path)
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            raw = f.read()
        if self.path.lower().endswith(".json"):
            return normalize_stop_words(self._flatten(json.loads(raw)))
        lines = (line for line in raw.splitlines() if not line.strip().startswith("#"))
        return normalize_stop_words(lines)

    @staticmethod
    def _flatten(data) -> List[str]:
        # {"casino": [...], "pharma": [...]} or a plain list
        if isinstance(data, dict):
            groups = list(data.values())
        elif isinstance(data, list):
            groups = [data]
        else:
            raise ValueError("stop words JSON must be a list or an object of lists")
        out: List[str] = []
        for words in groups:
            if not isinstance(words, list):
                raise ValueError(f"stop words group must be a list, got {type(words).__name__}")
            for w in words:
                if not isinstance(w, str):
                    raise ValueError(f"stop word must be a string, got {w!r}")
                out.append(w)
        return out
