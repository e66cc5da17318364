"""
Stop-word Scorer — counts spam keywords in a text blob.
"""
import math
from typing import Dict, Iterable, Optional

from core.models import ScoreResult, StopWordMatch


def round2(value: float) -> float:
    """Round half up to 2 decimals (0.125 -> 0.13)."""
    return math.floor(value * 100 + 0.5) / 100


def check_stop_words(text: Optional[str], stop_words: Optional[Iterable[str]]) -> ScoreResult:
    """
    Find every stop word contained in *text*.

    Matching is a case-insensitive substring search, so "class" matches
    "classical". Score is the share of whitespace tokens taken by matches,
    capped at 100.
    """
    words = list(stop_words or [])
    if not text or not words:
        return ScoreResult()

    text_lower = text.lower()
    found: Dict[str, StopWordMatch] = {}
    for raw in words:
        word = str(raw).lower().strip()
        if not word or word in found or word not in text_lower:
            continue
        count = text_lower.count(word)
        found[word] = StopWordMatch(word=word, count=count)

    total_words = len(text.split())
    occurrences = sum(m.count for m in found.values())
    score = min(100.0, occurrences / total_words * 100) if total_words else 0.0

    return ScoreResult(found=list(found.values()), count=len(found), score=round2(score))
