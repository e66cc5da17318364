"""
Spam Analyzer — runs text/meta extraction and stop-word scoring on one page.
"""
from typing import Iterable, Optional

from config.settings import SPAM_SCORE_THRESHOLD
from core.models import HtmlSpamAnalysis
from modules.spam_check.html_parser import HtmlParser, default_parser
from modules.spam_check.scorer import check_stop_words


def analyze_html(html: str, stop_words: Iterable[str], parser: Optional[HtmlParser] = None) -> HtmlSpamAnalysis:
    """Score body text, title, description and keywords of *html* together."""
    parser = parser or default_parser()
    text = parser.extract_text(html)
    meta = parser.extract_meta(html)

    blob = " ".join(p for p in (text, meta.title, meta.description, meta.keywords) if p)
    result = check_stop_words(blob, stop_words)

    return HtmlSpamAnalysis(
        text_length=len(text),
        meta_tags=meta,
        stop_words=result,
        # any keyword hit, or keywords above the density threshold
        is_spam=result.count > 0 or result.score > SPAM_SCORE_THRESHOLD,
        spam_score=result.score,
    )
