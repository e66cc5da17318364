"""
HTML Parser — extracts visible text and meta tags from archived pages.
A BeautifulSoup implementation is used when a tree builder is available;
the regex implementation needs nothing beyond the standard library.
"""
import html as html_lib
import logging
import re
from typing import Dict, Optional

from bs4 import BeautifulSoup, FeatureNotFound

from config.settings import NON_CONTENT_TAGS, PARSER_CANDIDATES
from core.models import MetaTags

logger = logging.getLogger(__name__)

_WS = re.compile(r"\s+")
_SCRIPT = re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE)
_STYLE = re.compile(r"<style[^>]*>[\s\S]*?</style>", re.IGNORECASE)
_TAG = re.compile(r"<[^>]+>")
_TITLE = re.compile(r"<title[^>]*>([\s\S]*?)</title>", re.IGNORECASE)
_META = re.compile(r"<meta\b[^>]*>", re.IGNORECASE)
_ATTR = re.compile(r"""([\w:-]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""")


def normalize_text(text: str) -> str:
    """Collapse whitespace runs, trim and lowercase."""
    return _WS.sub(" ", text).strip().lower()


class HtmlParser:
    """Text and meta extraction contract. Implementations never raise."""

    name = "base"

    def extract_text(self, html: str) -> str:
        raise NotImplementedError

    def extract_meta(self, html: str) -> MetaTags:
        raise NotImplementedError


class RegexHtmlParser(HtmlParser):
    """Pattern based extraction, always available."""

    name = "regex"

    def extract_text(self, html: str) -> str:
        if not html:
            return ""
        text = _SCRIPT.sub("", html)
        text = _STYLE.sub("", text)
        text = _TAG.sub(" ", text)
        return normalize_text(html_lib.unescape(text))

    def extract_meta(self, html: str) -> MetaTags:
        if not html:
            return MetaTags()
        meta = MetaTags()
        m = _TITLE.search(html)
        if m:
            meta.title = html_lib.unescape(_TAG.sub("", m.group(1))).strip()
        for tag in _META.findall(html):
            attrs = self._attrs(tag)
            name = attrs.get("name")
            if name == "description" and not meta.description:
                meta.description = attrs.get("content", "")
            elif name == "keywords" and not meta.keywords:
                meta.keywords = attrs.get("content", "")
        return meta

    @staticmethod
    def _attrs(tag: str) -> Dict[str, str]:
        out: Dict[str, str] = {}
        for key, dq, sq, bare in _ATTR.findall(tag):
            key = key.lower()
            if key not in out:
                out[key] = html_lib.unescape(dq or sq or bare)
        return out


class SoupHtmlParser(HtmlParser):
    """BeautifulSoup extraction bound to one tree builder."""

    name = "soup"

    def __init__(self, features: str = "html.parser"):
        self.features = features
        self._fallback = RegexHtmlParser()

    def extract_text(self, html: str) -> str:
        if not html:
            return ""
        try:
            soup = BeautifulSoup(html, self.features)
            for el in soup.find_all(list(NON_CONTENT_TAGS)):
                el.decompose()
            body = soup.find("body")
            text = body.get_text(separator=" ") if body else ""
            if not text.strip():
                text = soup.get_text(separator=" ")
            return normalize_text(text)
        except Exception as e:
            logger.debug("soup text extraction (%s) failed, using regex: %s", self.features, e)
            return self._fallback.extract_text(html)

    def extract_meta(self, html: str) -> MetaTags:
        if not html:
            return MetaTags()
        try:
            soup = BeautifulSoup(html, self.features)
            title = soup.find("title")
            return MetaTags(
                title=title.get_text().strip() if title else "",
                description=self._meta_content(soup, "description"),
                keywords=self._meta_content(soup, "keywords"),
            )
        except Exception as e:
            logger.debug("soup meta extraction (%s) failed: %s", self.features, e)
            return MetaTags()

    @staticmethod
    def _meta_content(soup: BeautifulSoup, name: str) -> str:
        m = soup.find("meta", attrs={"name": name})
        return (m.get("content") or "") if m else ""


# ── best HTML parser available ──────────────────────────────────────────────
def select_parser() -> HtmlParser:
    for p in PARSER_CANDIDATES:
        try:
            BeautifulSoup("<p>ok</p>", p)
            return SoupHtmlParser(p)
        except FeatureNotFound:
            continue
    logger.info("no BeautifulSoup tree builder available, using regex extraction")
    return RegexHtmlParser()


_default: Optional[HtmlParser] = None


def default_parser() -> HtmlParser:
    global _default
    if _default is None:
        _default = select_parser()
    return _default


def extract_text(html: str, parser: Optional[HtmlParser] = None) -> str:
    return (parser or default_parser()).extract_text(html)


def extract_meta(html: str, parser: Optional[HtmlParser] = None) -> MetaTags:
    return (parser or default_parser()).extract_meta(html)
