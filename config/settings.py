"""
Centralized configuration for wayback-spam-check.
Wayback endpoints, pacing delays, spam thresholds and shared constants.
"""

# ─── Wayback Machine ────────────────────────────────────────────────────────

WAYBACK_CDX_URL = "https://web.archive.org/cdx/search/cdx"
# id_ flag returns the archived bytes without the Wayback toolbar
WAYBACK_RAW_URL = "https://web.archive.org/web/{timestamp}id_/{url}"
WAYBACK_CDX_FIELDS = ("timestamp", "original", "statuscode", "mimetype", "digest")

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

# ─── Rate Limiting ──────────────────────────────────────────────────────────

REQUEST_TIMEOUT = 30
SNAPSHOT_DELAY = 1.5   # seconds between two snapshots of one domain
DOMAIN_DELAY = 3.0     # seconds between two domains of a batch

# ─── Spam Check Defaults ────────────────────────────────────────────────────

DEFAULT_MAX_SNAPSHOTS = 10
PROBE_SNAPSHOTS = 5
SPAM_SCORE_THRESHOLD = 5          # % of words, per snapshot
SPAM_PERCENTAGE_THRESHOLD = 50    # % of snapshots, per domain

# ─── HTML Extraction ────────────────────────────────────────────────────────

NON_CONTENT_TAGS = ("script", "style", "noscript", "iframe", "embed", "object")
PARSER_CANDIDATES = ("lxml", "html.parser")
