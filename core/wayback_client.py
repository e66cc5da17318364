"""
Wayback Machine client.
Lists archived snapshots through the CDX API and downloads their raw HTML.
"""

import logging
from typing import List, Optional

import requests

from config.settings import WAYBACK_CDX_FIELDS, WAYBACK_CDX_URL, WAYBACK_RAW_URL
from core.exceptions import SnapshotFetchError, SnapshotListError
from core.models import SnapshotHtml, SnapshotRecord
from core.runtime import RuntimeSettings, get_runtime_settings

logger = logging.getLogger(__name__)


class WaybackClient:
    """Snapshot listing and retrieval against web.archive.org."""

    name = "wayback"

    def __init__(self, settings: Optional[RuntimeSettings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_runtime_settings()
        self.timeout = self.settings.request_timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": self.settings.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        })

    # ── public API ──────────────────────────────────────────────────────────

    @staticmethod
    def can_handle(target) -> bool:
        return isinstance(target, str) and bool(target.strip())

    def list_snapshots(self, target: str, limit: int = 10) -> List[SnapshotRecord]:
        """Return up to *limit* HTML snapshots of *target*, oldest first."""
        params = [
            ("url", target),
            ("output", "json"),
            ("fl", ",".join(WAYBACK_CDX_FIELDS)),
            ("filter", "statuscode:200"),
            ("filter", "mimetype:text/html"),
            ("collapse", "digest"),
            ("limit", str(limit)),
        ]
        try:
            resp = self.session.get(WAYBACK_CDX_URL, params=params, timeout=self.timeout)
            resp.raise_for_status()
            rows = resp.json() if resp.text.strip() else []
        except requests.RequestException as e:
            logger.warning("CDX %s: %s", target, e)
            raise SnapshotListError(f"CDX request failed for {target}: {e}") from e
        except ValueError as e:
            logger.warning("CDX %s: invalid JSON: %s", target, e)
            raise SnapshotListError(f"CDX response for {target} is not valid JSON") from e

        if rows and rows[0] and rows[0][0] == "timestamp":
            rows = rows[1:]
        records = [self._to_record(row) for row in rows if row]
        logger.info("CDX %s: %d snapshots", target, len(records))
        return records[:limit]

    def fetch_snapshot_html(self, record: SnapshotRecord) -> SnapshotHtml:
        """Download the archived HTML of *record*."""
        url = self.snapshot_url(record)
        try:
            resp = self.session.get(url, timeout=self.timeout, allow_redirects=True)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning("GET %s: %s", url, e)
            raise SnapshotFetchError(f"Snapshot {record.timestamp} failed: {e}") from e
        html = resp.text
        return SnapshotHtml(html=html, length=len(html), snapshot_url=url)

    @staticmethod
    def snapshot_url(record: SnapshotRecord) -> str:
        return WAYBACK_RAW_URL.format(timestamp=record.timestamp, url=record.original_url)

    # ── internals ───────────────────────────────────────────────────────────

    @staticmethod
    def _to_record(row: List[str]) -> SnapshotRecord:
        padded = list(row) + [None] * (len(WAYBACK_CDX_FIELDS) - len(row))
        return SnapshotRecord(
            timestamp=padded[0],
            original_url=padded[1],
            status_code=padded[2],
            mime_type=padded[3],
            digest=padded[4],
        )
