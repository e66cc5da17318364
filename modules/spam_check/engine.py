"""
Spam Check Engine — orchestrates snapshot list → fetch → extract → score → aggregate.
"""
import logging
import time
from typing import Callable, Dict, Iterable, List, Optional, Union

from config.settings import PROBE_SNAPSHOTS, SPAM_PERCENTAGE_THRESHOLD
from core.exceptions import DomainAnalysisError, WaybackError
from core.models import DomainAnalysis, DomainError, DomainStatus, StopWordMatch, WaybackProbe
from core.runtime import RuntimeSettings, get_runtime_settings
from core.wayback_client import WaybackClient
from modules.spam_check.analyzer import analyze_html
from modules.spam_check.html_parser import HtmlParser, default_parser
from modules.spam_check.scorer import round2

logger = logging.getLogger(__name__)

ProgressSink = Callable[[str], None]
BatchResult = Union[DomainAnalysis, DomainError]


def _status_for(spam_percentage: float) -> DomainStatus:
    if spam_percentage >= SPAM_PERCENTAGE_THRESHOLD:
        return DomainStatus.SPAM
    if spam_percentage > 0:
        return DomainStatus.SUSPICIOUS
    return DomainStatus.CLEAN


def _prefixed(on_progress: Optional[ProgressSink], prefix: str) -> Optional[ProgressSink]:
    if on_progress is None:
        return None
    return lambda msg: on_progress(f"{prefix}{msg}")


class SpamCheckEngine:
    """Historical spam verdicts for domains, one Wayback snapshot at a time."""

    def __init__(
        self,
        client: Optional[WaybackClient] = None,
        parser: Optional[HtmlParser] = None,
        settings: Optional[RuntimeSettings] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.settings = settings or get_runtime_settings()
        self.client = client or WaybackClient(settings=self.settings)
        self.parser = parser or default_parser()
        self.sleep = sleep

    # ═══════════════════════════════════════════════════════════════════════
    # Public API
    # ═══════════════════════════════════════════════════════════════════════

    def analyze_domain(
        self,
        domain: str,
        stop_words: Optional[Iterable[str]] = (),
        max_snapshots: Optional[int] = None,
        on_progress: Optional[ProgressSink] = None,
    ) -> DomainAnalysis:
        """
        Check up to *max_snapshots* archived snapshots of *domain*.

        A snapshot that cannot be fetched or analysed is skipped. Failing to
        list the snapshots raises DomainAnalysisError.
        """
        def log(msg: str) -> None:
            if on_progress:
                on_progress(msg)

        words = list(stop_words or ())
        limit = max_snapshots if max_snapshots is not None else self.settings.max_snapshots

        log(f"Analyzing domain: {domain}")
        try:
            snapshots = self.client.list_snapshots(domain, limit)
        except Exception as e:
            raise DomainAnalysisError(domain, str(e)) from e

        if not snapshots:
            logger.info("%s: no snapshots", domain)
            return DomainAnalysis(domain=domain, status=DomainStatus.NO_SNAPSHOTS)

        total = len(snapshots)
        log(f"Found {total} snapshots, analyzing...")

        spam_snapshots = 0
        failed = 0
        total_spam_score = 0.0
        word_counts: Dict[str, int] = {}   # insertion order = discovery order
        first_spam_date: Optional[str] = None

        for idx, snapshot in enumerate(snapshots, 1):
            if idx > 1:
                self._pause(self.settings.snapshot_delay)
            log(f"[{idx}/{total}] Checking snapshot {snapshot.timestamp}...")
            try:
                page = self.client.fetch_snapshot_html(snapshot)
                analysis = analyze_html(page.html, words, self.parser)
            except Exception as e:
                failed += 1
                logger.warning("%s snapshot %s skipped: %s", domain, snapshot.timestamp, e)
                log(f"Error analyzing snapshot {snapshot.timestamp}: {e}")
                continue

            if not analysis.is_spam:
                continue
            spam_snapshots += 1
            total_spam_score += analysis.spam_score
            for match in analysis.stop_words.found:
                word_counts[match.word] = word_counts.get(match.word, 0) + match.count
            if first_spam_date is None:
                first_spam_date = snapshot.timestamp

        ratio = spam_snapshots / total * 100
        avg_spam_score = round2(total_spam_score / spam_snapshots) if spam_snapshots else 0.0
        # sorted() is stable: equal counts keep discovery order
        found = sorted(
            (StopWordMatch(word=w, count=c) for w, c in word_counts.items()),
            key=lambda m: m.count,
            reverse=True,
        )

        result = DomainAnalysis(
            domain=domain,
            snapshots_checked=total,
            spam_snapshots=spam_snapshots,
            spam_percentage=round2(ratio),
            avg_spam_score=avg_spam_score,
            spam_detected=spam_snapshots > 0,
            total_stop_words_found=len(word_counts),
            stop_words_found=found,
            first_spam_date=first_spam_date,
            status=_status_for(ratio),
            snapshots_failed=failed,
        )
        logger.info("%s: %s (%d/%d spam snapshots)", domain, result.status.value, spam_snapshots, total)
        return result

    def analyze_domains(
        self,
        domains: List[str],
        stop_words: Optional[Iterable[str]] = (),
        max_snapshots: Optional[int] = None,
        on_progress: Optional[ProgressSink] = None,
    ) -> List[BatchResult]:
        """Analyse *domains* in order. Blocking; one result per non-blank domain."""
        words = list(stop_words or ())
        results: List[BatchResult] = []
        processed = 0
        for idx, raw in enumerate(domains, 1):
            domain = (raw or "").strip()
            if not domain:
                continue
            if processed:
                self._pause(self.settings.domain_delay)
            processed += 1

            log = _prefixed(on_progress, f"[{idx}/{len(domains)}] {domain}: ")
            try:
                results.append(self.analyze_domain(domain, words, max_snapshots, log))
            except Exception as e:
                logger.error("domain error %s: %s", domain, e)
                if log:
                    log(f"Error: {e}")
                results.append(DomainError(domain=domain, error=str(e)))
        return results

    def _pause(self, seconds: float) -> None:
        # nan and negative delays are skipped
        if seconds > 0:
            self.sleep(seconds)

    def probe(self, target: str) -> WaybackProbe:
        """Quick check: list a few snapshots and download the first one."""
        try:
            snapshots = self.client.list_snapshots(target, PROBE_SNAPSHOTS)
            if not snapshots:
                return WaybackProbe(target=target)
            first = snapshots[0]
            page = self.client.fetch_snapshot_html(first)
        except Exception as e:
            raise WaybackError(f"Wayback probe failed: {e}") from e
        return WaybackProbe(
            target=target,
            snapshots_count=len(snapshots),
            first_snapshot_timestamp=first.timestamp,
            first_snapshot_url=first.original_url,
            first_snapshot_html_length=page.length,
            first_snapshot_wayback_url=page.snapshot_url,
        )
