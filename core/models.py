"""
Shared data models for wayback-spam-check.
All modules return these normalized types.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class DomainStatus(str, Enum):
    NO_SNAPSHOTS = "no_snapshots"
    CLEAN = "clean"
    SUSPICIOUS = "suspicious"
    SPAM = "spam"
    ERROR = "error"


# ─── Scoring Models ──────────────────────────────────────────────────────────

@dataclass
class StopWordMatch:
    word: str
    count: int = 1


@dataclass
class ScoreResult:
    found: List[StopWordMatch] = field(default_factory=list)
    count: int = 0
    score: float = 0.0

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class MetaTags:
    title: str = ""
    description: str = ""
    keywords: str = ""


@dataclass
class HtmlSpamAnalysis:
    text_length: int = 0
    meta_tags: MetaTags = field(default_factory=MetaTags)
    stop_words: ScoreResult = field(default_factory=ScoreResult)
    is_spam: bool = False
    spam_score: float = 0.0

    def to_dict(self) -> Dict:
        return asdict(self)


# ─── Wayback Models ──────────────────────────────────────────────────────────

@dataclass
class SnapshotRecord:
    timestamp: str
    original_url: str
    status_code: Optional[str] = None
    mime_type: Optional[str] = None
    digest: Optional[str] = None


@dataclass
class SnapshotHtml:
    html: str
    length: int
    snapshot_url: str


@dataclass
class WaybackProbe:
    target: str
    snapshots_count: int = 0
    first_snapshot_timestamp: Optional[str] = None
    first_snapshot_url: Optional[str] = None
    first_snapshot_html_length: Optional[int] = None
    first_snapshot_wayback_url: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)


# ─── Domain Analysis Models ──────────────────────────────────────────────────

@dataclass
class DomainAnalysis:
    domain: str
    snapshots_checked: int = 0
    spam_snapshots: int = 0
    spam_percentage: float = 0.0
    avg_spam_score: float = 0.0
    spam_detected: bool = False
    total_stop_words_found: int = 0
    stop_words_found: List[StopWordMatch] = field(default_factory=list)
    first_spam_date: Optional[str] = None
    status: DomainStatus = DomainStatus.CLEAN
    snapshots_failed: int = 0

    def to_dict(self) -> Dict:
        out = asdict(self)
        out["status"] = self.status.value
        return out


@dataclass
class DomainError:
    domain: str
    error: str
    status: DomainStatus = DomainStatus.ERROR

    def to_dict(self) -> Dict:
        return {"domain": self.domain, "error": self.error, "status": self.status.value}
