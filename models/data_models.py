"""
Data models for the Misinformation Detection Dashboard
"""
from dataclasses import dataclass, asdict, field
from datetime import date, datetime
from typing import List, Dict, Optional, Any
import json


class Verdict:
    """Verdict labels produced by the text scorer"""
    UNKNOWN = "Unknown"
    LIKELY_MISINFORMATION = "Likely Misinformation"
    LIKELY_RELIABLE = "Likely Reliable"
    POSSIBLY_MISINFORMATION = "Possibly Misinformation"
    INSUFFICIENT_INFORMATION = "Insufficient Information"

    ALL = (
        UNKNOWN,
        LIKELY_MISINFORMATION,
        LIKELY_RELIABLE,
        POSSIBLY_MISINFORMATION,
        INSUFFICIENT_INFORMATION,
    )


@dataclass(frozen=True)
class KeywordScores:
    """Raw signal counts feeding the decision policy"""
    strong_misinfo: int
    moderate_misinfo: int
    strong_reliable: int
    moderate_reliable: int
    excessive_punctuation: int
    caps_penalty: int
    word_count: int

    @property
    def total_misinfo(self) -> int:
        return (self.strong_misinfo + self.moderate_misinfo +
                self.excessive_punctuation + self.caps_penalty)

    @property
    def total_reliable(self) -> int:
        return self.strong_reliable + self.moderate_reliable


@dataclass(frozen=True)
class ClassificationResult:
    """Result of scoring one text snippet.

    ``strong_reliable`` and ``strong_misinfo`` are weighted subtotals (3 per
    keyword hit); ``reliable_indicators`` and ``misinformation_indicators``
    are the aggregate scores the decision policy compares. Breakdown fields
    are ``None`` for the ``Unknown`` verdict.
    """
    verdict: str
    confidence: float
    strong_reliable: Optional[int] = None
    strong_misinfo: Optional[int] = None
    reliable_indicators: Optional[int] = None
    misinformation_indicators: Optional[int] = None
    word_count: Optional[int] = None
    moderate_reliable: Optional[int] = None
    moderate_misinfo: Optional[int] = None
    excessive_punctuation: Optional[int] = None
    caps_penalty: Optional[int] = None

    @property
    def has_breakdown(self) -> bool:
        return self.word_count is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)

    @classmethod
    def unknown(cls) -> 'ClassificationResult':
        return cls(verdict=Verdict.UNKNOWN, confidence=0.0)

    @classmethod
    def from_scores(cls, scores: KeywordScores, verdict: str,
                    confidence: float) -> 'ClassificationResult':
        """Create instance from the signal counts and the decided verdict"""
        return cls(
            verdict=verdict,
            confidence=confidence,
            strong_reliable=scores.strong_reliable,
            strong_misinfo=scores.strong_misinfo,
            reliable_indicators=scores.total_reliable,
            misinformation_indicators=scores.total_misinfo,
            word_count=scores.word_count,
            moderate_reliable=scores.moderate_reliable,
            moderate_misinfo=scores.moderate_misinfo,
            excessive_punctuation=scores.excessive_punctuation,
            caps_penalty=scores.caps_penalty,
        )


@dataclass(frozen=True)
class DistributionSummary:
    """Real vs misinformation share of a dataset"""
    total: int
    real_pct: float
    fake_pct: float
    interpretation: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class DatasetStatistics:
    """Dataset statistics structure"""
    total_articles: int
    misinformation_count: int
    reliable_count: int
    earliest_date: Optional[date]
    latest_date: Optional[date]
    source: str = 'sample'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = asdict(self)
        for key in ('earliest_date', 'latest_date'):
            if data[key] is not None:
                data[key] = data[key].isoformat()
        return data


@dataclass(frozen=True)
class LiveDetection:
    """One simulated entry of the live detection feed"""
    timestamp: datetime
    source: str
    result: str
    confidence: float

    @property
    def time_label(self) -> str:
        return self.timestamp.strftime('%H:%M:%S')

    @property
    def confidence_pct(self) -> float:
        return round(self.confidence * 100, 1)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['timestamp'] = self.timestamp.isoformat()
        return data


@dataclass
class MatchedKeywords:
    """Keywords that fired for each polarity and weight class"""
    strong_misinfo: List[str] = field(default_factory=list)
    moderate_misinfo: List[str] = field(default_factory=list)
    strong_reliable: List[str] = field(default_factory=list)
    moderate_reliable: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.strong_misinfo or self.moderate_misinfo or
                    self.strong_reliable or self.moderate_reliable)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class DashboardEncoder(json.JSONEncoder):
    """Custom JSON encoder for dashboard data objects"""

    def default(self, obj):
        if isinstance(obj, (ClassificationResult, DistributionSummary,
                            DatasetStatistics, LiveDetection, MatchedKeywords)):
            return obj.to_dict()
        elif isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return super().default(obj)
