"""
Data models for the Misinformation Detection Dashboard
"""

from .data_models import (
    Verdict,
    KeywordScores,
    ClassificationResult,
    DistributionSummary,
    DatasetStatistics,
    LiveDetection,
    MatchedKeywords,
    DashboardEncoder
)

__all__ = [
    'Verdict',
    'KeywordScores',
    'ClassificationResult',
    'DistributionSummary',
    'DatasetStatistics',
    'LiveDetection',
    'MatchedKeywords',
    'DashboardEncoder'
]
