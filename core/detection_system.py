"""
Main detection system orchestrating all components
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from models.data_models import ClassificationResult, DatasetStatistics, MatchedKeywords
from engines.classification_engine import ClassificationEngine
from engines.ingestion_engine import DatasetIngestionEngine
from engines.monitoring_engine import MonitoringEngine
from core.dataset import ArticleDataset

logger = logging.getLogger(__name__)


class MisinformationDetectionSystem:
    """Owns the article dataset, the text classifier and the live feed simulator"""

    def __init__(self, data_file: Union[str, Path, None] = None,
                 monitoring_seed: Optional[int] = None):
        self.ingestion_engine = DatasetIngestionEngine(data_file)
        self.classifier = ClassificationEngine()
        self.monitoring_engine = MonitoringEngine(seed=monitoring_seed)

        self.dataset: Optional[ArticleDataset] = None
        self.loaded_at: Optional[datetime] = None

    def initialize_system(self) -> bool:
        """Load the dataset; returns False when no usable data is available"""
        frame, source = self.ingestion_engine.load_articles()
        self.dataset = ArticleDataset(frame, source=source)
        self.loaded_at = datetime.now()

        if len(self.dataset) == 0:
            logger.error("Dataset from %s contains no articles with valid dates", source)
            return False

        logger.info("Detection system ready with %d articles (%s)", len(self.dataset), source)
        return True

    def is_healthy(self) -> bool:
        return self.dataset is not None and len(self.dataset) > 0

    def classify_text(self, text: Optional[str]) -> ClassificationResult:
        """Classify a user-supplied snippet"""
        result = self.classifier.classify(text)
        logger.debug(
            "Classified %d characters: %s (%.1f%%)",
            len(text or ""), result.verdict, result.confidence
        )
        return result

    def get_matched_keywords(self, text: Optional[str]) -> MatchedKeywords:
        return self.classifier.get_matched_keywords(text)

    def get_statistics(self, dataset: Optional[ArticleDataset] = None) -> DatasetStatistics:
        """Statistics for the given (filtered) dataset, or the full one"""
        dataset = dataset if dataset is not None else self.dataset
        if dataset is None:
            return DatasetStatistics(
                total_articles=0,
                misinformation_count=0,
                reliable_count=0,
                earliest_date=None,
                latest_date=None
            )

        counts = dataset.label_counts()
        earliest, latest = dataset.date_bounds()

        return DatasetStatistics(
            total_articles=len(dataset),
            misinformation_count=counts['fake'],
            reliable_count=counts['real'],
            earliest_date=earliest,
            latest_date=latest,
            source=dataset.source
        )

    def get_system_health(self) -> Dict[str, Any]:
        """Summary of the loaded components; encode with DashboardEncoder for JSON"""
        stats = self.get_statistics()
        return {
            'system_status': 'Healthy' if self.is_healthy() else 'Needs Data',
            'dataset': stats,
            'data_file': str(self.ingestion_engine.data_file),
            'loaded_at': self.loaded_at,
            'classifier': {
                'misinformation_keywords': len(self.classifier.misinformation_keywords),
                'reliable_keywords': len(self.classifier.reliable_keywords),
            }
        }
