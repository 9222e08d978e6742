"""
Processing engines for the Misinformation Detection Dashboard
"""

from .classification_engine import ClassificationEngine, decide_verdict
from .ingestion_engine import DatasetIngestionEngine
from .monitoring_engine import MonitoringEngine

__all__ = [
    'ClassificationEngine',
    'decide_verdict',
    'DatasetIngestionEngine',
    'MonitoringEngine'
]
