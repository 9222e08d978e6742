# core/__init__.py
"""
Core components for the Misinformation Detection Dashboard
"""

from .dataset import ArticleDataset
from .detection_system import MisinformationDetectionSystem

__all__ = [
    'ArticleDataset',
    'MisinformationDetectionSystem'
]
