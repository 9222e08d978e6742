"""
Utility functions for the Misinformation Detection Dashboard
"""

from .text_processing import TextProcessor

__all__ = [
    'TextProcessor'
]
