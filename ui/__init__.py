"""
User interface components for the Misinformation Detection Dashboard
"""

from .components import UIComponents
from .dashboard import Dashboard

__all__ = [
    'UIComponents',
    'Dashboard'
]
