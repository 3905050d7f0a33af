"""
Dashboard Styles Package
"""

from .base_styles import BaseStyles
from .chart import ChartStyles, ChartTheme

__all__ = [
    'BaseStyles',
    'ChartStyles',
    'ChartTheme'
]
