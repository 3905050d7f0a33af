"""
Dashboard package: main window and its components
"""

from .main_dashboard import TradingDashboard

__all__ = ['TradingDashboard']
