"""
Dashboard Components Package
"""

from .account_panel import AccountPanel
from .market_data_panel import MarketDataPanel
from .candlestick_chart import CandlestickChart

__all__ = [
    'AccountPanel',
    'MarketDataPanel',
    'CandlestickChart'
]
