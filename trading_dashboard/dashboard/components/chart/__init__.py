"""
Candlestick chart engine: coordinate mapping, candle rendering, surface lifecycle
"""

from .coordinate_mapper import CoordinateMapper
from .candle_renderer import CandleDirection, CandleGlyph, CandleRenderer, classify
from .surface import CandlestickItem, ChartSurface
from .lifecycle import ChartLifecycleManager, ChartState

__all__ = [
    'CoordinateMapper',
    'CandleDirection',
    'CandleGlyph',
    'CandleRenderer',
    'classify',
    'CandlestickItem',
    'ChartSurface',
    'ChartLifecycleManager',
    'ChartState'
]
