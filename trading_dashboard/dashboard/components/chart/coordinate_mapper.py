# trading_dashboard/dashboard/components/chart/coordinate_mapper.py
"""
Module: Coordinate Mapper
Purpose: Map bar prices and positions into the chart surface's pixel space
Note: Pixel origin is top-left, Y grows downwards
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ....data.models import Bar

# Zero-width price ranges are padded by this fraction of the price level per side
DEGENERATE_RANGE_FRACTION = 0.01
# Used instead when the price level itself is zero
DEGENERATE_RANGE_ABSOLUTE = 1.0
# Empty band kept above and below the price extent, as a fraction of the extent
PRICE_MARGIN_FRACTION = 0.1


def price_extent(bars: Sequence[Bar]) -> Tuple[float, float]:
    """
    Lowest and highest price across all bars.

    Open and close are included so malformed bars (e.g. high < low) stay on
    screen; for valid bars this is exactly (min low, max high).
    """
    prices = np.array(
        [(bar.open, bar.high, bar.low, bar.close) for bar in bars],
        dtype=float
    )
    return float(prices.min()), float(prices.max())


@dataclass(frozen=True)
class CoordinateMapper:
    """
    Pure price/position -> pixel mapping for one bar sequence at one surface size.

    Built once per data replacement or resize and shared by every glyph of the
    draw pass, so relative positions never depend on drawing order.

    Attributes:
        width, height: Surface size in pixels
        bar_count: Number of bars the horizontal slots are divided into
        price_min, price_max: Visible price range (extent plus margins)
    """
    width: float
    height: float
    bar_count: int
    price_min: float
    price_max: float
    timestamp_index: Dict[datetime, int] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_bars(cls, bars: Sequence[Bar], width: float, height: float) -> 'CoordinateMapper':
        """
        Build the mapping for a non-empty bar sequence.

        Raises:
            ValueError: bars is empty, or the surface size is not positive
        """
        if not bars:
            raise ValueError("Cannot map an empty bar sequence")
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")

        low, high = price_extent(bars)

        if high - low <= 0:
            pad = abs(high) * DEGENERATE_RANGE_FRACTION or DEGENERATE_RANGE_ABSOLUTE
            low, high = low - pad, high + pad

        margin = (high - low) * PRICE_MARGIN_FRACTION

        # First occurrence wins for duplicate timestamps
        index: Dict[datetime, int] = {}
        for i, bar in enumerate(bars):
            index.setdefault(bar.timestamp, i)

        return cls(
            width=float(width),
            height=float(height),
            bar_count=len(bars),
            price_min=low - margin,
            price_max=high + margin,
            timestamp_index=index
        )

    @property
    def slot_width(self) -> float:
        """Horizontal pixels reserved for each bar"""
        return self.width / self.bar_count

    def price_to_y(self, price: float) -> float:
        return (self.price_max - price) / (self.price_max - self.price_min) * self.height

    def y_to_price(self, y: float) -> float:
        return self.price_max - y / self.height * (self.price_max - self.price_min)

    def index_to_x(self, index: int) -> float:
        """Horizontal centre of the bar at position index"""
        return (index + 0.5) * self.slot_width

    def time_to_x(self, timestamp: datetime) -> Optional[float]:
        """Horizontal centre of the first bar with this timestamp, None if absent"""
        index = self.timestamp_index.get(timestamp)
        if index is None:
            return None
        return self.index_to_x(index)

    def price_ticks(self, count: int = 5) -> List[Tuple[float, str]]:
        """Evenly spaced price labels as (y pixel, text) pairs for the price axis"""
        if count < 2:
            return []
        inner = self.price_max - self.price_min
        prices = np.linspace(self.price_min + inner * 0.05, self.price_max - inner * 0.05, count)
        return [(self.price_to_y(p), f"{p:.2f}") for p in prices]
