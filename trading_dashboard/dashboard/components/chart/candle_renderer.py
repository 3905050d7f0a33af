# trading_dashboard/dashboard/components/chart/candle_renderer.py
"""
Module: Candle Renderer
Purpose: Turn bars into wick + body glyphs and paint them with QPainter
UI Framework: PyQt6 with PyQtGraph
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

import pyqtgraph as pg

from ....data.models import Bar
from ....styles import ChartTheme
from .coordinate_mapper import CoordinateMapper

logger = logging.getLogger(__name__)

# Bodies never take more than this share of a bar slot, so neighbours never touch
BODY_SLOT_FRACTION = 0.8


class CandleDirection(Enum):
    UP = 'up'
    DOWN = 'down'


def classify(bar: Bar) -> CandleDirection:
    """close >= open is UP, anything else is DOWN"""
    return CandleDirection.UP if bar.is_up else CandleDirection.DOWN


@dataclass(frozen=True)
class CandleGlyph:
    """Pixel geometry and color of one candlestick"""
    index: int
    direction: CandleDirection
    color: str
    x: float
    wick_top: float
    wick_bottom: float
    body_left: float
    body_top: float
    body_width: float
    body_height: float

    @property
    def body_bottom(self) -> float:
        return self.body_top + self.body_height


class CandleRenderer:
    """
    Builds and paints candlestick glyphs for a whole bar sequence.

    A draw pass is a pure function of (bars, mapper, theme): nothing is carried
    over between passes, so repeating a pass repaints the same pixels.
    Malformed bars are not validated, they are drawn as given.
    """

    def __init__(self, theme: Optional[ChartTheme] = None):
        self.theme = theme or ChartTheme()

    def color_for(self, direction: CandleDirection) -> str:
        if direction is CandleDirection.UP:
            return self.theme.up_color
        return self.theme.down_color

    def body_width_for(self, mapper: CoordinateMapper) -> float:
        """Fixed body width, shrunk when bars are too dense to fit it"""
        return min(float(self.theme.body_width), mapper.slot_width * BODY_SLOT_FRACTION)

    def build_glyphs(self, bars: Sequence[Bar], mapper: CoordinateMapper) -> List[CandleGlyph]:
        """Compute one glyph per bar, in sequence order"""
        if not bars:
            return []

        body_width = self.body_width_for(mapper)
        min_height = float(self.theme.min_body_height)
        height = mapper.height
        glyphs = []

        for i, bar in enumerate(bars):
            direction = classify(bar)
            x = mapper.index_to_x(i)

            y_high = mapper.price_to_y(bar.high)
            y_low = mapper.price_to_y(bar.low)
            wick_top, wick_bottom = min(y_high, y_low), max(y_high, y_low)

            y_open = mapper.price_to_y(bar.open)
            y_close = mapper.price_to_y(bar.close)
            body_top = min(y_open, y_close)
            body_height = abs(y_open - y_close)

            # open == close would give an invisible body
            if body_height < min_height:
                body_top = (y_open + y_close) / 2 - min_height / 2
                body_height = min_height
            body_top = min(max(body_top, 0.0), max(height - body_height, 0.0))

            # The wick always spans the body
            wick_top = max(min(wick_top, body_top), 0.0)
            wick_bottom = min(max(wick_bottom, body_top + body_height), height)

            glyphs.append(CandleGlyph(
                index=i,
                direction=direction,
                color=self.color_for(direction),
                x=x,
                wick_top=wick_top,
                wick_bottom=wick_bottom,
                body_left=x - body_width / 2,
                body_top=body_top,
                body_width=body_width,
                body_height=body_height
            ))

        return glyphs

    def paint(self, painter, glyphs: Sequence[CandleGlyph]):
        """Paint glyphs in order: wick first, then the bordered body on top"""
        for glyph in glyphs:
            painter.setPen(pg.mkPen(glyph.color, width=self.theme.wick_width))
            painter.setBrush(pg.mkBrush(glyph.color))

            painter.drawLine(pg.QtCore.QPointF(glyph.x, glyph.wick_top),
                             pg.QtCore.QPointF(glyph.x, glyph.wick_bottom))

            painter.drawRect(pg.QtCore.QRectF(glyph.body_left,
                                              glyph.body_top,
                                              glyph.body_width,
                                              glyph.body_height))

    def record(self, glyphs: Sequence[CandleGlyph]):
        """Record a full draw pass into a fresh QPicture"""
        picture = pg.QtGui.QPicture()
        painter = pg.QtGui.QPainter(picture)
        try:
            self.paint(painter, glyphs)
        finally:
            painter.end()
        logger.debug(f"Recorded {len(glyphs)} candles")
        return picture
