# trading_dashboard/dashboard/components/chart/surface.py
"""
Chart surface: a pyqtgraph plot pinned to pixel coordinates, with a custom
candlestick item layered on top and a "no data" placeholder page
"""

import logging
from typing import List, Optional, Sequence

import pyqtgraph as pg
from PyQt6.QtWidgets import QWidget, QLabel, QStackedLayout
from PyQt6.QtCore import Qt

from ....data.models import Bar
from ....styles import ChartTheme
from .candle_renderer import CandleGlyph, CandleRenderer
from .coordinate_mapper import CoordinateMapper

logger = logging.getLogger(__name__)

# Configure PyQtGraph
pg.setConfigOptions(antialias=True)


class CandlestickItem(pg.GraphicsObject):
    """Custom candlestick item that replays the renderer's recorded picture"""

    def __init__(self, renderer: CandleRenderer):
        pg.GraphicsObject.__init__(self)
        self.renderer = renderer
        self.glyphs: List[CandleGlyph] = []
        self.picture = None
        self.bounds = pg.QtCore.QRectF()

    def set_bounds(self, width: float, height: float):
        self.prepareGeometryChange()
        self.bounds = pg.QtCore.QRectF(0, 0, width, height)

    def set_glyphs(self, glyphs: Sequence[CandleGlyph]):
        """Replace every glyph; the previous picture is discarded, never layered"""
        self.glyphs = list(glyphs)
        self.generatePicture()
        self.update()

    def clear(self):
        self.glyphs = []
        self.picture = None
        self.update()

    def generatePicture(self):
        """Generate the picture for painting"""
        self.picture = self.renderer.record(self.glyphs)

    def paint(self, p, *args):
        if self.picture:
            p.drawPicture(0, 0, self.picture)

    def boundingRect(self):
        return pg.QtCore.QRectF(self.bounds)


class ChartSurface(QWidget):
    """
    Mutable rendering target owned by exactly one ChartLifecycleManager.

    The plot's view box is fixed to [0, width] x [0, height] with Y inverted, so
    candle glyphs are drawn directly in CoordinateMapper pixel space. Axis labels
    are derived from the mapper rather than from the view box.
    """

    def __init__(self, parent: QWidget, width: int, height: int,
                 theme: Optional[ChartTheme] = None):
        super().__init__(parent)
        self.setObjectName("chart_surface")

        self.theme = theme or ChartTheme()
        self.renderer = CandleRenderer(self.theme)
        self.surface_width = width
        self.surface_height = height

        self.init_ui()
        self.set_size(width, height)

    def init_ui(self):
        """Initialize the placeholder page and the plot page"""
        self.stack = QStackedLayout(self)
        self.stack.setContentsMargins(0, 0, 0, 0)

        self.placeholder = QLabel("No data available")
        self.placeholder.setObjectName("chart_placeholder")
        self.placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.stack.addWidget(self.placeholder)

        self.plot_widget = pg.PlotWidget(background=self.theme.background)
        self.plot = self.plot_widget.getPlotItem()

        # Price scale on the right, time scale at the bottom
        self.plot.hideAxis('left')
        self.plot.showAxis('right')
        self.plot.showGrid(x=True, y=True, alpha=0.3)
        for name in ('right', 'bottom'):
            axis = self.plot.getAxis(name)
            axis.setPen(self.theme.border_color)
            axis.setTextPen(self.theme.text_color)

        # Fixed pixel-space view: no panning, zooming or auto range
        self.plot.setMouseEnabled(x=False, y=False)
        self.plot.setMenuEnabled(False)
        self.plot.hideButtons()
        self.plot.disableAutoRange()
        self.plot.invertY(True)

        self.candlestick_item = CandlestickItem(self.renderer)
        self.plot.addItem(self.candlestick_item)

        self.stack.addWidget(self.plot_widget)
        self.stack.setCurrentWidget(self.placeholder)

    def set_size(self, width: int, height: int):
        """Resize the surface and re-pin the view box to its pixel rectangle"""
        self.surface_width = width
        self.surface_height = height
        self.setFixedSize(width, height)
        self.plot.setXRange(0, width, padding=0)
        self.plot.setYRange(0, height, padding=0)
        self.candlestick_item.set_bounds(width, height)

    @property
    def is_showing_placeholder(self) -> bool:
        return self.stack.currentWidget() is self.placeholder

    @property
    def placeholder_text(self) -> str:
        return self.placeholder.text()

    def show_placeholder(self, text: str):
        """Drop every glyph and tick, then show the placeholder"""
        self.candlestick_item.clear()
        self.plot.getAxis('right').setTicks([[]])
        self.plot.getAxis('bottom').setTicks([[]])
        self.placeholder.setText(text)
        self.stack.setCurrentWidget(self.placeholder)

    def present(self, bars: Sequence[Bar], glyphs: Sequence[CandleGlyph],
                mapper: CoordinateMapper):
        """Show a full draw pass: glyphs plus axis labels from the same mapper"""
        self.candlestick_item.set_glyphs(glyphs)
        self.plot.getAxis('right').setTicks([mapper.price_ticks()])
        self.update_time_axis(bars, mapper)
        self.stack.setCurrentWidget(self.plot_widget)

    def update_time_axis(self, bars: Sequence[Bar], mapper: CoordinateMapper):
        """Update time axis labels"""
        num_bars = len(bars)

        # Show subset of labels to avoid crowding
        if num_bars > 50:
            step = num_bars // 10
        elif num_bars > 20:
            step = 5
        else:
            step = 1

        ticks = [
            (mapper.index_to_x(i), bar.timestamp.strftime('%H:%M'))
            for i, bar in enumerate(bars)
            if i % step == 0
        ]
        self.plot.getAxis('bottom').setTicks([ticks])

    def release(self):
        """Detach the candlestick item and drop the backing plot"""
        self.candlestick_item.clear()
        self.plot.removeItem(self.candlestick_item)
        self.plot_widget.close()
