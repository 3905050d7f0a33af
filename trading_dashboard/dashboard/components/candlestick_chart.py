# trading_dashboard/dashboard/components/candlestick_chart.py
"""
Candlestick Chart Component
Hosts one chart surface for a symbol, or a "No data available" placeholder
"""

import logging
from typing import Iterable, Optional

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent

from ...data.models import Bar
from ...styles import ChartStyles, ChartTheme
from .chart import ChartLifecycleManager, ChartState
from .chart.lifecycle import DEFAULT_WIDTH, DEFAULT_HEIGHT

logger = logging.getLogger(__name__)


class CandlestickChart(QWidget):
    """
    Chart component taking (bars, symbol, width, height).

    The chart is mounted when the widget is built and unmounted by teardown()
    or when the widget closes. The symbol is a display label only.
    """

    def __init__(self, bars: Optional[Iterable[Bar]] = None, symbol: str = "",
                 width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 theme: Optional[ChartTheme] = None, parent=None):
        super().__init__(parent)
        self.symbol = symbol
        self.chart_width = width
        self.chart_height = height

        self.manager = ChartLifecycleManager(self._placeholder_for(symbol))

        self.init_ui()
        self.apply_styles()

        self.manager.mount(self.chart_container, width, height, theme)
        self.set_bars(bars)

    @staticmethod
    def _placeholder_for(symbol: str) -> str:
        return f"No data available for {symbol}"

    def init_ui(self):
        """Initialize the UI"""
        self.setObjectName("chart_container")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(0)

        self.header = QLabel(f"{self.symbol} Candlestick Chart")
        self.header.setObjectName("chart_header")
        self.header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.header)

        self.chart_container = QWidget()
        layout.addWidget(self.chart_container)

    def apply_styles(self):
        """Apply styles to the widget"""
        self.setStyleSheet(ChartStyles.get_stylesheet())

    @property
    def has_data(self) -> bool:
        return self.manager.state is ChartState.MOUNTED_WITH_DATA

    def set_bars(self, bars: Optional[Iterable[Bar]]):
        """Replace the displayed bars; empty or None shows the placeholder"""
        self.manager.set_data(bars)
        # Title only accompanies an actual chart
        self.header.setVisible(self.has_data)

    def clear(self):
        """Show the placeholder, e.g. after a failed fetch"""
        self.set_bars(())

    def set_symbol(self, symbol: str):
        """Update the display label; rendering math is unaffected"""
        self.symbol = symbol
        self.header.setText(f"{symbol} Candlestick Chart")
        self.manager.placeholder_text = self._placeholder_for(symbol)
        if not self.has_data and self.manager.is_mounted:
            self.manager.set_data(())

    def resize_chart(self, width: int, height: int):
        self.chart_width = width
        self.chart_height = height
        self.manager.resize(width, height)

    def teardown(self):
        self.manager.unmount()

    def closeEvent(self, event: QCloseEvent):
        self.teardown()
        super().closeEvent(event)
