# trading_dashboard/dashboard/components/market_data_panel.py
"""
Market Data card: symbol entry, latest trade/quote, recent bars and the chart
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (QFrame, QVBoxLayout, QHBoxLayout, QLabel,
                             QLineEdit, QPushButton, QListWidget)
from PyQt6.QtCore import pyqtSignal

from ...data.models import MarketSnapshot
from .candlestick_chart import CandlestickChart

logger = logging.getLogger(__name__)


class MarketDataPanel(QFrame):
    """
    Symbol entry plus market snapshot display
    Submits on Enter key or button click
    """

    # Signal emitted when a symbol fetch is requested
    fetch_requested = pyqtSignal(str)

    def __init__(self, symbol: str = "AAPL", chart_width: int = 600,
                 chart_height: int = 400, parent=None):
        super().__init__(parent)
        self.snapshot: Optional[MarketSnapshot] = None
        self.loading = False
        self.init_ui(symbol, chart_width, chart_height)

    def init_ui(self, symbol: str, chart_width: int, chart_height: int):
        self.setObjectName("card")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(15, 15, 15, 15)
        layout.setSpacing(10)

        title = QLabel("Market Data")
        title.setObjectName("section_title")
        layout.addWidget(title)

        input_layout = QHBoxLayout()
        self.symbol_input = QLineEdit(symbol.upper())
        self.symbol_input.setPlaceholderText("Enter symbol (e.g., AAPL)")
        self.symbol_input.setMaxLength(10)
        self.symbol_input.textEdited.connect(self._force_upper)
        self.symbol_input.returnPressed.connect(self.submit)
        input_layout.addWidget(self.symbol_input)

        self.fetch_button = QPushButton("Fetch Data")
        self.fetch_button.clicked.connect(self.submit)
        input_layout.addWidget(self.fetch_button)
        layout.addLayout(input_layout)

        self.symbol_label = QLabel()
        self.symbol_label.setObjectName("section_title")
        self.trade_label = QLabel()
        self.quote_label = QLabel()
        for label in (self.symbol_label, self.trade_label, self.quote_label):
            layout.addWidget(label)

        layout.addWidget(QLabel("Recent 1-Minute Bars"))
        self.bars_list = QListWidget()
        layout.addWidget(self.bars_list)

        self.chart = CandlestickChart(symbol=symbol.upper(), width=chart_width,
                                      height=chart_height)
        layout.addWidget(self.chart)

    @property
    def symbol(self) -> str:
        return self.symbol_input.text().strip().upper()

    def _force_upper(self, text: str):
        upper = text.upper()
        if upper != text:
            cursor = self.symbol_input.cursorPosition()
            self.symbol_input.setText(upper)
            self.symbol_input.setCursorPosition(cursor)

    def submit(self):
        if self.loading or not self.symbol:
            return
        self.fetch_requested.emit(self.symbol)

    def set_loading(self, loading: bool):
        self.loading = loading
        self.fetch_button.setEnabled(not loading)
        self.fetch_button.setText("Loading..." if loading else "Fetch Data")

    def set_snapshot(self, snapshot: Optional[MarketSnapshot]):
        """Show a snapshot; None (failed fetch) leaves the chart on its placeholder"""
        self.snapshot = snapshot
        self.bars_list.clear()

        if snapshot is None:
            self.symbol_label.clear()
            self.trade_label.clear()
            self.quote_label.clear()
            self.chart.set_symbol(self.symbol)
            self.chart.clear()
            return

        self.symbol_label.setText(snapshot.symbol)

        trade = snapshot.latest_trade
        if trade is not None:
            self.trade_label.setText(
                f"<b>Latest Trade</b><br>"
                f"<b>Price:</b> ${trade.price}<br>"
                f"<b>Size:</b> {trade.size:g}<br>"
                f"<b>Exchange:</b> {trade.exchange}<br>"
                f"<b>Time:</b> {trade.timestamp:%Y-%m-%d %H:%M:%S}"
            )
        else:
            self.trade_label.clear()

        quote = snapshot.latest_quote
        if quote is not None:
            self.quote_label.setText(
                f"<b>Latest Quote</b><br>"
                f"<b>Bid:</b> ${quote.bid_price} ({quote.bid_size:g} shares)<br>"
                f"<b>Ask:</b> ${quote.ask_price} ({quote.ask_size:g} shares)<br>"
                f"<b>Spread:</b> ${quote.spread:.2f}<br>"
                f"<b>Time:</b> {quote.timestamp:%Y-%m-%d %H:%M:%S}"
            )
        else:
            self.quote_label.clear()

        for bar in snapshot.recent_bars:
            self.bars_list.addItem(
                f"{bar.timestamp:%H:%M:%S}  O: ${bar.open} H: ${bar.high} "
                f"L: ${bar.low} C: ${bar.close}  Volume: {bar.volume:,.0f}"
            )

        self.chart.set_symbol(snapshot.symbol)
        self.chart.set_bars(snapshot.recent_bars)
