# trading_dashboard/dashboard/main_dashboard.py
"""
Main Trading Dashboard window
Account information and market data side by side, fetched off the UI thread
"""

import logging
from typing import List, Optional

from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent

from ..config import DashboardConfig, get_config
from ..data import BrokerRESTClient, FetchWorker
from ..data.models import AccountData, MarketSnapshot
from ..styles import BaseStyles
from .components import AccountPanel, MarketDataPanel

logger = logging.getLogger(__name__)


class TradingDashboard(QMainWindow):
    """Main dashboard window"""

    def __init__(self, config: Optional[DashboardConfig] = None,
                 client: Optional[BrokerRESTClient] = None,
                 symbol: Optional[str] = None, auto_fetch: bool = True):
        super().__init__()
        self.config = config or get_config()
        self.client = client or BrokerRESTClient(self.config)
        self.current_symbol = (symbol or self.config.default_symbol).upper()

        # Running workers are kept referenced until they finish
        self.workers: List[FetchWorker] = []

        self.init_ui()
        self.apply_styles()
        self.connect_signals()

        if auto_fetch:
            self.fetch_account_data()
            self.fetch_market_data(self.current_symbol)

    def init_ui(self):
        self.setWindowTitle("Alpaca Trading Dashboard")

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(15)

        header = QLabel("Alpaca Trading Dashboard")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.setStyleSheet(f"font-size: {BaseStyles.FONT_SIZE_XLARGE}; font-weight: bold;")
        layout.addWidget(header)

        self.error_banner = QLabel()
        self.error_banner.setObjectName("error_banner")
        self.error_banner.setWordWrap(True)
        self.error_banner.hide()
        layout.addWidget(self.error_banner)

        grid = QHBoxLayout()
        self.account_panel = AccountPanel()
        self.market_panel = MarketDataPanel(
            symbol=self.current_symbol,
            chart_width=self.config.chart_width,
            chart_height=self.config.chart_height
        )
        grid.addWidget(self.account_panel, 1)
        grid.addWidget(self.market_panel, 2)
        layout.addLayout(grid)

        self.setCentralWidget(central)

    def apply_styles(self):
        self.setStyleSheet(BaseStyles.get_base_stylesheet())

    def connect_signals(self):
        self.client.error_occurred.connect(self.show_error)
        self.market_panel.fetch_requested.connect(self.fetch_market_data)

    def show_error(self, message: str):
        self.error_banner.setText(f"Error: {message}")
        self.error_banner.show()

    def clear_error(self):
        self.error_banner.clear()
        self.error_banner.hide()

    def _start_worker(self, worker: FetchWorker):
        self.workers.append(worker)
        worker.error_occurred.connect(self.show_error)
        worker.finished.connect(lambda: self._forget_worker(worker))
        worker.start()

    def _forget_worker(self, worker: FetchWorker):
        if worker in self.workers:
            self.workers.remove(worker)
        worker.deleteLater()

    def fetch_account_data(self):
        self.clear_error()
        self.account_panel.set_loading()
        worker = FetchWorker(self.client.fetch_account)
        worker.data_ready.connect(self.on_account_data)
        self._start_worker(worker)

    def fetch_market_data(self, symbol: str):
        symbol = symbol.strip().upper()
        if not symbol:
            return
        self.clear_error()
        self.current_symbol = symbol
        self.market_panel.set_loading(True)
        logger.info(f"Fetching market data for {symbol}")

        worker = FetchWorker(self.client.fetch_market_data, symbol)
        worker.data_ready.connect(self.on_market_data)
        worker.error_occurred.connect(lambda _: self.on_market_data(None))
        self._start_worker(worker)

    def on_account_data(self, account: Optional[AccountData]):
        self.account_panel.set_account(account)

    def on_market_data(self, snapshot: Optional[MarketSnapshot]):
        self.market_panel.set_loading(False)
        self.market_panel.set_snapshot(snapshot)

    def closeEvent(self, event: QCloseEvent):
        for worker in list(self.workers):
            worker.wait(2000)
        self.market_panel.chart.teardown()
        self.client.close()
        super().closeEvent(event)
