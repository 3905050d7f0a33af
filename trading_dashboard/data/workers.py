# trading_dashboard/data/workers.py
"""
Background fetch thread so REST calls never block the UI thread
"""
import logging
from typing import Any, Callable

from PyQt6.QtCore import QThread, pyqtSignal

logger = logging.getLogger(__name__)


class FetchWorker(QThread):
    """Runs one fetch callable off the UI thread and reports the result."""
    data_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(str)

    def __init__(self, fetch: Callable[..., Any], *args, parent=None):
        super().__init__(parent)
        self.fetch = fetch
        self.args = args

    def run(self):
        try:
            self.data_ready.emit(self.fetch(*self.args))
        except Exception as e:
            logger.error(f"Error in FetchWorker: {e}", exc_info=True)
            self.error_occurred.emit(str(e))
