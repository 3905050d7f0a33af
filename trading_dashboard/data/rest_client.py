# trading_dashboard/data/rest_client.py
"""
REST API client for the brokerage proxy
Fetches account data and market snapshots (latest trade, latest quote, recent bars)
All timestamps in UTC
"""
import logging
import requests
from typing import Any, Dict, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from ..config import DashboardConfig, get_config
from ..exceptions import DashboardAPIError, ResponseFormatError
from .models import AccountData, MarketSnapshot

logger = logging.getLogger(__name__)


class BrokerRESTClient(QObject):
    """
    REST API client for the brokerage proxy

    Failures never propagate out of the public fetch methods: they are logged,
    emitted on error_occurred and turned into a None return. Showing the error
    is the caller's job.
    """

    # Signals
    error_occurred = pyqtSignal(str)

    def __init__(self, config: Optional[DashboardConfig] = None,
                 base_url: Optional[str] = None):
        super().__init__()
        self.config = config or get_config()
        self.base_url = (base_url or self.config.base_url).rstrip('/')
        self.timeout = self.config.request_timeout

        self.session = requests.Session()
        self.session.headers.update({
            'Content-Type': 'application/json',
            'Accept': 'application/json'
        })
        if self.config.has_credentials:
            self.session.headers.update({
                'APCA-API-KEY-ID': self.config.api_key_id,
                'APCA-API-SECRET-KEY': self.config.api_secret_key
            })

    def _get_json(self, path: str) -> Dict[str, Any]:
        """
        GET a proxy endpoint and decode its JSON body

        Raises:
            DashboardAPIError: non-200 response
            ResponseFormatError: body is not a JSON object
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url}")

        response = self.session.get(url, timeout=self.timeout)

        if response.status_code != 200:
            raise DashboardAPIError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
                response_body=response.text,
                url=url
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseFormatError(f"Invalid JSON from {url}") from e

        if not isinstance(data, dict):
            raise ResponseFormatError(f"Expected a JSON object from {url}",
                                      {'type': type(data).__name__})
        return data

    def _report(self, what: str, error):
        message = f"Failed to fetch {what}: {error}"
        logger.error(message)
        self.error_occurred.emit(message)

    def fetch_account(self) -> Optional[AccountData]:
        """
        Fetch the brokerage account summary

        Returns:
            AccountData or None if the request or parsing failed
        """
        try:
            data = self._get_json('/api/alpaca/account')
            account = AccountData.from_api(data)
            logger.info(f"Fetched account {account.account_number} ({account.status})")
            return account

        except requests.exceptions.Timeout:
            self._report('account data', 'request timeout - server may be busy')
            return None

        except (requests.exceptions.RequestException,
                DashboardAPIError, ResponseFormatError) as e:
            self._report('account data', e)
            return None

    def fetch_market_data(self, symbol: str) -> Optional[MarketSnapshot]:
        """
        Fetch latest trade, latest quote and recent 1-minute bars

        Args:
            symbol: Stock symbol, upper-cased before the request

        Returns:
            MarketSnapshot or None if the request or parsing failed
        """
        symbol = symbol.strip().upper()
        if not symbol:
            self._report('market data', 'empty symbol')
            return None

        try:
            data = self._get_json(f'/api/alpaca/market-data/{symbol}')
            snapshot = MarketSnapshot.from_api(data)
            logger.info(f"Fetched {len(snapshot.recent_bars)} bars for {symbol}")
            return snapshot

        except requests.exceptions.Timeout:
            self._report('market data', 'request timeout - server may be busy')
            return None

        except (requests.exceptions.RequestException,
                DashboardAPIError, ResponseFormatError) as e:
            self._report('market data', e)
            return None

    def close(self):
        self.session.close()
