"""
Data layer: brokerage proxy client, fetch worker and models
"""

from .models import (Bar, BarSequence, as_bar_sequence, AccountData,
                     LatestTrade, LatestQuote, MarketSnapshot)
from .rest_client import BrokerRESTClient
from .workers import FetchWorker

__all__ = [
    'Bar',
    'BarSequence',
    'as_bar_sequence',
    'AccountData',
    'LatestTrade',
    'LatestQuote',
    'MarketSnapshot',
    'BrokerRESTClient',
    'FetchWorker'
]
