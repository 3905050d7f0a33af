# trading_dashboard/data/models/__init__.py
from .bar import Bar, BarSequence, as_bar_sequence, bars_from_api, parse_timestamp
from .market_data import AccountData, LatestTrade, LatestQuote, MarketSnapshot

__all__ = [
    'Bar', 'BarSequence', 'as_bar_sequence', 'bars_from_api', 'parse_timestamp',
    'AccountData', 'LatestTrade', 'LatestQuote', 'MarketSnapshot'
]
