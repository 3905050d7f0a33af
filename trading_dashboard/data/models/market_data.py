# trading_dashboard/data/models/market_data.py
"""
Account and market snapshot models parsed from the brokerage proxy
"""
from typing import Any, List, Mapping, Optional
from datetime import datetime
from dataclasses import dataclass, field

from .bar import BarSequence, bars_from_api, parse_timestamp
from ...exceptions import ResponseFormatError


def _as_float(value: Any) -> float:
    # Monetary account fields arrive as strings
    return float(value) if value not in (None, '') else 0.0


@dataclass(frozen=True)
class AccountData:
    """Brokerage account summary"""
    id: str
    account_number: str
    status: str
    currency: str
    buying_power: float
    cash: float
    portfolio_value: float
    pattern_day_trader: bool
    trading_blocked: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> 'AccountData':
        try:
            created = data.get('createdAt')
            return cls(
                id=str(data['id']),
                account_number=str(data['accountNumber']),
                status=str(data['status']),
                currency=str(data.get('currency', 'USD')),
                buying_power=_as_float(data.get('buyingPower')),
                cash=_as_float(data.get('cash')),
                portfolio_value=_as_float(data.get('portfolioValue')),
                pattern_day_trader=bool(data.get('patternDayTrader', False)),
                trading_blocked=bool(data.get('tradingBlocked', False)),
                created_at=parse_timestamp(created) if created else None
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ResponseFormatError(f"Malformed account payload: {e}") from e


@dataclass(frozen=True)
class LatestTrade:
    """Most recent trade print"""
    timestamp: datetime
    exchange: str
    price: float
    size: float
    conditions: List[str] = field(default_factory=list)
    trade_id: Optional[int] = None
    tape: str = ''

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> 'LatestTrade':
        return cls(
            timestamp=parse_timestamp(data['t']),
            exchange=str(data.get('x', '')),
            price=float(data['p']),
            size=float(data.get('s', 0)),
            conditions=list(data.get('c') or []),
            trade_id=data.get('i'),
            tape=str(data.get('z', ''))
        )


@dataclass(frozen=True)
class LatestQuote:
    """Most recent NBBO quote"""
    timestamp: datetime
    ask_exchange: str
    ask_price: float
    ask_size: float
    bid_exchange: str
    bid_price: float
    bid_size: float
    conditions: List[str] = field(default_factory=list)
    tape: str = ''

    @property
    def spread(self) -> float:
        return self.ask_price - self.bid_price

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> 'LatestQuote':
        return cls(
            timestamp=parse_timestamp(data['t']),
            ask_exchange=str(data.get('ax', '')),
            ask_price=float(data['ap']),
            ask_size=float(data.get('as', 0)),
            bid_exchange=str(data.get('bx', '')),
            bid_price=float(data['bp']),
            bid_size=float(data.get('bs', 0)),
            conditions=list(data.get('c') or []),
            tape=str(data.get('z', ''))
        )


@dataclass(frozen=True)
class MarketSnapshot:
    """Latest trade, latest quote and recent bars for one symbol"""
    symbol: str
    latest_trade: Optional[LatestTrade]
    latest_quote: Optional[LatestQuote]
    recent_bars: BarSequence = ()

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> 'MarketSnapshot':
        try:
            trade = data.get('latestTrade')
            quote = data.get('latestQuote')
            return cls(
                symbol=str(data['symbol']).upper(),
                latest_trade=LatestTrade.from_api(trade) if trade else None,
                latest_quote=LatestQuote.from_api(quote) if quote else None,
                recent_bars=bars_from_api(data.get('recentBars'))
            )
        except ResponseFormatError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise ResponseFormatError(f"Malformed market data payload: {e}") from e
