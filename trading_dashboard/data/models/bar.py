# trading_dashboard/data/models/bar.py
"""
OHLCV bar model and the read-only bar sequence handed to the chart
All timestamps in UTC
"""
from typing import Any, Iterable, Mapping, Optional, Tuple
from datetime import datetime
from dataclasses import dataclass

import pandas as pd

from ...exceptions import ResponseFormatError


@dataclass(frozen=True)
class Bar:
    """
    Single OHLCV bar

    Prices are expected to satisfy low <= min(open, close) <= max(open, close) <= high.
    This is the producer's promise, not something checked here: malformed bars
    are carried and drawn exactly as given.
    """
    timestamp: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float
    trades: int = 0  # Number of trades in this bar
    vwap: Optional[float] = None

    @property
    def is_up(self) -> bool:
        """Up bar when close >= open; there is no unchanged state"""
        return self.close >= self.open

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> 'Bar':
        """
        Build a bar from the brokerage short-key shape

        Args:
            data: {'t': ISO timestamp, 'o', 'h', 'l', 'c', 'v', 'n'?, 'vw'?}

        Raises:
            ResponseFormatError: required keys missing or not numeric
        """
        try:
            vwap = data.get('vw')
            return cls(
                timestamp=parse_timestamp(data['t']),
                open=float(data['o']),
                high=float(data['h']),
                low=float(data['l']),
                close=float(data['c']),
                volume=float(data['v']),
                trades=int(data.get('n') or 0),
                vwap=float(vwap) if vwap is not None else None
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ResponseFormatError(f"Malformed bar: {e}", {'bar': dict(data)}) from e


# Ordered by timestamp ascending; owned by the caller and never mutated by the chart
BarSequence = Tuple[Bar, ...]


def as_bar_sequence(bars: Optional[Iterable[Bar]]) -> BarSequence:
    """Snapshot any iterable of bars into an immutable sequence, keeping order"""
    if bars is None:
        return ()
    return tuple(bars)


def parse_timestamp(value: Any) -> datetime:
    """
    Parse an API timestamp into an aware UTC datetime

    Handles 'Z' suffixes and nanosecond fractions (truncated to microseconds).
    """
    stamp = pd.Timestamp(value)
    # None and empty strings parse to NaT rather than raising
    if pd.isna(stamp):
        raise ValueError(f"Invalid timestamp: {value!r}")
    if stamp.tzinfo is None:
        stamp = stamp.tz_localize('UTC')
    else:
        stamp = stamp.tz_convert('UTC')
    return stamp.floor('us').to_pydatetime()


def bars_from_api(raw_bars: Optional[Iterable[Mapping[str, Any]]]) -> BarSequence:
    """Convert a list of API bar dicts into a bar sequence, preserving order"""
    if not raw_bars:
        return ()
    return tuple(Bar.from_api(raw) for raw in raw_bars)
