"""
Trading dashboard: brokerage account and market data with a candlestick chart
"""

__version__ = "0.1.0"
