# trading_dashboard/main.py
"""
Trading Dashboard entry point
Builds the Qt application and shows the dashboard window
"""

import sys
import logging
import argparse

from PyQt6.QtWidgets import QApplication

from .config import get_config
from .dashboard import TradingDashboard
from .styles import BaseStyles

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description='Trading Dashboard - account and market data with candlestick chart'
    )

    parser.add_argument(
        'symbol',
        nargs='?',
        default=None,
        help='Symbol to load on start (default: DASHBOARD_DEFAULT_SYMBOL or AAPL)'
    )

    parser.add_argument(
        '--server-url',
        default=None,
        help='Brokerage proxy base URL (default: DASHBOARD_API_URL or http://localhost:3001)'
    )

    parser.add_argument('--width', type=int, default=None, help='Chart width in pixels')
    parser.add_argument('--height', type=int, default=None, help='Chart height in pixels')

    parser.add_argument(
        '--log-level',
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: DASHBOARD_LOG_LEVEL or INFO)'
    )

    return parser.parse_args(argv)


def build_config(args):
    """Turn CLI arguments into config overrides"""
    overrides = {}
    if args.server_url:
        overrides['base_url'] = args.server_url
    if args.width:
        overrides['chart_width'] = args.width
    if args.height:
        overrides['chart_height'] = args.height
    if args.log_level:
        overrides['log_level'] = args.log_level
    if args.symbol:
        overrides['default_symbol'] = args.symbol
    return get_config(reset=True, **overrides)


def main(argv=None) -> int:
    """Main entry point"""
    args = parse_arguments(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    # Package-level handlers; module loggers propagate up to them
    config.get_logger('trading_dashboard')

    logger.info("=" * 60)
    logger.info("TRADING DASHBOARD")
    logger.info("=" * 60)
    logger.info(f"Symbol: {config.default_symbol}")
    logger.info(f"Server: {config.base_url}")
    logger.info("=" * 60)
    logger.debug(f"Configuration: {config.to_dict()}")

    app = QApplication(sys.argv[:1])
    app.setStyleSheet(BaseStyles.get_base_stylesheet())

    window = TradingDashboard(config)
    window.resize(1400, 900)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
