#!/usr/bin/env python3
"""
Run Trading Dashboard
Execute from root directory: python run_dashboard.py [SYMBOL]
"""

import sys

from trading_dashboard.main import main


if __name__ == "__main__":
    sys.exit(main())
