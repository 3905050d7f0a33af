# tests/conftest.py
"""
Shared fixtures: headless Qt application and sample bar sequences
"""

import os
import random
from datetime import datetime, timedelta, timezone

# Must be set before any Qt module creates the application
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

import pytest
from PyQt6.QtWidgets import QApplication, QWidget

from trading_dashboard.data.models import Bar

SESSION_OPEN = datetime(2024, 1, 2, 14, 30, tzinfo=timezone.utc)


def make_bar(minute: int, o: float, h: float, l: float, c: float, v: float = 1000) -> Bar:
    return Bar(
        timestamp=SESSION_OPEN + timedelta(minutes=minute),
        open=o, high=h, low=l, close=c, volume=v
    )


@pytest.fixture(scope='session')
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def container(qapp):
    widget = QWidget()
    yield widget
    widget.deleteLater()


@pytest.fixture
def up_bar():
    return make_bar(0, 100, 102, 99, 101)


@pytest.fixture
def down_bar():
    return make_bar(0, 101, 102, 99, 100)


@pytest.fixture
def random_bars():
    """Sixty valid one-minute bars from a seeded random walk"""
    rng = random.Random(42)
    bars = []
    price = 150.0
    for i in range(60):
        o = price
        c = max(1.0, o + rng.uniform(-1.5, 1.5))
        h = max(o, c) + rng.uniform(0, 0.8)
        l = max(0.0, min(o, c) - rng.uniform(0, 0.8))
        bars.append(make_bar(i, o, h, l, c, v=rng.randint(100, 5000)))
        price = c
    return bars
