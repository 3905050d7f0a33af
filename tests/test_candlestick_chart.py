# tests/test_candlestick_chart.py
"""
Tests for the hosting chart component
"""

import pytest

from trading_dashboard.dashboard.components import CandlestickChart
from trading_dashboard.dashboard.components.chart import ChartState


@pytest.fixture
def make_chart(qapp):
    charts = []

    def factory(*args, **kwargs):
        chart = CandlestickChart(*args, **kwargs)
        charts.append(chart)
        return chart

    yield factory
    for chart in charts:
        chart.teardown()
        chart.deleteLater()


class TestCandlestickChart:

    def test_empty_shows_placeholder_for_symbol(self, make_chart):
        chart = make_chart([], symbol='AAPL')
        surface = chart.manager.surface
        assert surface.is_showing_placeholder
        assert surface.placeholder_text == "No data available for AAPL"
        assert chart.header.isHidden()
        assert surface.candlestick_item.glyphs == []

    def test_bars_show_chart_and_title(self, make_chart, up_bar):
        chart = make_chart([up_bar], symbol='AAPL')
        assert chart.has_data
        assert not chart.header.isHidden()
        assert chart.header.text() == "AAPL Candlestick Chart"

    def test_default_size(self, make_chart):
        chart = make_chart(symbol='SPY')
        assert chart.manager.surface.surface_width == 600
        assert chart.manager.surface.surface_height == 400

    def test_symbol_does_not_change_geometry(self, make_chart, random_bars):
        chart = make_chart(random_bars, symbol='AAPL')
        before = chart.manager.glyphs
        chart.set_symbol('MSFT')
        assert chart.manager.glyphs == before
        assert chart.header.text() == "MSFT Candlestick Chart"

    def test_set_symbol_updates_placeholder(self, make_chart):
        chart = make_chart(symbol='AAPL')
        chart.set_symbol('TSLA')
        assert chart.manager.surface.placeholder_text == "No data available for TSLA"

    def test_clear_after_failed_fetch(self, make_chart, random_bars):
        chart = make_chart(random_bars, symbol='AAPL')
        chart.clear()
        assert not chart.has_data
        assert chart.manager.surface.is_showing_placeholder

    def test_resize_chart(self, make_chart, random_bars):
        chart = make_chart(random_bars, symbol='AAPL', width=800, height=500)
        chart.resize_chart(400, 250)
        assert chart.manager.mapper.width == 400
        assert chart.manager.mapper.height == 250

    def test_teardown_unmounts(self, make_chart, up_bar):
        chart = make_chart([up_bar], symbol='AAPL')
        chart.teardown()
        assert chart.manager.state is ChartState.UNMOUNTED
