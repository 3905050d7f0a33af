# tests/test_coordinate_mapper.py
"""
Tests for price/position to pixel mapping
"""

import pytest

from trading_dashboard.dashboard.components.chart import CoordinateMapper
from tests.conftest import make_bar


class TestVerticalScale:

    def test_empty_sequence_rejected(self):
        with pytest.raises(ValueError):
            CoordinateMapper.from_bars([], 600, 400)

    def test_non_positive_size_rejected(self, up_bar):
        with pytest.raises(ValueError):
            CoordinateMapper.from_bars([up_bar], 0, 400)

    def test_extent_plus_margin(self, up_bar):
        mapper = CoordinateMapper.from_bars([up_bar], 600, 400)
        # extent 99..102, 10% margin each side
        assert mapper.price_min == pytest.approx(98.7)
        assert mapper.price_max == pytest.approx(102.3)

    def test_higher_price_is_higher_on_screen(self, up_bar):
        mapper = CoordinateMapper.from_bars([up_bar], 600, 400)
        assert mapper.price_to_y(102) < mapper.price_to_y(99)

    def test_inverse(self, random_bars):
        mapper = CoordinateMapper.from_bars(random_bars, 600, 400)
        for price in (mapper.price_min, 150.0, mapper.price_max):
            assert mapper.y_to_price(mapper.price_to_y(price)) == pytest.approx(price)

    def test_zero_width_range_is_padded(self):
        flat = make_bar(0, 50, 50, 50, 50)
        mapper = CoordinateMapper.from_bars([flat], 600, 400)
        assert mapper.price_max > mapper.price_min
        assert 0 < mapper.price_to_y(50) < 400

    def test_zero_price_level_is_padded(self):
        mapper = CoordinateMapper.from_bars([make_bar(0, 0, 0, 0, 0)], 600, 400)
        assert mapper.price_max - mapper.price_min > 0
        assert mapper.price_to_y(0) == pytest.approx(200)

    def test_malformed_bar_kept_in_range(self):
        bad = make_bar(0, 100, 98, 102, 101)  # high < low
        mapper = CoordinateMapper.from_bars([bad], 600, 400)
        for price in (98, 100, 101, 102):
            assert 0 <= mapper.price_to_y(price) <= 400

    def test_price_ticks_inside_surface(self, random_bars):
        mapper = CoordinateMapper.from_bars(random_bars, 600, 400)
        ticks = mapper.price_ticks(5)
        assert len(ticks) == 5
        assert all(0 <= y <= 400 for y, _ in ticks)


class TestHorizontalScale:

    def test_uniform_slots(self, random_bars):
        mapper = CoordinateMapper.from_bars(random_bars, 600, 400)
        assert mapper.slot_width == pytest.approx(10)
        assert mapper.index_to_x(0) == pytest.approx(5)
        assert mapper.index_to_x(59) == pytest.approx(595)

    def test_time_lookup(self, random_bars):
        mapper = CoordinateMapper.from_bars(random_bars, 600, 400)
        assert mapper.time_to_x(random_bars[3].timestamp) == pytest.approx(mapper.index_to_x(3))

    def test_duplicate_timestamp_uses_first_bar(self):
        bars = [make_bar(0, 1, 2, 0.5, 1.5), make_bar(0, 1, 2, 0.5, 1.5), make_bar(1, 1, 2, 0.5, 1.5)]
        mapper = CoordinateMapper.from_bars(bars, 300, 200)
        assert mapper.time_to_x(bars[1].timestamp) == pytest.approx(mapper.index_to_x(0))

    def test_unknown_timestamp(self, up_bar):
        mapper = CoordinateMapper.from_bars([up_bar], 600, 400)
        assert mapper.time_to_x(make_bar(30, 1, 1, 1, 1).timestamp) is None


class TestPurity:

    def test_same_sequence_same_mapping(self, random_bars):
        first = CoordinateMapper.from_bars(random_bars, 600, 400)
        second = CoordinateMapper.from_bars(list(random_bars), 600, 400)
        assert first == second
        assert [first.price_to_y(b.close) for b in random_bars] == \
               [second.price_to_y(b.close) for b in random_bars]

    def test_size_changes_mapping(self, random_bars):
        small = CoordinateMapper.from_bars(random_bars, 300, 200)
        large = CoordinateMapper.from_bars(random_bars, 600, 400)
        assert small != large
        assert large.index_to_x(10) == pytest.approx(2 * small.index_to_x(10))
