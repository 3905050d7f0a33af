# tests/test_lifecycle.py
"""
Tests for the chart lifecycle state machine
"""

import pytest
from PyQt6 import sip
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget

from trading_dashboard.dashboard.components.chart import (ChartLifecycleManager, ChartState,
                                                          ChartSurface)
from trading_dashboard.exceptions import LifecycleError, SurfaceUnavailable
from tests.conftest import make_bar


@pytest.fixture
def manager():
    chart = ChartLifecycleManager("No data available for AAPL")
    yield chart
    chart.unmount()


@pytest.fixture
def mounted(manager, container):
    manager.mount(container, 600, 400)
    return manager


def surfaces_in(container):
    return container.findChildren(ChartSurface, options=Qt.FindChildOption.FindDirectChildrenOnly)


class TestMount:

    def test_starts_unmounted(self, manager):
        assert manager.state is ChartState.UNMOUNTED
        assert manager.surface is None

    def test_mount_creates_one_surface(self, mounted, container):
        assert mounted.state is ChartState.MOUNTED_EMPTY
        assert len(surfaces_in(container)) == 1
        assert mounted.surface.surface_width == 600
        assert mounted.surface.is_showing_placeholder

    def test_mount_twice_is_an_error(self, mounted, container):
        with pytest.raises(LifecycleError):
            mounted.mount(container, 600, 400)
        assert len(surfaces_in(container)) == 1

    def test_missing_container(self, manager):
        with pytest.raises(SurfaceUnavailable):
            manager.mount(None, 600, 400)
        assert manager.state is ChartState.UNMOUNTED

    def test_deleted_container(self, manager, qapp):
        widget = QWidget()
        sip.delete(widget)
        with pytest.raises(SurfaceUnavailable):
            manager.mount(widget, 600, 400)
        assert manager.state is ChartState.UNMOUNTED
        assert manager.surface is None

    def test_container_shared_by_two_managers(self, mounted, container):
        other = ChartLifecycleManager()
        with pytest.raises(SurfaceUnavailable):
            other.mount(container, 600, 400)
        assert other.state is ChartState.UNMOUNTED
        assert len(surfaces_in(container)) == 1

    def test_failed_surface_build_leaves_nothing_behind(self, manager, container, monkeypatch):
        def broken(self, text):
            raise RuntimeError("boom")
        monkeypatch.setattr(ChartSurface, 'show_placeholder', broken)

        with pytest.raises(SurfaceUnavailable):
            manager.mount(container, 600, 400)
        assert manager.state is ChartState.UNMOUNTED
        assert surfaces_in(container) == []
        manager.unmount()

    def test_invalid_size(self, manager, container):
        with pytest.raises(ValueError):
            manager.mount(container, 0, 400)
        assert manager.state is ChartState.UNMOUNTED


class TestCallsBeforeMount:

    def test_set_data_before_mount(self, manager, up_bar):
        with pytest.raises(LifecycleError):
            manager.set_data([up_bar])

    def test_resize_before_mount(self, manager):
        with pytest.raises(LifecycleError):
            manager.resize(300, 200)

    def test_unmount_before_mount_is_harmless(self, manager):
        manager.unmount()
        assert manager.state is ChartState.UNMOUNTED


class TestData:

    def test_non_empty_shows_chart(self, mounted, random_bars):
        mounted.set_data(random_bars)
        assert mounted.state is ChartState.MOUNTED_WITH_DATA
        assert not mounted.surface.is_showing_placeholder
        assert len(mounted.glyphs) == len(random_bars)
        assert len(mounted.surface.candlestick_item.glyphs) == len(random_bars)

    def test_empty_shows_placeholder(self, mounted):
        mounted.set_data([])
        assert mounted.state is ChartState.MOUNTED_EMPTY
        assert mounted.surface.is_showing_placeholder
        assert mounted.surface.placeholder_text == "No data available for AAPL"
        assert mounted.mapper is None

    def test_toggling_leaves_no_residual_glyphs(self, mounted, random_bars):
        for _ in range(3):
            mounted.set_data(random_bars)
            assert len(mounted.surface.candlestick_item.glyphs) == len(random_bars)
            mounted.set_data([])
            assert mounted.surface.candlestick_item.glyphs == []
            assert mounted.surface.candlestick_item.picture is None

    def test_replacement_is_wholesale(self, mounted, random_bars, up_bar):
        mounted.set_data(random_bars)
        mounted.set_data([up_bar])
        assert mounted.bars == (up_bar,)
        assert len(mounted.glyphs) == 1

    def test_caller_list_not_aliased(self, mounted, random_bars):
        bars = list(random_bars)
        mounted.set_data(bars)
        bars.clear()
        assert len(mounted.bars) == len(random_bars)

    def test_generator_input(self, mounted, random_bars):
        mounted.set_data(bar for bar in random_bars)
        assert len(mounted.glyphs) == len(random_bars)

    def test_same_data_twice_gives_same_glyphs(self, mounted, random_bars):
        mounted.set_data(random_bars)
        first = mounted.glyphs
        mounted.set_data(random_bars)
        assert mounted.glyphs == first

    def test_duplicate_timestamps_drawn_separately(self, mounted):
        bars = [make_bar(0, 10, 11, 9, 10.5), make_bar(0, 10.5, 12, 10, 11)]
        mounted.set_data(bars)
        assert len(mounted.glyphs) == 2
        assert mounted.glyphs[0].x < mounted.glyphs[1].x


class TestResize:

    def test_resize_redraws_within_bounds(self, mounted, random_bars):
        mounted.set_data(random_bars)
        mounted.resize(300, 150)
        assert mounted.mapper.width == 300
        assert mounted.surface.surface_height == 150
        for glyph in mounted.glyphs:
            assert 0 <= glyph.body_left and glyph.body_left + glyph.body_width <= 300
            assert 0 <= glyph.wick_top <= glyph.wick_bottom <= 150

    def test_resize_without_data_keeps_placeholder(self, mounted):
        mounted.resize(300, 150)
        assert mounted.state is ChartState.MOUNTED_EMPTY
        assert mounted.surface.is_showing_placeholder

    def test_resize_rejects_non_positive(self, mounted):
        with pytest.raises(ValueError):
            mounted.resize(300, -1)


class TestUnmount:

    def test_unmount_releases_surface(self, mounted, container, random_bars):
        mounted.set_data(random_bars)
        mounted.unmount()
        assert mounted.state is ChartState.UNMOUNTED
        assert mounted.surface is None
        assert mounted.bars == ()
        assert surfaces_in(container) == []

    def test_unmount_twice(self, mounted):
        mounted.unmount()
        mounted.unmount()
        assert mounted.state is ChartState.UNMOUNTED

    def test_remount_after_unmount(self, mounted, container, up_bar):
        mounted.unmount()
        mounted.mount(container, 400, 300)
        mounted.set_data([up_bar])
        assert mounted.state is ChartState.MOUNTED_WITH_DATA
        assert len(surfaces_in(container)) == 1

    def test_operations_after_unmount(self, mounted, up_bar):
        mounted.unmount()
        with pytest.raises(LifecycleError):
            mounted.set_data([up_bar])

    def test_unmount_survives_cleanup_failure(self, mounted, container, monkeypatch):
        def broken(self):
            raise RuntimeError("boom")
        monkeypatch.setattr(ChartSurface, 'release', broken)

        mounted.unmount()
        assert mounted.state is ChartState.UNMOUNTED
        assert surfaces_in(container) == []
