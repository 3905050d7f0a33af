# tests/test_styles.py
"""
Tests for stylesheets and the chart theme
"""

from trading_dashboard.styles import BaseStyles, ChartStyles, ChartTheme


class TestStyles:

    def test_base_stylesheet_uses_palette(self):
        sheet = BaseStyles.get_base_stylesheet()
        assert 'QLabel#error_banner' in sheet
        assert BaseStyles.NEGATIVE in sheet
        assert BaseStyles.ACCENT_PRIMARY in sheet

    def test_chart_stylesheet_targets_chart_widgets(self):
        sheet = ChartStyles.get_stylesheet()
        for selector in ('QWidget#chart_container', 'QLabel#chart_header',
                         'QLabel#chart_placeholder'):
            assert selector in sheet

    def test_theme_defaults(self):
        theme = ChartTheme()
        assert (theme.up_color, theme.down_color) == ('#26a69a', '#ef5350')
        assert (theme.wick_width, theme.body_width, theme.min_body_height) == (1, 8, 1)
        assert not hasattr(theme, 'grid_color')
