"""
Styles for chart component
"""

from dataclasses import dataclass

from .base_styles import BaseStyles


class ChartStyles:

    # Chart color scheme
    CHART_BACKGROUND = "#1a1a1a"
    CHART_TEXT = "#ffffff"
    CHART_BORDER = "#555555"

    # Candlestick colors
    CANDLE_UP = "#26a69a"
    CANDLE_DOWN = "#ef5350"

    # Candlestick geometry (pixels)
    WICK_WIDTH = 1
    BODY_WIDTH = 8
    MIN_BODY_HEIGHT = 1

    @staticmethod
    def get_stylesheet():
        return f"""
        /* Chart container */
        QWidget#chart_container {{
            background-color: {BaseStyles.BACKGROUND_SECONDARY};
            border: 1px solid {BaseStyles.BORDER_COLOR};
            border-radius: {BaseStyles.BORDER_RADIUS_LG};
            padding: 10px;
        }}

        /* Chart header */
        QLabel#chart_header {{
            font-size: {BaseStyles.FONT_SIZE_LARGE};
            font-weight: bold;
            padding: 0 0 10px 0;
            color: {BaseStyles.TEXT_PRIMARY};
        }}

        /* No data placeholder */
        QLabel#chart_placeholder {{
            color: {BaseStyles.TEXT_SECONDARY};
            background-color: {BaseStyles.BACKGROUND_SECONDARY};
        }}
        """


@dataclass(frozen=True)
class ChartTheme:
    """Colors and glyph sizes for one chart surface"""
    up_color: str = ChartStyles.CANDLE_UP
    down_color: str = ChartStyles.CANDLE_DOWN
    wick_width: float = ChartStyles.WICK_WIDTH
    body_width: float = ChartStyles.BODY_WIDTH
    min_body_height: float = ChartStyles.MIN_BODY_HEIGHT
    background: str = ChartStyles.CHART_BACKGROUND
    text_color: str = ChartStyles.CHART_TEXT
    border_color: str = ChartStyles.CHART_BORDER
