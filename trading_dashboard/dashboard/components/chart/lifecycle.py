# trading_dashboard/dashboard/components/chart/lifecycle.py
"""
Module: Chart Lifecycle Manager
Purpose: Own creation, data rebinding, resize and teardown of one chart surface
Note: All calls happen on the Qt UI thread; every redraw is a full repaint
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional

from PyQt6 import sip
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from ....data.models import Bar, BarSequence, as_bar_sequence
from ....exceptions import LifecycleError, SurfaceUnavailable
from ....styles import ChartTheme
from .candle_renderer import CandleGlyph, CandleRenderer
from .coordinate_mapper import CoordinateMapper
from .surface import ChartSurface

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 400


class ChartState(Enum):
    UNMOUNTED = 'unmounted'
    MOUNTED_EMPTY = 'mounted_empty'
    MOUNTED_WITH_DATA = 'mounted_with_data'


class ChartLifecycleManager:
    """
    State machine: UNMOUNTED -> MOUNTED_EMPTY <-> MOUNTED_WITH_DATA -> UNMOUNTED

    mount() acquires exactly one ChartSurface inside a container widget and
    unmount() releases it. set_data() and resize() recompute the coordinate
    mapper once and run a complete candle pass; nothing is diffed.

    An empty bar sequence is the "no data" state, not an error.
    """

    def __init__(self, placeholder_text: str = "No data available"):
        self.placeholder_text = placeholder_text

        self._state = ChartState.UNMOUNTED
        self._surface: Optional[ChartSurface] = None
        self._container: Optional[QWidget] = None
        self._bars: BarSequence = ()
        self._mapper: Optional[CoordinateMapper] = None
        self._glyphs: List[CandleGlyph] = []

    @property
    def state(self) -> ChartState:
        return self._state

    @property
    def is_mounted(self) -> bool:
        return self._state is not ChartState.UNMOUNTED

    @property
    def surface(self) -> Optional[ChartSurface]:
        return self._surface

    @property
    def bars(self) -> BarSequence:
        return self._bars

    @property
    def mapper(self) -> Optional[CoordinateMapper]:
        return self._mapper

    @property
    def glyphs(self) -> List[CandleGlyph]:
        return list(self._glyphs)

    @property
    def renderer(self) -> Optional[CandleRenderer]:
        return self._surface.renderer if self._surface is not None else None

    def mount(self, container: QWidget, width: int = DEFAULT_WIDTH,
              height: int = DEFAULT_HEIGHT, style: Optional[ChartTheme] = None):
        """
        Create the chart surface inside container

        Raises:
            LifecycleError: already mounted
            ValueError: width or height not positive
            SurfaceUnavailable: container missing, deleted, already hosting a
                chart, or surface construction failed (state stays UNMOUNTED)
        """
        if self._state is not ChartState.UNMOUNTED:
            raise LifecycleError("mount() called on a mounted chart",
                                 {'state': self._state.value})
        self._check_size(width, height)
        self._check_container(container)

        surface = None
        try:
            surface = ChartSurface(container, width, height, style)
            layout = container.layout()
            if layout is None:
                layout = QVBoxLayout(container)
                layout.setContentsMargins(0, 0, 0, 0)
            layout.addWidget(surface)
            surface.show_placeholder(self.placeholder_text)
        except Exception as e:
            # The constructor may have failed after parenting itself to container
            if surface is None:
                surface = container.findChild(
                    ChartSurface, options=Qt.FindChildOption.FindDirectChildrenOnly
                )
            if surface is not None:
                self._release_surface(surface, container)
            raise SurfaceUnavailable("Failed to build chart surface",
                                     {'error': str(e)}) from e

        self._surface = surface
        self._container = container
        self._bars = ()
        self._mapper = None
        self._glyphs = []
        self._state = ChartState.MOUNTED_EMPTY
        logger.debug(f"Chart mounted at {width}x{height}")

    def set_data(self, bars: Optional[Iterable[Bar]]):
        """Replace the bound bar sequence wholesale and repaint everything"""
        self._require_mounted('set_data')
        self._bars = as_bar_sequence(bars)
        self._redraw()

    def resize(self, width: int, height: int):
        """Resize the surface and repaint the current bars at the new size"""
        self._require_mounted('resize')
        self._check_size(width, height)
        self._surface.set_size(width, height)
        self._redraw()

    def unmount(self):
        """
        Release the surface and everything registered on it.
        Safe on an unmounted manager; cleanup failures are logged, never raised.
        """
        surface, container = self._surface, self._container

        self._surface = None
        self._container = None
        self._bars = ()
        self._mapper = None
        self._glyphs = []
        self._state = ChartState.UNMOUNTED

        if surface is not None:
            self._release_surface(surface, container)
            logger.debug("Chart unmounted")

    def _redraw(self):
        surface = self._surface

        if not self._bars:
            self._mapper = None
            self._glyphs = []
            surface.show_placeholder(self.placeholder_text)
            self._state = ChartState.MOUNTED_EMPTY
            return

        self._mapper = CoordinateMapper.from_bars(
            self._bars, surface.surface_width, surface.surface_height
        )
        self._glyphs = surface.renderer.build_glyphs(self._bars, self._mapper)
        surface.present(self._bars, self._glyphs, self._mapper)
        self._state = ChartState.MOUNTED_WITH_DATA
        logger.debug(f"Drew {len(self._glyphs)} candles")

    def _require_mounted(self, operation: str):
        if self._state is ChartState.UNMOUNTED or self._surface is None:
            raise LifecycleError(f"{operation}() called before mount()")

    @staticmethod
    def _check_size(width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Chart size must be positive, got {width}x{height}")

    @staticmethod
    def _check_container(container: Optional[QWidget]):
        if container is None:
            raise SurfaceUnavailable("No container to mount the chart into")
        if sip.isdeleted(container):
            raise SurfaceUnavailable("Container has already been deleted")
        existing = container.findChild(
            ChartSurface, options=Qt.FindChildOption.FindDirectChildrenOnly
        )
        if existing is not None:
            raise SurfaceUnavailable("Container already hosts a chart surface")

    @staticmethod
    def _release_surface(surface: ChartSurface, container: Optional[QWidget]):
        """Best-effort teardown: each step runs even if an earlier one failed"""
        if sip.isdeleted(surface):
            return

        steps = [('release plot', surface.release)]
        if container is not None and not sip.isdeleted(container) and container.layout() is not None:
            steps.append(('detach from layout', lambda: container.layout().removeWidget(surface)))
        steps.append(('unparent', lambda: surface.setParent(None)))
        steps.append(('delete', surface.deleteLater))

        for name, step in steps:
            try:
                step()
            except Exception as e:
                logger.warning(f"Chart cleanup step '{name}' failed: {e}")
