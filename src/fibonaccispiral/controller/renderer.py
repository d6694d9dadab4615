"""
Spiral Renderer
===============
Paints a spiral layout onto a fixed-size QImage surface.

Why is this file needed?
------------------------
1. Fitting: It maps abstract grid units onto surface pixels, keeping the
   aspect ratio and a symmetric margin on all sides.
2. Painting: It draws one square at a time (so the sequencer can animate the
   tiling) and the dashed spiral curve once all squares are on the surface.

The surface is a QImage rather than a widget so that rendering works the same
way on screen and off screen.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QFont, QImage, QPainter, QPainterPath, QPen

from fibonaccispiral.config import (
    SURFACE_WIDTH, SURFACE_HEIGHT, SURFACE_MARGIN,
    BACKGROUND_COLOR, BORDER_COLOR, LABEL_COLOR, CURVE_COLOR,
    SQUARE_SATURATION, SQUARE_LIGHTNESS, MIN_FONT_SIZE, FONT_SIZE_RATIO,
)
from fibonaccispiral.model.layout import BoundingBox, Layout, PlacedSquare

logger = logging.getLogger(__name__)


def compute_scale(
    bounds: BoundingBox,
    width: float,
    height: float,
    margin: float = SURFACE_MARGIN,
) -> float:
    """
    Pixels per grid unit that fit the whole bounding box inside the surface.

    A zero box width or height is divided as 1, so degenerate layouts
    (a single square, or no square at all) still get a finite scale.
    """
    scale_x = (width - 2 * margin) / (bounds.width or 1)
    scale_y = (height - 2 * margin) / (bounds.height or 1)
    return min(scale_x, scale_y)


def color_for_index(index: int, total: int) -> QColor:
    """Rainbow sweep over the sequence: hue goes 0 -> 360 deg with the index."""
    hue = (index / total) if total else 0.0
    return QColor.fromHslF(hue % 1.0, SQUARE_SATURATION, SQUARE_LIGHTNESS)


def font_size_for(screen_size: float) -> float:
    """Label size proportional to the square, never below MIN_FONT_SIZE."""
    return max(MIN_FONT_SIZE, screen_size * FONT_SIZE_RATIO)


class SpiralRenderer(QObject):
    """
    Draws squares and the spiral curve of a layout on a QImage.

    Call `begin()` once per layout, then `paint_square()` per square and finally
    `paint_curve()`. `render()` does all of it in one go.
    """
    surface_changed = Signal()

    def __init__(
        self,
        surface: Optional[QImage] = None,
        margin: int = SURFACE_MARGIN,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        if surface is None:
            surface = QImage(SURFACE_WIDTH, SURFACE_HEIGHT, QImage.Format.Format_RGB32)
        self.surface: QImage = surface
        self.margin: int = margin

        self._layout: Layout = Layout()
        self._sequence_length: int = 0
        self._scale: float = 1.0

        self.clear()

    # --- PROPERTIES ---

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def layout(self) -> Layout:
        return self._layout

    # --- PUBLIC API ---

    def clear(self) -> None:
        """Fill the whole surface with the background colour."""
        self.surface.fill(QColor(BACKGROUND_COLOR))
        self.surface_changed.emit()

    def begin(self, layout: Layout, sequence_length: int) -> None:
        """Prepare a fresh surface for the given layout and derive the scale."""
        self._layout = layout
        self._sequence_length = sequence_length
        self._scale = compute_scale(
            layout.bounds, self.surface.width(), self.surface.height(), self.margin
        )
        logger.debug(
            f"Rendering {len(layout)} squares, bounds {layout.bounds}, scale {self._scale:.3f}"
        )
        self.clear()

    def to_surface(self, x: float, y: float) -> QPointF:
        """Grid point to surface pixels: (grid - box min) * scale + margin."""
        bounds = self._layout.bounds
        return QPointF(
            (x - bounds.min_x) * self._scale + self.margin,
            (y - bounds.min_y) * self._scale + self.margin,
        )

    def square_rect(self, square: PlacedSquare) -> QRectF:
        """Surface rectangle of a square."""
        top_left = self.to_surface(square.x, square.y)
        screen_size = square.size * self._scale
        return QRectF(top_left.x(), top_left.y(), screen_size, screen_size)

    def paint_square(self, square: PlacedSquare) -> None:
        """Fill, outline and label one square."""
        rect = self.square_rect(square)

        painter = QPainter(self.surface)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)

            painter.fillRect(rect, color_for_index(square.index, self._sequence_length))

            border = QPen(QColor(BORDER_COLOR))
            border.setWidthF(2.0)
            painter.setPen(border)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRect(rect)

            font = QFont("Arial")
            font.setBold(True)
            font.setPixelSize(max(1, round(font_size_for(rect.width()))))
            painter.setFont(font)
            painter.setPen(QColor(LABEL_COLOR))
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, str(square.size))
        finally:
            painter.end()

        self.surface_changed.emit()

    def paint_curve(self) -> None:
        """
        Dashed curve through the centres of consecutive squares.

        Each segment is a quadratic curve whose control point is the segment
        midpoint.
        """
        squares = self._layout.squares
        if len(squares) < 2:
            return

        pen = QPen(QColor(CURVE_COLOR))
        pen.setWidthF(2.0)
        # dash lengths are in pen-width units: 5 px on, 5 px off
        pen.setDashPattern([2.5, 2.5])

        painter = QPainter(self.surface)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)

            for current, nxt in zip(squares, squares[1:]):
                start = self.to_surface(*current.center)
                end = self.to_surface(*nxt.center)
                mid = QPointF((start.x() + end.x()) / 2, (start.y() + end.y()) / 2)

                path = QPainterPath(start)
                path.quadTo(mid, end)
                painter.drawPath(path)
        finally:
            painter.end()

        self.surface_changed.emit()

    def render(self, layout: Layout, sequence_length: int) -> None:
        """Paint a complete, static spiral without animation."""
        self.begin(layout, sequence_length)
        for square in layout:
            self.paint_square(square)
        self.paint_curve()
