"""
Spiral Canvas Widget
====================
Shows the renderer's QImage surface, scaled to the widget while keeping its
aspect ratio.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QRectF, QSize, Qt
from PySide6.QtGui import QColor, QPainter, QPaintEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from fibonaccispiral.controller.renderer import SpiralRenderer


class SpiralCanvas(QWidget):
    def __init__(self, renderer: SpiralRenderer, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.renderer = renderer
        self.setMinimumSize(300, 300)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        # Repaint whenever the renderer touches the surface
        self.renderer.surface_changed.connect(self.update)

    def sizeHint(self) -> QSize:
        return self.renderer.surface.size()

    def target_rect(self) -> QRectF:
        """Largest centred rectangle with the surface's aspect ratio."""
        image_size = self.renderer.surface.size()
        scaled = image_size.scaled(self.size(), Qt.AspectRatioMode.KeepAspectRatio)
        x = (self.width() - scaled.width()) / 2
        y = (self.height() - scaled.height()) / 2
        return QRectF(x, y, scaled.width(), scaled.height())

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        painter.fillRect(self.rect(), QColor("#f0f0f0"))
        painter.drawImage(self.target_rect(), self.renderer.surface)
        painter.end()
