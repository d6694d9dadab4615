"""
Animation Sequencer
===================
Reveals a spiral layout one square at a time.

Why is this file needed?
------------------------
1. Responsiveness: Instead of blocking in a sleep loop, each step is scheduled
   on a single-shot QTimer, so the Qt event loop keeps running between squares.
2. Re-entrancy: The busy flag of AnimationState guarantees that only one run
   paints the surface at a time. Calls made while running are ignored.

A run always completes: there is no cancellation. The step delay is captured
when the run starts; changing it afterwards only affects the next run.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from fibonaccispiral.controller.renderer import SpiralRenderer
from fibonaccispiral.model.layout import Layout
from fibonaccispiral.model.state import AnimationState

logger = logging.getLogger(__name__)


class AnimationSequencer(QObject):
    # Signals to keep the UI in sync with the run
    started = Signal()
    square_painted = Signal(int)  # index of the square just painted
    finished = Signal()
    running_changed = Signal(bool)

    def __init__(
        self,
        renderer: SpiralRenderer,
        state: Optional[AnimationState] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.renderer = renderer
        self.state = state if state is not None else AnimationState()

        # step list + cursor of the current run
        self._layout: Layout = Layout()
        self._cursor: int = 0
        self._delay_ms: int = 0

        self._step_timer = QTimer(self)
        self._step_timer.setSingleShot(True)
        self._step_timer.timeout.connect(self._advance)

    @property
    def is_running(self) -> bool:
        return self.state.is_running

    @property
    def current_delay_ms(self) -> int:
        """Delay used by the run in progress (or the last one)."""
        return self._delay_ms

    def run(self, layout: Layout, step_delay_ms: Optional[int] = None) -> bool:
        """
        Start revealing the layout.

        Args:
            layout: Squares to paint, in order.
            step_delay_ms: Pause after each square. Defaults to the delay stored
                in the animation state at the moment of the call.

        Returns:
            True if a run was started, False if the call was ignored
            (already running or nothing to draw).

        Raises:
            ValueError: If the delay is negative.
        """
        if self.state.is_running:
            logger.debug("Animation already running, ignoring run request.")
            return False

        if layout.is_empty:
            logger.debug("Empty layout, nothing to animate.")
            return False

        delay = self.state.step_delay_ms if step_delay_ms is None else step_delay_ms
        if delay < 0:
            raise ValueError(f"Step delay must be non-negative, got {delay} ms.")

        self._layout = layout
        self._cursor = 0
        self._delay_ms = int(delay)

        self._set_running(True)
        self.started.emit()
        logger.info(f"Animating {len(layout)} squares with {self._delay_ms} ms per step.")

        try:
            self.renderer.begin(layout, len(layout))
        except Exception:
            self._abort()
            raise
        self._advance()
        return True

    def _advance(self) -> None:
        """Paint the square under the cursor, or finish when all are painted."""
        if self._cursor < len(self._layout):
            square = self._layout[self._cursor]
            try:
                self.renderer.paint_square(square)
            except Exception:
                self._abort()
                raise
            self._cursor += 1
            logger.debug(f"Painted square {square.index} (size {square.size}).")
            self.square_painted.emit(square.index)
            self._step_timer.start(self._delay_ms)
            return

        try:
            self.renderer.paint_curve()
        finally:
            self._set_running(False)
        logger.info("Animation finished.")
        self.finished.emit()

    def _abort(self) -> None:
        """End the run after a failed paint; the busy flag is cleared."""
        self._step_timer.stop()
        self._set_running(False)
        logger.error(f"Animation aborted at square {self._cursor}.")

    def _set_running(self, running: bool) -> None:
        if self.state.is_running != running:
            self.state.is_running = running
            self.running_changed.emit(running)
