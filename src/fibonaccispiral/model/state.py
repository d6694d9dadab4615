"""
Application State (Data Model)
==============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the current sequence, the requested term count
   and the animation settings in one place instead of module-level variables.
2. Decoupling: Views read from this object; the sequencer and the control
   panel write to it.

Classes:
    AnimationState: Busy flag and step delay of the animation.
    SpiralState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from fibonaccispiral.config import DEFAULT_STEP_DELAY_MS, DEFAULT_TERMS
from fibonaccispiral.model.layout import Layout, compute_layout
from fibonaccispiral.model.sequence import generate_fibonacci

logger = logging.getLogger(__name__)


@dataclass
class AnimationState:
    """
    is_running is the only guard against overlapping animation runs.
    It is also what the UI uses to disable its controls.
    """
    is_running: bool = False
    step_delay_ms: int = DEFAULT_STEP_DELAY_MS


@dataclass
class SpiralState:
    term_count: int = DEFAULT_TERMS
    sequence: list[int] = field(default_factory=list)
    animation: AnimationState = field(default_factory=AnimationState)

    def regenerate(self, term_count: int) -> Layout:
        """
        Replace the sequence with a freshly generated one.

        Args:
            term_count: Already validated number of terms.

        Returns:
            The layout of the new sequence.
        """
        self.term_count = term_count
        self.sequence = generate_fibonacci(term_count)
        logger.info(f"Generated {len(self.sequence)} Fibonacci terms.")
        return compute_layout(self.sequence)

    def reset(self) -> None:
        """Restore defaults. The running flag is left to the sequencer."""
        self.term_count = DEFAULT_TERMS
        self.sequence = []
        self.animation.step_delay_ms = DEFAULT_STEP_DELAY_MS
        logger.info("Spiral state has been reset.")
