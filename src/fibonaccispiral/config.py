"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (surface size, margins, delays)
   scattered throughout the code.
2. Consistency: The model, the renderer and the widgets read the same
   defaults, so a Reset in the UI restores exactly what the model starts with.

Exports:
    SURFACE_WIDTH, SURFACE_HEIGHT (int): Pixel size of the drawing surface.
    SURFACE_MARGIN (int): Symmetric margin kept free around the tiling.
    MIN_TERMS, MAX_TERMS, DEFAULT_TERMS (int): Term count bounds and default.
    DEFAULT_STEP_DELAY_MS, MIN_STEP_DELAY_MS, MAX_STEP_DELAY_MS (int): Animation delay.
"""

# Drawing surface
SURFACE_WIDTH: int = 600
SURFACE_HEIGHT: int = 600
SURFACE_MARGIN: int = 40
BACKGROUND_COLOR: str = "#ffffff"
BORDER_COLOR: str = "#ffffff"
LABEL_COLOR: str = "#ffffff"
CURVE_COLOR: str = "#666666"

# Square colours (HSL, hue is swept by index)
SQUARE_SATURATION: float = 0.70
SQUARE_LIGHTNESS: float = 0.60

# Labels
MIN_FONT_SIZE: float = 12.0
FONT_SIZE_RATIO: float = 0.3

# Term count
MIN_TERMS: int = 1
MAX_TERMS: int = 25
DEFAULT_TERMS: int = 10

# Animation
DEFAULT_STEP_DELAY_MS: int = 300
MIN_STEP_DELAY_MS: int = 50
MAX_STEP_DELAY_MS: int = 1000
STEP_DELAY_INCREMENT_MS: int = 50
