"""
Spiral Layout
=============
Places one square per Fibonacci term so that together they form the classic
golden-spiral tiling.

Why is this file needed?
------------------------
1. Geometry: The placement rule is independent of any drawing backend, so it
   lives in the model and works in abstract grid units (not pixels).
2. Fitting: The bounding box computed here is what the renderer uses to derive
   a fit-to-surface scale.

Placement rule:
    Index 0 sits at (0, 0), index 1 at (1, 0). Every following square is
    attached to the previous one, cycling right, up, left, down
    (phase = (i - 2) mod 4). The y axis points down, as on a screen.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Sequence

import numpy as np


class Direction(IntEnum):
    """Side of the previous square the next square is attached to."""
    RIGHT = 0
    UP = 1
    LEFT = 2
    DOWN = 3


@dataclass(frozen=True)
class PlacedSquare:
    """One square of the tiling, top-left corner and edge length in grid units."""
    x: int
    y: int
    size: int
    index: int

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.size / 2, self.y + self.size / 2


@dataclass(frozen=True)
class BoundingBox:
    """Tightest axis-aligned box containing every square."""
    min_x: int = 0
    max_x: int = 0
    min_y: int = 0
    max_y: int = 0

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class Layout:
    squares: tuple[PlacedSquare, ...] = ()
    bounds: BoundingBox = field(default_factory=BoundingBox)

    def __len__(self) -> int:
        return len(self.squares)

    def __iter__(self) -> Iterator[PlacedSquare]:
        return iter(self.squares)

    def __getitem__(self, index: int) -> PlacedSquare:
        return self.squares[index]

    @property
    def is_empty(self) -> bool:
        return not self.squares


def place_next(prev: PlacedSquare, size: int, index: int) -> PlacedSquare:
    """
    Attach a square of the given size to the previous one.

    Args:
        prev: The square placed for index - 1.
        size: Edge length of the new square (the sequence value).
        index: Position of the new square in the sequence (>= 2).

    Returns:
        The new square.
    """
    direction = Direction((index - 2) % 4)

    if direction == Direction.RIGHT:
        x = prev.x + prev.size
        y = prev.y - size + prev.size
    elif direction == Direction.UP:
        x = prev.x + prev.size - size
        y = prev.y - size
    elif direction == Direction.LEFT:
        x = prev.x - size
        y = prev.y
    else:
        x = prev.x
        y = prev.y + prev.size

    return PlacedSquare(x=x, y=y, size=size, index=index)


def compute_bounds(squares: Sequence[PlacedSquare]) -> BoundingBox:
    """Bounding box of all squares; all zeros when there are none."""
    if not squares:
        return BoundingBox()

    # columns: x0, y0, x1, y1
    extents = np.array(
        [(s.x, s.y, s.x + s.size, s.y + s.size) for s in squares],
        dtype=np.int64,
    )
    x0, y0, _, _ = extents.min(axis=0)
    _, _, x1, y1 = extents.max(axis=0)

    return BoundingBox(min_x=int(x0), max_x=int(x1), min_y=int(y0), max_y=int(y1))


def compute_layout(sequence: Sequence[int]) -> Layout:
    """
    Place every term of the sequence on the grid.

    The first two squares are unit squares regardless of the sequence values,
    matching the 1, 1 start of the sequence.

    Args:
        sequence: Fibonacci terms (may be empty).

    Returns:
        Layout with one PlacedSquare per term and the bounding box.
    """
    squares: list[PlacedSquare] = []

    if len(sequence) >= 1:
        squares.append(PlacedSquare(x=0, y=0, size=1, index=0))
    if len(sequence) >= 2:
        squares.append(PlacedSquare(x=1, y=0, size=1, index=1))

    for i in range(2, len(sequence)):
        squares.append(place_next(squares[i - 1], int(sequence[i]), i))

    return Layout(squares=tuple(squares), bounds=compute_bounds(squares))
