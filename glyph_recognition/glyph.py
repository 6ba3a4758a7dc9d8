#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Normalized glyph representation used for table lookup.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .errors import GridShapeError
from .pixels import Pixel


@dataclass(frozen=True)
class Glyph:
    """
    A glyph flattened into row-major pixels plus its width.

    ``pixels`` holds row 0 left to right, then row 1, and so on; the height is
    ``len(pixels) // width``.
    """

    pixels: Tuple[Pixel, ...]
    width: int

    def __post_init__(self):
        # Table lookup hashes the pixels, so any sequence is frozen to a tuple
        object.__setattr__(self, "pixels", tuple(Pixel(pixel) for pixel in self.pixels))
        if self.width <= 0:
            raise GridShapeError(f"Glyph width must be positive, got {self.width}")
        if len(self.pixels) % self.width != 0:
            raise GridShapeError(
                f"{len(self.pixels)} pixels do not fill rows of width {self.width}"
            )

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[Pixel]]) -> "Glyph":
        """
        Normalize a raw glyph given as left-to-right columns.

        Args:
            columns: Equal-height columns of pixels

        Returns:
            Glyph with row-major pixels

        Raises:
            GridShapeError: If there are no columns or their heights differ
        """
        if not columns:
            raise GridShapeError("Cannot normalize a glyph with no columns")

        height = len(columns[0])
        for index, column in enumerate(columns):
            if len(column) != height:
                raise GridShapeError(
                    f"Column {index} has height {len(column)}, expected {height}"
                )

        pixels = tuple(column[y] for y in range(height) for column in columns)
        return cls(pixels=pixels, width=len(columns))

    @property
    def height(self) -> int:
        return len(self.pixels) // self.width

    def rows(self) -> List[Tuple[Pixel, ...]]:
        return [self.pixels[y * self.width:(y + 1) * self.width] for y in range(self.height)]

    def render(self) -> str:
        """Draw the glyph with '#' for ON and ' ' for OFF."""
        return "\n".join("".join(str(pixel) for pixel in row) for row in self.rows())

    def __str__(self) -> str:
        bits = "".join(str(int(pixel)) for pixel in self.pixels)
        return f"Glyph(width={self.width}, pixels={bits})"
