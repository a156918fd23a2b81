"""
Text layout estimation for the reMarkable simple renderer.

The renderer does not report font metrics back, so text widgets are sized
with a fixed character aspect ratio measured against its built-in font.
"""

from __future__ import annotations

from dataclasses import dataclass

from .commands import Number, Rect

# Font metrics of the simple renderer, measured empirically.
FONT_SIZE_TO_CHARACTER_HEIGHT = 1.3125
FONT_SIZE_TO_CHARACTER_WIDTH = 1 / 1.7


@dataclass(frozen=True)
class ScreenSize:
    """Drawable canvas of the device in pixels."""

    width: int
    height: int


REMARKABLE_SCREEN_SIZE = ScreenSize(width=1380, height=1820)


@dataclass(frozen=True)
class TextSize:
    """Estimated bounding box of a block of text."""

    width: float
    height: float

    def to_rect(self, x: Number, y: Number) -> Rect:
        """Place the box at ``(x, y)``."""
        return Rect(x=x, y=y, width=self.width, height=self.height)


def calculate_text_widget_size(font_size: Number, value: str) -> TextSize:
    """
    Estimate the size needed to render ``value`` at ``font_size``.

    Args:
        font_size: Font size in renderer units
        value: Text, possibly spanning several lines

    Returns:
        TextSize: Width from the longest line, height from the line count
    """
    lines = value.split("\n")
    rows = len(lines)
    columns = max(len(line) for line in lines)
    return TextSize(
        width=font_size * FONT_SIZE_TO_CHARACTER_WIDTH * columns,
        height=font_size * FONT_SIZE_TO_CHARACTER_HEIGHT * rows,
    )


def fits_on_screen(rect: Rect, screen: ScreenSize = REMARKABLE_SCREEN_SIZE) -> bool:
    """Check whether ``rect`` lies fully inside the canvas."""
    return (
        rect.x >= 0
        and rect.y >= 0
        and rect.x + rect.width <= screen.width
        and rect.y + rect.height <= screen.height
    )
