"""Pseudo-random helpers and the small widget set the screens draw with."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MS_PER_TICK = 16.6667
"""Length of one frame in milliseconds at 60 frames per second."""

_MULTIPLIER = 1103515245
_INCREMENT = 12345
_MASK32 = 0xFFFFFFFF

MIN_X = 50
X_SPAN = 380
MIN_Y = 50
Y_SPAN = 170


def randomish(seed: int) -> int:
    """Return a value in 0..32767 derived from a 32-bit unsigned seed."""
    value = (seed * _MULTIPLIER + _INCREMENT) & _MASK32
    return (value // 65536) % 32768


def random_position(seed: int) -> tuple[int, int, int]:
    """Draw a target position, advancing the seed twice.

    Returns ``(x, y, next_seed)``.
    """
    seed += 1
    x = MIN_X + randomish(seed) % X_SPAN
    seed += 1
    y = MIN_Y + randomish(seed) % Y_SPAN
    return x, y, seed


class Bitmap(enum.Enum):
    """Images available for the target."""

    TARGET20_MIN = "target20_min"
    TARGET50_MIN = "target50_min"


@dataclass
class Widget:
    """A drawable element with a position, a size and a visibility flag."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    visible: bool = True
    invalidations: int = 0

    def set_visible(self, visible: bool) -> None:
        self.visible = bool(visible)

    def set_xy(self, x: int, y: int) -> None:
        self.x, self.y = x, y

    def set_position(self, x: int, y: int, width: int, height: int) -> None:
        self.x, self.y, self.width, self.height = x, y, width, height

    def invalidate(self) -> None:
        """Mark the widget as needing a redraw."""
        self.invalidations += 1


@dataclass
class TargetButton(Widget):
    """The clickable target."""

    released: Bitmap = Bitmap.TARGET50_MIN
    pressed: Bitmap = Bitmap.TARGET50_MIN

    def set_bitmaps(self, released: Bitmap, pressed: Bitmap) -> None:
        self.released, self.pressed = released, pressed


@dataclass
class TextArea(Widget):
    """A text field showing one formatted value."""

    text: str = ""

    def set_text(self, value: object) -> None:
        self.text = str(value)


@dataclass
class ToggleButton(Widget):
    """A two-state button."""

    state: bool = False

    def force_state(self, state: bool) -> None:
        self.state = bool(state)

    def get_state(self) -> bool:
        return self.state