"""Start screen: pick a difficulty and stir the random seed."""

from __future__ import annotations

from typing import Optional

from reflexgame.common import ToggleButton
from reflexgame.model import ModelListener

_MULTIPLIER = 1103515245
_INCREMENT = 12345


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


class SettingsView:
    """Shows the difficulty toggle and counts frames as a seed source."""

    def __init__(self) -> None:
        self.presenter: Optional[SettingsPresenter] = None
        self.difficulty_button = ToggleButton()
        self.difficulty: bool = False
        self.random_tick: int = 0
        self.active: bool = False

    def bind(self, presenter: "SettingsPresenter") -> None:
        self.presenter = presenter

    def setup_screen(self) -> None:
        self.active = True
        self.difficulty_button.force_state(self.difficulty)

    def tear_down_screen(self) -> None:
        """Mark the screen as no longer shown."""
        self.active = False

    def toggle_difficulty(self) -> None:
        """Read the toggle and store the difficulty in the model."""
        self.difficulty = self.difficulty_button.get_state()
        self.presenter.store_difficulty(self.difficulty)

    def handle_tick_event(self) -> None:
        self.random_tick = _wrap32(self.random_tick + 1)

    def get_tick(self) -> None:
        """Scramble the frame counter and store it as the game seed."""
        value = _wrap32(self.random_tick + 1)
        value = _wrap32(value * _MULTIPLIER + _INCREMENT)
        self.random_tick = _trunc_mod(_trunc_div(value, 65536), 32768)
        self.presenter.store_tick(self.random_tick)


class SettingsPresenter(ModelListener):
    """Passes the settings screen's choices to the model."""

    def __init__(self, view: SettingsView) -> None:
        super().__init__()
        self.view = view
        self.active = False

    def activate(self) -> None:
        """Mark the presenter as serving the shown screen."""
        self.active = True

    def deactivate(self) -> None:
        """Mark the presenter as no longer serving the shown screen."""
        self.active = False

    def store_difficulty(self, val: bool) -> None:
        self.model.store_difficulty(val)

    def store_tick(self, val: int) -> None:
        self.model.store_tick(val)