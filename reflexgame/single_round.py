"""Single-shot reaction test: wait for the target, click it, see the time."""

from __future__ import annotations

from typing import Optional

from reflexgame.common import (
    MS_PER_TICK,
    Bitmap,
    TargetButton,
    TextArea,
    Widget,
    random_position,
    randomish,
)
from reflexgame.model import ModelListener


def _target_bitmap(hard: bool) -> Bitmap:
    return Bitmap.TARGET20_MIN if hard else Bitmap.TARGET50_MIN


class SingleRoundView:
    """Shows one target after a random delay and reports the reaction time."""

    def __init__(self) -> None:
        self.presenter: Optional[SingleRoundPresenter] = None
        self.target = TargetButton(visible=False)
        self.text_area = TextArea(visible=False)
        self.restart = Widget(visible=False)
        self.home = Widget(visible=False)
        self.tick_counter = 0
        self.time_passed = 0
        self.random_time = 0
        self.random_x = 0
        self.random_y = 0
        self.infinitick = 1
        self.difficulty = False
        self.allow_spawn = True
        self.active = False

    def bind(self, presenter: "SingleRoundPresenter") -> None:
        self.presenter = presenter

    def set_difficulty(self, val: bool) -> None:
        """Use the small target when hard, the large one otherwise."""
        self.difficulty = bool(val)
        bitmap = _target_bitmap(self.difficulty)
        self.target.set_bitmaps(bitmap, bitmap)
        self.target.invalidate()

    def set_tick(self, val: int) -> None:
        self.infinitick = val

    def setup_screen(self) -> None:
        self.active = True
        self.tick_counter = 0
        self.time_passed = 0
        self.random_time = 180 + randomish(self.infinitick) % 120

    def tear_down_screen(self) -> None:
        """Mark the screen as no longer shown."""
        self.active = False

    def _move_target(self) -> None:
        self.random_x, self.random_y, self.infinitick = random_position(self.infinitick)
        self.target.set_xy(self.random_x, self.random_y)

    def handle_tick_event(self) -> None:
        self.tick_counter += 1
        self.infinitick += 1
        if self.tick_counter == self.random_time:
            self._move_target()
        if self.tick_counter >= self.random_time and self.allow_spawn:
            self.target.set_visible(True)
            self.time_passed += 1
        self.target.invalidate()

    def target_clicked(self) -> int:
        """Show the reaction time in milliseconds and return it."""
        self.tick_counter = 0
        reaction_ms = int(self.time_passed * MS_PER_TICK)
        self.text_area.set_text(reaction_ms)
        self.text_area.invalidate()
        self.text_area.set_visible(True)
        self.allow_spawn = False
        self.time_passed = 0
        self.target.set_visible(False)
        self.restart.set_visible(True)
        self.home.set_visible(True)
        self.restart.invalidate()
        self.home.invalidate()
        self._move_target()
        return reaction_ms

    def reset(self) -> None:
        """Start another attempt."""
        self.tick_counter = 0
        self.time_passed = 0
        self.text_area.set_visible(False)
        self.allow_spawn = True
        self.restart.set_visible(False)
        self.home.set_visible(False)
        self.restart.invalidate()
        self.text_area.invalidate()
        self.home.invalidate()


class SingleRoundPresenter(ModelListener):
    """Feeds the stored difficulty and seed to the single-round view."""

    def __init__(self, view: SingleRoundView) -> None:
        super().__init__()
        self.view = view
        self.active = False

    def activate(self) -> None:
        self.active = True
        self.view.set_difficulty(self.model.get_difficulty())
        self.view.set_tick(self.model.get_tick())

    def deactivate(self) -> None:
        """Mark the presenter as no longer serving the shown screen."""
        self.active = False