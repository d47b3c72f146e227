"""Thirty-second round: hit as many targets as possible."""

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

ROUND_SECONDS = 30
TICKS_PER_SECOND = 60
FADE_POSITION = (198, 220, 84, 22)


class TimedRoundView:
    """Counts hits and average reaction time over a fixed-length round."""

    def __init__(self) -> None:
        self.presenter: Optional[TimedRoundPresenter] = None
        self.target = TargetButton(visible=False)
        self.fade = TextArea(visible=False)
        self.timer = TextArea(text=str(ROUND_SECONDS))
        self.hits_text = TextArea(visible=False)
        self.average_text = TextArea(visible=False)
        self.restart = Widget(visible=False)
        self.home = Widget(visible=False)
        self.tick_counter = 0
        self.time_passed = 0
        self.random_time = 0
        self.random_x = 0
        self.random_y = 0
        self.num_targets = 0
        self.time = ROUND_SECONDS
        self.all_time = 0
        self.infinitick = 0
        self.difficulty = False
        self.allow_spawn = True
        self.active = False

    def bind(self, presenter: "TimedRoundPresenter") -> None:
        self.presenter = presenter

    def set_difficulty(self, val: bool) -> None:
        """Use the small target when hard, the large one otherwise."""
        self.difficulty = bool(val)
        bitmap = Bitmap.TARGET20_MIN if self.difficulty else Bitmap.TARGET50_MIN
        self.target.set_bitmaps(bitmap, bitmap)
        self.target.invalidate()

    def set_tick(self, val: int) -> None:
        self.infinitick = val

    def _move_target(self) -> None:
        self.random_x, self.random_y, self.infinitick = random_position(self.infinitick)
        self.target.set_xy(self.random_x, self.random_y)

    def _set_summary_visible(self, visible: bool) -> None:
        self.hits_text.set_visible(visible)
        self.average_text.set_visible(visible)
        self.hits_text.invalidate()
        self.average_text.invalidate()

    def setup_screen(self) -> None:
        self.active = True
        self.all_time = 0
        self.num_targets = 0
        self.tick_counter = 0
        self.infinitick += 1
        self.random_time = 180 + randomish(self.infinitick) % 120
        self._move_target()

    def tear_down_screen(self) -> None:
        """Mark the screen as no longer shown."""
        self.active = False

    def handle_tick_event(self) -> None:
        self.tick_counter += 1
        if self.tick_counter >= self.random_time and self.allow_spawn:
            self.target.set_visible(True)
            self.target.invalidate()
            self.time_passed += 1
            if self.tick_counter % TICKS_PER_SECOND == 0:
                self.time -= 1
                self.timer.set_text(self.time)
                self.timer.invalidate()
        self.target.invalidate()
        if self.time <= 0:
            self.time = 0
            self.end_game()

    def target_clicked(self) -> int:
        """Record a hit, flash its reaction time and return it in milliseconds."""
        reaction_ms = int(self.time_passed * MS_PER_TICK)
        self.fade.set_text(reaction_ms)
        self.fade.set_position(*FADE_POSITION)
        self.fade.set_visible(True)
        self.num_targets += 1
        self.all_time += reaction_ms
        self.time_passed = 0
        self.target.set_visible(False)
        self.restart.invalidate()
        self.home.invalidate()
        self.fade.invalidate()
        self._move_target()
        return reaction_ms

    def reset(self) -> None:
        """Start a fresh round."""
        self.tick_counter = 0
        self.time_passed = 0
        self.all_time = 0
        self.num_targets = 0
        self.time = ROUND_SECONDS
        self.timer.set_text(self.time)
        self.fade.set_visible(False)
        self.allow_spawn = True
        self.restart.set_visible(False)
        self.home.set_visible(False)
        self.timer.set_visible(True)
        self.timer.invalidate()
        self.restart.invalidate()
        self.fade.invalidate()
        self.home.invalidate()
        self._set_summary_visible(False)

    def end_game(self) -> None:
        """Stop spawning and show the hit count and average reaction time."""
        self.tick_counter = 0
        self.time_passed = 0
        self.restart.set_visible(True)
        self.home.set_visible(True)
        self.target.set_visible(False)
        self.allow_spawn = False
        self.hits_text.set_text(self.num_targets)
        average = int(self.all_time / self.num_targets) if self.num_targets else 0
        self.average_text.set_text(average)
        self.timer.set_visible(False)
        self.target.invalidate()
        self.restart.invalidate()
        self.home.invalidate()
        self.timer.invalidate()
        self._set_summary_visible(True)


class TimedRoundPresenter(ModelListener):
    """Feeds the stored difficulty and seed to the timed-round view."""

    def __init__(self, view: TimedRoundView) -> None:
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