"""Application object that owns the model and switches between screens."""

from __future__ import annotations

import enum
from typing import Optional

from reflexgame.model import Model
from reflexgame.settings_screen import SettingsPresenter, SettingsView
from reflexgame.single_round import SingleRoundPresenter, SingleRoundView
from reflexgame.timed_round import TimedRoundPresenter, TimedRoundView


class Screen(enum.Enum):
    """The screens of the game."""

    SETTINGS = "settings"
    SINGLE_ROUND = "single_round"
    TIMED_ROUND = "timed_round"


_SCREENS = {
    Screen.SETTINGS: (SettingsView, SettingsPresenter),
    Screen.SINGLE_ROUND: (SingleRoundView, SingleRoundPresenter),
    Screen.TIMED_ROUND: (TimedRoundView, TimedRoundPresenter),
}


class FrontendApplication:
    """Owns the model and the active view/presenter pair."""

    def __init__(self, model: Optional[Model] = None) -> None:
        self.model = model if model is not None else Model()
        self.screen: Optional[Screen] = None
        self.view = None
        self.presenter = None
        self.goto_start_screen()

    def goto_start_screen(self) -> None:
        self.goto_screen(Screen.SETTINGS)

    def goto_screen(self, screen: Screen) -> None:
        """Leave the current screen and make ``screen`` active."""
        screen = Screen(screen)
        if self.presenter is not None:
            self.presenter.deactivate()
        if self.view is not None:
            self.view.tear_down_screen()
        view_cls, presenter_cls = _SCREENS[screen]
        view = view_cls()
        presenter = presenter_cls(view)
        view.bind(presenter)
        presenter.bind(self.model)
        self.model.bind(presenter)
        self.screen, self.view, self.presenter = screen, view, presenter
        view.setup_screen()
        presenter.activate()

    def handle_tick_event(self) -> None:
        """Advance one frame: the model first, then the active view."""
        self.model.tick()
        self.view.handle_tick_event()