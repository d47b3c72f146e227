import pytest

from reflexgame.app import FrontendApplication, Screen
from reflexgame.common import Bitmap
from reflexgame.model import Model
from reflexgame.settings_screen import SettingsView
from reflexgame.single_round import SingleRoundView
from reflexgame.timed_round import TimedRoundView


def test_starts_on_settings():
    app = FrontendApplication()
    assert app.screen is Screen.SETTINGS
    assert isinstance(app.view, SettingsView)
    assert app.presenter.model is app.model
    assert app.model.model_listener is app.presenter


def test_uses_given_model():
    model = Model()
    app = FrontendApplication(model)
    assert app.model is model


@pytest.mark.parametrize(
    "screen, view_cls",
    [(Screen.SINGLE_ROUND, SingleRoundView), (Screen.TIMED_ROUND, TimedRoundView)],
)
def test_settings_flow_into_game_screens(screen, view_cls):
    app = FrontendApplication()
    app.view.difficulty_button.force_state(True)
    app.view.toggle_difficulty()
    app.view.get_tick()
    seed = app.model.get_tick()
    app.goto_screen(screen)
    assert isinstance(app.view, view_cls)
    assert app.view.difficulty is True
    assert app.view.target.released is Bitmap.TARGET20_MIN
    assert app.view.infinitick == seed


def test_tick_reaches_active_view():
    app = FrontendApplication()
    app.handle_tick_event()
    app.handle_tick_event()
    assert app.view.random_tick == 2
    assert app.model.frames == 2
    app.goto_screen(Screen.SINGLE_ROUND)
    app.handle_tick_event()
    assert app.view.tick_counter == 1


def test_goto_by_value():
    app = FrontendApplication()
    app.goto_screen("timed_round")
    assert app.screen is Screen.TIMED_ROUND


def test_unknown_screen_rejected():
    app = FrontendApplication()
    with pytest.raises(ValueError):
        app.goto_screen("scoreboard")


def test_return_to_start_screen():
    app = FrontendApplication()
    app.goto_screen(Screen.TIMED_ROUND)
    assert app.screen is Screen.TIMED_ROUND
    app.goto_start_screen()
    assert app.screen is Screen.SETTINGS
    assert isinstance(app.view, SettingsView)
    assert app.presenter.model is app.model
    assert app.model.model_listener is app.presenter