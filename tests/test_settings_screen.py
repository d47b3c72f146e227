import pytest

from reflexgame.model import Model
from reflexgame.settings_screen import SettingsPresenter, SettingsView


@pytest.fixture
def wired():
    model = Model()
    view = SettingsView()
    presenter = SettingsPresenter(view)
    view.bind(presenter)
    presenter.bind(model)
    return model, view, presenter


def test_setup_forces_button_state(wired):
    _, view, _ = wired
    view.difficulty = True
    view.setup_screen()
    assert view.difficulty_button.get_state() is True


def test_toggle_stores_difficulty(wired):
    model, view, _ = wired
    view.difficulty_button.force_state(True)
    view.toggle_difficulty()
    assert view.difficulty is True
    assert model.get_difficulty() is True
    view.difficulty_button.force_state(False)
    view.toggle_difficulty()
    assert model.get_difficulty() is False


def test_tick_event_counts(wired):
    _, view, _ = wired
    for _ in range(5):
        view.handle_tick_event()
    assert view.random_tick == 5


def test_tick_event_wraps_at_32_bits(wired):
    _, view, _ = wired
    view.random_tick = 2**31 - 1
    view.handle_tick_event()
    assert view.random_tick == -(2**31)


def test_get_tick_from_zero(wired):
    model, view, _ = wired
    view.get_tick()
    assert view.random_tick == 16838
    assert model.get_tick() == 16838


@pytest.mark.parametrize("start", [0, 5, 17, 1000, -3, 2**31 - 1])
def test_get_tick_range_and_storage(wired, start):
    model, view, _ = wired
    view.random_tick = start
    view.get_tick()
    assert -32768 < view.random_tick < 32768
    assert model.get_tick() == view.random_tick


def test_presenter_stores_directly(wired):
    model, _, presenter = wired
    presenter.store_tick(99)
    presenter.store_difficulty(True)
    assert (model.get_tick(), model.get_difficulty()) == (99, True)