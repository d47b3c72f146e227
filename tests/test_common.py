import pytest

from reflexgame.common import (
    Bitmap,
    TargetButton,
    TextArea,
    ToggleButton,
    Widget,
    random_position,
    randomish,
)


def test_randomish_known_values():
    assert randomish(0) == 0
    assert randomish(1) == 16838


@pytest.mark.parametrize("seed", [0, 1, 2, 99, 123456, 2**31, 2**32 - 1])
def test_randomish_range(seed):
    assert 0 <= randomish(seed) <= 32767


@pytest.mark.parametrize("seed", [3, 77, 40000])
def test_randomish_is_32_bit(seed):
    assert randomish(seed) == randomish(seed + 2**32)
    assert randomish(-seed) == randomish(2**32 - seed)


@pytest.mark.parametrize("seed", [0, 1, 5, 1000, 65535])
def test_random_position_bounds_and_seed(seed):
    x, y, next_seed = random_position(seed)
    assert 50 <= x < 430
    assert 50 <= y < 220
    assert next_seed == seed + 2


def test_random_position_deterministic():
    first = random_position(42)
    assert first == (161, 149, 44)
    assert random_position(42) == first


def test_widget_geometry_and_visibility():
    widget = Widget()
    widget.set_xy(10, 20)
    assert (widget.x, widget.y) == (10, 20)
    widget.set_position(1, 2, 3, 4)
    assert (widget.x, widget.y, widget.width, widget.height) == (1, 2, 3, 4)
    widget.set_visible(False)
    assert widget.visible is False
    widget.invalidate()
    widget.invalidate()
    assert widget.invalidations == 2


def test_target_bitmaps():
    target = TargetButton()
    target.set_bitmaps(Bitmap.TARGET20_MIN, Bitmap.TARGET20_MIN)
    assert target.released is Bitmap.TARGET20_MIN
    assert target.pressed is Bitmap.TARGET20_MIN


def test_text_area_formats_value():
    area = TextArea()
    area.set_text(30)
    assert area.text == "30"


def test_toggle_button_state():
    button = ToggleButton()
    assert button.get_state() is False
    button.force_state(True)
    assert button.get_state() is True