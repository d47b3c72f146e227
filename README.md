# reflexgame

The game logic for a small reaction-time game. After a short random delay, a
target appears at a random position. The player clicks it as fast as
possible, and the game reports the reaction time in milliseconds.

Each screen holds plain widget objects: `TargetButton`, `TextArea`,
`ToggleButton` and `Widget` from `reflexgame.common`. You can read their
visibility, position, bitmaps and text. A host loop calls
`handle_tick_event()` once per frame. One frame counts as 16.6667 ms, which is
60 frames per second. The host loop also calls `target_clicked()`, `reset()`
and the other handlers when the player acts.

## Screens

- **Settings** (`reflexgame.settings_screen.SettingsView` /
  `SettingsPresenter`):
  - `toggle_difficulty()` reads the state of `difficulty_button` and stores it
    in the model.
  - Each tick advances a frame counter. `get_tick()` scrambles that counter
    and stores the result in the model as the seed for the rounds.
- **Single round** (`reflexgame.single_round.SingleRoundView` /
  `SingleRoundPresenter`):
  - The target appears after 180 to 299 frames.
  - `target_clicked()` returns the reaction time in milliseconds. It shows the
    time in `text_area`, hides the target and shows `restart` and `home`.
  - `reset()` starts another attempt.
- **Timed round** (`reflexgame.timed_round.TimedRoundView` /
  `TimedRoundPresenter`):
  - The round lasts 30 seconds (`ROUND_SECONDS`). The countdown in `timer`
    runs only while a target is on screen.
  - After a hit, the target moves and shows again on the next frame. Each
    hit's time flashes in `fade`.
  - When the time runs out, `end_game()` shows the hit count in `hits_text`
    and the average reaction time in `average_text`. The average is 0 if
    there were no hits.

Both rounds use the small target (`Bitmap.TARGET20_MIN`) when the difficulty
is set and the large one (`Bitmap.TARGET50_MIN`) otherwise.

`reflexgame.app.FrontendApplication` owns the shared `Model` and starts on
the settings screen. `goto_screen()` switches to any of the screens in
`reflexgame.app.Screen`: `SETTINGS`, `SINGLE_ROUND` or `TIMED_ROUND`. It
builds a fresh view and presenter each time. `handle_tick_event()` ticks the
model and then the active view.

```python
from reflexgame.app import FrontendApplication, Screen

app = FrontendApplication()
app.model.store_difficulty(True)
app.goto_screen(Screen.SINGLE_ROUND)
while not app.view.target.visible:
    app.handle_tick_event()
app.handle_tick_event()
print(app.view.target_clicked())   # reaction time in ms
```

## Shared state

The `Model` carries the chosen difficulty and the random seed from one
screen to the next:

```python
from reflexgame.model import Model

model = Model()
model.get_difficulty()      # False: easy by default
model.get_tick()            # 1

model.store_difficulty(True)
model.store_tick(16838)
model.get_difficulty()      # True
model.get_tick()            # 16838
```

## Randomness

Target delays and positions come from a small linear congruential
generator, so a given seed always gives the same game:

```python
from reflexgame.common import randomish, random_position

randomish(1)                        # 16838
x, y, seed = random_position(1)     # 50 <= x < 430, 50 <= y < 220; seed == 3
```

## What it does not do

This package contains no drawing, no input handling, no main loop and no
command to run. It only keeps the state of the screens. A front end must:

- render the widgets;
- call `handle_tick_event()` once per frame;
- route clicks to the handlers.

## Installing for development

Install the package with its `test` extra, then run pytest from the
project root.