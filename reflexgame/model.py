"""Shared game state kept across screens."""

from __future__ import annotations

from typing import Optional


class Model:
    """Holds the chosen difficulty and the seed carried between screens."""

    def __init__(self) -> None:
        self.model_listener: Optional[ModelListener] = None
        self.difficulty: bool = False
        self.random_tick: int = 1
        self.frames: int = 0

    def bind(self, listener: Optional["ModelListener"]) -> None:
        """Attach the presenter that listens to this model."""
        self.model_listener = listener

    def tick(self) -> None:
        """Called once per frame; counts the frames seen by the model."""
        self.frames += 1

    def store_difficulty(self, val: bool) -> None:
        self.difficulty = bool(val)

    def get_difficulty(self) -> bool:
        return self.difficulty

    def store_tick(self, val: int) -> None:
        self.random_tick = int(val)

    def get_tick(self) -> int:
        return self.random_tick


class ModelListener:
    """Base for presenters that talk to the model."""

    def __init__(self) -> None:
        self.model: Optional[Model] = None

    def bind(self, model: Optional[Model]) -> None:
        """Attach the model this listener reads from and writes to."""
        self.model = model