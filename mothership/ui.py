"""Screen-fixed interface elements: fill bars and text labels."""

from __future__ import annotations

from typing import Any

import numpy as np

from .game_object import GameObject, ObjectType

TEXT_LENGTH = 40


class _InterfaceElement(GameObject):
    """An invincible on-screen element that takes part in no collisions."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.object_type = ObjectType.UI
        self.is_invincible = True

    def collide(self, other: GameObject) -> None:
        """Interface elements never collide."""


class DrawingGameObject(_InterfaceElement):
    """A bar filled up to a fraction of its length in one colour."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._fill_value = 0.0
        self.fill_color = np.zeros(4)

    @property
    def fill_value(self) -> float:
        """How full the bar is, always within [0, 1]."""
        return self._fill_value

    @fill_value.setter
    def fill_value(self, value: float) -> None:
        self._fill_value = min(max(float(value), 0.0), 1.0)

    def collide(self, other: GameObject) -> None:
        """Bars never collide."""


class TextGameObject(_InterfaceElement):
    """A label showing a short line of text."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.text = ""

    @property
    def text_codes(self) -> list[int]:
        """Character codes of the displayed text, cut to the label's capacity."""
        return [ord(char) for char in self.text[:TEXT_LENGTH]]

    def collide(self, other: GameObject) -> None:
        """Labels never collide."""