"""Screen-space helpers: HUD label formatting and screen wrap-around."""

from __future__ import annotations

from collections.abc import Sequence

from pygame.math import Vector2


def label_with_int(text: str, value: int) -> str:
    """Return ``text`` followed by the decimal form of ``value``."""
    return f"{text}{int(value)}"


def label_with_vector(text: str, value: Sequence[float]) -> str:
    """Return ``text`` followed by ``(x, y)`` with both parts truncated to integers."""
    x, y = value[0], value[1]
    return f"{text}({int(x)}, {int(y)})"


def label_with_text(text: str, value: str) -> str:
    """Return the two strings joined together."""
    return f"{text}{value}"


def wrap_off_screen(
    position: Sequence[float],
    units_off_screen: float,
    screen_size: tuple[int, int],
) -> Vector2:
    """Return ``position`` moved to the opposite side once it leaves the screen.

    Only one axis is corrected per call, checked in the order: right, left,
    top, bottom. The margin is truncated to whole units.
    """
    width, height = screen_size
    margin = int(units_off_screen)
    result = Vector2(position[0], position[1])
    if result.x >= width + margin:
        result.x = -margin
    elif result.x <= -margin:
        result.x = width
    elif result.y <= -margin:
        result.y = height
    elif result.y >= height + margin:
        result.y = -margin
    return result