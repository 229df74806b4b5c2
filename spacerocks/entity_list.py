"""Ordered collections of shots and asteroids looked up by id."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Optional, TypeVar, Union

import pygame

from spacerocks.geometry import wrap_off_screen
from spacerocks.shapes import Asteroid, Shot

T = TypeVar("T", bound=Union[Shot, Asteroid])


class EntityList(Generic[T]):
    """An insertion-ordered list of entities that carry an ``id``."""

    title = "EntityList"
    item_label = "id"

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def insert(self, item: T) -> None:
        """Append ``item`` at the end."""
        self._items.append(item)

    def remove_by_id(self, item_id: int) -> T:
        """Remove and return the first entity with ``item_id``.

        Raises IndexError when the list is empty and KeyError when no
        entity has that id.
        """
        if not self._items:
            raise IndexError("list is empty")
        index = self.find(item_id)
        if index is None:
            raise KeyError(item_id)
        return self._items.pop(index)

    def pop(self) -> T:
        """Remove and return the oldest entity; IndexError when empty."""
        if not self._items:
            raise IndexError("list is empty")
        return self._items.pop(0)

    def get(self, item_id: int) -> T:
        """Return the first entity with ``item_id``; KeyError when absent."""
        index = self.find(item_id)
        if index is None:
            raise KeyError(item_id)
        return self._items[index]

    def find(self, item_id: int) -> Optional[int]:
        """Return the position of the first entity with ``item_id``, or None."""
        return next(
            (index for index, item in enumerate(self._items) if item.id == item_id),
            None,
        )

    def describe(self) -> str:
        """Return a multi-line listing of the ids held."""
        lines = [f"Printing {self.title}...", f"arr.size: {len(self._items)}"]
        lines.extend(f"{self.item_label}: {item.id}" for item in self._items)
        lines.append("End Print...")
        return "\n".join(lines)


class ShotList(EntityList[Shot]):
    """The player's shots in flight."""

    title = "ShotsArray"
    item_label = "shot id"

    def advance(self, dt: float) -> None:
        """Move every shot along its velocity for ``dt`` seconds."""
        for shot in self._items:
            shot.shape.position += shot.shape.velocity * dt

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every shot as a filled circle."""
        for shot in self._items:
            shape = shot.shape
            center = (int(shape.position.x), int(shape.position.y))
            pygame.draw.circle(surface, shape.color, center, shape.radius)


class AsteroidList(EntityList[Asteroid]):
    """The asteroids currently on the field."""

    title = "AsteroidsArray"
    item_label = "Asteroid id"

    def advance(self, dt: float, screen_size: tuple[int, int]) -> None:
        """Move every asteroid and wrap it around the screen edges.

        The wrap margin is twice the radius of the oldest asteroid and is
        applied to all of them.
        """
        if not self._items:
            return
        margin = self._items[0].shape.radius * 2
        for asteroid in self._items:
            shape = asteroid.shape
            shape.position = wrap_off_screen(
                shape.position + shape.velocity * dt, margin, screen_size
            )

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every asteroid as a circle outline."""
        for asteroid in self._items:
            shape = asteroid.shape
            center = (int(shape.position.x), int(shape.position.y))
            pygame.draw.circle(surface, shape.color, center, shape.radius, width=1)