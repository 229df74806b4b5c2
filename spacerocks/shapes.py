"""Plain game objects: circles, shots, asteroids and spawn edges."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from pygame.math import Vector2

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)


@dataclass
class CircleShape:
    """A moving circle."""

    position: Vector2
    radius: float
    color: Color = WHITE
    velocity: Vector2 = field(default_factory=Vector2)


@dataclass
class Shot:
    """A projectile fired by the player, alive while ``timer`` is positive."""

    id: int
    shape: CircleShape
    timer: float


@dataclass
class Asteroid:
    """An asteroid drifting across the screen."""

    shape: CircleShape
    id: int


@dataclass
class Edge:
    """A spawn edge: direction of travel and starting point."""

    velocity: Vector2
    position: Vector2 = field(default_factory=Vector2)


def create_asteroid(
    position: Sequence[float],
    velocity: Sequence[float],
    radius: float,
    asteroid_id: int,
    color: Color,
) -> Asteroid:
    """Build an asteroid with its own copies of the given vectors."""
    shape = CircleShape(
        position=Vector2(position[0], position[1]),
        radius=float(radius),
        color=color,
        velocity=Vector2(velocity[0], velocity[1]),
    )
    return Asteroid(shape=shape, id=asteroid_id)