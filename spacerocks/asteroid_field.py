"""Timed spawning of asteroids from the four screen edges."""

from __future__ import annotations

import random
from typing import Optional

from pygame.math import Vector2

from spacerocks.entity_list import AsteroidList
from spacerocks.shapes import WHITE, Asteroid, Color, Edge, create_asteroid

ASTEROID_MIN_RADIUS = 20
ASTEROID_KINDS = 3
ASTEROID_SPAWN_RATE = 0.8  # seconds
ASTEROID_MAX_RADIUS = ASTEROID_MIN_RADIUS * ASTEROID_KINDS
ASTEROID_ROTATE_RADS = 0.523599
ASTEROID_MIN_SPEED = 40
ASTEROID_MAX_SPEED = 100
MAX_ASTEROIDS = 40

COLOR_OPTIONS: tuple[Color, ...] = (WHITE,)

_EDGE_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def random_float(rng: random.Random, low: float, high: float) -> float:
    """Return a uniformly distributed float between ``low`` and ``high``."""
    return low + rng.random() * (high - low)


class AsteroidField:
    """Spawns asteroids at a fixed rate while fewer than the maximum are alive."""

    def __init__(
        self,
        screen_size: tuple[int, int] = (1280, 800),
        rng: Optional[random.Random] = None,
    ) -> None:
        self.screen_size = screen_size
        self.rng = rng if rng is not None else random.Random()
        self.edges = [Edge(velocity=Vector2(dx, dy)) for dx, dy in _EDGE_DIRECTIONS]
        self.asteroid_id = 0
        self.spawn_timer = 0.0
        self.asteroids = AsteroidList()

    def edge_position(self, index: int, scaler: float) -> Vector2:
        """Return the starting point on edge ``index`` at fraction ``scaler``.

        Edges are left, right, top and bottom, each lying just beyond the
        screen by the largest asteroid radius.
        """
        width, height = self.screen_size
        if index == 0:
            return Vector2(-ASTEROID_MAX_RADIUS, scaler * height)
        if index == 1:
            return Vector2(width + ASTEROID_MAX_RADIUS, scaler * height)
        if index == 2:
            return Vector2(scaler * width, -ASTEROID_MAX_RADIUS)
        if index == 3:
            return Vector2(scaler * width, height + ASTEROID_MAX_RADIUS)
        raise IndexError(f"edge index out of range: {index}")

    def spawn(self, radius: float, edge: Edge) -> Asteroid:
        """Add an asteroid of ``radius`` starting on ``edge`` and return it."""
        color = self.rng.choice(COLOR_OPTIONS)
        asteroid = create_asteroid(
            edge.position, edge.velocity, radius, self.asteroid_id, color
        )
        self.asteroids.insert(asteroid)
        self.asteroid_id += 1
        return asteroid

    def update(self, dt: float) -> Optional[Asteroid]:
        """Advance the spawn timer by ``dt``; return the asteroid spawned, if any."""
        self.spawn_timer += dt
        if self.spawn_timer <= ASTEROID_SPAWN_RATE:
            return None
        self.spawn_timer = 0.0
        if len(self.asteroids) >= MAX_ASTEROIDS:
            return None

        index = self.rng.randrange(len(self.edges))
        speed = self.rng.randint(ASTEROID_MIN_SPEED, ASTEROID_MAX_SPEED)
        velocity = self.edges[index].velocity * speed
        velocity = velocity.rotate_rad(
            random_float(self.rng, -ASTEROID_ROTATE_RADS, ASTEROID_ROTATE_RADS)
        )
        position = self.edge_position(index, random_float(self.rng, 0.0, 1.0))
        kind = self.rng.randint(1, ASTEROID_KINDS)
        return self.spawn(ASTEROID_MIN_RADIUS * kind, Edge(velocity, position))