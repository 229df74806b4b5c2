"""The player's ship: steering, movement, firing and shot lifetimes."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

import pygame
from pygame.math import Vector2

from spacerocks.entity_list import ShotList
from spacerocks.geometry import wrap_off_screen
from spacerocks.shapes import WHITE, CircleShape, Shot

PLAYER_START_POS_X = 640
PLAYER_START_POS_Y = 400
PLAYER_RADIUS = 20
PLAYER_TURN_SPEED = 5
PLAYER_SPEED = 10
PLAYER_REVERSE_FACTOR = 1.5
PLAYER_SHOOT_SPEED = 25
PLAYER_SHOOT_COOLDOWN = 0.35  # seconds
SHOT_COOLDOWN = 1.0
SHOT_RADIUS = 5

LEFT_STICK_DEADZONE = 0.3


@dataclass(frozen=True)
class Controls:
    """The steering actions requested for one frame."""

    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    fire: bool = False

    def any(self) -> bool:
        """Return True when at least one action is requested."""
        return any(getattr(self, f.name) for f in fields(self))


def apply_deadzone(value: float, deadzone: float) -> float:
    """Return 0.0 for values strictly inside ``(-deadzone, deadzone)``."""
    if -deadzone < value < deadzone:
        return 0.0
    return value


def controls_from_gamepad(
    left_x: float,
    left_y: float,
    up: bool,
    down: bool,
    left: bool,
    right: bool,
    fire: bool,
) -> Controls:
    """Combine the d-pad, the left stick and the right trigger into controls."""
    stick_x = apply_deadzone(left_x, LEFT_STICK_DEADZONE)
    stick_y = apply_deadzone(left_y, LEFT_STICK_DEADZONE)
    return Controls(
        forward=up or -stick_y > LEFT_STICK_DEADZONE,
        backward=down or stick_y > LEFT_STICK_DEADZONE,
        left=left or -stick_x > LEFT_STICK_DEADZONE,
        right=right or stick_x > LEFT_STICK_DEADZONE,
        fire=fire,
    )


class Player:
    """The ship, with its shots in flight."""

    def __init__(self) -> None:
        self.shape = CircleShape(
            position=Vector2(PLAYER_START_POS_X, PLAYER_START_POS_Y),
            radius=PLAYER_RADIUS,
            color=WHITE,
            velocity=Vector2(0, 0),
        )
        self.rotation = 0.0
        self.shots = ShotList()
        self.shot_count = 0
        self.timer = 0.0

    def _forward(self) -> Vector2:
        return Vector2(0, -self.shape.radius).rotate_rad(self.rotation)

    def triangle(self) -> list[Vector2]:
        """Return the ship's tip, left base and right base corners."""
        radius = self.shape.radius
        corners = (
            Vector2(0, -radius),
            Vector2(-radius * 0.6, radius * 0.8),
            Vector2(radius * 0.6, radius * 0.8),
        )
        return [self.shape.position + c.rotate_rad(self.rotation) for c in corners]

    def rotate(self, dt: float) -> None:
        """Turn the ship; negative ``dt`` turns the other way."""
        self.rotation += PLAYER_TURN_SPEED * dt

    def move(self, dt: float, screen_size: tuple[int, int]) -> None:
        """Move along the heading; negative ``dt`` reverses at reduced speed."""
        speed = PLAYER_SPEED if dt > 0 else PLAYER_SPEED / PLAYER_REVERSE_FACTOR
        self.shape.position = wrap_off_screen(
            self.shape.position + self._forward() * (speed * dt),
            self.shape.radius,
            screen_size,
        )

    def shoot(self) -> Shot:
        """Fire a shot along the heading and start the firing cooldown."""
        shape = CircleShape(
            position=Vector2(self.shape.position),
            radius=SHOT_RADIUS,
            color=WHITE,
            velocity=self._forward() * PLAYER_SHOOT_SPEED,
        )
        shot = Shot(id=self.shot_count, shape=shape, timer=SHOT_COOLDOWN)
        self.shots.insert(shot)
        self.timer = PLAYER_SHOOT_COOLDOWN
        self.shot_count += 1
        return shot

    def _apply(self, controls: Controls, dt: float, screen_size: tuple[int, int]) -> bool:
        pressed = False
        if controls.forward:
            self.move(dt, screen_size)
            pressed = True
        if controls.backward:
            self.move(-dt, screen_size)
            pressed = True
        if controls.left:
            self.rotate(-dt)
            pressed = True
        if controls.right:
            self.rotate(dt)
            pressed = True
        if controls.fire and self.timer <= 0:
            self.shoot()
            pressed = True
        return pressed

    def _age_shots(self, dt: float) -> None:
        # An expired shot removes the oldest shot, and the scan carries on
        # from the same position.
        index = 0
        while index < len(self.shots):
            shot = list(self.shots)[index]
            if shot.timer > 0:
                shot.timer -= dt
            else:
                self.shots.pop()
            index += 1

    def update(
        self,
        dt: float,
        screen_size: tuple[int, int] = (1280, 800),
        keyboard: Optional[Controls] = None,
        gamepad: Optional[Controls] = None,
    ) -> None:
        """Advance timers and apply input; the keyboard is used only when the
        gamepad produced no action."""
        if self.timer > 0:
            self.timer -= dt
        self._age_shots(dt)
        pressed = False
        if gamepad is not None:
            pressed = self._apply(gamepad, dt, screen_size)
        if not pressed and keyboard is not None:
            self._apply(keyboard, dt, screen_size)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ship as a filled triangle."""
        points = [(p.x, p.y) for p in self.triangle()]
        pygame.draw.polygon(surface, WHITE, points)