"""Game states, menus and the main loop."""

from __future__ import annotations

import argparse
import random
from enum import Enum, auto
from typing import Optional

import pygame

from spacerocks.asteroid_field import AsteroidField
from spacerocks.geometry import label_with_int, label_with_text, label_with_vector
from spacerocks.player import Controls, Player, controls_from_gamepad
from spacerocks.resources import search_and_set_resource_dir
from spacerocks.shapes import WHITE

SCREEN_SIZE = (1280, 800)
TARGET_FPS = 60
TITLE = "Asteroids"
BACKGROUND_FILE = "space3.jpg"

BUTTON_WIDTH = 250
BUTTON_HEIGHT = 60
BUTTON_MARGIN = 10
BUTTON_Y = 400
BUTTON_SPACING = 30

TITLE_Y = 150
TITLE_SIZE = 75
HUD_FONT_SIZE = 20

BLACK = (0, 0, 0)
GRAY = (130, 130, 130)
BLUE = (0, 121, 241)

RIGHT_TRIGGER_DEADZONE = -0.9


class GameState(Enum):
    MENU = auto()
    PLAYING = auto()
    PAUSED = auto()


def button_rect(center_x: int, center_y: int, width: int, height: int) -> pygame.Rect:
    """Return a rectangle of the given size centred on the given point."""
    return pygame.Rect(center_x - width // 2, center_y - height // 2, width, height)


def menu_button_center(screen_width: int, index: int) -> tuple[int, int]:
    """Return the centre of the ``index``-th menu button, counted from 0."""
    return (
        screen_width // 2,
        BUTTON_Y + BUTTON_HEIGHT // 2 + index * (BUTTON_HEIGHT + BUTTON_SPACING),
    )


class Game:
    """The game's state machine and the objects of the running round."""

    def __init__(
        self,
        screen_size: tuple[int, int] = SCREEN_SIZE,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.screen_size = screen_size
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.MENU
        self.running = True
        self.player: Optional[Player] = None
        self.field: Optional[AsteroidField] = None

    def new_game(self) -> None:
        """Start a fresh round."""
        self.state = GameState.PLAYING
        self.player = Player()
        self.field = AsteroidField(self.screen_size, self.rng)

    def toggle_pause(self) -> GameState:
        """Switch between playing and paused; other states are left alone."""
        if self.state is GameState.PLAYING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.PLAYING
        return self.state

    def leave_game(self) -> None:
        """Drop the running round and return to the main menu."""
        self.state = GameState.MENU
        self.player = None
        self.field = None

    def quit(self) -> None:
        """Stop the main loop."""
        self.running = False

    def update(
        self,
        dt: float,
        keyboard: Optional[Controls] = None,
        gamepad: Optional[Controls] = None,
    ) -> None:
        """Advance the round by ``dt`` seconds while playing."""
        if self.state is not GameState.PLAYING:
            return
        if self.field is None or self.player is None:
            raise RuntimeError("no game in progress")
        self.field.update(dt)
        self.field.asteroids.advance(dt, self.screen_size)
        self.player.update(dt, self.screen_size, keyboard, gamepad)
        self.player.shots.advance(dt)


class _Renderer:
    """Draws text, buttons and the scene onto the window surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._fonts: dict[int, pygame.font.Font] = {}

    def font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def text(self, text: str, x: int, y: int, size: int) -> None:
        self.surface.blit(self.font(size).render(text, True, WHITE), (x, y))

    def centered_title(self, text: str) -> None:
        width = self.font(TITLE_SIZE).size(text)[0]
        self.text(text, self.surface.get_width() // 2 - width // 2, TITLE_Y, TITLE_SIZE)

    def button(self, text: str, index: int, mouse: tuple[int, int], clicked: bool) -> bool:
        center_x, center_y = menu_button_center(self.surface.get_width(), index)
        rect = button_rect(center_x, center_y, BUTTON_WIDTH, BUTTON_HEIGHT)
        hovered = rect.collidepoint(mouse)
        pygame.draw.rect(self.surface, BLUE if hovered else GRAY, rect)
        text_height = BUTTON_HEIGHT - 2 * BUTTON_MARGIN
        text_width = self.font(text_height).size(text)[0]
        self.text(
            text, center_x - text_width // 2, center_y - text_height // 2, text_height
        )
        return hovered and clicked


def _keyboard_controls() -> Controls:
    keys = pygame.key.get_pressed()
    return Controls(
        forward=bool(keys[pygame.K_w]),
        backward=bool(keys[pygame.K_s]),
        left=bool(keys[pygame.K_a]),
        right=bool(keys[pygame.K_d]),
        fire=bool(keys[pygame.K_SPACE]),
    )


def _gamepad_controls(joystick: pygame.joystick.JoystickType) -> Controls:
    axes = joystick.get_numaxes()
    left_x = joystick.get_axis(0) if axes > 0 else 0.0
    left_y = joystick.get_axis(1) if axes > 1 else 0.0
    hat_x, hat_y = joystick.get_hat(0) if joystick.get_numhats() > 0 else (0, 0)
    fire = joystick.get_axis(5) > RIGHT_TRIGGER_DEADZONE if axes > 5 else False
    return controls_from_gamepad(
        left_x, left_y, hat_y > 0, hat_y < 0, hat_x < 0, hat_x > 0, fire
    )


def _load_background() -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(BACKGROUND_FILE).convert()
    except (pygame.error, FileNotFoundError):
        return None


def main(argv: Optional[list[str]] = None) -> int:
    """Open the window and run the game until the player quits."""
    parser = argparse.ArgumentParser(prog="spacerocks", description="Asteroids arcade game.")
    parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode(SCREEN_SIZE, pygame.NOFRAME)
        pygame.display.set_caption(TITLE)
        search_and_set_resource_dir("resources")
        background = _load_background()
        renderer = _Renderer(surface)
        clock = pygame.time.Clock()
        game = Game(SCREEN_SIZE)
        joystick: Optional[pygame.joystick.JoystickType] = None
        dt = 0.0

        while game.running:
            clicked = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.quit()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_F4:
                        game.quit()
                    elif event.key == pygame.K_ESCAPE:
                        game.toggle_pause()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = True
                elif event.type == pygame.JOYDEVICEREMOVED:
                    joystick = None
            if joystick is None and pygame.joystick.get_count() > 0:
                joystick = pygame.joystick.Joystick(0)

            mouse = pygame.mouse.get_pos()
            surface.fill(BLACK)
            if background is not None:
                surface.blit(background, (0, 0))
            renderer.text(label_with_int("FPS: ", round(clock.get_fps())), 1180, 10, HUD_FONT_SIZE)
            renderer.text(label_with_int("Score: ", 0), 10, 10, HUD_FONT_SIZE)
            if joystick is not None:
                renderer.text(
                    label_with_text("Controller: ", joystick.get_name()), 10, 30, HUD_FONT_SIZE
                )
            renderer.text(label_with_vector("Pos: ", mouse), 1100, 780, HUD_FONT_SIZE)

            if game.state is GameState.PAUSED:
                renderer.centered_title("Paused")
                if renderer.button("Leave Game", 0, mouse, clicked):
                    game.leave_game()
            elif game.state is GameState.MENU:
                renderer.centered_title(TITLE)
                if renderer.button("New Game", 0, mouse, clicked):
                    game.new_game()
                elif renderer.button("Quit Game", 1, mouse, clicked):
                    game.quit()
            elif game.state is GameState.PLAYING:
                gamepad = _gamepad_controls(joystick) if joystick is not None else None
                game.update(dt, _keyboard_controls(), gamepad)
                assert game.field is not None and game.player is not None
                game.field.asteroids.draw(surface)
                game.player.draw(surface)
                game.player.shots.draw(surface)

            pygame.display.flip()
            dt = clock.tick(TARGET_FPS) / 1000.0
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())