import random

import pytest

from spacerocks.game import (
    BUTTON_HEIGHT,
    BUTTON_SPACING,
    BUTTON_WIDTH,
    BUTTON_Y,
    Game,
    GameState,
    button_rect,
    menu_button_center,
)
from spacerocks.player import Controls


@pytest.fixture
def game():
    return Game((1280, 800), random.Random(7))


@pytest.mark.parametrize("cx,cy,w,h", [(640, 430, 250, 60), (100, 50, 40, 20)])
def test_button_rect_is_centred(cx, cy, w, h):
    rect = button_rect(cx, cy, w, h)
    assert rect.center == (cx, cy)
    assert rect.size == (w, h)


def test_first_menu_button_top_is_button_y():
    rect = button_rect(*menu_button_center(1280, 0), BUTTON_WIDTH, BUTTON_HEIGHT)
    assert rect.top == BUTTON_Y
    assert rect.centerx == 640


def test_menu_buttons_are_spaced():
    first = menu_button_center(1280, 0)
    second = menu_button_center(1280, 1)
    assert second[0] == first[0]
    assert second[1] - first[1] == BUTTON_HEIGHT + BUTTON_SPACING


def test_starts_in_menu(game):
    assert game.state is GameState.MENU
    assert game.running is True
    assert game.player is None


def test_pause_ignored_in_menu(game):
    assert game.toggle_pause() is GameState.MENU


def test_new_game_and_pause_cycle(game):
    game.new_game()
    assert game.state is GameState.PLAYING
    assert game.player is not None and game.field is not None
    assert game.toggle_pause() is GameState.PAUSED
    assert game.toggle_pause() is GameState.PLAYING


def test_leave_game_returns_to_menu(game):
    game.new_game()
    game.toggle_pause()
    game.leave_game()
    assert game.state is GameState.MENU
    assert game.player is None
    assert game.field is None


def test_quit_stops_running(game):
    game.quit()
    assert game.running is False


def test_update_spawns_asteroid_while_playing(game):
    game.new_game()
    game.update(1.0)
    assert len(game.field.asteroids) == 1


def test_update_does_nothing_while_paused(game):
    game.new_game()
    game.toggle_pause()
    game.update(1.0)
    assert len(game.field.asteroids) == 0
    assert game.field.spawn_timer == 0.0


def test_update_fires_shot_and_moves_it(game):
    game.new_game()
    start = game.player.shape.position.copy()
    game.update(0.1, keyboard=Controls(fire=True))
    shots = list(game.player.shots)
    assert len(shots) == 1
    assert shots[0].shape.position.y < start.y


def test_update_without_round_raises():
    game = Game((1280, 800), random.Random(1))
    game.state = GameState.PLAYING
    with pytest.raises(RuntimeError):
        game.update(0.1)