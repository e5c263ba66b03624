from starraid.model import Game, Sprite, SpriteSet
from starraid.ship import move_left, move_right


def _game():
    sprites = SpriteSet(
        ship=Sprite(40, 30, 400, 780),
        bullet=Sprite(4, 12),
        target=Sprite(16, 16),
        explosion=Sprite(30, 30),
        invader_l1=Sprite(40, 20),
        invader_m1=Sprite(44, 24),
        invader_s1=Sprite(50, 30),
    )
    return Game.create(900, 900, sprites)


def test_move_right_steps_twenty():
    game = _game()
    start = game.ship.x
    move_right(game)
    assert game.ship.x == start + 20


def test_move_left_steps_twenty():
    game = _game()
    start = game.ship.x
    move_left(game)
    assert game.ship.x == start - 20


def test_move_right_wraps_past_edge():
    game = _game()
    game.ship.x = game.width + game.ship.width - 20 + 1
    move_right(game)
    assert game.ship.x == -game.ship.width


def test_move_right_at_boundary_still_steps():
    game = _game()
    edge = game.width + game.ship.width - 20
    game.ship.x = edge
    move_right(game)
    assert game.ship.x == edge + 20


def test_move_left_wraps_past_edge():
    game = _game()
    game.ship.x = -game.ship.width + 20 - 1
    move_left(game)
    assert game.ship.x == game.width


def test_move_left_at_boundary_still_steps():
    game = _game()
    edge = -game.ship.width + 20
    game.ship.x = edge
    move_left(game)
    assert game.ship.x == edge - 20


def test_right_then_left_returns_to_start():
    game = _game()
    start = game.ship.x
    move_right(game)
    move_left(game)
    assert game.ship.x == start
    assert game.ship.y == 780