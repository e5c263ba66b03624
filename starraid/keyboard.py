"""Key handling during play."""

from enum import Enum

from starraid.bullets import fire
from starraid.ship import move_left, move_right


class Key(Enum):
    """Keys that control the ship."""

    RIGHT = "right"
    LEFT = "left"
    SPACE = "space"


def dispatch(game, key):
    """Apply a key press to the game; return whether the key was handled."""
    if key is Key.RIGHT:
        move_right(game)
    elif key is Key.LEFT:
        move_left(game)
    elif key is Key.SPACE:
        ship = game.ship
        fire(game, ship.x + ship.width // 2, ship.y)
    else:
        return False
    return True