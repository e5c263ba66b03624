"""Sideways movement of the player's ship, wrapping at the edges."""

STEP = 20


def move_right(game):
    """Move the ship right, reappearing on the left past the edge."""
    ship = game.ship
    if ship.x > game.width + ship.width - STEP:
        ship.x = -ship.width
    else:
        ship.x += STEP


def move_left(game):
    """Move the ship left, reappearing on the right past the edge."""
    ship = game.ship
    if ship.x < -ship.width + STEP:
        ship.x = game.width
    else:
        ship.x -= STEP