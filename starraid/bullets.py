"""Bullets fired by the ship."""

BULLET_SPEED = 10


def fire(game, x, y):
    """Add a bullet at ``(x, y)`` and return it."""
    bullet = game.sprites.bullet.moved(x, y)
    game.bullets.append(bullet)
    return bullet


def advance_bullets(game):
    """Move every bullet up, drop those above the screen, return the rest."""
    for bullet in game.bullets:
        bullet.y -= BULLET_SPEED
    game.bullets[:] = [bullet for bullet in game.bullets if bullet.y >= 0]
    return game.bullets