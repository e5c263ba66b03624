"""Bullet hits on invaders, scoring and explosions."""

from starraid.model import Explosion


def _hits(bullet, target):
    return (
        target.x <= bullet.x <= target.x + target.width
        and target.y <= bullet.y <= target.y + target.height
    )


def resolve_hits(game):
    """Apply bullet hits to invaders and return the invaders destroyed.

    A bullet is spent on the first invader it overlaps.
    """
    destroyed = []
    surviving = []
    for bullet in game.bullets:
        victim = next(
            (inv for inv in game.invaders if _hits(bullet, inv.sprite)), None
        )
        if victim is None:
            surviving.append(bullet)
            continue
        victim.health -= 1
        if victim.health <= 0:
            game.score += victim.kind.points()
            game.explosions.append(Explosion(victim.sprite.x, victim.sprite.y))
            game.invaders.remove(victim)
            destroyed.append(victim)
    game.bullets[:] = surviving
    return destroyed


def tick_explosions(game):
    """Return the explosions to show this tick and age them, dropping expired ones."""
    shown = list(game.explosions)
    for explosion in shown:
        explosion.ttl -= 1
    game.explosions[:] = [e for e in shown if e.ttl >= 0]
    return shown