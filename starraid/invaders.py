"""Spawning and descent of invaders."""

import math

from starraid.model import Invader, InvaderType

MAX_LEVEL = 6
LEVEL_CAP_TIME = 110
SPAWN_Y = -10
DESCENT_SPEED = 1


def difficulty(time_pass):
    """Difficulty level for the elapsed game time."""
    if time_pass < LEVEL_CAP_TIME:
        return int(time_pass / 10)
    return MAX_LEVEL


def choose_type(roll):
    """Pick the invader kind for a random roll."""
    if roll < 20:
        return InvaderType.L1
    if roll < 50:
        return InvaderType.M1
    return InvaderType.S1


def spawn_interval(game):
    """Seconds between spawns at the current level; a negative wait never elapses."""
    wait = MAX_LEVEL - game.hard_level
    if wait < 0:
        return math.inf
    return float(wait)


def _template(sprites, kind):
    return {
        InvaderType.L1: sprites.invader_l1,
        InvaderType.M1: sprites.invader_m1,
        InvaderType.S1: sprites.invader_s1,
    }[kind]


def spawn_invader(game, rng):
    """Add a random invader just above the playfield and return it."""
    kind = choose_type(rng.randrange(10 * (game.hard_level + 1)))
    template = _template(game.sprites, kind)
    span = game.width - template.width
    if span <= 0:
        raise ValueError(
            f"invader of width {template.width} does not fit a field {game.width} wide"
        )
    x = rng.randrange(span) + 1
    invader = Invader(template.moved(x, SPAWN_Y), kind, kind.health())
    game.invaders.append(invader)
    return invader


def advance_invaders(game):
    """Move invaders down; those reaching the bottom cost health. Return how many got through."""
    game.hard_level = difficulty(game.time_pass)
    remaining = []
    escaped = 0
    for invader in game.invaders:
        invader.sprite.y += DESCENT_SPEED
        if invader.sprite.y >= game.height:
            escaped += 1
        else:
            remaining.append(invader)
    game.invaders[:] = remaining
    game.health -= escaped
    return escaped