"""The main game loop and the command that starts it."""

import argparse
import random
import time

import pygame

from starraid.bullets import advance_bullets
from starraid.combat import resolve_hits, tick_explosions
from starraid.invaders import advance_invaders, spawn_interval, spawn_invader
from starraid.keyboard import Key, dispatch
from starraid.media import load_sprites
from starraid.model import FOOTER_HEIGHT, Game
from starraid.render import Renderer

FRAME_TIME = 0.016
DEFAULT_SIZE = 900
DEFAULT_ASSETS = "Assets"

_PLAY_KEYS = {
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_SPACE: Key.SPACE,
}


def step(game, keys, now, rng):
    """Advance the game by one frame and return whether it is over.

    ``game.time_start`` marks when the invader spawner last woke; a new
    invader appears once the current spawn interval has passed since then.
    """
    for key in keys:
        dispatch(game, key)
    if now - game.time_start >= spawn_interval(game):
        spawn_invader(game, rng)
        game.time_start = now
    advance_invaders(game)
    tick_explosions(game)
    advance_bullets(game)
    resolve_hits(game)
    game.time_pass += FRAME_TIME
    return game.is_over()


def _await_restart(game, renderer):
    renderer.draw_game_over()
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            continue
        if event.key == pygame.K_q:
            print("Thanks for playing!")
            return False
        if event.key == pygame.K_r:
            print("Restarting game...")
            game.reset()
            game.time_start = time.time()
            return True


def run(game, surface):
    """Play until the window is closed or the player quits; return the score."""
    renderer = Renderer(game, surface)
    rng = random.Random()
    while True:
        keys = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return game.score
            if event.type == pygame.KEYDOWN and event.key in _PLAY_KEYS:
                keys.append(_PLAY_KEYS[event.key])
        over = step(game, keys, time.time(), rng)
        renderer.draw_frame()
        pygame.display.flip()
        if over and not _await_restart(game, renderer):
            return game.score
        time.sleep(FRAME_TIME)


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Shoot down the descending invaders.")
    parser.add_argument("--assets", default=DEFAULT_ASSETS, help="directory holding Sprites/")
    parser.add_argument("--width", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--height", type=int, default=DEFAULT_SIZE)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= FOOTER_HEIGHT:
        parser.error(f"screen must be wider than 0 and taller than {FOOTER_HEIGHT}")
    return args


def main(argv=None):
    """Open the window, load the sprites and play."""
    args = _parse_args(argv)
    pygame.init()
    try:
        surface = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Star Raid")
        sprites = load_sprites(args.width, args.height - FOOTER_HEIGHT, args.assets)
        game = Game.create(args.width, args.height, sprites)
        run(game, surface)
    finally:
        pygame.quit()
    return 0