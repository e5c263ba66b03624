"""Loading the sprite images from an asset directory."""

from pathlib import Path

import pygame

from starraid.model import Sprite, SpriteSet

SHIP_IMAGE = Path("Sprites", "player2.png")
EXPLOSION_IMAGE = Path("Sprites", "Explosions", "invaderExplosion.png")
BULLET_IMAGE = Path("Sprites", "Projectiles", "Projectile_Player.png")
TARGET_IMAGE = Path("Sprites", "targetMark.png")
INVADER_L1_IMAGE = Path("Sprites", "Invaders", "invaderL1.png")
INVADER_M1_IMAGE = Path("Sprites", "Invaders", "invaderM1.png")
INVADER_S1_IMAGE = Path("Sprites", "Invaders", "invaderS1.png")

SHIP_LEFT_OF_CENTRE = 50
SHIP_RISE = 40


def load_image(path, x, y):
    """Load an image file into a sprite placed at ``(x, y)``."""
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise OSError(f"Failed to load image: {path}") from exc
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    width, height = image.get_size()
    return Sprite(width=width, height=height, x=x, y=y, image=image)


def load_sprites(width, height, asset_dir):
    """Load every sprite for a playfield of the given size from ``asset_dir``."""
    root = Path(asset_dir)
    centre_x = width // 2 - SHIP_LEFT_OF_CENTRE
    return SpriteSet(
        ship=load_image(root / SHIP_IMAGE, centre_x, height - SHIP_RISE),
        invader_l1=load_image(root / INVADER_L1_IMAGE, 0, 0),
        invader_m1=load_image(root / INVADER_M1_IMAGE, 0, 0),
        invader_s1=load_image(root / INVADER_S1_IMAGE, 0, 0),
        bullet=load_image(root / BULLET_IMAGE, 0, 0),
        target=load_image(root / TARGET_IMAGE, 0, 0),
        explosion=load_image(root / EXPLOSION_IMAGE, centre_x, height),
    )