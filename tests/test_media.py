import pygame
import pytest

from starraid.media import (
    BULLET_IMAGE,
    EXPLOSION_IMAGE,
    INVADER_L1_IMAGE,
    INVADER_M1_IMAGE,
    INVADER_S1_IMAGE,
    SHIP_IMAGE,
    TARGET_IMAGE,
    load_image,
    load_sprites,
)


def _write_png(path, size, colour=(200, 10, 10)):
    path.parent.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface(size)
    surface.fill(colour)
    pygame.image.save(surface, str(path))
    return path


SIZES = {
    SHIP_IMAGE: (40, 20),
    EXPLOSION_IMAGE: (30, 30),
    BULLET_IMAGE: (4, 12),
    TARGET_IMAGE: (16, 16),
    INVADER_L1_IMAGE: (24, 18),
    INVADER_M1_IMAGE: (32, 22),
    INVADER_S1_IMAGE: (44, 28),
}


@pytest.fixture
def asset_dir(tmp_path):
    for relative, size in SIZES.items():
        _write_png(tmp_path / relative, size)
    return tmp_path


def test_load_image_reads_size_and_position(tmp_path):
    path = _write_png(tmp_path / "a.png", (13, 7))
    sprite = load_image(path, 5, 9)
    assert (sprite.width, sprite.height) == (13, 7)
    assert (sprite.x, sprite.y) == (5, 9)
    assert sprite.image.get_size() == (13, 7)


def test_load_image_keeps_pixels(tmp_path):
    path = _write_png(tmp_path / "b.png", (3, 3), colour=(0, 0, 255))
    sprite = load_image(path, 0, 0)
    assert tuple(sprite.image.get_at((1, 1)))[:3] == (0, 0, 255)


def test_load_image_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_image(tmp_path / "missing.png", 0, 0)


def test_load_image_garbage_file(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(b"not an image at all")
    with pytest.raises(OSError):
        load_image(path, 0, 0)


def test_load_sprites_sizes(asset_dir):
    sprites = load_sprites(900, 820, asset_dir)
    assert (sprites.ship.width, sprites.ship.height) == SIZES[SHIP_IMAGE]
    assert (sprites.bullet.width, sprites.bullet.height) == SIZES[BULLET_IMAGE]
    assert (sprites.target.width, sprites.target.height) == SIZES[TARGET_IMAGE]
    assert (sprites.invader_l1.width, sprites.invader_l1.height) == SIZES[INVADER_L1_IMAGE]
    assert (sprites.invader_m1.width, sprites.invader_m1.height) == SIZES[INVADER_M1_IMAGE]
    assert (sprites.invader_s1.width, sprites.invader_s1.height) == SIZES[INVADER_S1_IMAGE]
    assert (sprites.explosion.width, sprites.explosion.height) == SIZES[EXPLOSION_IMAGE]


def test_load_sprites_positions(asset_dir):
    sprites = load_sprites(900, 820, asset_dir)
    assert (sprites.ship.x, sprites.ship.y) == (400, 780)
    assert sprites.explosion.y == 820
    assert sprites.explosion.x == sprites.ship.x
    assert (sprites.bullet.x, sprites.bullet.y) == (0, 0)
    assert (sprites.invader_s1.x, sprites.invader_s1.y) == (0, 0)


def test_load_sprites_missing_asset(asset_dir):
    (asset_dir / TARGET_IMAGE).unlink()
    with pytest.raises(OSError):
        load_sprites(900, 820, asset_dir)