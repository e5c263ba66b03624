# starraid

An arcade shooter played in a pygame window, 900×900 by default. Invaders
fall from the top of the screen. You slide a ship along the bottom and shoot
them down before they get through.

## Installing

```
pip install .
```

pygame is installed as a dependency.

## Playing

```
starraid --assets path/to/Assets
```

Options:

- `--assets DIR`: the directory that holds `Sprites/`. The default is
  `Assets`, relative to the current directory.
- `--width N`, `--height N`: the window size. Both default to 900. The
  height must be more than 80, because the bottom 80 pixels hold the footer.

Controls:

- **Left / Right arrows**: move the ship 20 pixels. The ship wraps round when
  it goes past either edge of the playfield.
- **Space**: fire a bullet straight up from the middle of the ship.
- Closing the window ends the game.

Points for each invader destroyed:

| Invader | Hits to destroy | Points |
|---------|-----------------|--------|
| L1      | 3               | 100    |
| M1      | 6               | 200    |
| S1      | 12              | 400    |

You start with three lives, and every invader that reaches the bottom of the
playfield costs one. The difficulty level goes up by one every 10 seconds of
play. At each level new invaders appear sooner (every `6 - level` seconds)
and the tougher kinds turn up more often. The footer shows your remaining
lives as ship icons, your score, and the time played as `h:m:s`.

When you run out of lives the game-over screen shows your final score. Press
**R** to start again or **Q** to quit.

## Sprites

The package ships no images. `starraid.media.load_sprites(width, height,
asset_dir)` loads them from these paths under the asset directory:

- `Sprites/player2.png`: the ship
- `Sprites/Projectiles/Projectile_Player.png`: the bullet
- `Sprites/Invaders/invaderL1.png`, `invaderM1.png`, `invaderS1.png`: the
  three invaders
- `Sprites/Explosions/invaderExplosion.png`: the explosion
- `Sprites/targetMark.png`: the lock-on mark

If an image cannot be loaded, `OSError` is raised.

## Using it as a library

The rules of the game do not depend on the display, so you can drive and test
them directly:

- `starraid.model`: `Game` (use `Game.create(width, height, sprites)`, then
  `reset()` and `is_over()`), `Sprite`, `SpriteSet`, `Invader`,
  `InvaderType` (with `points()` and `health()`), `Explosion`, `Target`
- `starraid.ship`: `move_left`, `move_right`
- `starraid.bullets`: `fire`, `advance_bullets`
- `starraid.invaders`: `difficulty`, `choose_type`, `spawn_interval`,
  `spawn_invader`, `advance_invaders`
- `starraid.combat`: `resolve_hits`, `tick_explosions`
- `starraid.targets`: `create_targets`, `update_targets`
- `starraid.keyboard`: `Key`, `dispatch`
- `starraid.hud`: `format_clock`, `format_score`, `life_icon_positions`,
  `game_over_lines`
- `starraid.render`: `Renderer`, which draws a game onto a pygame surface
  with `draw_frame()` and `draw_game_over()`
- `starraid.loop`: `step(game, keys, now, rng)` advances one frame and says
  whether the game is over. `run(game, surface)` plays on a pygame surface
  and returns the score. `main()` is the `starraid` command.

A minimal headless frame:

```python
import random
from starraid.model import Game, Sprite, SpriteSet
from starraid.keyboard import Key
from starraid.loop import step

sprites = SpriteSet(
    ship=Sprite(40, 20, 400, 780), bullet=Sprite(2, 8), target=Sprite(10, 10),
    explosion=Sprite(30, 30), invader_l1=Sprite(30, 20),
    invader_m1=Sprite(30, 20), invader_s1=Sprite(30, 20),
)
game = Game.create(900, 900, sprites)
over = step(game, [Key.SPACE], game.time_start, random.Random(1))
```

## What it does not do

- There is no sound and no saved high-score table.
- Lock-on marks can be created and updated with `starraid.targets`, but the
  game loop does not use them and the renderer does not draw them.

## Running the tests

```
pip install .[test]
pytest
```