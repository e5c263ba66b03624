"""Text and layout for the footer and the game-over screen."""

LIFE_ICON_LEFT = 10
LIFE_ICON_GAP = 2
LIFE_ICON_RISE = 50


def format_clock(seconds):
    """Elapsed time as ``h:m:s`` without zero padding."""
    total = int(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60
    return f"{hours}:{minutes}:{secs}"


def format_score(score):
    """The score as shown in the footer."""
    return f"{score:d}"


def life_icon_positions(game):
    """Top-left corners of the ship icons that show remaining health."""
    step = game.ship.width + LIFE_ICON_GAP
    y = game.height_screen - LIFE_ICON_RISE
    return [(LIFE_ICON_LEFT + i * step, y) for i in range(max(game.health, 0))]


def game_over_lines(score):
    """Game-over texts with their offsets from the screen centre."""
    return [
        ("GAME OVER", -50, -40),
        (f"Final Score: {score}", -60, -10),
        ("Press 'R' to restart or 'Q' to quit", -120, 20),
    ]