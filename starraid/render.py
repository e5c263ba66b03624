"""Drawing the playfield, the footer and the game-over screen."""

import pygame

from starraid.hud import (
    format_clock,
    format_score,
    game_over_lines,
    life_icon_positions,
)

BACKGROUND = (0, 0, 0)
TEXT_COLOUR = (255, 255, 255)
FOOTER_LINE_COLOUR = (0, 255, 0)
FONT_SIZE = 20

FOOTER_LINE_RISE = 70
TEXT_BASELINE_RISE = 30
CLOCK_LEFT_OF_EDGE = 80
SCORE_LEFT_OF_EDGE = 200


class Renderer:
    """Draws a game onto a pygame surface."""

    def __init__(self, game, surface):
        self.game = game
        self.surface = surface
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(None, FONT_SIZE)

    def _blit(self, image, x, y):
        if image is not None:
            self.surface.blit(image, (x, y))

    def _draw_sprite(self, sprite):
        self._blit(sprite.image, sprite.x, sprite.y)

    def _draw_text(self, text, x, baseline):
        rendered = self.font.render(text, True, TEXT_COLOUR)
        self.surface.blit(rendered, (x, baseline - self.font.get_ascent()))

    def _draw_footer(self):
        game = self.game
        line_y = game.height_screen - FOOTER_LINE_RISE
        pygame.draw.line(
            self.surface, FOOTER_LINE_COLOUR, (0, line_y), (game.width_screen, line_y), 1
        )
        baseline = game.height_screen - TEXT_BASELINE_RISE
        self._draw_text(format_clock(game.time_pass), game.width - CLOCK_LEFT_OF_EDGE, baseline)
        self._draw_text(format_score(game.score), game.width - SCORE_LEFT_OF_EDGE, baseline)
        for x, y in life_icon_positions(game):
            self._blit(game.ship.image, x, y)

    def draw_frame(self):
        """Draw the ship, invaders, explosions, bullets and footer."""
        game = self.game
        self.surface.fill(BACKGROUND)
        self._draw_sprite(game.ship)
        for invader in game.invaders:
            self._draw_sprite(invader.sprite)
        explosion_image = game.sprites.explosion.image
        for explosion in game.explosions:
            self._blit(explosion_image, explosion.x, explosion.y)
        for bullet in game.bullets:
            self._draw_sprite(bullet)
        self._draw_footer()

    def draw_game_over(self):
        """Clear the screen and show the final score with restart instructions."""
        game = self.game
        self.surface.fill(BACKGROUND)
        centre_x = game.width_screen // 2
        centre_y = game.height_screen // 2
        for text, dx, dy in game_over_lines(game.score):
            self._draw_text(text, centre_x + dx, centre_y + dy)