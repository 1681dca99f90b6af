"""
PyGame renderer for Duel Pong game
"""

import pygame

from duel_pong.core.entities import Ball
from duel_pong.core.entities import GameState
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import Score
from duel_pong.utils.config import game_config

LINE_WIDTH = 2


class PygameRenderer:
    """PyGame-based renderer for Duel Pong"""

    def __init__(self, width: int | None = None, height: int | None = None):
        """Initialize the PyGame renderer"""
        self.width = width or game_config.BOARD_WIDTH
        self.height = height or game_config.BOARD_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Duel Pong")

        self.background_color: tuple[int, int, int] = game_config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = game_config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = game_config.PADDLE_COLOR
        self.line_color: tuple[int, int, int] = game_config.LINE_COLOR
        self.score_color: tuple[int, int, int] = game_config.SCORE_COLOR

        # The score takes a quarter of the board height
        self.font_size = round(self.height / 4)
        self.font_score = pygame.font.Font(None, self.font_size)
        self.font_score.set_bold(True)
        self.font_small = pygame.font.Font(None, 24)

    def clear_screen(self) -> None:
        """Paint the background over the previous frame"""
        self.screen.fill(self.background_color)

    def draw_score(self, score: Score) -> None:
        """Draw each player's score on their own half of the board"""
        center_x = self.width // 2
        margin = game_config.SCORE_MARGIN

        top_text = self.font_score.render(str(score.player1), True, self.score_color)
        top_rect = top_text.get_rect(midbottom=(center_x, margin + self.font_size + 20))
        self.screen.blit(top_text, top_rect)

        bottom_text = self.font_score.render(str(score.player2), True, self.score_color)
        bottom_rect = bottom_text.get_rect(midbottom=(center_x, self.height - margin))
        self.screen.blit(bottom_text, bottom_rect)

    def draw_ball(self, ball: Ball) -> None:
        """Draw the game ball"""
        pos = (round(ball.position.x), round(ball.position.y))
        radius = round(game_config.BALL_RADIUS)
        pygame.draw.circle(self.screen, self.ball_color, pos, radius)
        pygame.draw.circle(self.screen, self.line_color, pos, radius, LINE_WIDTH)

    def draw_paddle(self, paddle: Paddle) -> None:
        """Draw a player paddle, centred on its position"""
        rect = pygame.Rect(*paddle.get_rect(game_config.PADDLE_WIDTH, game_config.PADDLE_HEIGHT))
        pygame.draw.rect(self.screen, self.paddle_color, rect)
        pygame.draw.rect(self.screen, self.line_color, rect, LINE_WIDTH)

    def draw_status(self, sound_enabled: bool) -> None:
        """Draw the sound toggle state in the corner"""
        label = "Sound: On" if sound_enabled else "Sound: Off"
        text = self.font_small.render(f"{label} (M)", True, self.line_color)
        self.screen.blit(text, (10, self.height // 2 - text.get_height() // 2))

    def render_frame(self, state: GameState) -> None:
        """Render a complete frame from the committed state"""
        self.clear_screen()
        self.draw_score(state.score)
        self.draw_ball(state.ball)
        for paddle in state.paddles:
            self.draw_paddle(paddle)

    def present(self) -> None:
        """Show the frame that was just drawn"""
        pygame.display.flip()

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        pygame.display.quit()
