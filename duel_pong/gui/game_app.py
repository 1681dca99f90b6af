"""
Main game application with PyGame GUI
"""

import argparse
import logging
import sys

import pygame

from duel_pong.core.interfaces import FeedbackSink
from duel_pong.core.interfaces import InputSource
from duel_pong.core.interfaces import RendererProtocol
from duel_pong.core.physics import PhysicsEngine
from duel_pong.core.physics import StepResult
from duel_pong.gui.keyboard_input import KeyboardInput
from duel_pong.gui.pygame_renderer import PygameRenderer
from duel_pong.gui.sound import SoundPlayer
from duel_pong.utils.config import game_config
from duel_pong.utils.config import load_config_from_file
from duel_pong.utils.keyboard_layout import auto_configure_layout

logger = logging.getLogger(__name__)


def play_frame(
    engine: PhysicsEngine,
    source: InputSource,
    sink: FeedbackSink,
    renderer: RendererProtocol,
) -> StepResult:
    """Steps the engine with one input snapshot, then reports and draws the result"""
    result = engine.update(source.snapshot())
    sink.on_step(result)
    renderer.render_frame(result.state)
    return result


class DuelPongApp:
    """Runs the simulation once per frame and feeds the renderer and the sounds"""

    def __init__(self) -> None:
        self.engine = PhysicsEngine(game_config.BOARD_WIDTH, game_config.BOARD_HEIGHT)
        self.renderer = PygameRenderer(game_config.BOARD_WIDTH, game_config.BOARD_HEIGHT)
        self.keyboard = KeyboardInput()
        self.sound = SoundPlayer(enabled=game_config.SOUND_ENABLED)
        self.clock = pygame.time.Clock()
        self.running = True

        logger.info(
            "Duel Pong initialized on a %dx%d board",
            game_config.BOARD_WIDTH,
            game_config.BOARD_HEIGHT,
        )

    def handle_event(self, event: pygame.event.Event) -> None:
        """Handle window and application keys, paddle keys are polled each frame"""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_m:
                enabled = self.sound.toggle()
                logger.info("Sound %s", "on" if enabled else "off")
            elif event.key == pygame.K_r:
                self.engine.reset_game()
                logger.info("Game restarted")

    def update(self) -> None:
        """Move the game one frame forward and draw it"""
        self.keyboard.update_keys()
        play_frame(self.engine, self.keyboard, self.sound, self.renderer)

    def render(self) -> None:
        """Draw the overlay and show the frame"""
        self.renderer.draw_status(self.sound.enabled)
        self.renderer.present()

    def run(self) -> None:
        """Main application loop"""
        logger.info("Starting Duel Pong...")

        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                self.update()
                self.render()

                # Wait for the next frame
                self.clock.tick(game_config.FPS)
        except Exception:
            logger.exception("Unexpected error in the game loop")
            raise
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        logger.info("Cleaning up resources...")
        self.renderer.cleanup()
        pygame.quit()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Duel Pong, two players on one keyboard")
    parser.add_argument("--config", help="JSON configuration file", default=None)
    parser.add_argument("--sound", action="store_true", help="Start with sound enabled")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config:
        if not load_config_from_file(args.config):
            logger.error("Could not load configuration from %s", args.config)
            sys.exit(1)
    else:
        auto_configure_layout()
    if args.sound:
        game_config.SOUND_ENABLED = True

    try:
        DuelPongApp().run()
    except KeyboardInterrupt:
        logger.info("User interruption")


if __name__ == "__main__":
    main()
