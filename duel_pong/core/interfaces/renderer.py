"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from duel_pong.core.entities import GameState


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    A renderer only reads the committed state, it never feeds anything back into
    the simulation.
    """

    def render_frame(self, state: GameState) -> None:
        """
        Render a single frame of the game.

        Args:
            state: Committed state returned by the simulation step
        """
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
