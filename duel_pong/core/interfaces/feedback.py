"""
Feedback protocol - defines interface for layers reacting to what happened in a frame
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from duel_pong.core.physics import StepResult


class FeedbackSink(Protocol):
    """Protocol for audio (or other) feedback driven by the result of each step"""

    def on_step(self, result: "StepResult") -> None:
        """
        React to one simulation step.

        Args:
            result: New state with the collisions detected during the frame and
                whether the ball was served
        """
        ...
