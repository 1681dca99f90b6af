"""
Input protocol - defines interface for input collectors (keyboard, scripted, etc.)
"""

from typing import Protocol

from duel_pong.core.entities import InputAction


class InputSource(Protocol):
    """
    Protocol for anything producing the actions held down during a frame.

    The live input state may change at any time between frames, the snapshot
    returned here is what the simulation reads for a whole frame.
    """

    def snapshot(self) -> frozenset[InputAction]:
        """
        Get the actions currently held down.

        Returns:
            Immutable set of logical actions

        Example:
            >>> inputs = source.snapshot()
            >>> InputAction.RELEASE_SERVE in inputs
            False
        """
        ...
