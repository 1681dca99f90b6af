"""
Protocols implemented by the collaborators of the simulation
"""

from duel_pong.core.interfaces.feedback import FeedbackSink
from duel_pong.core.interfaces.input import InputSource
from duel_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["FeedbackSink", "InputSource", "RendererProtocol"]
