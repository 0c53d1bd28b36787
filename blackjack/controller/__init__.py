"""
Controller layer for Blackjack.

This package drives a single round of play on top of the core model and
exposes the DTOs that the user interface layers render.
"""

from .game_controller import (
    BlackjackController, RoundResult, GameIO, play_blackjack,
    HIT_OR_STAND_PROMPT, BUST_MESSAGE, DEALER_PLAYING_MESSAGE,
    DEALER_HIT_MESSAGE, DEALER_BUST_MESSAGE
)
from .dto import PlayerSnapshot, RoundSummary, GameConfiguration

__all__ = [
    'BlackjackController', 'RoundResult', 'GameIO', 'play_blackjack',
    'HIT_OR_STAND_PROMPT', 'BUST_MESSAGE', 'DEALER_PLAYING_MESSAGE',
    'DEALER_HIT_MESSAGE', 'DEALER_BUST_MESSAGE',
    'PlayerSnapshot', 'RoundSummary', 'GameConfiguration',
]
