"""
Core game logic for Blackjack.

This package contains the platform independent game components: cards and
the deck, players and their hands, and the scoring and settlement rules.
"""

from .enums import Suit, Rank, GamePhase, PlayerAction
from .cards import Card, Deck
from .player import Player
from .rules import (
    BLACKJACK, DEALER_STAND_THRESHOLD, MIN_PLAYERS, MAX_PLAYERS, DEALER_NAME,
    card_value, hand_score, is_natural, is_bust, dealer_should_hit,
    is_winner, settle, validate_player_count
)
from .exceptions import (
    BlackjackError, GameConfigError, DeckExhaustedError,
    GameStateError, TerminalInputError
)


__all__ = [
    # Enums
    'Suit', 'Rank', 'GamePhase', 'PlayerAction',

    # Core classes
    'Card', 'Deck', 'Player',

    # Rules
    'BLACKJACK', 'DEALER_STAND_THRESHOLD', 'MIN_PLAYERS', 'MAX_PLAYERS', 'DEALER_NAME',
    'card_value', 'hand_score', 'is_natural', 'is_bust', 'dealer_should_hit',
    'is_winner', 'settle', 'validate_player_count',

    # Errors
    'BlackjackError', 'GameConfigError', 'DeckExhaustedError',
    'GameStateError', 'TerminalInputError',
]
