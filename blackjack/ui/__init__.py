"""User interface layers for Blackjack."""
