"""
Terminal Blackjack

A single-table Blackjack game played against the dealer in a text terminal.
The package is layered into a platform independent core, a controller that
drives one round, and a click based command line interface.
"""

__version__ = "0.1.0"
__author__ = "Blackjack Development Team"
