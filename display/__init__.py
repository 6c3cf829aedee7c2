"""
Display module for two-player TicTacToe.
Colours and layout settings for the graphical client.
"""

from .config import DisplayConfig
