"""
Display configuration for the TicTacToe window.
Colours, fonts and sizes for the Tkinter client.
"""

from typing import Dict


class DisplayConfig:
    """
    Configuration class for display settings.
    Purely cosmetic - nothing here affects the game rules.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_PADDING = 20

    # ==================== BOARD SETTINGS ====================
    CELL_WIDTH = 4     # In text units
    CELL_HEIGHT = 2
    CELL_FONT = ("Segoe UI", 28, "bold")

    TITLE_FONT = ("Segoe UI", 20, "bold")
    STATUS_FONT = ("Segoe UI", 13)
    SCORE_FONT = ("Segoe UI", 13, "bold")
    BUTTON_FONT = ("Segoe UI", 11, "bold")

    # ==================== THEMES ====================
    DEFAULT_THEME = "light"

    THEMES: Dict[str, Dict[str, str]] = {
        "light": {
            "background": "#ffffff",
            "panel": "#f5f5f5",
            "text": "#282c34",
            "primary": "#1976d2",   # X marks, borders, restart button
            "accent": "#388e3c",    # O marks, win highlight outline
            "highlight": "#cfe5d0",
            "disabled": "#f0f0f0",
        },
        "dark": {
            "background": "#1a1a2e",
            "panel": "#16213e",
            "text": "#e8e8e8",
            "primary": "#64b5f6",
            "accent": "#81c784",
            "highlight": "#2e4d32",
            "disabled": "#1f2a44",
        },
    }

    THEME_TOGGLE_LABELS = {
        "light": "🌙 Dark",
        "dark": "☀️ Light",
    }

    @classmethod
    def get_theme(cls, name: str) -> Dict[str, str]:
        """
        Look up a theme palette.

        Raises:
            KeyError: If the theme does not exist.
        """
        if name not in cls.THEMES:
            raise KeyError(f"Unknown theme {name!r}. Choose from: {', '.join(cls.THEMES)}")
        return cls.THEMES[name]

    @classmethod
    def next_theme(cls, name: str) -> str:
        """Theme the toggle button switches to."""
        names = list(cls.THEMES)
        return names[(names.index(name) + 1) % len(names)]
