"""
TicTacToe UI
A graphical interface for two-player TicTacToe using Tkinter.

Shows:
- The 3x3 board (click an empty cell to play)
- Game status and score
- Restart and light/dark theme buttons
"""

import logging
import tkinter as tk
from typing import List, Optional

from display.config import DisplayConfig
from logic.board import CELL_COUNT, Mark, index_to_cell
from logic.game_state import GameState


logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for two-player TicTacToe.

    The window only renders GameState and forwards clicks to it.
    """

    def __init__(
        self,
        game_state: Optional[GameState] = None,
        theme: str = DisplayConfig.DEFAULT_THEME,
        config: Optional[DisplayConfig] = None
    ):
        """
        Initialize the UI.

        Args:
            game_state: Session to display (a fresh one if omitted).
            theme: Name of the starting colour theme.
            config: Display settings.
        """
        self.config = config or DisplayConfig()
        self.game_state = game_state or GameState()
        self.theme_name = theme
        self.palette = self.config.get_theme(theme)

        self.cell_buttons: List[tk.Button] = []

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter widgets."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.resizable(False, False)

        self.main_frame = tk.Frame(self.root, padx=self.config.WINDOW_PADDING,
                                   pady=self.config.WINDOW_PADDING)
        self.main_frame.pack(fill=tk.BOTH, expand=True)

        self.theme_btn = tk.Button(
            self.main_frame,
            font=self.config.BUTTON_FONT,
            relief='flat',
            command=self._toggle_theme
        )
        self.theme_btn.pack(anchor=tk.E)

        self.title_label = tk.Label(self.main_frame, text=self.config.WINDOW_TITLE,
                                    font=self.config.TITLE_FONT)
        self.title_label.pack(pady=(0, 10))

        # Score and status side by side
        self.info_frame = tk.Frame(self.main_frame)
        self.info_frame.pack(pady=(0, 12))

        self.score_label = tk.Label(self.info_frame, font=self.config.SCORE_FONT)
        self.score_label.pack(side=tk.LEFT, padx=(0, 24))

        self.status_label = tk.Label(self.info_frame, font=self.config.STATUS_FONT, width=16)
        self.status_label.pack(side=tk.LEFT)

        # Board grid
        self.board_frame = tk.Frame(self.main_frame, borderwidth=2, relief='solid')
        self.board_frame.pack()

        for index in range(CELL_COUNT):
            row, col = index_to_cell(index)
            cell = tk.Button(
                self.board_frame,
                text="",
                font=self.config.CELL_FONT,
                width=self.config.CELL_WIDTH,
                height=self.config.CELL_HEIGHT,
                relief='ridge',
                borderwidth=1,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col)
            self.cell_buttons.append(cell)

        self.restart_btn = tk.Button(
            self.main_frame,
            text="Restart",
            font=self.config.BUTTON_FONT,
            fg='white',
            width=12,
            relief='flat',
            command=self._restart
        )
        self.restart_btn.pack(pady=(20, 0))

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Forward a cell click to the game."""
        result = self.game_state.apply_move(index)
        if not result:
            # Disabled cells normally prevent this; just ignore the click
            logger.debug("Ignored click on cell %d: %s", index, result.message)
            return
        self._refresh()

    def _restart(self):
        """Start a new game, keeping the score."""
        self.game_state.restart()
        self._refresh()

    def _toggle_theme(self):
        """Switch between light and dark colours."""
        self.theme_name = self.config.next_theme(self.theme_name)
        self.palette = self.config.get_theme(self.theme_name)
        logger.debug("Theme set to %s", self.theme_name)
        self._refresh()

    def _refresh(self):
        """Redraw everything from the game state."""
        self._apply_theme()
        self._update_board_display()
        self._update_game_info()

    def _apply_theme(self):
        """Colour the static widgets."""
        p = self.palette
        for widget in (self.root, self.main_frame, self.info_frame):
            widget.configure(bg=p['background'])
        self.board_frame.configure(bg=p['primary'])
        self.title_label.configure(bg=p['background'], fg=p['primary'])
        self.score_label.configure(bg=p['background'], fg=p['text'])
        self.status_label.configure(bg=p['background'], fg=p['text'])
        self.theme_btn.configure(
            text=self.config.THEME_TOGGLE_LABELS[self.theme_name],
            bg=p['panel'],
            fg=p['text'],
            activebackground=p['panel']
        )
        self.restart_btn.configure(bg=p['primary'], activebackground=p['accent'])

    def _update_board_display(self):
        """Update the board grid."""
        p = self.palette
        winning_line = self.game_state.winning_line or ()
        game_over = self.game_state.is_game_over

        for index, cell in enumerate(self.cell_buttons):
            mark = self.game_state.board[index]
            colour = p['primary'] if mark == Mark.X else p['accent']

            if index in winning_line:
                bg = p['highlight']
            elif mark is not None or game_over:
                bg = p['disabled']
            else:
                bg = p['background']

            cell.configure(
                text=mark.value if mark is not None else "",
                state='disabled' if mark is not None or game_over else 'normal',
                bg=bg,
                fg=colour,
                disabledforeground=colour,
                activebackground=p['panel']
            )

    def _update_game_info(self):
        """Update status and score labels."""
        self.status_label.configure(text=self.game_state.status_text())
        self.score_label.configure(text=self.game_state.score_text())

    def _quit(self):
        """Quit the application."""
        logger.debug("Quitting")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
