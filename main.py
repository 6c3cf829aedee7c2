"""
Entry point for two-player TicTacToe.

Launches the Tkinter window by default, or a terminal
hot-seat game with --no-ui.
"""

import argparse
import logging
from typing import Callable, Optional

from display.config import DisplayConfig
from logic.board import Mark
from logic.game_state import GameState


logger = logging.getLogger(__name__)

HELP_TEXT = "Enter a cell number 1-9, 'r' to restart or 'q' to quit."


def play_console(
    game_state: GameState,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print
) -> GameState:
    """
    Run a terminal game loop until the players quit.

    Args:
        game_state: Session to play.
        read: Prompt function returning a line of input.
        write: Output function.

    Returns:
        The session, with its final score.
    """
    write(HELP_TEXT)

    while True:
        write("")
        write(game_state.render())
        write(f"{game_state.status_text()}    [{game_state.score_text()}]")

        prompt = "Play again? (r/q): " if game_state.is_game_over else f"{game_state.current_player.value} > "
        try:
            command = read(prompt).strip().lower()
        except EOFError:
            break

        if command in ("q", "quit"):
            break
        if command in ("r", "restart"):
            game_state.restart()
            continue

        try:
            cell = int(command)
        except ValueError:
            write(HELP_TEXT)
            continue

        result = game_state.apply_move(cell - 1)
        if not result:
            write(f"Move rejected: {result.message}")

    write(f"Final score - {game_state.score_text()}")
    return game_state


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--first",
        choices=[mark.value for mark in Mark],
        default=Mark.X.value,
        help="Mark that starts the first game (default: X)"
    )
    parser.add_argument(
        "--theme",
        choices=list(DisplayConfig.THEMES),
        default=DisplayConfig.DEFAULT_THEME,
        help="Starting colour theme for the window"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every move"
    )
    return parser.parse_args(argv)


def main(argv: Optional[list] = None):
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    game_state = GameState.new(first_player=Mark(args.first))

    if args.no_ui:
        print("\n" + "="*40)
        print("   Tic Tac Toe")
        print("="*40)
        try:
            play_console(game_state)
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user.")
        finally:
            print("Goodbye!")
        return

    # Imported here so the terminal mode works without a display
    from ui import TicTacToeUI

    logger.debug("Starting window with theme %s", args.theme)
    ui = TicTacToeUI(game_state=game_state, theme=args.theme)
    ui.run()


if __name__ == "__main__":
    main()
