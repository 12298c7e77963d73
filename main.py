"""
Main entry point for Vanish TicTacToe.

This script ties together:
- Logic (game state, win checking, AI, play session)
- Rendering (board image, screenshots)
- UI (Tkinter window, or a console loop with --no-ui)

Run this script to play!
"""

import time
from typing import Optional

# Logic imports
from logic.config import GameConfig
from logic.game_state import GameMode, Variant
from logic.ai_player import Difficulty
from logic.scheduler import ManualScheduler
from logic.game_session import GameSession
from logic.rules import format_rules

# Rendering imports
from rendering.board_renderer import BoardRenderer


class ConsoleGame:
    """
    Console front-end for a play session.

    Game flow:
    1. The board is printed
    2. The player types a cell number (1-9) or a command
    3. Delayed work (bot move, next round) runs before the next prompt
    4. Repeat until the player quits
    """

    COMMANDS = "1-9 = place mark, r = reset, d = change difficulty, s = screenshot, q = quit"

    def __init__(
        self,
        variant: Variant,
        mode: GameMode,
        difficulty: Difficulty,
        config: Optional[GameConfig] = None
    ):
        self.config = config or GameConfig()
        self.scheduler = ManualScheduler()
        self.session = GameSession(
            variant=variant,
            mode=mode,
            difficulty=difficulty,
            scheduler=self.scheduler,
            config=self.config
        )
        self.renderer = BoardRenderer()
        self.is_running = False

        print("\n" + "=" * 60)
        print(f"   Vanish TicTacToe - {variant.name.capitalize()} / {mode.value}")
        if mode == GameMode.BOT:
            print(f"   {self.session.difficulty_label}")
        print("=" * 60 + "\n")

    def start(self):
        """Start the game loop."""
        print(self.COMMANDS)
        self.is_running = True

        try:
            while self.is_running:
                self._show()
                self._handle(input("> ").strip().lower())

                # Wait out the bot move / next round, showing the board first
                while self.is_running and self.scheduler.pending:
                    self._show()
                    self.scheduler.run_next(sleep=time.sleep)
        except (KeyboardInterrupt, EOFError):
            print("\n\nGame interrupted by user.")

        print("Goodbye!")

    def _show(self):
        session = self.session
        session.game_state.print_board()
        print(f"\n{session.status_text()}")
        print(f"Score  O: {session.scores[session.human_player]}  "
              f"X: {session.scores[session.bot_player]}")

    def _handle(self, command: str):
        if command == "q":
            self.is_running = False
        elif command == "r":
            self.session.reset(hard=True)
        elif command == "d":
            if self.session.mode == GameMode.BOT:
                self.session.cycle_difficulty()
                print(f"Now playing: {self.session.difficulty_label}")
        elif command == "s":
            path = self.renderer.save_screenshot(self.renderer.render_session(self.session))
            print(f"Saved: {path}")
        elif command.isdigit() and 1 <= int(command) <= 9:
            if not self.session.select_cell(int(command) - 1):
                print("That move isn't allowed right now.")
                open_cells = self.session.valid_moves()
                if open_cells:
                    print("Open cells: " + ", ".join(str(i + 1) for i in open_cells))
        elif command:
            print(self.COMMANDS)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Vanish TicTacToe")
    parser.add_argument(
        "--variant",
        choices=["classic", "vanish"],
        default="classic",
        help="Rule variant (vanish: 3 marks each, the oldest one vanishes)"
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameMode.BOT.value,
        help="Play against the bot or a friend on the same screen"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.name.lower() for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY.lower(),
        help="Bot difficulty"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--rules",
        action="store_true",
        help="Print the game rules and exit"
    )

    args = parser.parse_args()

    if args.rules:
        print(format_rules(args.variant))
        return

    variant = Variant.from_name(args.variant)
    mode = GameMode(args.mode)
    difficulty = Difficulty[args.difficulty.upper()]

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(variant=variant, mode=mode, difficulty=difficulty)
        ui.run()
        return

    ConsoleGame(variant, mode, difficulty).start()


if __name__ == "__main__":
    main()
