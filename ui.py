"""
Vanish TicTacToe UI
A graphical interface for the game using Tkinter.

Shows:
- The board (click a cell to play)
- Game status and scores
- Difficulty level selection (bot mode)
- Reset and quit controls
"""

import time
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional, Callable

# Logic imports
from logic.config import GameConfig
from logic.game_state import GameMode, Variant, CLASSIC
from logic.ai_player import Difficulty
from logic.scheduler import DeferredTask, Scheduler
from logic.game_session import GameSession
from logic.rules import rules_for

# Rendering imports
from rendering.config import RenderConfig
from rendering.board_renderer import BoardRenderer, cell_at


class TkScheduler(Scheduler):
    """Runs deferred tasks on the Tk event loop."""

    def __init__(self, root: tk.Misc):
        self.root = root

    def call_later(self, delay: float, callback: Callable[[], None], name: str = "") -> DeferredTask:
        task = DeferredTask(time.monotonic() + delay, callback, name)
        after_id = self.root.after(int(delay * 1000), task.run)
        task.on_cancel = lambda: self.root.after_cancel(after_id)
        return task


class TicTacToeUI:
    """
    Main UI class for Vanish TicTacToe.
    """

    DIFFICULTY_COLORS = {
        Difficulty.EASY: "#4ade80",
        Difficulty.MEDIUM: "#fbbf24",
        Difficulty.HARD: "#f87171",
    }

    def __init__(
        self,
        variant: Variant = CLASSIC,
        mode: GameMode = GameMode.BOT,
        difficulty: Optional[Difficulty] = None,
        config: Optional[GameConfig] = None
    ):
        """Initialize the UI."""
        self.config = config or GameConfig()
        self.render_config = RenderConfig()
        self.renderer = BoardRenderer(self.render_config)
        self.variant = variant
        self.mode = mode

        # Create UI first, the scheduler needs the Tk root
        self._create_ui()

        self.session = GameSession(
            variant=variant,
            mode=mode,
            difficulty=difficulty,
            scheduler=TkScheduler(self.root),
            config=self.config
        )
        self.session.listeners.append(lambda _session: self._refresh())
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Vanish TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 14), foreground='#ffd700')
        style.configure('Rules.TLabel', font=('Segoe UI', 9), foreground='#a6b3e0')

        # Left panel - Board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, padx=(0, 10))

        title = f"🎮 {self.variant.name.capitalize()} Mode"
        ttk.Label(left_frame, text=title, style='Title.TLabel').pack(pady=(0, 5))

        size = self.render_config.BOARD_OUTPUT_SIZE
        self.board_canvas = tk.Canvas(left_frame, width=size, height=size, bg='#0f0f1a',
                                      highlightthickness=2, highlightbackground='#00d4ff')
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_click)

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=10)

        # Right panel
        right_frame = ttk.Frame(main_frame, width=300)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))

        # Scores
        ttk.Label(right_frame, text="📊 Score", style='Title.TLabel').pack()
        self.score_label = ttk.Label(right_frame, text="")
        self.score_label.pack(pady=5)

        # Difficulty section (bot mode only)
        self.diff_buttons = {}
        if self.mode == GameMode.BOT:
            ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
            ttk.Label(right_frame, text="⚙️ Difficulty", style='Title.TLabel').pack()

            diff_frame = ttk.Frame(right_frame)
            diff_frame.pack(pady=10)

            for level, color in self.DIFFICULTY_COLORS.items():
                btn = tk.Button(
                    diff_frame,
                    text=level.label,
                    font=('Segoe UI', 10, 'bold'),
                    width=8,
                    activebackground=color,
                    command=lambda d=level: self.session.set_difficulty(d)
                )
                btn.pack(side=tk.LEFT, padx=5)
                self.diff_buttons[level] = btn

        # Rules
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="📜 Game Rules", style='Title.TLabel').pack()
        for rule_title, description in rules_for(self.variant.name):
            ttk.Label(right_frame, text=f"{rule_title}: {description}", style='Rules.TLabel',
                      wraplength=280).pack(anchor=tk.W, pady=2)

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        tk.Button(
            right_frame,
            text="🔄 Reset Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=24,
            command=lambda: self.session.reset(hard=True)
        ).pack(pady=5)

        tk.Button(
            right_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=24,
            command=self._quit
        ).pack(pady=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        """Forward a board click to the session."""
        size = self.render_config.BOARD_OUTPUT_SIZE
        index = cell_at(event.x, event.y, size, size)
        if index is not None:
            self.session.select_cell(index)

    def _refresh(self):
        """Redraw the board and labels from the session."""
        session = self.session

        image = Image.fromarray(self.renderer.to_rgb(self.renderer.render_session(session)))
        photo = ImageTk.PhotoImage(image)
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        self.status_label.configure(text=session.status_text())

        o_name, x_name = ("You", "Bot") if self.mode == GameMode.BOT else ("Player O", "Player X")
        self.score_label.configure(
            text=f"{o_name} (O): {session.scores[session.human_player]}    "
                 f"{x_name} (X): {session.scores[session.bot_player]}"
        )

        for level, btn in self.diff_buttons.items():
            if level == session.difficulty:
                btn.configure(bg=self.DIFFICULTY_COLORS[level], fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.session.reset(hard=True)  # Cancels pending bot move / round reset
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Vanish TicTacToe UI")
    parser.add_argument("--variant", choices=["classic", "vanish"], default="classic")
    parser.add_argument("--mode", choices=[m.value for m in GameMode], default=GameMode.BOT.value)

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("   Vanish TicTacToe UI")
    print("=" * 60)
    print(f"   Variant: {args.variant}   Mode: {args.mode}")
    print("=" * 60 + "\n")

    ui = TicTacToeUI(variant=Variant.from_name(args.variant), mode=GameMode(args.mode))
    ui.run()


if __name__ == "__main__":
    main()
