"""A windowed front end for the game, drawn on a grid canvas."""

from __future__ import annotations

import argparse
import colorsys
from typing import TYPE_CHECKING, Any

from snakegrid.game import (
    DEFAULT_SCORE_FILE,
    GRID_SIZE,
    Game,
    ScoreStore,
    Speed,
)

if TYPE_CHECKING:
    import tkinter as tk

PANEL_WIDTH = 150
START_HUE = 120
HUE_STEP = 5
SNAKE_SATURATION = 200
SNAKE_VALUE = 130

WELCOME_TEXT = "按R键以开始游戏"
GAME_OVER_TEXT = "游戏结束\n按R键重新开始"
PAUSED_TEXT = "游戏暂停"
PAUSE_LABEL = "暂停"
RESUME_LABEL = "继续"

_SPEED_CHOICES = (
    ("1x", Speed.NORMAL),
    ("1.5x", Speed.ONE_AND_HALF),
    ("2x", Speed.DOUBLE),
)


def snake_colors(count: int) -> list[str]:
    """Return ``count`` body colours, head first, shifting hue along the body."""
    colors = []
    for index in range(count):
        hue = (START_HUE + HUE_STEP * index) % 360
        red, green, blue = colorsys.hsv_to_rgb(
            hue / 360, SNAKE_SATURATION / 255, SNAKE_VALUE / 255
        )
        colors.append(
            "#{:02x}{:02x}{:02x}".format(
                round(red * 255), round(green * 255), round(blue * 255)
            )
        )
    return colors


def status_message(game: Game) -> str:
    """Return the text shown over the board, or an empty string."""
    lines = []
    if game.starts == 0:
        lines.append(WELCOME_TEXT)
    elif game.game_over:
        lines.append(GAME_OVER_TEXT)
    if game.paused and not game.game_over:
        lines.append(PAUSED_TEXT)
    return "\n".join(lines)


def _score_label(title: str, value: int) -> str:
    return f"{title}\n     {value}"


class GameWindow:
    """Draws a game on a canvas and drives it from a Tk event loop."""

    def __init__(self, root: tk.Misc, game: Game) -> None:
        import tkinter as tk

        self.root = root
        self.game = game
        self._pending: str | None = None
        self._pending_interval: int | None = None

        board_width = game.width * GRID_SIZE
        board_height = game.height * GRID_SIZE
        self.canvas = tk.Canvas(
            root, width=board_width, height=board_height,
            background="white", highlightthickness=0,
        )
        self.canvas.pack(side=tk.LEFT)

        panel = tk.Frame(root, width=PANEL_WIDTH, height=board_height)
        panel.pack(side=tk.RIGHT, fill=tk.Y)
        panel.pack_propagate(False)

        self.score_label = tk.Label(panel, justify=tk.LEFT)
        self.score_label.pack(pady=(20, 5))
        self.high_label = tk.Label(panel, justify=tk.LEFT)
        self.high_label.pack(pady=5)

        self.start_button = tk.Button(
            panel, text="开始", takefocus=False, command=self._on_start
        )
        self.start_button.pack(fill=tk.X, padx=20, pady=5)
        self.pause_button = tk.Button(
            panel, text=PAUSE_LABEL, takefocus=False, command=self._on_pause
        )
        self.pause_button.pack(fill=tk.X, padx=20, pady=5)
        self.restart_button = tk.Button(
            panel, text="重新开始", takefocus=False, command=self._on_restart
        )
        self.restart_button.pack(fill=tk.X, padx=20, pady=5)

        self.speed_var = tk.StringVar(master=root, value=game.speed.name)
        for label, speed in _SPEED_CHOICES:
            tk.Radiobutton(
                panel, text=label, value=speed.name, variable=self.speed_var,
                takefocus=False, command=self._on_speed,
            ).pack(anchor=tk.W, padx=20)

        root.bind("<KeyPress>", self.on_key)
        self.canvas.focus_set()
        self.redraw()

    def _sync_timer(self) -> None:
        """Keep the scheduled tick in line with the game's timer state."""
        wanted = self.game.interval if self.game.running else None
        if self._pending is not None and wanted != self._pending_interval:
            self.root.after_cancel(self._pending)
            self._pending = None
            self._pending_interval = None
        if wanted is not None and self._pending is None:
            self._pending = self.root.after(wanted, self.on_tick)
            self._pending_interval = wanted

    def _refresh(self) -> None:
        self._sync_timer()
        self.canvas.focus_set()
        self.redraw()

    def _on_start(self) -> None:
        self.game.start()
        self._refresh()

    def _on_pause(self) -> None:
        self.game.toggle_pause()
        self._refresh()

    def _on_restart(self) -> None:
        self.game.restart()
        self._refresh()

    def _on_speed(self) -> None:
        self.game.set_speed(Speed[self.speed_var.get()])
        self._refresh()

    def on_key(self, event: Any) -> None:
        self.game.handle_key(event.keysym)
        self._refresh()

    def on_tick(self) -> None:
        self._pending = None
        self._pending_interval = None
        if self.game.running:
            self.game.tick()
        self._sync_timer()
        self.redraw()

    def _draw_grid(self) -> None:
        width = self.game.width * GRID_SIZE
        height = self.game.height * GRID_SIZE
        for row in range(self.game.height + 1):
            y = row * GRID_SIZE
            self.canvas.create_line(0, y, width, y, fill="lightgray")
        for col in range(self.game.width + 1):
            x = col * GRID_SIZE
            self.canvas.create_line(x, 0, x, height, fill="lightgray")

    def redraw(self) -> None:
        """Repaint the board and update the side panel."""
        import tkinter as tk

        game = self.game
        self.canvas.delete("all")
        self._draw_grid()

        body = game.snake.body
        for (x, y), color in zip(body, snake_colors(len(body))):
            self.canvas.create_rectangle(
                x * GRID_SIZE, y * GRID_SIZE,
                (x + 1) * GRID_SIZE, (y + 1) * GRID_SIZE,
                fill=color, outline="",
            )

        if not game.game_over:
            fx, fy = game.food.position
            self.canvas.create_oval(
                fx * GRID_SIZE + 2, fy * GRID_SIZE + 2,
                (fx + 1) * GRID_SIZE - 2, (fy + 1) * GRID_SIZE - 2,
                fill="red", outline="",
            )

        message = status_message(game)
        if message:
            self.canvas.create_text(
                game.width * GRID_SIZE // 2, game.height * GRID_SIZE // 2,
                text=message, font=("Arial", 20), fill="black",
                justify=tk.CENTER,
            )

        self.score_label.configure(text=_score_label("当前得分", game.score))
        self.high_label.configure(text=_score_label("最高得分", game.high_score))
        self.pause_button.configure(
            text=RESUME_LABEL if game.paused else PAUSE_LABEL,
            state=tk.NORMAL if game.pause_enabled else tk.DISABLED,
        )
        self.start_button.configure(
            state=tk.NORMAL if game.start_enabled else tk.DISABLED
        )


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    import tkinter as tk

    parser = argparse.ArgumentParser(prog="snakegrid", description="Play snake.")
    parser.add_argument(
        "--score-file", default=DEFAULT_SCORE_FILE,
        help="file that keeps the best score",
    )
    args = parser.parse_args(argv)

    root = tk.Tk()
    root.title("Snake")
    root.resizable(False, False)
    GameWindow(root, Game(ScoreStore(args.score_file)))
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())