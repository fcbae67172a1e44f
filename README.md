# snakegrid

A classic snake game played on a 30 × 30 grid. You steer the snake, eat food
to grow and score points, and the game ends when the snake hits a wall or its
own body. The best score is kept between sessions.

## Installing

```
pip install .
```

The game window uses tkinter, which ships with most Python installations.

## Playing

```
snakegrid
```

- Press **R** to start, or use the start button. After a game ends, press
  **R** again to play another round.
- Steer with the **arrow keys** or **W A S D**. The snake cannot turn straight
  back on itself, and it turns at most once per step.
- Press **Space** or the pause button to pause and resume.
- The restart button starts a new game at once, at the normal 150 ms step.
- Choose 1×, 1.5× or 2× speed. At 1× the snake moves every 150 ms, at 1.5×
  every 100 ms and at 2× every 75 ms.

The best score is stored in `save.txt` in the current working directory. Use
`--score-file PATH` to keep it somewhere else:

```
snakegrid --score-file ~/snake-best.txt
```

## Using the game logic

The rules of the game do not depend on the window, so you can drive them
yourself:

```python
import random

from snakegrid.game import Game, ScoreStore

game = Game(ScoreStore("save.txt"), random.Random(0))
game.start()
game.handle_key("Up")
game.tick()
print(game.snake.head, game.score)
```

- `snakegrid.snake.Snake` holds the body (a list of `(x, y)` cells, head
  first) and the `Direction` it is moving in. It offers `move()`, `grow()`,
  `check_collision()` and `set_direction()`.
- `snakegrid.food.Food` places food at random on cells the snake does not
  occupy; `generate(body)` picks a new cell and raises `ValueError` when none
  is free.
- `snakegrid.game.Game` adds scoring, pausing, speed selection (`Speed`) and
  the game-over rules. `tick()` advances one step; `handle_key()` takes key
  names such as `"r"`, `"space"`, `"up"` or `"w"`. The game only records
  whether its timer should run and at what `interval`; calling `tick()` on
  time is up to the caller.
- `snakegrid.game.ScoreStore` reads and writes the best score; a file that
  cannot be read counts as a score of 0.
- `snakegrid.app.GameWindow` draws a `Game` on a Tk canvas and schedules its
  ticks.

## Running the tests

```
pip install .[test]
pytest
```