# deadline_arcade

Six small, deadline-themed games built on pygame. Each game is its own
command. The rules of most games live in plain modules
(`invaders`, `textinput`, `highscores`, `rsa`, `circuit`, `puzzle`) that can
be used and tested without opening a window; the `*_app` modules and
`scenes` hold the windows, input and drawing.

## Installing

```
pip install .
```

With the test suite:

```
pip install ".[test]"
pytest
```

## Assets

Fonts and images are not shipped with the package. Every command takes
`--assets DIR` (default: the current directory) naming the directory that
holds them. A missing required file is reported on standard error and the
command exits with status 1.

| Command             | Required                                                    | Optional                          |
|---------------------|-------------------------------------------------------------|-----------------------------------|
| `deadline-invaders` | `arial.ttf`, `space_background.png`, `ship1.png`, `ship2.png` |                                 |
| `escape-room-menu`  | `menusection/creepster.ttf`                                 | `menusection/menu_background.png` |
| `rsa-decryptor`     | `DejaVuSans.ttf`                                            | `background.png`                  |
| `circuit-maze`      | `arial.ttf`, `background.png`                               |                                   |
| `scene-switcher`    | `scene1.png` to `scene5.png`                                |                                   |
| `deadline-decoder`  | `impact.ttf`                                                | `puzzleimage.png`, `decryptorimage.png` |

## The games

### Deadline Invaders

```
deadline-invaders [--assets DIR] [--tutorial | --win-score N] [--seed N]
```

Type your name and press Enter (closing the window here uses the name
"Player"). Then shoot down the falling "PROJECT", "QUIZ", "LAB" and "EXAM"
ships: Left and Right move, Space fires. A new ship appears about once a
second, and each hit is worth 10 points. The game ends when you reach the
winning score (200 by default, 100 with `--tutorial`, or `N` with
`--win-score`) or when a ship passes the bottom of the screen. The end screen
shows your name and score for five seconds, with a random sixteen-letter
"Encrypted code" if you won or "Try Again!" if you did not. `--seed` makes
ship placement and the code repeatable.

Rules: `deadline_arcade.invaders` (`InvadersGame`, `Rect`, `Bullet`, `Enemy`,
`rects_collide`, `generate_encrypted_code`, `glow_intensity`); name entry:
`deadline_arcade.textinput.NameEntry`; the end-screen text:
`deadline_arcade.invaders_app.end_screen_lines`.

### Escape Room Conquest menu

```
escape-room-menu [--assets DIR] [--scores FILE]
```

A menu with New Game, Resume Game, Help, Map, Highest Score and Exit.
Buttons turn white under the pointer and black once clicked.

- **New Game** asks for a name and adds 10 points to that player in the score
  file (default `highscores.txt`), creating an entry if there is none.
- **Highest Score** shows every player, best first, or "No high scores yet!";
  Escape or closing the window returns to the menu.
- **Exit** closes the menu.

The score file holds one `name score` pair per line. It is handled by
`deadline_arcade.highscores` (`load_scores`, `sorted_scores`, `update_score`,
`format_score_lines`).

### RSA Decryptor

```
rsa-decryptor [--assets DIR]
```

Enter your name, then fill in `n`, `e` and the encrypted text; click a field
to type into it, and press Decrypt. The one correct combination shows a
hidden message in green; anything else shows "Access Denied. Try again.", or
"Invalid input" when `n` or `e` is not a number, in red.

`deadline_arcade.rsa` provides `mod_exp`, `decrypt_rsa`, `check_access`,
`Focus` and the `DecryptorForm` the window uses.

### Circuit Maze

```
circuit-maze [--assets DIR] [--no-glow]
```

A 6×6 board with 60 seconds on the clock. Click the tiles of the hidden path,
in order; the path is `circuit.VALID_PATH`, given as (row, column). The
component labels (`S`, `R`, `W`, `D`, `C`, `B`, `E`) are placed with the two
coordinates swapped, so they do not mark the tiles to click. A wrong click or
running out of time loses; completing the path wins. `--no-glow` turns off
the pulsing background and labels.

Rules: `deadline_arcade.circuit` (`CircuitMaze`, `Tile`, `TileType`,
`is_valid_step`, `glow_level`).

### Scene switcher

```
scene-switcher [--assets DIR]
```

Shows `scene1.png`; the keys 1 to 5 fade from black to the matching scene.
Pressing the key of the scene already shown does nothing. See
`deadline_arcade.scenes.SceneSwitcher` and `fade_alphas`.

### Deadline Decoder

```
deadline-decoder [--assets DIR]
```

Enter your name, then click the monitor area to start three riddles, each
with a 30-second clock. Type an answer and press Enter; a wrong answer leaves
the riddle open until the time runs out. After a riddle is solved or timed
out, Space moves to the next one. After the last riddle a "Decryptor
Unlocked" window shows `decryptorimage.png` until a key is pressed or the
window is closed.

Rules: `deadline_arcade.puzzle` (`Puzzle`, `PuzzleSession`,
`default_puzzles`).

## What the package does not do

The games are separate commands and are not linked together. The Escape Room
Conquest menu does not start any game: New Game only records the name and
its 10 points, and Resume Game, Help and Map only print their own label to
standard output. The RSA decryptor only compares its fields with the expected
values; `decrypt_rsa` is available as a function but the window does not call
it.