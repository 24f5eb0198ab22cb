# dinorun

A small side-scrolling runner. A dinosaur runs along the bottom row of a
16×2 character display. It jumps over ground blocks, ducks under overhead
blocks by staying down, and collects coins. The display is simulated in
memory, custom 5×8 glyphs included, and the game is drawn in a terminal
with `curses`.

## Installing

```
pip install .
```

## Playing

```
dinorun
dinorun --seed 42
```

`--seed` fixes where obstacles appear, so a round can be replayed.

A menu comes first and asks for a difficulty. Medium is the starting
choice; easy scrolls slowest and hard fastest.

| Key                     | Action                              |
|-------------------------|-------------------------------------|
| `4` or Left             | previous difficulty                 |
| `6` or Right            | next difficulty                     |
| `#` or Enter            | start the game                      |
| `2`, Space or Up        | jump while the dinosaur is on ground |
| `*` or `r`              | new round from the score screen     |
| `q` or Esc              | quit                                |

Every scrolling tick scores 10 points and every coin scores 30. The round
ends when the dinosaur hits a block: the terminal beeps, and the score
screen shows the total as `score:0000000` with the hint `press * restart`.
Collecting a coin also beeps.

The command needs a terminal with `curses` support; without it, it prints
an error and exits with status 1.

## Using the pieces

The modules can also be used on their own:

- `dinorun.lcd.CharacterLcd` models a two-line character display with a
  controller-style display RAM: `move_to()`, `put()`, `write()`, `clear()`
  and eight programmable glyphs through `create_custom_char()`. Read it
  back with `cell()`, `visible_rows()` or `render()`, which can draw custom
  glyph codes with text stand-ins.
- `dinorun.music` describes melodies as `PlayingNote` values and turns them
  into square-wave `Tone` timings with `render_note()` and `render_song()`;
  `note_frequency()` and `note_duration_us()` give the figures for a
  single note. `JUMP`, `GET_COIN`, `DIE` and `DEBUG` are ready-made
  melodies.
- `dinorun.game` holds the rules: `new_game()`, `advance()`,
  `check_collision()`, `generate_obstacles()`, `tick_interval()`, the
  drawing helpers `draw_character()`, `draw_obstacles()` and
  `load_custom_chars()`, and a `Game` class that runs one loop iteration
  at a time through `Game.step()` and shows the result with
  `Game.final_screen()`. A `sound` callback given to `Game` receives the
  rendered tones of each melody.
- `dinorun.app.choose_difficulty()` runs the difficulty menu over any
  stream of keypad codes (`dinorun.app.Key`).

## What it does not do

Sound is not synthesised: the terminal game only rings the terminal bell,
and the tones from `dinorun.music` are timings, not audio.

## Running the tests

```
pip install .[test]
pytest
```