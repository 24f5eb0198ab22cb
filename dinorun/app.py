"""Terminal front end: difficulty menu and the game loop on a simulated LCD."""

from __future__ import annotations

import argparse
import random
import sys
import time
from enum import IntEnum
from typing import Iterable, Iterator, Optional

from dinorun.game import TEXT_GLYPHS, Difficulty, Game, load_custom_chars, new_game
from dinorun.lcd import CharacterLcd

_MENU_TITLE = "keeping up: mode"
_LABELS = {
    Difficulty.EASY: "<     easy     >",
    Difficulty.MEDIUM: "<    medium    >",
    Difficulty.HARD: "<     hard     >",
}
_SAMPLE_DELAY = 0.03
_SCORE_PAUSE = 3.0


class Key(IntEnum):
    """Keypad codes (row * 4 + column + 1); zero when nothing is pressed."""

    NONE = 0
    JUMP = 2
    LEFT = 5
    RIGHT = 7
    RESTART = 13
    CONFIRM = 15


def _next_press(samples: Iterator[int]) -> int:
    for sample in samples:
        if sample:
            return sample
    raise StopIteration


def choose_difficulty(
    keys: Iterable[int], lcd: CharacterLcd, difficulty: int = Difficulty.MEDIUM
) -> Difficulty:
    """Run the difficulty menu over a stream of keypad samples.

    Left and right cycle through the levels, confirm accepts. The menu also
    ends when the samples run out, keeping the current choice.
    """
    samples = iter(keys)
    chosen = Difficulty(difficulty)
    lcd.clear()
    lcd.move_to(0, 0)
    lcd.write(_MENU_TITLE)
    lcd.move_to(1, 0)
    lcd.write(_LABELS[Difficulty.MEDIUM])
    try:
        while next(samples) != Key.CONFIRM:
            pressed = _next_press(samples)
            if pressed == Key.CONFIRM:
                break
            if pressed == Key.LEFT:
                chosen = Difficulty((chosen + 2) % 3)
            elif pressed == Key.RIGHT:
                chosen = Difficulty((chosen + 1) % 3)
            lcd.move_to(1, 0)
            lcd.write(_LABELS[chosen])
    except StopIteration:
        pass
    return chosen


class _Quit(Exception):
    pass


class _Keyboard:
    """Keypad samples read from a curses window, repainting the LCD each time."""

    def __init__(self, screen, lcd: CharacterLcd, keymap: dict, curses_module) -> None:
        self._screen = screen
        self._lcd = lcd
        self._keymap = keymap
        self._curses = curses_module

    def __iter__(self) -> "_Keyboard":
        return self

    def __next__(self) -> int:
        self._paint()
        time.sleep(_SAMPLE_DELAY)
        code = self._screen.getch()
        if code in (ord("q"), ord("Q"), 27):
            raise _Quit
        return self._keymap.get(code, Key.NONE)

    def pause(self, seconds: float) -> None:
        self._paint()
        time.sleep(seconds)
        self._curses.flushinp()

    def _paint(self) -> None:
        rows = self._lcd.render(TEXT_GLYPHS)
        border = "+" + "-" * self._lcd.columns + "+"
        lines = [border, *("|" + row + "|" for row in rows), border, "",
                 "2/space jump  4/6 choose  # confirm  * restart  q quit"]
        self._screen.erase()
        try:
            for y, line in enumerate(lines):
                self._screen.addstr(y, 0, line)
        except self._curses.error:
            pass
        self._screen.refresh()


def _run(screen, curses_module, rng: random.Random) -> None:
    try:
        curses_module.curs_set(0)
    except curses_module.error:
        pass
    screen.nodelay(True)
    screen.keypad(True)
    keymap = {
        ord("2"): Key.JUMP, ord(" "): Key.JUMP, curses_module.KEY_UP: Key.JUMP,
        ord("4"): Key.LEFT, curses_module.KEY_LEFT: Key.LEFT,
        ord("6"): Key.RIGHT, curses_module.KEY_RIGHT: Key.RIGHT,
        ord("#"): Key.CONFIRM, 10: Key.CONFIRM, 13: Key.CONFIRM,
        curses_module.KEY_ENTER: Key.CONFIRM,
        ord("*"): Key.RESTART, ord("r"): Key.RESTART,
    }
    lcd = CharacterLcd()
    load_custom_chars(lcd)
    keyboard = _Keyboard(screen, lcd, keymap, curses_module)

    def beep(_tones) -> None:
        curses_module.beep()

    while True:
        state = new_game(Difficulty.MEDIUM)
        state.difficulty = choose_difficulty(keyboard, lcd, state.difficulty)
        game = Game(state, lcd, rng, beep)
        while game.step(next(keyboard) == Key.JUMP):
            pass
        game.final_screen()
        keyboard.pause(_SCORE_PAUSE)
        while next(keyboard) != Key.RESTART:
            pass


def main(argv: Optional[list] = None) -> int:
    """Play the runner game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="dinorun", description="Jump over blocks and collect coins on a 16x2 display."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle placement")
    args = parser.parse_args(argv)
    try:
        import curses
    except ImportError:
        print("dinorun: this terminal has no curses support", file=sys.stderr)
        return 1
    rng = random.Random(args.seed)
    try:
        curses.wrapper(_run, curses, rng)
    except (_Quit, KeyboardInterrupt):
        pass
    return 0