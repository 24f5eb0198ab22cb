"""Rules, state and drawing of the side-scrolling runner game."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, List, Optional, Protocol, Sequence

from dinorun.lcd import CharacterLcd
from dinorun.music import DIE, GET_COIN, PlayingNote, Tone, render_song

EMPTY = 255
"""Location value of an obstacle that is not on screen."""

SPAWN_LOCATION = 32
"""Half-cell location at which coins appear; blocks appear up to 3 further."""

TICK_SCORE = 10
COIN_SCORE = 30

DINO_RUN1 = 0
DINO_RUN2 = 1
DINO_JUMP_HEAD = 2
DINO_JUMP_BODY = 3
BLOCK_LEFT = 4
BLOCK = 5
BLOCK_RIGHT = 6
COIN = 7

GLYPH_PATTERNS = {
    DINO_RUN1: bytes([0x06, 0x0F, 0x04, 0x0E, 0x0E, 0x04, 0x0A, 0x0A]),
    DINO_RUN2: bytes([0x06, 0x0F, 0x04, 0x1D, 0x17, 0x04, 0x1A, 0x03]),
    DINO_JUMP_HEAD: bytes([0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x06, 0x0F]),
    DINO_JUMP_BODY: bytes([0x1D, 0x17, 0x04, 0x0B, 0x11, 0x00, 0x00, 0x00]),
    BLOCK_LEFT: bytes([0x1C] * 8),
    BLOCK: bytes([0x1F] * 8),
    BLOCK_RIGHT: bytes([0x07] * 8),
    COIN: bytes([0x11, 0x0A, 0x1F, 0x04, 0x1F, 0x04, 0x04, 0x04]),
}

TEXT_GLYPHS = {
    DINO_RUN1: "D",
    DINO_RUN2: "d",
    DINO_JUMP_HEAD: "o",
    DINO_JUMP_BODY: "A",
    BLOCK_LEFT: "\u258c",
    BLOCK: "\u2588",
    BLOCK_RIGHT: "\u2590",
    COIN: "$",
}
"""Text stand-ins for the custom glyphs, for drawing the display in a terminal."""


class Position(IntEnum):
    """Pose of the runner."""

    ON_GROUND1 = 1
    ON_GROUND2 = 2
    JUMP_IN_AIR = 3
    WALK_IN_AIR = 4
    WALK_IN_AIR2 = 5
    FALLING = 6

    @property
    def on_ground(self) -> bool:
        return self in (Position.ON_GROUND1, Position.ON_GROUND2)


class Difficulty(IntEnum):
    EASY = 0
    MEDIUM = 1
    HARD = 2


class Collision(Enum):
    """Outcome of checking the runner against the obstacles next to it."""

    NONE = "none"
    COIN = "coin"
    CRASH = "crash"


@dataclass
class Obstacle:
    """A block or coin; ``location`` and ``width`` count half cells."""

    width: int
    location: int = EMPTY

    @property
    def is_empty(self) -> bool:
        return self.location == EMPTY


@dataclass
class Line:
    """What travels along one display row."""

    block: Obstacle
    coin: Obstacle


@dataclass
class GameState:
    position: Position = Position.ON_GROUND1
    jumpable: bool = True
    upper: Line = field(default_factory=lambda: Line(Obstacle(8), Obstacle(1)))
    lower: Line = field(default_factory=lambda: Line(Obstacle(10), Obstacle(1)))
    score: int = 0
    difficulty: Difficulty = Difficulty.MEDIUM


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


Sound = Callable[[List[Tone]], None]


def new_game(difficulty: int = Difficulty.MEDIUM) -> GameState:
    """A fresh game: runner on the ground, nothing on screen, no score."""
    return GameState(difficulty=Difficulty(difficulty))


def load_custom_chars(lcd: CharacterLcd) -> None:
    """Define the game's eight glyphs on the display."""
    for index, pattern in GLYPH_PATTERNS.items():
        lcd.create_custom_char(index, pattern)


_SPACE = ord(" ")

_CHARACTER_CELLS = {
    Position.ON_GROUND1: (_SPACE, DINO_RUN1),
    Position.ON_GROUND2: (_SPACE, DINO_RUN2),
    Position.JUMP_IN_AIR: (DINO_JUMP_HEAD, DINO_JUMP_BODY),
    Position.WALK_IN_AIR: (DINO_RUN1, _SPACE),
    Position.WALK_IN_AIR2: (DINO_RUN2, _SPACE),
    Position.FALLING: (DINO_JUMP_HEAD, DINO_JUMP_BODY),
}


def draw_character(state: GameState, lcd: CharacterLcd) -> None:
    """Draw the runner in the first column of both rows."""
    top, bottom = _CHARACTER_CELLS[state.position]
    lcd.move_to(0, 0)
    lcd.put(top)
    lcd.move_to(1, 0)
    lcd.put(bottom)


def _draw_block(lcd: CharacterLcd, row: int, block: Obstacle) -> None:
    if block.is_empty:
        return
    start = block.location // 2
    width = block.width
    lcd.move_to(row, start)
    if block.location % 2 == 1:
        lcd.put(BLOCK_RIGHT)
        for offset in range((width - 1) // 2):
            lcd.move_to(row, start + offset + 1)
            lcd.put(BLOCK)
        if width % 2 != 1:
            lcd.move_to(row, start + width // 2)
            lcd.put(BLOCK_LEFT)
    else:
        lcd.put(BLOCK_LEFT)
        for offset in range(width // 2):
            lcd.move_to(row, start + offset)
            lcd.put(BLOCK)
        if width % 2 == 1:
            lcd.move_to(row, start + width // 2)
            lcd.put(BLOCK_LEFT)


def _draw_coin(lcd: CharacterLcd, row: int, coin: Obstacle) -> None:
    if not coin.is_empty:
        lcd.move_to(row, coin.location // 2)
        lcd.put(COIN)


def draw_obstacles(state: GameState, lcd: CharacterLcd) -> None:
    """Draw both blocks, then both coins."""
    _draw_block(lcd, 0, state.upper.block)
    _draw_block(lcd, 1, state.lower.block)
    _draw_coin(lcd, 1, state.lower.coin)
    _draw_coin(lcd, 0, state.upper.coin)


def advance_obstacle(obstacle: Obstacle) -> None:
    """Move an obstacle one half cell left; at the edge it shrinks, then goes."""
    if obstacle.is_empty:
        return
    if obstacle.location == 0:
        if obstacle.width > 1:
            obstacle.width -= 1
        else:
            obstacle.location = EMPTY
    else:
        obstacle.location -= 1


_NEXT_POSITION = {
    Position.ON_GROUND1: Position.ON_GROUND2,
    Position.ON_GROUND2: Position.ON_GROUND1,
    Position.JUMP_IN_AIR: Position.WALK_IN_AIR,
    Position.WALK_IN_AIR: Position.WALK_IN_AIR2,
    Position.FALLING: Position.ON_GROUND1,
}


def advance(state: GameState) -> None:
    """One tick: scroll everything, score the tick, animate the runner."""
    for obstacle in (state.upper.block, state.upper.coin, state.lower.block, state.lower.coin):
        advance_obstacle(obstacle)
    state.score += TICK_SCORE
    if state.position is Position.WALK_IN_AIR2:
        # Keep walking along the top while a lower block is still underneath.
        if state.lower.block.location in (0, 1):
            state.position = Position.WALK_IN_AIR
        else:
            state.position = Position.FALLING
    else:
        state.position = _NEXT_POSITION[Position(state.position)]


def check_collision(state: GameState) -> Collision:
    """Check the runner's row; a coin it touches is collected and scored."""
    on_ground = Position(state.position).on_ground
    if state.lower.block.location <= 1 and on_ground:
        return Collision.CRASH
    if state.upper.block.location <= 1 and not on_ground:
        return Collision.CRASH
    result = Collision.NONE
    if state.lower.coin.location <= 1 and on_ground:
        state.lower.coin.location = EMPTY
        state.score += COIN_SCORE
        result = Collision.COIN
    if state.upper.coin.location <= 1 and not on_ground:
        state.upper.coin.location = EMPTY
        state.score += COIN_SCORE
        result = Collision.COIN
    return result


def _spawn_block(block: Obstacle, rng: RandomSource) -> None:
    if rng.randrange(3) == 0:
        block.location = SPAWN_LOCATION + rng.randrange(4) if rng.randrange(3) == 0 else EMPTY
        block.width = 4 + rng.randrange(11)


def _spawn_coin(line: Line, rng: RandomSource) -> None:
    if line.coin.is_empty and line.block.location + line.block.width < 28:
        line.coin.location = EMPTY if rng.randrange(5) == 0 else SPAWN_LOCATION


def generate_obstacles(state: GameState, rng: RandomSource) -> None:
    """Maybe bring in new blocks and coins at the right edge."""
    lower, upper = state.lower, state.upper
    if lower.block.is_empty:
        if lower.coin.is_empty:
            _spawn_block(lower.block, rng)
    elif upper.block.is_empty:
        if upper.coin.is_empty and lower.block.location + lower.block.width < 28:
            _spawn_block(upper.block, rng)
    _spawn_coin(lower, rng)
    _spawn_coin(upper, rng)


_TICK_INTERVALS = {Difficulty.EASY: 8, Difficulty.MEDIUM: 5, Difficulty.HARD: 2}


def tick_interval(difficulty: int) -> int:
    """Number of loop iterations between scrolling ticks."""
    return _TICK_INTERVALS[Difficulty(difficulty)]


class Game:
    """Runs the game loop one iteration at a time against a display."""

    def __init__(
        self,
        state: GameState,
        lcd: CharacterLcd,
        rng: Optional[RandomSource] = None,
        sound: Optional[Sound] = None,
    ) -> None:
        self.state = state
        self.lcd = lcd
        self.rng = rng if rng is not None else random.Random()
        self.sound = sound
        self.interval = tick_interval(state.difficulty)
        self.over = False
        self._counter = 0

    def step(self, jump_pressed: bool) -> bool:
        """Run one iteration; return False once the runner has crashed."""
        if self.over:
            raise RuntimeError("the game is over")
        state = self.state
        on_ground = Position(state.position).on_ground
        tick_due = self._counter >= self.interval
        if jump_pressed and on_ground:
            state.position = Position.JUMP_IN_AIR
            if self._collide():
                return False
        generate_obstacles(state, self.rng)
        if tick_due:
            self._counter = 0
            advance(state)
            if self._collide():
                return False
        self.lcd.clear()
        draw_character(state, self.lcd)
        draw_obstacles(state, self.lcd)
        self._counter += 1
        return True

    def final_screen(self) -> List[str]:
        """Show the score and the restart hint; return the rows shown."""
        self.lcd.clear()
        self.lcd.move_to(0, 0)
        self.lcd.write(f"score:{self.state.score:07d}")
        self.lcd.move_to(1, 0)
        self.lcd.write("press * restart")
        return self.lcd.render()

    def _collide(self) -> bool:
        result = check_collision(self.state)
        if result is Collision.CRASH:
            self._play(DIE)
            self.over = True
            return True
        if result is Collision.COIN:
            self._play(GET_COIN)
        return False

    def _play(self, song: Sequence[PlayingNote]) -> None:
        if self.sound is not None:
            self.sound(list(render_song(song, speed=1, pitch=1)))