"""Square-wave melodies played on a buzzer, described as timed tones."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Optional

TICK_US = 10
"""Length in microseconds of one timing tick of the buzzer driver."""

_WHOLE_NOTE_TICKS = 80000.0
_BASE_FREQUENCY = 220.0
_HALF_PERIOD_SCALE = 50000.0


class Note(IntEnum):
    """Pitch class, counted in semitones above A."""

    A = 0
    A_SHARP = 1
    B = 2
    C = 3
    C_SHARP = 4
    D = 5
    D_SHARP = 6
    E = 7
    F = 8
    F_SHARP = 9
    G = 10
    G_SHARP = 11


class Duration(IntEnum):
    """Note length; each step halves the previous one."""

    WHOLE = 0
    HALF = 1
    QUARTER = 2
    EIGHTH = 3


@dataclass(frozen=True)
class PlayingNote:
    """One note (or rest) of a melody."""

    note: Note
    duration: Duration
    is_rest: bool = False
    octave: int = 4


@dataclass(frozen=True)
class Tone:
    """What the buzzer does for one note.

    A sounding tone toggles the output ``cycles`` times, high then low, each
    half lasting ``half_period_us``. A rest keeps silent for ``duration_us``.
    """

    frequency: Optional[float]
    half_period_us: int
    cycles: int
    duration_us: int

    @property
    def is_rest(self) -> bool:
        return self.frequency is None


def _duration_ticks(note: PlayingNote, speed: int) -> int:
    return int(_WHOLE_NOTE_TICKS * 0.5 ** (int(note.duration) + speed))


def note_frequency(note: PlayingNote, pitch: int = 0) -> float:
    """Frequency in hertz of a note, shifted by ``pitch`` octaves."""
    if note.is_rest:
        raise ValueError("a rest has no frequency")
    semitones = int(note.note) + 12.0 * (note.octave - 4 + pitch)
    return _BASE_FREQUENCY * 2.0 ** (semitones / 12.0)


def note_duration_us(note: PlayingNote, speed: int = 0) -> int:
    """Total length of a note in microseconds; each speed step halves it."""
    return _duration_ticks(note, speed) * TICK_US


def render_note(note: PlayingNote, speed: int = 0, pitch: int = 0) -> Tone:
    """Work out how the buzzer plays a single note."""
    ticks = _duration_ticks(note, speed)
    if note.is_rest:
        return Tone(frequency=None, half_period_us=0, cycles=0, duration_us=ticks * TICK_US)
    frequency = note_frequency(note, pitch)
    half_period = int(_HALF_PERIOD_SCALE / frequency)
    if half_period <= 0:
        raise ValueError(f"frequency {frequency:.1f} Hz is too high to play")
    cycles = ticks // (2 * half_period)
    return Tone(
        frequency=frequency,
        half_period_us=half_period * TICK_US,
        cycles=cycles,
        duration_us=cycles * 2 * half_period * TICK_US,
    )


def render_song(song: Iterable[PlayingNote], speed: int = 0, pitch: int = 0) -> Iterator[Tone]:
    """Yield the tones of a melody in order."""
    for note in song:
        yield render_note(note, speed, pitch)


DEBUG = (
    *(PlayingNote(Note.E, Duration.WHOLE, False, 5),) * 4,
    *(PlayingNote(Note.E, Duration.WHOLE, True, 5),) * 4,
    *(PlayingNote(Note.B, Duration.HALF, False, 5),) * 4,
    PlayingNote(Note.E, Duration.WHOLE, False, 5),
    PlayingNote(Note.B, Duration.HALF, False, 5),
)

JUMP = (
    PlayingNote(Note.D, Duration.HALF, False, 4),
    PlayingNote(Note.B, Duration.HALF, False, 4),
)

GET_COIN = (
    PlayingNote(Note.G, Duration.HALF, False, 5),
    PlayingNote(Note.G, Duration.HALF, False, 5),
)

DIE = (
    PlayingNote(Note.A, Duration.HALF, False, 5),
    PlayingNote(Note.A, Duration.HALF, False, 4),
    PlayingNote(Note.A, Duration.HALF, False, 3),
    PlayingNote(Note.A, Duration.HALF, False, 2),
)