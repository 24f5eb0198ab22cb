import pytest

from dinorun.music import (
    DEBUG,
    DIE,
    GET_COIN,
    JUMP,
    Duration,
    Note,
    PlayingNote,
    Tone,
    note_duration_us,
    note_frequency,
    render_note,
    render_song,
)


def test_a4_is_base_frequency():
    assert note_frequency(PlayingNote(Note.A, Duration.WHOLE, False, 4)) == 220.0


def test_octave_and_pitch_double_frequency():
    low = note_frequency(PlayingNote(Note.C, Duration.HALF, False, 4))
    up_octave = note_frequency(PlayingNote(Note.C, Duration.HALF, False, 5))
    up_pitch = note_frequency(PlayingNote(Note.C, Duration.HALF, False, 4), pitch=1)
    assert up_octave == pytest.approx(2 * low)
    assert up_pitch == pytest.approx(up_octave)


def test_semitones_increase_frequency():
    freqs = [note_frequency(PlayingNote(n, Duration.HALF, False, 4)) for n in Note]
    assert freqs == sorted(freqs)
    assert len(set(freqs)) == 12


def test_rest_has_no_frequency():
    with pytest.raises(ValueError):
        note_frequency(PlayingNote(Note.A, Duration.HALF, True, 4))


def test_whole_note_duration():
    assert note_duration_us(PlayingNote(Note.A, Duration.WHOLE)) == 800000


def test_duration_halves_per_step_and_speed():
    whole = PlayingNote(Note.A, Duration.WHOLE)
    half = PlayingNote(Note.A, Duration.HALF)
    assert note_duration_us(half) * 2 == note_duration_us(whole)
    assert note_duration_us(whole, speed=1) == note_duration_us(half)


def test_rest_renders_as_silence_of_full_length():
    rest = PlayingNote(Note.E, Duration.WHOLE, True, 5)
    tone = render_note(rest, speed=1)
    assert tone.is_rest
    assert tone.cycles == 0
    assert tone.duration_us == note_duration_us(rest, speed=1)


def test_tone_fits_within_note_length():
    note = PlayingNote(Note.G, Duration.HALF, False, 5)
    tone = render_note(note, speed=1, pitch=1)
    assert not tone.is_rest
    assert tone.cycles > 0
    assert tone.duration_us == tone.cycles * 2 * tone.half_period_us
    assert tone.duration_us <= note_duration_us(note, speed=1)
    assert note_duration_us(note, speed=1) - tone.duration_us < 2 * tone.half_period_us


def test_higher_note_has_shorter_half_period():
    low = render_note(PlayingNote(Note.A, Duration.HALF, False, 4))
    high = render_note(PlayingNote(Note.A, Duration.HALF, False, 5))
    assert high.half_period_us < low.half_period_us
    assert high.cycles > low.cycles


def test_too_high_frequency_raises():
    with pytest.raises(ValueError):
        render_note(PlayingNote(Note.A, Duration.HALF, False, 20))


def test_render_song_keeps_order_and_length():
    tones = list(render_song(DIE, speed=1, pitch=1))
    assert len(tones) == len(DIE)
    freqs = [t.frequency for t in tones]
    for higher, lower in zip(freqs, freqs[1:]):
        assert higher == pytest.approx(2 * lower)


def test_song_tables():
    assert len(DEBUG) == 14
    assert sum(n.is_rest for n in DEBUG) == 4
    assert all(n.duration is Duration.HALF for n in JUMP + GET_COIN + DIE)
    assert GET_COIN[0] == GET_COIN[1]
    assert isinstance(render_note(JUMP[0]), Tone)
    assert render_note(JUMP[0]).frequency < render_note(JUMP[1]).frequency * 2