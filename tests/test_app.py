import pytest

from dinorun.app import Key, choose_difficulty, main
from dinorun.game import Difficulty
from dinorun.lcd import CharacterLcd


def test_confirm_immediately_keeps_difficulty():
    lcd = CharacterLcd()
    assert choose_difficulty([Key.CONFIRM], lcd) is Difficulty.MEDIUM
    assert lcd.render() == ["keeping up: mode", "<    medium    >"]


def test_right_then_confirm_selects_hard():
    lcd = CharacterLcd()
    samples = [Key.NONE, Key.NONE, Key.RIGHT, Key.NONE, Key.CONFIRM]
    assert choose_difficulty(samples, lcd) is Difficulty.HARD
    assert lcd.render()[1] == "<     hard     >"


def test_left_selects_easy():
    lcd = CharacterLcd()
    samples = [Key.NONE, Key.LEFT, Key.CONFIRM]
    assert choose_difficulty(samples, lcd) is Difficulty.EASY
    assert lcd.render()[1] == "<     easy     >"


def test_right_wraps_around():
    lcd = CharacterLcd()
    samples = [Key.NONE, Key.RIGHT, Key.NONE, Key.RIGHT, Key.NONE, Key.CONFIRM]
    assert choose_difficulty(samples, lcd) is Difficulty.EASY


def test_left_and_right_cancel_out():
    lcd = CharacterLcd()
    samples = [Key.NONE, Key.LEFT, Key.NONE, Key.RIGHT, Key.CONFIRM]
    assert choose_difficulty(samples, lcd, Difficulty.HARD) is Difficulty.HARD


def test_other_keys_are_ignored():
    lcd = CharacterLcd()
    samples = [Key.NONE, Key.JUMP, Key.NONE, Key.RESTART, Key.CONFIRM]
    assert choose_difficulty(samples, lcd) is Difficulty.MEDIUM
    assert lcd.render()[1] == "<    medium    >"


def test_exhausted_samples_keep_choice():
    lcd = CharacterLcd()
    assert choose_difficulty([Key.NONE, Key.LEFT, Key.NONE], lcd) is Difficulty.EASY


def test_invalid_start_difficulty():
    with pytest.raises(ValueError):
        choose_difficulty([], CharacterLcd(), 5)


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit) as excinfo:
        main(["--seed", "abc"])
    assert excinfo.value.code == 2