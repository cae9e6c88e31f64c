import random
from pathlib import Path

import pytest

from deadline_arcade.invaders import (
    CODE_LENGTH,
    CODE_PREFIX,
    TUTORIAL_WIN_SCORE,
    WIN_SCORE,
    generate_encrypted_code,
)
from deadline_arcade.invaders_app import (
    GREEN,
    RED,
    WHITE,
    Settings,
    end_screen_lines,
    main,
    parse_args,
)


def test_default_settings_use_full_win_score():
    settings = parse_args([])
    assert settings.win_score == WIN_SCORE
    assert settings.assets == Path(".")
    assert settings.seed is None


def test_tutorial_mode_lowers_win_score():
    assert parse_args(["--tutorial"]).win_score == TUTORIAL_WIN_SCORE


def test_explicit_win_score_and_seed():
    settings = parse_args(["--win-score", "50", "--seed", "7", "--assets", "data"])
    assert settings.win_score == 50
    assert settings.seed == 7
    assert settings.assets == Path("data")


def test_non_positive_win_score_is_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--win-score", "0"])


def test_tutorial_and_win_score_conflict():
    with pytest.raises(SystemExit):
        parse_args(["--tutorial", "--win-score", "30"])


def test_end_screen_header_lines():
    lines = end_screen_lines("Ada", 120, False)
    assert [line.text for line in lines[:3]] == ["Game Over!", "Player: Ada", "Score: 120"]
    assert all(line.color == WHITE for line in lines[:3])
    assert lines[0].pos == (320, 180)


def test_end_screen_loss_says_try_again():
    lines = end_screen_lines("Ada", 40, False)
    assert len(lines) == 4
    assert lines[-1].text == "Try Again!"
    assert lines[-1].color == RED
    assert lines[-1].pos == (300, 310)


def test_end_screen_win_shows_code():
    lines = end_screen_lines("Ada", 200, True, random.Random(3))
    code = lines[-1]
    assert code.color == GREEN
    assert code.text.startswith(CODE_PREFIX)
    letters = code.text[len(CODE_PREFIX):]
    assert len(letters) == CODE_LENGTH
    assert letters.isalpha() and letters.isupper()


def test_end_screen_code_follows_rng():
    first = end_screen_lines("Ada", 200, True, random.Random(11))[-1].text
    expected = generate_encrypted_code(random.Random(11))
    assert first == expected


def test_missing_assets_listed(tmp_path):
    (tmp_path / "arial.ttf").write_bytes(b"")
    missing = Settings(assets=tmp_path).missing_assets()
    assert tmp_path / "arial.ttf" not in missing
    assert tmp_path / "ship1.png" in missing
    assert len(missing) == 3


def test_main_reports_missing_assets(tmp_path, capsys):
    status = main(["--assets", str(tmp_path)])
    assert status == 1
    assert "arial.ttf" in capsys.readouterr().err