import math

from deadline_arcade.rsa_app import background_offset, main


def test_offset_at_rest():
    assert background_offset(0.0) == 0


def test_offset_extremes():
    assert background_offset(math.pi / 2) == 5
    assert background_offset(3 * math.pi / 2) == -5


def test_offset_stays_within_five_pixels():
    offsets = {background_offset(step * 0.05) for step in range(400)}
    assert all(-5 <= value <= 5 for value in offsets)
    assert 5 in offsets and -4 in offsets


def test_offset_truncates_towards_zero():
    t = math.asin(0.5)
    assert background_offset(t) == 2
    assert background_offset(-t) == -2


def test_main_fails_without_font(tmp_path):
    assert main(["--assets", str(tmp_path)]) == 1