from pathlib import Path

from deadline_arcade.circuit_app import BACKGROUND_FILE, FONT_FILE, main, parse_args


def test_parse_args_defaults():
    settings = parse_args([])
    assert settings.assets == Path(".")
    assert settings.glow is True


def test_parse_args_options(tmp_path):
    settings = parse_args(["--assets", str(tmp_path), "--no-glow"])
    assert settings.assets == tmp_path
    assert settings.glow is False


def test_missing_assets_listed(tmp_path):
    (tmp_path / FONT_FILE).write_bytes(b"")
    settings = parse_args(["--assets", str(tmp_path)])
    assert settings.missing_assets() == [tmp_path / BACKGROUND_FILE]


def test_main_fails_without_assets(tmp_path, capsys):
    assert main(["--assets", str(tmp_path)]) == 1
    assert "missing asset" in capsys.readouterr().err