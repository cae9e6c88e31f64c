from deadline_arcade.highscores import (
    NO_SCORES_TEXT,
    format_score_lines,
    load_scores,
    sorted_scores,
    update_score,
)


def test_missing_file_has_no_scores(tmp_path):
    assert load_scores(tmp_path / "absent.txt") == []


def test_update_creates_file(tmp_path):
    path = tmp_path / "highscores.txt"
    update_score(path, "alice", 10)
    assert path.read_text() == "alice 10\n"
    assert load_scores(path) == [("alice", 10)]


def test_update_accumulates_points(tmp_path):
    path = tmp_path / "highscores.txt"
    update_score(path, "alice", 10)
    update_score(path, "alice", 5)
    assert load_scores(path) == [("alice", 15)]


def test_new_player_is_appended_after_existing(tmp_path):
    path = tmp_path / "highscores.txt"
    path.write_text("bob 3\nalice 7\n")
    result = update_score(path, "carol", 4)
    assert result == [("bob", 3), ("alice", 7), ("carol", 4)]
    assert load_scores(path) == result


def test_every_duplicate_entry_is_updated(tmp_path):
    path = tmp_path / "highscores.txt"
    path.write_text("bob 1\nbob 2\n")
    update_score(path, "bob", 10)
    assert load_scores(path) == [("bob", 11), ("bob", 12)]


def test_load_stops_at_malformed_score(tmp_path):
    path = tmp_path / "highscores.txt"
    path.write_text("bob 3\nalice x\ncarol 2\n")
    assert load_scores(path) == [("bob", 3)]


def test_sorted_scores_descending():
    scores = [("a", 1), ("b", 9), ("c", 5)]
    result = sorted_scores(scores)
    assert result == [("b", 9), ("c", 5), ("a", 1)]
    assert sorted(result) == sorted(scores)


def test_format_empty_table():
    assert format_score_lines([]) == [NO_SCORES_TEXT]
    assert NO_SCORES_TEXT == "No high scores yet!"


def test_format_lines():
    assert format_score_lines([("bob", 3), ("eve", 8)]) == ["bob: 3", "eve: 8"]