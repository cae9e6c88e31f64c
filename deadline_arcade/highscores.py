"""Persistent player score table kept as a plain text file."""

from __future__ import annotations

from pathlib import Path

NO_SCORES_TEXT = "No high scores yet!"

Score = tuple[str, int]


def load_scores(path: str | Path) -> list[Score]:
    """Read ``name score`` pairs in file order.

    A missing file holds no scores. Reading stops at the first pair whose
    score is not an integer, and a trailing name without a score is dropped.
    """
    try:
        tokens = Path(path).read_text(encoding="utf-8").split()
    except FileNotFoundError:
        return []

    scores: list[Score] = []
    for name, raw in zip(tokens[::2], tokens[1::2]):
        try:
            scores.append((name, int(raw)))
        except ValueError:
            break
    return scores


def sorted_scores(scores: list[Score]) -> list[Score]:
    """Scores from highest to lowest."""
    return sorted(scores, key=lambda entry: entry[1], reverse=True)


def update_score(path: str | Path, player: str, points: int) -> list[Score]:
    """Add ``points`` to every entry for ``player``, or append a new entry.

    The whole table is written back and returned.
    """
    found = False
    scores: list[Score] = []
    for name, score in load_scores(path):
        if name == player:
            score += points
            found = True
        scores.append((name, score))
    if not found:
        scores.append((player, points))

    Path(path).write_text(
        "".join(f"{name} {score}\n" for name, score in scores), encoding="utf-8"
    )
    return scores


def format_score_lines(scores: list[Score]) -> list[str]:
    """Lines shown in the score window, in the order given."""
    if not scores:
        return [NO_SCORES_TEXT]
    return [f"{name}: {score}" for name, score in scores]