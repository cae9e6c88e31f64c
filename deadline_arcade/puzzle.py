"""Rules of the Deadline Decoder riddle game."""

from __future__ import annotations

from dataclasses import dataclass, field

from deadline_arcade.invaders import Rect

PUZZLE_TIME_LIMIT = 30
MONITOR_AREA = Rect(320, 256, 512, 320)

START_PROMPT = "Click the screen to start the puzzle..."
SOLVED_TEXT = "Correct! Press SPACE for next puzzle."
FAILED_TEXT = "Time's up! Press SPACE to try next puzzle."


@dataclass(frozen=True)
class Puzzle:
    """A riddle and its expected answer."""

    question: str
    answer: str


def default_puzzles() -> list[Puzzle]:
    """The riddles asked, in order."""
    return [
        Puzzle("I have keys but no locks, I have space but no room. What am I?", "keyboard"),
        Puzzle("What has to be broken before you use it?", "egg"),
        Puzzle("The more you take, the more you leave behind. What am I?", "footsteps"),
    ]


def _strictly_inside(x: int, y: int, rect: Rect) -> bool:
    return rect.x < x < rect.x + rect.w and rect.y < y < rect.y + rect.h


@dataclass
class PuzzleSession:
    """Progress through the riddles; times are in milliseconds."""

    puzzles: list[Puzzle] = field(default_factory=default_puzzles)
    current: int = -1
    user_input: str = ""
    started: bool = False
    solved: bool = False
    failed: bool = False
    finished: bool = False
    start_time: int = 0

    def __post_init__(self) -> None:
        if not self.puzzles:
            raise ValueError("at least one puzzle is needed")

    @property
    def active(self) -> bool:
        """True while the current riddle accepts an answer."""
        return self.started and not (self.solved or self.failed or self.finished)

    @property
    def current_puzzle(self) -> Puzzle | None:
        if 0 <= self.current < len(self.puzzles):
            return self.puzzles[self.current]
        return None

    def _begin(self, now: int) -> None:
        self.started = True
        self.solved = False
        self.failed = False
        self.user_input = ""
        self.start_time = now

    def click(self, x: int, y: int, now: int) -> bool:
        """Start the first riddle when the monitor is clicked; True if it started."""
        if self.started or not _strictly_inside(x, y, MONITOR_AREA):
            return False
        self.current = 0
        self._begin(now)
        return True

    def type_char(self, char: str) -> None:
        """Append a printable ASCII character to the answer."""
        if self.active and len(char) == 1 and 32 <= ord(char) <= 126:
            self.user_input += char

    def backspace(self) -> None:
        """Drop the last character of the answer."""
        if self.active and self.user_input:
            self.user_input = self.user_input[:-1]

    def submit(self) -> bool:
        """Check the answer; True once the riddle is solved."""
        puzzle = self.current_puzzle
        if self.active and puzzle is not None and self.user_input == puzzle.answer:
            self.solved = True
        return self.solved

    def advance(self, now: int) -> bool:
        """Move past a solved or failed riddle; True if a new one began."""
        if self.finished or not (self.solved or self.failed):
            return False
        self.current += 1
        if self.current < len(self.puzzles):
            self._begin(now)
            return True
        self.finished = True
        return False

    def seconds_left(self, now: int) -> int:
        """Whole seconds left on the current riddle's clock."""
        return PUZZLE_TIME_LIMIT - (now - self.start_time) // 1000

    def update(self, now: int) -> None:
        """Fail the current riddle once its time has run out."""
        if self.started and not self.solved and self.seconds_left(now) <= 0:
            self.failed = True

    def status_text(self, now: int) -> str:
        """The main message shown on screen."""
        if not self.started:
            return START_PROMPT
        if self.solved:
            return SOLVED_TEXT
        if self.failed:
            return FAILED_TEXT
        puzzle = self.current_puzzle
        question = puzzle.question if puzzle is not None else ""
        return (
            f"{question}\n\nYour Answer: {self.user_input}"
            f"\n\nTime Left: {self.seconds_left(now)}"
        )