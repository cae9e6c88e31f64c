"""Keyboard name entry shared by the game screens."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_NAME = "Player"
CURSOR = "_"


@dataclass
class NameEntry:
    """Collects a player's name one text event at a time."""

    text: str = ""
    done: bool = False

    def type(self, text: str) -> None:
        """Append typed text to the name."""
        if not self.done:
            self.text += text

    def backspace(self) -> None:
        """Remove the last character, if there is one."""
        if not self.done and self.text:
            self.text = self.text[:-1]

    def submit(self) -> bool:
        """Finish entry; an empty name is refused and entry continues."""
        if self.text:
            self.done = True
        return self.done

    @property
    def display(self) -> str:
        """The name as shown on screen, followed by the cursor."""
        return self.text + CURSOR