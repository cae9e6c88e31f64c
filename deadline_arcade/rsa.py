"""RSA decryption helpers and the state of the decryptor form."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

from deadline_arcade.invaders import Rect

EXPECTED_N = 2537
EXPECTED_E = 13
EXPECTED_CIPHERTEXT = "2081 2182 2024"
SECRET_MESSAGE = "Curzon is haunted"
ACCESS_DENIED = "Access Denied. Try again."
INVALID_INPUT = "Invalid input"

_LLONG_MIN = -(2**63)
_LLONG_MAX = 2**63 - 1
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _c_mod(value: int, mod: int) -> int:
    """Remainder with the sign of the dividend."""
    remainder = abs(value) % abs(mod)
    return -remainder if value < 0 else remainder


def _parse_long(text: str) -> int:
    """Parse a leading signed 64-bit integer; trailing text is ignored."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _LLONG_MIN <= value <= _LLONG_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def mod_exp(base: int, exp: int, mod: int) -> int:
    """``base ** exp`` reduced modulo ``mod`` by square-and-multiply."""
    result = 1
    base = _c_mod(base, mod)
    while exp > 0:
        if exp % 2 == 1:
            result = _c_mod(result * base, mod)
        exp >>= 1
        base = _c_mod(base * base, mod)
    return result


def decrypt_rsa(encrypted: str, d: int, n: int) -> str:
    """Decrypt whitespace-separated cipher numbers into one character each."""
    return "".join(
        chr(mod_exp(_parse_long(token), d, n) & 0xFF) for token in encrypted.split()
    )


def check_access(n_text: str, e_text: str, encrypted: str) -> str:
    """The message the decryptor shows for the given form contents."""
    try:
        n = _parse_long(n_text)
        e = _parse_long(e_text)
    except ValueError:
        return INVALID_INPUT
    if n == EXPECTED_N and e == EXPECTED_E and encrypted == EXPECTED_CIPHERTEXT:
        return SECRET_MESSAGE
    return ACCESS_DENIED


class Focus(enum.Enum):
    """Which text field receives typing."""

    N = "n"
    E = "e"
    ENCRYPTED = "encrypted"


FIELD_RECTS = {
    Focus.N: Rect(200, 40, 500, 38),
    Focus.E: Rect(200, 100, 500, 38),
    Focus.ENCRYPTED: Rect(200, 190, 500, 38),
}
DECRYPT_BUTTON = Rect(50, 260, 120, 40)


def _strictly_inside(x: int, y: int, rect: Rect) -> bool:
    return rect.x < x < rect.x + rect.w and rect.y < y < rect.y + rect.h


@dataclass
class DecryptorForm:
    """Three text fields, a decrypt button and the last result."""

    inputs: dict[Focus, str] = field(default_factory=lambda: {f: "" for f in Focus})
    focus: Focus = Focus.N
    result: str = ""

    def click(self, x: int, y: int) -> None:
        """Press the button or move the focus to the field under the pointer."""
        if _strictly_inside(x, y, DECRYPT_BUTTON):
            self.result = check_access(
                self.inputs[Focus.N], self.inputs[Focus.E], self.inputs[Focus.ENCRYPTED]
            )
            return
        for focus, rect in FIELD_RECTS.items():
            if _strictly_inside(x, y, rect):
                self.focus = focus
                return

    def type(self, text: str) -> None:
        """Append typed text to the focused field."""
        self.inputs[self.focus] += text

    def backspace(self) -> None:
        """Drop the last character of the focused field."""
        self.inputs[self.focus] = self.inputs[self.focus][:-1]

    def result_is_error(self) -> bool:
        """True when the result is a refusal rather than a message."""
        return self.result in (ACCESS_DENIED, INVALID_INPUT)

    @property
    def focused_rect(self) -> Rect:
        return FIELD_RECTS[self.focus]